"""埋め込み用HTMLフラグメントと非同期リフレッシュのエンドポイント"""
from datetime import datetime
from typing import Optional
from fastapi import APIRouter, Depends, Form, HTTPException, Query
from fastapi.responses import HTMLResponse
from sqlalchemy.orm import Session

from ..database import get_db
from ..deps import get_now, get_schema_hooks, get_site_url
from ..services.render import (
    render_state, render_opening_times, render_opening_times_short,
    render_all, render_short_all, render_widget,
    STATUS_WIDGET, SHORT_WIDGET,
)
from ..services.schema_org import SchemaHooks, opening_hours_schema
from ..services.store import load_week, get_messages

router = APIRouter(prefix="/api/v1", tags=["fragments"])

REFRESH_PATH = "/api/v1/refresh"
SPINNER_PATH = "/static/img/spinner.svg"
STYLESHEET_PATH = "/static/style.css"

TAGS = (
    "opening-times",
    "opening-times-short",
    "open-state",
    "open-ajax",
    "open-short-ajax",
)

REFRESH_ACTIONS = {
    "open_now": render_all,
    "opening_times_short": render_short_all,
}


def widget(widget_def: tuple, site_url: str) -> str:
    """埋め込み先ページ（別ドメイン）から呼べるよう絶対URLで出力"""
    return render_widget(widget_def, site_url + REFRESH_PATH, site_url + SPINNER_PATH)


@router.get("/fragments/{tag}", response_class=HTMLResponse)
def fragment(
    tag: str,
    db: Session = Depends(get_db),
    now: datetime = Depends(get_now),
    hooks: SchemaHooks = Depends(get_schema_hooks),
    site_url: str = Depends(get_site_url),
):
    if tag not in TAGS:
        raise HTTPException(status_code=404, detail=f"不明なタグです: {tag}")

    # ウィジェットは中身をrefreshで取得するのでDBを読まない
    if tag == "open-ajax":
        return widget(STATUS_WIDGET, site_url)
    if tag == "open-short-ajax":
        return widget(SHORT_WIDGET, site_url)

    week = load_week(db)
    if tag == "open-state":
        return render_state(week, get_messages(db), now)

    schema = opening_hours_schema(week, site_url, hooks)
    if tag == "opening-times":
        return render_opening_times(week, now, schema)
    return render_opening_times_short(week, schema)


@router.api_route("/refresh", methods=["GET", "POST"], response_class=HTMLResponse)
def refresh(
    action: Optional[str] = Query(None, description="open_now / opening_times_short"),
    form_action: Optional[str] = Form(None, alias="action"),
    db: Session = Depends(get_db),
    now: datetime = Depends(get_now),
    hooks: SchemaHooks = Depends(get_schema_hooks),
    site_url: str = Depends(get_site_url),
):
    """非同期ウィジェットから呼ばれ、営業状態＋営業時間を再描画して返す"""
    # クエリ文字列またはフォーム（FormData）のaction
    action = action or form_action
    renderer = REFRESH_ACTIONS.get(action)
    if renderer is None:
        raise HTTPException(status_code=400, detail=f"不明なactionです: {action}")

    week = load_week(db)
    schema = opening_hours_schema(week, site_url, hooks)
    return renderer(week, get_messages(db), now, schema)
