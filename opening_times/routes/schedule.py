"""営業時間エンドポイント（JSON）"""
from datetime import datetime
from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ..database import get_db
from ..deps import get_now, get_schema_hooks, get_site_url
from ..schemas import ScheduleRowOut, ScheduleGroupOut, StatusOut
from ..services.schema_org import SchemaHooks, opening_hours_schema
from ..services.render import current_status
from ..services.store import load_week, get_messages
from ..services.week import full_week, condensed_week

router = APIRouter(prefix="/api/v1", tags=["schedule"])


@router.get("/schedule", response_model=List[ScheduleRowOut])
def schedule(db: Session = Depends(get_db), now: datetime = Depends(get_now)):
    return [ScheduleRowOut.model_validate(row) for row in full_week(load_week(db), now)]


@router.get("/schedule/condensed", response_model=List[ScheduleGroupOut])
def schedule_condensed(db: Session = Depends(get_db)):
    return [
        ScheduleGroupOut(
            days=list(g.days),
            label=g.label,
            open=g.open,
            close=g.close,
            closed=g.closed,
            text=g.describe(),
        )
        for g in condensed_week(load_week(db))
    ]


@router.get("/status", response_model=StatusOut)
def status(db: Session = Depends(get_db), now: datetime = Depends(get_now)):
    current = current_status(load_week(db), get_messages(db), now)
    return StatusOut(
        day=current.day,
        state=current.result.state,
        reason=current.result.reason,
        message=current.message,
    )


@router.get("/schema")
def schema(
    db: Session = Depends(get_db),
    hooks: SchemaHooks = Depends(get_schema_hooks),
    site_url: str = Depends(get_site_url),
):
    """schema.org LocalBusiness（JSON-LD）"""
    doc = opening_hours_schema(load_week(db), site_url, hooks)
    if doc is None:
        raise HTTPException(status_code=404, detail="営業時間スキーマは出力されません")
    return doc


@router.get("/health")
def health():
    return {"status": "ok"}
