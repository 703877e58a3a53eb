"""HTMLフラグメント生成（埋め込み用）

ラベル・時刻はエスケープする。営業中/休業中メッセージは管理者が入力した
リッチテキストなのでそのまま出力する。
"""
import logging
from datetime import datetime
from html import escape
from dataclasses import dataclass
from typing import Optional

from .open_now import Day, EvaluationResult, OpenState, evaluate
from .week import StatusMessages, WeekSchedule, full_week, condensed_week
from .schema_org import render_schema_script

logger = logging.getLogger(__name__)

CLOSED_LABEL = "CLOSED"

# 非同期ウィジェット: (コンテナID, refreshのaction, 読み込み中の文言)
STATUS_WIDGET = ("open-now-widget", "open_now", "Checking store status...")
SHORT_WIDGET = ("opening-times-short-widget", "opening_times_short", "Loading opening times...")


@dataclass(frozen=True)
class CurrentStatus:
    day: Day
    result: EvaluationResult
    message: str


def current_status(
    week: WeekSchedule, messages: StatusMessages, now: datetime = None
) -> CurrentStatus:
    """今日の営業状態と表示メッセージ。INVALIDは利用者には休業中として扱いログに残す"""
    if now is None:
        now = datetime.now()
    today = week.today(now)
    result = evaluate(today.open, today.close, now)
    if result.state is OpenState.INVALID:
        logger.warning(f"Invalid schedule for {today.day.value}: {result.reason}")

    message = messages.open_message if result.is_open else messages.closed_message
    return CurrentStatus(day=today.day, result=result, message=message)


def render_state(week: WeekSchedule, messages: StatusMessages, now: datetime = None) -> str:
    status = current_status(week, messages, now)
    return f'<div class="open_state mb-4">{status.message}</div>'


def _times(open: str, close: str, separator: str) -> str:
    return (
        '<div class="open_times__times">'
        f'<div class="open_times__open">{escape(open)}</div>'
        f"<div>{separator}</div>"
        f'<div class="open_times__close">{escape(close)}</div>'
        "</div>"
    )


def _closed() -> str:
    return (
        '<div class="open_times__times">'
        f'<div class="open_times__closed">{CLOSED_LABEL}</div>'
        "</div>"
    )


def render_opening_times(
    week: WeekSchedule, now: datetime = None, schema: Optional[dict] = None
) -> str:
    """全曜日の営業時間。今日の行には today クラスを付与"""
    parts = ['<div class="open_times">']
    for row in full_week(week, now):
        css = "open_times__row today" if row.is_today else "open_times__row"
        parts.append(f'<div class="{css}">')
        parts.append(f'<div class="open_times__label">{escape(row.label)}</div>')
        parts.append(_closed() if row.closed else _times(row.open, row.close, "-"))
        parts.append("</div>")
    parts.append("</div>")
    parts.append(render_schema_script(schema))
    return "".join(parts)


def render_opening_times_short(week: WeekSchedule, schema: Optional[dict] = None) -> str:
    """連続する同一時間帯の曜日をまとめた短縮版"""
    parts = ['<div class="open_times_short">']
    for group in condensed_week(week):
        parts.append('<div class="open_times__row">')
        parts.append(f'<div class="open_times__label">{escape(group.label)}</div>')
        parts.append(_closed() if group.closed else _times(group.open, group.close, "–"))
        parts.append("</div>")
    parts.append("</div>")
    parts.append(render_schema_script(schema))
    return "".join(parts)


def render_all(
    week: WeekSchedule, messages: StatusMessages, now: datetime = None,
    schema: Optional[dict] = None,
) -> str:
    """営業状態 + 全曜日（refresh: open_now）"""
    if now is None:
        now = datetime.now()
    return render_state(week, messages, now) + render_opening_times(week, now, schema)


def render_short_all(
    week: WeekSchedule, messages: StatusMessages, now: datetime = None,
    schema: Optional[dict] = None,
) -> str:
    """営業状態 + 短縮版（refresh: opening_times_short）"""
    if now is None:
        now = datetime.now()
    return render_state(week, messages, now) + render_opening_times_short(week, schema)


def render_widget(widget: tuple, refresh_url: str, spinner_url: str) -> str:
    """読み込み中表示 + refreshエンドポイントを叩いて差し替えるスクリプト"""
    container_id, action, loading = widget
    return f"""<div id="{container_id}">
    <div>{loading}</div>
    <img width=140 height=6 src="{escape(spinner_url)}">
</div>
<script>
    document.addEventListener('DOMContentLoaded', function() {{
        fetch('{escape(refresh_url)}?action={action}', {{
                method: 'POST',
                credentials: 'same-origin'
            }})
            .then(response => response.text())
            .then(data => {{
                const container = document.getElementById('{container_id}');
                if (container) {{
                    container.innerHTML = data;
                }}
            }})
            .catch(error => {{
                console.error('Error loading content:', error);
            }});
    }});
</script>"""


def render_page(title: str, body: str, stylesheet_url: str) -> str:
    """フラグメントを1ページに埋め込んだデモ用HTML"""
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="utf-8">
    <title>{escape(title)}</title>
    <link rel="stylesheet" href="{escape(stylesheet_url)}">
</head>
<body>
    <h1>{escape(title)}</h1>
{body}
</body>
</html>"""
