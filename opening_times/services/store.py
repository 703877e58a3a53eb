"""スケジュールストア読み取り — DBの設定値をドメイン型に変換

リクエストごとに読み直す（キャッシュしない）。
"""
from sqlalchemy.orm import Session

from ..models import OpeningDay, MessageSetting
from .open_now import Day
from .week import DaySchedule, StatusMessages, WeekSchedule


def _to_schedule(row: OpeningDay) -> DaySchedule:
    return DaySchedule(
        day=row.day,
        label=row.label or row.day.value,
        open=row.open or "",
        close=row.close or "",
    )


def get_day_schedule(db: Session, day: Day) -> DaySchedule:
    """未設定の曜日は休業日として返す"""
    row = db.get(OpeningDay, day)
    if row is None:
        return DaySchedule.empty(day)
    return _to_schedule(row)


def load_week(db: Session) -> WeekSchedule:
    rows = db.query(OpeningDay).all()
    return WeekSchedule([_to_schedule(r) for r in rows])


def get_messages(db: Session) -> StatusMessages:
    row = db.query(MessageSetting).order_by(MessageSetting.id).first()
    if row is None:
        return StatusMessages()
    return StatusMessages(
        open_message=row.open_message or "",
        closed_message=row.closed_message or "",
    )
