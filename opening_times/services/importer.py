"""営業時間設定の取り込み（管理画面の代わりにJSONから書き込む）"""
from sqlalchemy.orm import Session

from ..models import OpeningDay, MessageSetting
from ..schemas import ScheduleConfigIn
from .open_now import WEEK


def save_schedule(db: Session, config: ScheduleConfigIn) -> int:
    """7曜日分とメッセージを上書き保存。保存した曜日数を返す"""
    for day in WEEK:
        entry = config.days.get(day)
        row = db.get(OpeningDay, day) or OpeningDay(day=day)
        row.label = (entry.label if entry and entry.label else day.value)
        row.open = entry.open if entry else ""
        row.close = entry.close if entry else ""
        db.add(row)

    messages = db.query(MessageSetting).order_by(MessageSetting.id).first() or MessageSetting(id=1)
    messages.open_message = config.open_message
    messages.closed_message = config.closed_message
    db.add(messages)

    db.commit()
    return len(WEEK)
