"""open_now 判定 — 現在営業中かどうかを判定

DB非依存のロジック。時刻は管理画面で入力された12時間表記（"9:00 am"）のまま扱う。
タイムゾーン変換は行わず、サーバーのローカル時刻で判定する。
"""
import enum
import logging
from dataclasses import dataclass
from datetime import datetime, time
from typing import Optional

logger = logging.getLogger(__name__)

TIME_FORMAT_12H = "%I:%M %p"
TIME_FORMAT_24H = "%H:%M:%S"

INVALID_ORDER = "closing time is before opening time"


class Day(str, enum.Enum):
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"

    @classmethod
    def of(cls, when: datetime) -> "Day":
        """weekday() → Day（ロケール非依存）"""
        return WEEK[when.weekday()]


# 週の並び順（月曜始まり、固定）
WEEK = tuple(Day)


class OpenState(str, enum.Enum):
    OPEN = "open"
    CLOSED = "closed"
    INVALID = "invalid"


@dataclass(frozen=True)
class EvaluationResult:
    state: OpenState
    reason: Optional[str] = None

    @property
    def is_open(self) -> bool:
        return self.state is OpenState.OPEN


OPEN = EvaluationResult(OpenState.OPEN)
CLOSED = EvaluationResult(OpenState.CLOSED)


def parse_time(value: Optional[str]) -> Optional[time]:
    """12時間表記をtimeに変換。空・不正ならNone"""
    if not value:
        return None
    try:
        return datetime.strptime(value.strip(), TIME_FORMAT_12H).time()
    except ValueError:
        return None


def convert_to_24h(value: Optional[str]) -> str:
    """schema.org用に "9:00 am" → "09:00:00"。変換できなければ空文字"""
    parsed = parse_time(value)
    if parsed is None:
        if value:
            logger.warning(f"Unparsable opening time: {value!r}")
        return ""
    return parsed.strftime(TIME_FORMAT_24H)


def evaluate(open: Optional[str], close: Optional[str], now: datetime = None) -> EvaluationResult:
    """open/closeと現在時刻から営業状態を返す。

    境界時刻ちょうどは営業中とみなさない（open < now < close）。
    深夜跨ぎ（close < open）は未対応のためINVALID。
    """
    if not open:
        return CLOSED

    if now is None:
        now = datetime.now()
    # 分単位で比較（秒は切り捨て）
    current = now.time().replace(second=0, microsecond=0)

    open_t = parse_time(open)
    close_t = parse_time(close)
    if open_t is None or close_t is None:
        bad = open if open_t is None else close
        logger.warning(f"Unparsable schedule time: {bad!r}")
        return EvaluationResult(OpenState.INVALID, f"unparsable time: {bad!r}")

    if open_t > close_t:
        return EvaluationResult(OpenState.INVALID, INVALID_ORDER)

    if open_t < current < close_t:
        return OPEN
    return CLOSED


def is_today(day: Day, now: datetime = None) -> bool:
    if now is None:
        now = datetime.now()
    return Day.of(now) is day
