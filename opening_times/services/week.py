"""週間スケジュールの表示用データ（全曜日 / 連続曜日をまとめた短縮版）"""
from dataclasses import dataclass
from datetime import datetime
from typing import List, Sequence, Tuple

from .open_now import Day, WEEK, is_today


@dataclass(frozen=True)
class DaySchedule:
    day: Day
    label: str
    open: str = ""
    close: str = ""

    @classmethod
    def empty(cls, day: Day) -> "DaySchedule":
        return cls(day=day, label=day.value)

    @property
    def pair(self) -> Tuple[str, str]:
        return (self.open, self.close)


@dataclass(frozen=True)
class StatusMessages:
    open_message: str = ""
    closed_message: str = ""


class WeekSchedule:
    """月〜日の7件を固定順で保持する読み取り専用コンテナ"""

    def __init__(self, days: Sequence[DaySchedule]):
        by_day = {d.day: d for d in days}
        self._days = tuple(by_day.get(day) or DaySchedule.empty(day) for day in WEEK)

    def __getitem__(self, day: Day) -> DaySchedule:
        return self._days[WEEK.index(day)]

    def __iter__(self):
        return iter(self._days)

    def __len__(self):
        return len(self._days)

    def today(self, now: datetime = None) -> DaySchedule:
        if now is None:
            now = datetime.now()
        return self[Day.of(now)]


@dataclass(frozen=True)
class ScheduleRow:
    day: Day
    label: str
    open: str
    close: str
    is_today: bool

    @property
    def closed(self) -> bool:
        return self.open == ""


@dataclass(frozen=True)
class ScheduleGroup:
    days: Tuple[Day, ...]
    labels: Tuple[str, ...]
    open: str
    close: str

    @property
    def label(self) -> str:
        if len(self.labels) == 1:
            return self.labels[0]
        return f"{self.labels[0]} - {self.labels[-1]}"

    @property
    def closed(self) -> bool:
        # open/closeの両方が入っていなければ休業扱い
        return not (self.open and self.close)

    def describe(self) -> str:
        if self.closed:
            return f"{self.label}: CLOSED"
        return f"{self.label}: {self.open} – {self.close}"


def full_week(week: WeekSchedule, now: datetime = None) -> List[ScheduleRow]:
    """全曜日を1行ずつ。時刻は入力値のまま"""
    if now is None:
        now = datetime.now()
    return [
        ScheduleRow(
            day=d.day,
            label=d.label,
            open=d.open,
            close=d.close,
            is_today=is_today(d.day, now),
        )
        for d in week
    ]


def condensed_week(week: WeekSchedule) -> List[ScheduleGroup]:
    """連続する同一時間帯の曜日をまとめる（ランレングス）"""
    groups = []
    run = []
    for d in week:
        if run and d.pair != run[0].pair:
            groups.append(_group(run))
            run = []
        run.append(d)
    if run:
        groups.append(_group(run))
    return groups


def _group(run: List[DaySchedule]) -> ScheduleGroup:
    first = run[0]
    return ScheduleGroup(
        days=tuple(d.day for d in run),
        labels=tuple(d.label for d in run),
        open=first.open,
        close=first.close,
    )
