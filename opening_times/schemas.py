"""Pydantic スキーマ定義"""
from typing import Optional, List, Dict
from pydantic import BaseModel, field_validator, model_validator

from .services.open_now import Day, OpenState, parse_time


# === レスポンス ===

class ScheduleRowOut(BaseModel):
    day: Day
    label: str
    open: str
    close: str
    is_today: bool
    closed: bool
    class Config:
        from_attributes = True


class ScheduleGroupOut(BaseModel):
    days: List[Day]
    label: str
    open: str
    close: str
    closed: bool
    text: str


class StatusOut(BaseModel):
    day: Day
    state: OpenState
    reason: Optional[str] = None
    message: str


# === 設定インポート ===

class DayConfigIn(BaseModel):
    label: Optional[str] = None
    open: str = ""
    close: str = ""

    @field_validator("open", "close")
    @classmethod
    def check_time(cls, v: str) -> str:
        v = (v or "").strip()
        if v and parse_time(v) is None:
            raise ValueError(f"12時間表記（例: 9:00 am）ではありません: {v!r}")
        return v

    @model_validator(mode="after")
    def check_pair(self):
        if bool(self.open) != bool(self.close):
            raise ValueError("open と close は両方指定するか両方空にしてください")
        if self.open and parse_time(self.open) > parse_time(self.close):
            raise ValueError("closing time is before opening time")
        return self


class ScheduleConfigIn(BaseModel):
    """scripts/import_schedule.py が読むJSON"""
    days: Dict[Day, DayConfigIn] = {}
    open_message: str = ""
    closed_message: str = ""

    @field_validator("days", mode="before")
    @classmethod
    def normalize_day_keys(cls, v):
        # "monday" / "Monday" どちらのキーも受け付ける
        if isinstance(v, dict):
            return {str(k).capitalize(): day for k, day in v.items()}
        return v
