"""SQLAlchemy モデル定義"""
from datetime import datetime
from sqlalchemy import Column, Enum, Integer, String, Text, DateTime

from .database import Base
from .services.open_now import Day


class OpeningDay(Base):
    """曜日ごとの営業時間（管理画面で設定、7行固定）"""
    __tablename__ = "opening_days"

    day = Column(Enum(Day), primary_key=True)
    label = Column(Text, nullable=False)
    open = Column(String(8), nullable=False, default="")   # "9:00 am" 形式、空なら休業
    close = Column(String(8), nullable=False, default="")
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class MessageSetting(Base):
    """営業中/休業中メッセージ（全体で1行）"""
    __tablename__ = "message_settings"

    id = Column(Integer, primary_key=True)
    open_message = Column(Text, nullable=False, default="")
    closed_message = Column(Text, nullable=False, default="")
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
