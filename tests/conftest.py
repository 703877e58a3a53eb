"""共通フィクスチャ — インメモリSQLiteと時刻固定"""
from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from opening_times.main import app
from opening_times.database import get_db, init_store, make_engine
from opening_times.deps import get_now
from opening_times.schemas import ScheduleConfigIn
from opening_times.services.importer import save_schedule
from opening_times.services.open_now import Day
from opening_times.services.week import DaySchedule, WeekSchedule

# 2026-10-14 は水曜日
WEDNESDAY_2PM = datetime(2026, 10, 14, 14, 0)

OPEN_MESSAGE = "<p>We are open</p>"
CLOSED_MESSAGE = "<p>We are closed</p>"

NINE_TO_FIVE = ("9:00 am", "5:00 pm")


def make_week(**times) -> WeekSchedule:
    """make_week(monday=("9:00 am", "5:00 pm"), ...) 指定のない曜日は休業"""
    days = []
    for day in Day:
        open_, close = times.get(day.value.lower(), ("", ""))
        days.append(DaySchedule(day=day, label=day.value, open=open_, close=close))
    return WeekSchedule(days)


def weekdays_nine_to_five() -> WeekSchedule:
    return make_week(
        monday=NINE_TO_FIVE, tuesday=NINE_TO_FIVE, wednesday=NINE_TO_FIVE,
        thursday=NINE_TO_FIVE, friday=NINE_TO_FIVE,
    )


@pytest.fixture
def db():
    engine = make_engine("sqlite://", poolclass=StaticPool)
    init_store(engine)
    session = sessionmaker(bind=engine, autocommit=False, autoflush=False)()
    yield session
    session.close()
    engine.dispose()


@pytest.fixture
def seeded_db(db):
    """月〜金 9:00 am - 5:00 pm、土日休み"""
    config = ScheduleConfigIn.model_validate({
        "days": {
            day: {"label": day.capitalize(), "open": "9:00 am", "close": "5:00 pm"}
            for day in ("monday", "tuesday", "wednesday", "thursday", "friday")
        },
        "open_message": OPEN_MESSAGE,
        "closed_message": CLOSED_MESSAGE,
    })
    save_schedule(db, config)
    return db


@pytest.fixture
def client(seeded_db):
    hooks = app.state.schema_hooks
    app.dependency_overrides[get_db] = lambda: seeded_db
    app.dependency_overrides[get_now] = lambda: WEDNESDAY_2PM
    yield TestClient(app)
    app.dependency_overrides.clear()
    app.state.schema_hooks = hooks
