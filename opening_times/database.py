"""スケジュールストアのDB接続・セッション管理"""
from sqlalchemy import create_engine, event, inspect
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase

from .config import DATABASE_URL


class Base(DeclarativeBase):
    pass


def make_engine(url: str, **kwargs) -> Engine:
    """SQLiteはスレッド間共有を許可し、ファイルDBならWALで読み取りと書き込みを分ける"""
    if not url.startswith("sqlite"):
        return create_engine(url, **kwargs)

    kwargs.setdefault("connect_args", {"check_same_thread": False})
    engine = create_engine(url, **kwargs)
    if url not in ("sqlite://", "sqlite:///:memory:"):
        @event.listens_for(engine, "connect")
        def set_wal(dbapi_conn, connection_record):
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA journal_mode=WAL")
            cursor.close()
    return engine


engine = make_engine(DATABASE_URL)
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


def get_db():
    """FastAPI Depends用。リクエストごとに新しいセッション"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_store(bind) -> None:
    """opening_days / message_settings を作成（既存なら何もしない）"""
    from . import models  # noqa: F401  テーブル定義の登録
    Base.metadata.create_all(bind)


def missing_tables(bind) -> list:
    """スケジュールストアに必要なテーブルのうち存在しないものを返す"""
    inspector = inspect(bind)
    return [name for name in Base.metadata.tables if not inspector.has_table(name)]
