"""FastAPI アプリケーション"""
import logging
from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.responses import HTMLResponse

from .routes.schedule import router as schedule_router
from .routes.fragments import router as fragments_router, widget, STYLESHEET_PATH
from .config import API_HOST, API_PORT, OUTPUT_OPENING_HOURS_SCHEMA, STATIC_DIR
from .database import engine, missing_tables
from .deps import get_site_url
from .services.render import render_page, STATUS_WIDGET
from .services.schema_org import SchemaHooks

logger = logging.getLogger(__name__)


def check_schedule_store(bind) -> None:
    """スケジュールストアが無ければ起動を中止する"""
    missing = missing_tables(bind)
    if missing:
        raise RuntimeError(
            f"Schedule store is not initialised (missing tables: {', '.join(missing)}). "
            "Run scripts/import_schedule.py first."
        )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """起動時にスケジュールストアを確認"""
    check_schedule_store(engine)
    logger.info("Schedule store OK")
    yield


app = FastAPI(
    title="Opening Times API",
    description="週間営業時間から現在の営業状態を判定し、埋め込み用HTMLとして返すAPI",
    version="3.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# JSON-LD出力の有効化・マージは埋め込み側で差し替える
app.state.schema_hooks = SchemaHooks(enabled=lambda: OUTPUT_OPENING_HOURS_SCHEMA)

# CORS（埋め込み先ページからのfetch用）
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(schedule_router)
app.include_router(fragments_router)


@app.get("/", response_class=HTMLResponse)
def root(site_url: str = Depends(get_site_url)):
    """営業状態ウィジェットを埋め込んだデモページ"""
    return render_page("Opening Times", widget(STATUS_WIDGET, site_url), site_url + STYLESHEET_PATH)


app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("opening_times.main:app", host=API_HOST, port=API_PORT)
