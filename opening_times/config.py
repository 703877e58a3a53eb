"""アプリケーション設定"""
import os
from pathlib import Path

# 静的ファイルはパッケージ同梱、DBは実行ディレクトリに置く
PACKAGE_DIR = Path(__file__).parent
STATIC_DIR = PACKAGE_DIR / "static"

DATABASE_URL = os.getenv(
    "DATABASE_URL",
    f"sqlite:///{Path.cwd() / 'opening_times.db'}"
)

API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8000"))

# schema.org の @id とウィジェットのURLに使うサイトURL（未設定ならリクエストのbase_url）
SITE_URL = os.getenv("SITE_URL", "").rstrip("/")

# JSON-LD出力はテーマ側と重複しやすいのでデフォルト無効
OUTPUT_OPENING_HOURS_SCHEMA = os.getenv(
    "OUTPUT_OPENING_HOURS_SCHEMA", "0"
).strip().lower() in {"1", "true", "yes", "on"}
