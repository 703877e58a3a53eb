"""FastAPI Depends用の共通依存（現在時刻・schemaフック・サイトURL）"""
from datetime import datetime

from fastapi import Request

from .config import SITE_URL
from .services.schema_org import SchemaHooks


def get_now() -> datetime:
    """サーバーのローカル時刻（テストでは dependency_overrides で固定）"""
    return datetime.now()


def get_schema_hooks(request: Request) -> SchemaHooks:
    return getattr(request.app.state, "schema_hooks", None) or SchemaHooks()


def get_site_url(request: Request) -> str:
    return SITE_URL or str(request.base_url).rstrip("/")
