"""schema.org OpeningHoursSpecification（JSON-LD）生成

既存のLocalBusiness/Organizationスキーマと重複しないよう、デフォルトでは出力しない。
有効化やマージは SchemaHooks 経由で埋め込み側が制御する。
"""
import json
import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from .open_now import convert_to_24h
from .week import WeekSchedule

logger = logging.getLogger(__name__)

SCHEMA_CONTEXT = "https://schema.org"


def _disabled() -> bool:
    return False


@dataclass
class SchemaHooks:
    """JSON-LD出力の有効/無効判定と、出力前のマージ処理"""
    enabled: Callable[[], bool] = _disabled
    merge: Optional[Callable[[dict], dict]] = None


def opening_hours_specification(week: WeekSchedule) -> List[dict]:
    """同じ開店/閉店時刻の曜日をまとめる（隣接していなくても同一グループ）"""
    grouped: Dict[tuple, dict] = {}
    for d in week:
        if not d.open or not d.close:
            continue
        group = grouped.get(d.pair)
        if group is None:
            group = grouped[d.pair] = {
                "days": [],
                "opens": convert_to_24h(d.open),
                "closes": convert_to_24h(d.close),
            }
        group["days"].append(d.day.value)

    return [
        {
            "@type": "OpeningHoursSpecification",
            "dayOfWeek": group["days"],
            "opens": group["opens"],
            "closes": group["closes"],
        }
        for group in grouped.values()
    ]


def opening_hours_schema(
    week: WeekSchedule, site_url: str, hooks: SchemaHooks = None
) -> Optional[dict]:
    """LocalBusinessスキーマ。無効時・営業時間なしの場合はNone"""
    hooks = hooks or SchemaHooks()
    if not hooks.enabled():
        return None

    opening_hours = opening_hours_specification(week)
    if not opening_hours:
        return None

    schema = {
        "@context": SCHEMA_CONTEXT,
        "@type": "LocalBusiness",
        "@id": f"{site_url.rstrip('/')}#localbusiness",
        "openingHoursSpecification": opening_hours,
    }

    if hooks.merge is not None:
        schema = hooks.merge(schema)
    return schema


def render_schema_script(schema: Optional[dict]) -> str:
    """<script type="application/ld+json"> ブロック。schemaがNoneなら空文字"""
    if not schema:
        return ""
    body = json.dumps(schema, ensure_ascii=False, indent=4)
    # </script> による途中終了を防ぐ
    body = body.replace("</", "<\\/")
    return f'<script type="application/ld+json">\n{body}\n</script>'
