#!/usr/bin/env python3
"""営業時間設定JSONをDBにインポート

usage: python scripts/import_schedule.py data/schedule.example.json

DBは DATABASE_URL（未設定なら実行ディレクトリの opening_times.db）
"""

import sys
import json
from pathlib import Path

from pydantic import ValidationError

# プロジェクトルートをパスに追加
sys.path.insert(0, str(Path(__file__).parent.parent))

from opening_times.database import engine, SessionLocal, init_store
from opening_times.schemas import ScheduleConfigIn
from opening_times.services.importer import save_schedule


def main():
    if len(sys.argv) != 2:
        print(__doc__)
        sys.exit(2)

    path = Path(sys.argv[1])
    print(f"📄 {path} を読み込み...")
    try:
        config = ScheduleConfigIn.model_validate(json.loads(path.read_text(encoding="utf-8")))
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        print(f"   ❌ 設定が不正です:\n{e}")
        sys.exit(1)

    print("🗄️  テーブル作成...")
    init_store(engine)

    session = SessionLocal()
    try:
        n = save_schedule(session, config)
        print(f"   ✅ {n}曜日")
        print("\n🎉 インポート完了!")
    finally:
        session.close()


if __name__ == "__main__":
    main()
