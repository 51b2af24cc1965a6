from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from config import get_settings_module

from class_attendance.database.bootstrap import apply_schema, ensure_database_exists, list_tables
from class_attendance.database.connection import DBConfig, DatabasePool


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    ensure_database_exists(db_config)
    pool = DatabasePool(DBConfig.from_dict(db_config), pool_size=1)
    try:
        apply_schema(pool)
        tables = list_tables(pool)
    finally:
        pool.close()

    print(f"OK: Applied schema.sql -> {pool.config.describe()} (tables={len(tables)})")


if __name__ == "__main__":
    main()
