from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from config import get_settings_module

from class_attendance.database.bootstrap import apply_seed_sql
from class_attendance.database.connection import DBConfig, DatabasePool


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    pool = DatabasePool(DBConfig.from_dict(dict(settings.DB_CONFIG)), pool_size=1)
    try:
        apply_seed_sql(pool)
    finally:
        pool.close()

    print(f"OK: Seeded database -> {pool.config.describe()}")


if __name__ == "__main__":
    main()
