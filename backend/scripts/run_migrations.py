#!/usr/bin/env python3
"""
Apply pending schema migrations using DATABASE_URL from config.
The API also applies them on startup. From backend/: python scripts/run_migrations.py
"""
from __future__ import annotations

import os
import sys

_script_dir = os.path.dirname(os.path.abspath(__file__))
_backend = os.path.dirname(_script_dir)
if _backend not in sys.path:
    sys.path.insert(0, _backend)

from customers_api.core.config import get_settings
from customers_api.core.logging_config import setup_logging
from customers_api.db.migrations import MIGRATIONS, run_migrations
from customers_api.db.session import build_engine


def main() -> int:
    settings = get_settings()
    setup_logging(settings.log_level)
    engine = build_engine(settings)
    names = {version: name for version, name, _ in MIGRATIONS}
    try:
        applied = run_migrations(engine)
    finally:
        engine.dispose()
    for version in applied:
        print(f"OK: {version} {names[version]}")
    if not applied:
        print("Up to date")
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except Exception as e:
        print(f"FAIL: {e}", file=sys.stderr)
        sys.exit(1)
