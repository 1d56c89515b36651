"""Load settings from environment (.env and env vars)."""

from __future__ import annotations

import os
from pathlib import Path

# Load .env from project root if present
_env_path = Path(__file__).resolve().parent.parent.parent / ".env"
if _env_path.exists():
    from dotenv import load_dotenv
    load_dotenv(_env_path)


def _str(key: str, default: str = "") -> str:
    return (os.environ.get(key) or "").strip() or default


# Logging
LOG_LEVEL = _str("CONTEXT_MAP_LOG_LEVEL", "INFO")
LOG_FORMAT = _str("CONTEXT_MAP_LOG_FORMAT", "console")

# Application context seeded by the demo driver
APP_NAME = _str("CONTEXT_MAP_APP_NAME", "RecordExampleApp")
APP_VERSION = _str("CONTEXT_MAP_APP_VERSION", "1.0.0")
