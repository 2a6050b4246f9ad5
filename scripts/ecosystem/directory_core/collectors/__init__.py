"""Collector helpers and package exports."""

from __future__ import annotations

import os
from pathlib import Path

BUNDLED_DATA_DIR = Path(__file__).resolve().parents[1] / "data"


def env_data_dir() -> Path:
    value = os.environ.get("ECOSYSTEM_DATA_DIR")
    return Path(value) if value else BUNDLED_DATA_DIR

def env_api_url() -> str | None:
    return os.environ.get("ECOSYSTEM_API_URL") or None

def env_api_key() -> str | None:
    return os.environ.get("ECOSYSTEM_API_KEY") or None
