from __future__ import annotations

"""Configuration utilities for the project."""

import json
import os
from pathlib import Path
from typing import Optional

__all__ = [
    "load_config",
    "data_dir",
    "default_session_minutes",
    "random_seed",
    "log_level",
]

DEFAULT_SESSION_MINUTES = 60


def load_config() -> dict:
    """Load configuration from ``config.json`` or environment variables."""
    cfg_path = Path(__file__).resolve().parent.parent.parent / "config.json"
    if cfg_path.exists():
        with cfg_path.open("r", encoding="utf-8") as f:
            data = []
            for line in f:
                l = line.strip()
                if l.startswith("#") or l.startswith("//"):
                    continue
                data.append(line)
            return json.loads("".join(data))
    return {
        "data_dir": os.getenv("FITPLAN_DATA_DIR", ""),
        "default_session_minutes": os.getenv("FITPLAN_SESSION_MINUTES", ""),
        "random_seed": os.getenv("FITPLAN_SEED", ""),
        "log_level": os.getenv("FITPLAN_LOG_LEVEL", "INFO"),
    }


def data_dir(cfg: dict | None = None) -> Path:
    """Return the directory holding per-user JSON files.

    An empty value in ``config.json`` falls back to ``FITPLAN_DATA_DIR`` and
    then to ``data/`` inside the package.
    """
    cfg = cfg or load_config()
    value = cfg.get("data_dir") or os.getenv("FITPLAN_DATA_DIR", "")
    if value:
        return Path(value)
    return Path(__file__).resolve().parent.parent / "data"


def default_session_minutes(cfg: dict | None = None) -> int:
    """Session length used when a profile does not configure one."""
    cfg = cfg or load_config()
    value = cfg.get("default_session_minutes") or os.getenv("FITPLAN_SESSION_MINUTES", "")
    return int(value) if value else DEFAULT_SESSION_MINUTES


def random_seed(cfg: dict | None = None) -> Optional[int]:
    """Seed for exercise sampling, or ``None`` to use the process-wide source."""
    cfg = cfg or load_config()
    value = cfg.get("random_seed")
    if value in (None, ""):
        value = os.getenv("FITPLAN_SEED", "")
    return int(value) if value != "" else None


def log_level(cfg: dict | None = None) -> str:
    cfg = cfg or load_config()
    return str(cfg.get("log_level") or os.getenv("FITPLAN_LOG_LEVEL", "INFO")).upper()
