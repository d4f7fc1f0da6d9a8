"""Utilities for safe JSON storage.

This module implements atomic reading and writing of JSON files with file
locking.  Each user has a dedicated directory under ``data/<user_id>/`` holding
``profile.json`` (the onboarding record) and ``plans.json`` (the last
generated plans, stored verbatim).  The plan generators never touch the disk;
callers persist their results through the functions defined here.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional, Type, TypeVar

from filelock import FileLock
from pydantic import BaseModel, ValidationError

from .config import data_dir
from .schema import GeneratedPlans, Profile

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

# Base data directory.  Use the monkeypatch fixture in tests to override this
# location.
DATA_DIR: Path = data_dir()


def _lock_path(path: Path) -> Path:
    """Return the path of the lock file corresponding to ``path``."""
    return path.with_suffix(path.suffix + ".lock")


def read_json(path: Path, model_cls: Type[T]) -> Optional[T]:
    """Read a JSON file into a pydantic model.

    Reading is protected by a file lock to avoid reading a partially written
    file.  A missing, empty or unparsable file yields ``None``.

    Args:
        path: Path to the JSON file.
        model_cls: The pydantic model class to instantiate.

    Returns:
        An instance of ``model_cls`` or ``None``.
    """
    if not path.exists():
        return None
    lock = FileLock(str(_lock_path(path)))
    with lock:
        contents = path.read_text(encoding="utf-8")
    if not contents.strip():
        return None
    try:
        return model_cls.model_validate_json(contents)
    except ValidationError as exc:
        logger.warning("read_json: discarding invalid %s: %s", path, exc)
        return None


def write_json(path: Path, obj: BaseModel) -> None:
    """Atomically write a pydantic object to a JSON file.

    The target directory is created if it does not exist.  The entire
    operation is guarded by a file lock.

    Args:
        path: Path to write to.
        obj: A pydantic model instance to serialise.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    lock = FileLock(str(_lock_path(path)))
    with lock:
        # Serialise before touching the target so that a ``ValueError``
        # (e.g. NaN with ``allow_nan=False``) leaves the old file in place.
        data = obj.model_dump(mode="json")
        json_data = json.dumps(data, ensure_ascii=False, allow_nan=False, indent=2)
        tmp_path = path.with_suffix(path.suffix + ".tmp")
        tmp_path.write_text(json_data, encoding="utf-8")
        tmp_path.replace(path)


def user_dir(user_id: str | int) -> Path:
    """Return the directory path for a specific user, creating it lazily."""
    user_path = DATA_DIR / str(user_id)
    user_path.mkdir(parents=True, exist_ok=True)
    return user_path


def json_path(user_id: str | int, filename: str) -> Path:
    return user_dir(user_id) / filename


def load_profile(user_id: str | int) -> Profile:
    """Load a user's profile; an unset profile is returned if none is stored."""
    profile = read_json(json_path(user_id, "profile.json"), Profile)
    return profile if profile is not None else Profile()


def save_profile(user_id: str | int, profile: Profile) -> None:
    write_json(json_path(user_id, "profile.json"), profile)


def load_plans(user_id: str | int) -> Optional[GeneratedPlans]:
    """Return the last plans stored for ``user_id``, if any."""
    path = json_path(user_id, "plans.json")
    plans = read_json(path, GeneratedPlans)
    logger.debug("load_plans: user=%s path=%s found=%s", user_id, path, plans is not None)
    return plans


def save_plans(user_id: str | int, plans: GeneratedPlans) -> None:
    """Persist generated plans for ``user_id``, replacing earlier ones."""
    path = json_path(user_id, "plans.json")
    logger.info(
        "save_plans: user=%s path=%s sessions=%d",
        user_id,
        path,
        len(plans.workout.sessions),
    )
    write_json(path, plans)
