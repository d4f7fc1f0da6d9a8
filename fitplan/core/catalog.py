from __future__ import annotations

"""Read-only exercise catalog loaded from ``exercises.yaml``."""

import logging
import random
from importlib import resources
from typing import Dict, List, Optional, Sequence, Tuple

import yaml

from .schema import Exercise

__all__ = [
    "all_exercises",
    "get_exercise",
    "by_muscle_group",
    "by_difficulty",
    "by_equipment",
    "sample_without_replacement",
]

logger = logging.getLogger(__name__)


def _load_catalog() -> Tuple[Exercise, ...]:
    """Return the bundled exercises as an immutable tuple."""
    with resources.files(__package__).joinpath("exercises.yaml").open(
        "r", encoding="utf-8"
    ) as fh:
        raw = yaml.safe_load(fh) or []
    exercises = tuple(Exercise(**entry) for entry in raw)
    logger.debug("loaded %d catalog exercises", len(exercises))
    return exercises


EXERCISES: Tuple[Exercise, ...] = _load_catalog()
_BY_ID: Dict[str, Exercise] = {ex.id: ex for ex in EXERCISES}


def all_exercises() -> List[Exercise]:
    return list(EXERCISES)


def get_exercise(exercise_id: str) -> Exercise:
    """Return the catalog entry with ``exercise_id``.

    Raises:
        KeyError: if no exercise has that identifier.
    """
    return _BY_ID[exercise_id]


def by_muscle_group(group: str) -> List[Exercise]:
    return [ex for ex in EXERCISES if ex.muscle_group == group]


def by_difficulty(tier: str) -> List[Exercise]:
    return [ex for ex in EXERCISES if ex.difficulty == tier]


def by_equipment(item: str) -> List[Exercise]:
    """Return exercises that can be performed with ``item``."""
    return [ex for ex in EXERCISES if item in ex.equipment]


def sample_without_replacement(
    exercises: Sequence[Exercise],
    count: int,
    rng: Optional[random.Random] = None,
) -> List[Exercise]:
    """Return ``min(count, len(exercises))`` exercises in shuffled order.

    The input sequence is left untouched.  ``rng`` defaults to the
    process-wide :mod:`random` generator; pass a seeded
    :class:`random.Random` for reproducible picks.
    """
    pool = list(exercises)
    (rng or random).shuffle(pool)
    return pool[: max(count, 0)]
