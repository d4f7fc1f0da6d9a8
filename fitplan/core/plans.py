from __future__ import annotations

"""Generate both plans for a single profile snapshot."""

import logging
import random
from typing import Optional

from .config import DEFAULT_SESSION_MINUTES
from .nutrition import generate_nutrition_plan
from .schema import GeneratedPlans, Profile
from .workout import generate_workout_plan

logger = logging.getLogger(__name__)


def generate_plans(
    profile: Profile,
    rng: Optional[random.Random] = None,
    *,
    default_session_minutes: int = DEFAULT_SESSION_MINUTES,
) -> GeneratedPlans:
    """Return the nutrition and workout plans for ``profile``.

    The two calculators are independent.  Errors are not caught here, so an
    incomplete profile surfaces as the :class:`ProfileIncompleteError`
    raised by the nutrition calculator.
    """
    nutrition = generate_nutrition_plan(profile)
    workout = generate_workout_plan(
        profile, rng, default_session_minutes=default_session_minutes
    )
    logger.info(
        "generated plans for %s: %s kcal, %d sessions",
        profile.name or "<anonymous>",
        nutrition.calories,
        len(workout.sessions),
    )
    return GeneratedPlans(nutrition=nutrition, workout=workout)
