"""Workout plan generation.

A plan is built in two steps: a fixed template is chosen from the number of
training days and the user's experience, then each training day is filled
with exercises sampled from the catalog.  Only the sampling is random; pass a
seeded :class:`random.Random` as ``rng`` to make it reproducible.
"""

from __future__ import annotations

import logging
import random
from typing import Iterable, List, NamedTuple, Optional, Sequence, Tuple

from . import catalog
from .config import DEFAULT_SESSION_MINUTES
from .schema import Exercise, Profile, WorkoutPlan, WorkoutSession
from .utils import round_half_up

logger = logging.getLogger(__name__)

WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

GYM_EQUIPMENT = ("barbell", "dumbbell", "machine", "cable", "bodyweight")
HOME_EQUIPMENT = ("dumbbell", "bodyweight")

DEFAULT_DAYS_PER_WEEK = 4
WARMUP_MINUTES = 5
COOLDOWN_MINUTES = 5
MINUTES_PER_SET = 1.5


class Program(NamedTuple):
    name: str
    description: str


class SessionTemplate(NamedTuple):
    focus: Tuple[str, ...]
    exercise_count: int
    notes: str
    fixed_duration_min: Optional[int] = None


# One template per ordinal training day; days past the last get no session.
SESSION_TEMPLATES: Tuple[SessionTemplate, ...] = (
    SessionTemplate(
        ("chest", "shoulders", "triceps"),
        5,
        "Focus on compound movements first, then isolation exercises",
    ),
    SessionTemplate(
        ("back", "biceps"),
        5,
        "Prioritize pulling movements for back development",
    ),
    SessionTemplate(
        ("legs",),
        5,
        "Start with compound leg movements, finish with isolation",
    ),
    SessionTemplate(
        ("chest", "back", "shoulders"),
        5,
        "Secondary upper body session with moderate intensity",
    ),
    SessionTemplate(
        ("legs",),
        5,
        "Secondary leg session focusing on weak points",
    ),
    SessionTemplate(("abs",), 3, "Light abs and core work", fixed_duration_min=30),
)

PROGRESSION_TIPS = {
    "beginner": [
        "Focus on form and technique before adding weight",
        "Increase weight by 2-5 lbs when you can complete all reps with good form",
        "Rest 2-3 minutes between compound sets",
    ],
    "intermediate": [
        "Aim to increase weight or reps every 1-2 weeks",
        "Use RPE (Rate of Perceived Exertion) 7-8 for compound lifts",
        "Incorporate drop sets and supersets for intensity",
    ],
    "advanced": [
        "Periodize your training with phases of 4-6 weeks",
        "Use advanced techniques like cluster sets and paused reps",
        "Track all workouts and aim for progressive overload",
    ],
}

INTENSITY_LABELS = {
    "beginner": "Moderate",
    "intermediate": "High",
    "advanced": "Very High",
}


def difficulty_for(experience: Optional[str]) -> str:
    """Map training experience onto a catalog difficulty tier."""
    match experience:
        case "untrained" | "beginner":
            return "beginner"
        case "intermediate":
            return "intermediate"
        case "advanced":
            return "advanced"
        case _:
            return "intermediate"


def available_equipment(location: Optional[str]) -> Tuple[str, ...]:
    return GYM_EQUIPMENT if location == "gym" else HOME_EQUIPMENT


def select_program(days_per_week: int) -> Program:
    """Return the named weekly template for ``days_per_week``."""
    if days_per_week <= 3:
        return Program(
            "Full Body 3x/Week",
            "Efficient full-body workouts perfect for beginners and those with limited time",
        )
    if days_per_week == 4:
        return Program(
            "Push/Pull/Legs Split",
            "Classic split for balanced muscle development and recovery",
        )
    if days_per_week == 5:
        return Program(
            "Upper/Lower Split",
            "Advanced split for maximum volume and recovery",
        )
    return Program(
        "High Frequency Training",
        "Intense program hitting each muscle group twice per week",
    )


def program_duration_weeks(difficulty: str) -> int:
    if difficulty == "beginner":
        return 8
    if difficulty == "advanced":
        return 16
    return 12


def candidate_exercises(focus: Iterable[str], equipment: Sequence[str]) -> List[Exercise]:
    """Return catalog exercises for ``focus`` usable with ``equipment``.

    An exercise qualifies when any of its equipment options is available.
    """
    allowed = set(equipment)
    pool: List[Exercise] = []
    for group in focus:
        pool.extend(
            ex for ex in catalog.by_muscle_group(group) if allowed.intersection(ex.equipment)
        )
    return pool


def build_sessions(
    profile: Profile,
    rng: Optional[random.Random] = None,
    default_session_minutes: int = DEFAULT_SESSION_MINUTES,
) -> List[WorkoutSession]:
    """Assemble one session per training day, in the configured order."""
    equipment = available_equipment(profile.training_location)
    duration = profile.session_duration_min
    if duration is None:
        duration = default_session_minutes
    sessions: List[WorkoutSession] = []
    for day_number, template in zip(profile.training_days, SESSION_TEMPLATES):
        pool = candidate_exercises(template.focus, equipment)
        picked = catalog.sample_without_replacement(pool, template.exercise_count, rng)
        if len(picked) < template.exercise_count:
            logger.debug(
                "only %d of %d exercises available for %s",
                len(picked),
                template.exercise_count,
                "/".join(template.focus),
            )
        sessions.append(
            WorkoutSession(
                day=WEEKDAYS[day_number],
                day_number=day_number,
                focus_muscles=list(template.focus),
                exercises=picked,
                duration_min=template.fixed_duration_min or duration,
                notes=template.notes,
            )
        )
    return sessions


def generate_workout_plan(
    profile: Profile,
    rng: Optional[random.Random] = None,
    default_session_minutes: int = DEFAULT_SESSION_MINUTES,
) -> WorkoutPlan:
    """Build the multi-week workout plan for ``profile``.

    With no training days selected the program is still named for the
    default four-day week, but no sessions are produced.
    """
    difficulty = difficulty_for(profile.experience)
    days_per_week = len(profile.training_days) or DEFAULT_DAYS_PER_WEEK
    program = select_program(days_per_week)
    sessions = build_sessions(profile, rng, default_session_minutes)
    logger.info(
        "workout plan %r: %d days/week, %d sessions, difficulty=%s",
        program.name,
        days_per_week,
        len(sessions),
        difficulty,
    )
    return WorkoutPlan(
        name=program.name,
        days_per_week=days_per_week,
        duration_weeks=program_duration_weeks(difficulty),
        difficulty=difficulty,
        description=program.description,
        sessions=sessions,
    )


def estimate_session_minutes(exercises: Iterable[Exercise]) -> int:
    """Estimate the time needed for ``exercises`` including warm-up and cool-down."""
    total = WARMUP_MINUTES + COOLDOWN_MINUTES
    for ex in exercises:
        total += ex.sets * MINUTES_PER_SET + ex.rest_seconds / 60
    return round_half_up(total)


def workout_intensity(difficulty: str) -> str:
    return INTENSITY_LABELS.get(difficulty, "Moderate")


def progression_recommendations(difficulty: str) -> List[str]:
    """Return progression tips for ``difficulty``; unknown tiers get none."""
    return list(PROGRESSION_TIPS.get(difficulty, []))
