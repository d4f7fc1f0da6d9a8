"""Tests for workout plan generation."""

import random

import pytest

from fitplan.core import workout
from fitplan.core.catalog import get_exercise
from fitplan.core.schema import Profile
from fitplan.core.workout import (
    available_equipment,
    difficulty_for,
    estimate_session_minutes,
    generate_workout_plan,
    program_duration_weeks,
    select_program,
)


def make_profile(**overrides):
    data = dict(
        age=30,
        sex="female",
        height_cm=168,
        weight_kg=62,
        experience="intermediate",
        training_days=[0, 2, 4],
        session_duration_min=45,
        training_location="gym",
        weekly_progress_goal="gain_muscle",
        progress_amount_kg=0.25,
    )
    data.update(overrides)
    return Profile(**data)


@pytest.mark.parametrize(
    "experience,expected",
    [
        ("untrained", "beginner"),
        ("beginner", "beginner"),
        ("intermediate", "intermediate"),
        ("advanced", "advanced"),
        (None, "intermediate"),
    ],
)
def test_difficulty_for(experience, expected):
    assert difficulty_for(experience) == expected


def test_available_equipment():
    assert set(available_equipment("gym")) == {"barbell", "dumbbell", "machine", "cable", "bodyweight"}
    assert set(available_equipment("home")) == {"dumbbell", "bodyweight"}
    assert set(available_equipment(None)) == {"dumbbell", "bodyweight"}


@pytest.mark.parametrize(
    "days,name",
    [
        (1, "Full Body 3x/Week"),
        (3, "Full Body 3x/Week"),
        (4, "Push/Pull/Legs Split"),
        (5, "Upper/Lower Split"),
        (6, "High Frequency Training"),
        (7, "High Frequency Training"),
    ],
)
def test_select_program(days, name):
    assert select_program(days).name == name


def test_program_duration():
    assert program_duration_weeks("beginner") == 8
    assert program_duration_weeks("intermediate") == 12
    assert program_duration_weeks("advanced") == 16


def test_home_three_day_plan():
    profile = make_profile(training_days=[0, 1, 2], training_location="home")
    plan = generate_workout_plan(profile, random.Random(5))
    assert plan.name == "Full Body 3x/Week"
    assert plan.days_per_week == 3
    assert plan.duration_weeks == 12
    assert [s.focus_muscles for s in plan.sessions] == [
        ["chest", "shoulders", "triceps"],
        ["back", "biceps"],
        ["legs"],
    ]
    home = {"dumbbell", "bodyweight"}
    for session in plan.sessions:
        assert session.duration_min == 45
        for ex in session.exercises:
            assert home.intersection(ex.equipment)
            assert ex.muscle_group in session.focus_muscles
    # pull and leg pools are smaller than five at home
    assert len(plan.sessions[0].exercises) == 5
    assert len(plan.sessions[1].exercises) == 4
    assert len(plan.sessions[2].exercises) == 2


@pytest.mark.parametrize("days", [[3], [1, 5], [6, 0, 3, 2], [0, 1, 2, 3, 4], [4, 3, 2, 1, 0, 6], list(range(7))])
def test_session_count_and_order(days):
    plan = generate_workout_plan(make_profile(training_days=days), random.Random(0))
    assert len(plan.sessions) == min(len(days), 6)
    assert [s.day_number for s in plan.sessions] == days[: len(plan.sessions)]
    labels = [s.day for s in plan.sessions]
    assert labels == [workout.WEEKDAYS[d] for d in days[: len(labels)]]


def test_six_day_plan_has_fixed_abs_session():
    plan = generate_workout_plan(make_profile(training_days=[0, 1, 2, 3, 4, 5]), random.Random(9))
    abs_session = plan.sessions[5]
    assert abs_session.focus_muscles == ["abs"]
    assert abs_session.duration_min == 30
    assert len(abs_session.exercises) == 3
    assert plan.sessions[3].focus_muscles == ["chest", "back", "shoulders"]
    assert plan.sessions[4].focus_muscles == ["legs"]
    assert len(plan.sessions[4].exercises) == 5
    assert plan.name == "High Frequency Training"


def test_session_exercises_are_unique():
    plan = generate_workout_plan(make_profile(training_days=[0, 1, 2, 3]), random.Random(2))
    for session in plan.sessions:
        ids = [ex.id for ex in session.exercises]
        assert len(ids) == len(set(ids))


def test_no_training_days_keeps_default_program():
    plan = generate_workout_plan(make_profile(training_days=[]))
    assert plan.days_per_week == 4
    assert plan.name == "Push/Pull/Legs Split"
    assert plan.sessions == []


def test_default_session_length():
    profile = make_profile(session_duration_min=None)
    plan = generate_workout_plan(profile, random.Random(1))
    assert {s.duration_min for s in plan.sessions} == {60}
    plan = generate_workout_plan(profile, random.Random(1), default_session_minutes=50)
    assert {s.duration_min for s in plan.sessions} == {50}


def test_seeded_generation_is_reproducible():
    profile = make_profile(training_days=[0, 1, 2, 3, 4])
    first = generate_workout_plan(profile, random.Random(11))
    second = generate_workout_plan(profile, random.Random(11))
    assert first == second


def test_estimate_session_minutes():
    assert estimate_session_minutes([]) == 10
    # 10 + (4*1.5 + 3) + (3*1.5 + 1.5)
    exercises = [get_exercise("barbell_bench_press"), get_exercise("leg_curls")]
    assert estimate_session_minutes(exercises) == 25


def test_intensity_and_progression():
    assert workout.workout_intensity("advanced") == "Very High"
    assert workout.workout_intensity("unknown") == "Moderate"
    assert len(workout.progression_recommendations("beginner")) == 3
    assert workout.progression_recommendations("unknown") == []


def test_configured_session_length_is_used_as_is():
    plan = generate_workout_plan(make_profile(session_duration_min=20), random.Random(1), 60)
    assert {s.duration_min for s in plan.sessions} == {20}
    assert all(s.duration_min > 0 for s in plan.sessions)
