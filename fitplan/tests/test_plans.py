import random

import pytest

from fitplan.core.plans import generate_plans
from fitplan.core.schema import GeneratedPlans, Profile, ProfileIncompleteError


def test_generate_plans_returns_both():
    profile = Profile(
        age=25,
        sex="male",
        height_cm=180,
        weight_kg=75,
        activity_level="active",
        goals=["lose_weight"],
        experience="intermediate",
        training_days=[0, 1, 2],
        training_location="home",
        weekly_progress_goal="lose_weight",
        progress_amount_kg=0.5,
    )
    plans = generate_plans(profile, random.Random(3))
    assert isinstance(plans, GeneratedPlans)
    assert plans.nutrition.calories == 2170
    assert (plans.nutrition.protein_g, plans.nutrition.fat_g, plans.nutrition.carbs_g) == (190, 72, 190)
    assert len(plans.workout.sessions) == 3
    assert plans.generated_at.tzinfo is not None


def test_generate_plans_propagates_precondition_failure():
    with pytest.raises(ProfileIncompleteError) as excinfo:
        generate_plans(Profile(training_days=[0, 1]))
    assert excinfo.value.fields == ["age", "height_cm", "weight_kg", "progress_amount_kg"]
    assert isinstance(excinfo.value, ValueError)
