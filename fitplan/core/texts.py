from __future__ import annotations

"""Load plain-text templates from ``texts.yaml`` and render plans with them."""

from importlib import resources
from typing import Dict

import yaml
from jinja2 import Template

from .nutrition import calculate_macro_percentages
from .schema import GeneratedPlans, NutritionPlan, WorkoutPlan
from .workout import estimate_session_minutes, progression_recommendations, workout_intensity


def _load_texts() -> dict:
    """Return dictionary of template definitions from YAML."""
    with resources.files(__package__).joinpath("texts.yaml").open(
        "r", encoding="utf-8"
    ) as fh:
        return yaml.safe_load(fh)


_data = _load_texts()

# Dictionaries with descriptions and compiled templates
DESCRIPTIONS: Dict[str, str] = {}
TEMPLATES: Dict[str, Template] = {}

for _name, _info in _data.items():
    DESCRIPTIONS[_name] = _info.get("description", "")
    TEMPLATES[_name] = Template(_info["template"])

NUTRITION_SUMMARY = TEMPLATES["nutrition_summary"]
WORKOUT_SUMMARY = TEMPLATES["workout_summary"]


def render_nutrition(plan: NutritionPlan) -> str:
    pct = calculate_macro_percentages(plan.protein_g, plan.carbs_g, plan.fat_g)
    return NUTRITION_SUMMARY.render(plan=plan, pct=pct)


def render_workout(plan: WorkoutPlan) -> str:
    sessions = [
        {"session": s, "estimate": estimate_session_minutes(s.exercises)}
        for s in plan.sessions
    ]
    return WORKOUT_SUMMARY.render(
        plan=plan,
        sessions=sessions,
        intensity=workout_intensity(plan.difficulty),
        tips=progression_recommendations(plan.difficulty),
    )


def render_plans(plans: GeneratedPlans) -> str:
    """Return a human-readable summary of both plans."""
    return render_nutrition(plans.nutrition) + "\n\n" + render_workout(plans.workout)
