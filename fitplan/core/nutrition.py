"""Core nutritional calculations.

This module contains formulas for estimating basal metabolic rate (BMR), total
daily energy expenditure (TDEE), a goal-adjusted calorie target and the
macronutrient, hydration and meal-frequency recommendations derived from it.
Values returned from these functions are purely indicative and should not
replace professional advice.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List, NamedTuple, Optional, Tuple

from .schema import MacroPercentages, NutritionPlan, Profile
from .utils import round_half_up

logger = logging.getLogger(__name__)

ACTIVITY_MULTIPLIERS = {
    "sedentary": 1.2,
    "lightly_active": 1.375,
    "active": 1.55,
    "very_active": 1.725,
}
DEFAULT_ACTIVITY_MULTIPLIER = 1.55

# Midpoint between the male and female constants for other/unset sex.
SEX_CONSTANTS = {"male": 5, "female": -161}
DEFAULT_SEX_CONSTANT = -78

# Energy per kg of lost fat tissue, and surplus per kg of gained mass.
KCAL_PER_KG_LOSS = 7700
KCAL_PER_KG_GAIN = 1100

KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARBS = 4
KCAL_PER_G_FAT = 9


class MacroRatios(NamedTuple):
    protein: float
    fat: float
    carbs: float


class MacroRule(NamedTuple):
    name: str
    applies: Callable[[frozenset, Optional[str]], bool]
    ratios: MacroRatios


BASELINE_RATIOS = MacroRatios(protein=0.30, fat=0.25, carbs=0.45)

# Evaluated in order; a later match overrides an earlier one, so the
# beginner rule always wins when it applies.
MACRO_RULES: Tuple[MacroRule, ...] = (
    MacroRule(
        "muscle_or_strength",
        lambda goals, exp: "gain_muscle" in goals or "gain_strength" in goals,
        MacroRatios(protein=0.35, fat=0.25, carbs=0.40),
    ),
    MacroRule(
        "lose_weight",
        lambda goals, exp: "lose_weight" in goals,
        MacroRatios(protein=0.35, fat=0.30, carbs=0.35),
    ),
    MacroRule(
        "get_leaner",
        lambda goals, exp: "get_leaner" in goals,
        MacroRatios(protein=0.40, fat=0.30, carbs=0.30),
    ),
    MacroRule(
        "beginner",
        lambda goals, exp: exp == "beginner",
        MacroRatios(protein=0.30, fat=0.20, carbs=0.50),
    ),
)


def calculate_bmr(weight_kg: float, height_cm: float, age: float, sex: Optional[str]) -> int:
    """Compute basal metabolic rate using the Mifflin–St Jeor equation.

    Args:
        weight_kg: Body weight in kilograms.
        height_cm: Height in centimetres.
        age: Age in years.
        sex: "male", "female" or anything else (including ``None``), which
            uses the midpoint constant.

    Returns:
        Estimated BMR in kilocalories per day, rounded.
    """
    constant = SEX_CONSTANTS.get(sex or "", DEFAULT_SEX_CONSTANT)
    return round_half_up(10 * weight_kg + 6.25 * height_cm - 5 * age + constant)


def activity_multiplier(level: Optional[str]) -> float:
    """Return the TDEE multiplier for ``level``, 1.55 when unknown."""
    return ACTIVITY_MULTIPLIERS.get(level or "", DEFAULT_ACTIVITY_MULTIPLIER)


def calculate_tdee(bmr: float, activity_level: Optional[str]) -> int:
    return round_half_up(bmr * activity_multiplier(activity_level))


def calculate_adjusted_calories(tdee: float, goal: Optional[str], weekly_rate_kg: float) -> int:
    """Shift TDEE by the daily delta implied by the weekly progress rate.

    Losing ``weekly_rate_kg`` per week subtracts ``rate * 7700 / 7`` kcal a
    day; gaining weight or muscle adds ``rate * 1100 / 7``.  Any other goal
    leaves TDEE unchanged.  No lower bound is applied.
    """
    if goal == "lose_weight":
        adjustment = -(weekly_rate_kg * KCAL_PER_KG_LOSS) / 7
    elif goal in ("gain_weight", "gain_muscle"):
        adjustment = (weekly_rate_kg * KCAL_PER_KG_GAIN) / 7
    else:
        adjustment = 0
    return round_half_up(tdee + adjustment)


def select_macro_ratios(goals: Iterable[str], experience: Optional[str]) -> MacroRatios:
    """Return the protein/fat/carb calorie fractions for the given tags."""
    goal_set = frozenset(goals)
    ratios = BASELINE_RATIOS
    for rule in MACRO_RULES:
        if rule.applies(goal_set, experience):
            ratios = rule.ratios
    return ratios


def calculate_macros(calories: float, goals: Iterable[str], experience: Optional[str]) -> dict[str, int]:
    """Convert the selected calorie split into grams.

    Each macro is rounded on its own, so the percentages recomputed from the
    grams need not add up to exactly 100.

    Returns:
        Dict with keys ``protein_g``, ``carbs_g`` and ``fat_g``.
    """
    ratios = select_macro_ratios(goals, experience)
    return {
        "protein_g": round_half_up(calories * ratios.protein / KCAL_PER_G_PROTEIN),
        "carbs_g": round_half_up(calories * ratios.carbs / KCAL_PER_G_CARBS),
        "fat_g": round_half_up(calories * ratios.fat / KCAL_PER_G_FAT),
    }


def calculate_water_intake(weight_kg: float, activity_level: Optional[str]) -> float:
    """Daily water in litres: 35 ml per kg, plus 0.5 L for active people."""
    liters = weight_kg * 0.035
    if activity_level in ("active", "very_active"):
        liters += 0.5
    return round_half_up(liters * 10) / 10


def meal_frequency(goals: Iterable[str]) -> int:
    return 4 if "gain_muscle" in goals else 3


def calculate_macro_percentages(protein_g: int, carbs_g: int, fat_g: int) -> MacroPercentages:
    """Return the calorie share of each macro, recomputed from grams."""
    protein_kcal = protein_g * KCAL_PER_G_PROTEIN
    carbs_kcal = carbs_g * KCAL_PER_G_CARBS
    fat_kcal = fat_g * KCAL_PER_G_FAT
    total = protein_kcal + carbs_kcal + fat_kcal
    if total <= 0:
        return MacroPercentages()
    return MacroPercentages(
        protein_pct=round_half_up(protein_kcal / total * 100),
        carbs_pct=round_half_up(carbs_kcal / total * 100),
        fat_pct=round_half_up(fat_kcal / total * 100),
    )


def generate_nutrition_plan(profile: Profile) -> NutritionPlan:
    """Compute all nutritional targets for ``profile``.

    Raises:
        ProfileIncompleteError: if a required numeric field is unset.
    """
    profile.require_complete()
    goals: List[str] = list(profile.goals)
    bmr = calculate_bmr(profile.weight_kg, profile.height_cm, profile.age, profile.sex)
    tdee = calculate_tdee(bmr, profile.activity_level)
    calories = calculate_adjusted_calories(
        tdee, profile.weekly_progress_goal, profile.progress_amount_kg
    )
    macros = calculate_macros(calories, goals, profile.experience)
    plan = NutritionPlan(
        bmr=bmr,
        tdee=tdee,
        calories=calories,
        water_l=calculate_water_intake(profile.weight_kg, profile.activity_level),
        meal_frequency=meal_frequency(goals),
        **macros,
    )
    logger.debug(
        "nutrition plan: bmr=%s tdee=%s calories=%s macros=%s",
        bmr,
        tdee,
        calories,
        macros,
    )
    return plan
