"""Pydantic models for profiles, catalog entries and generated plans.

``Profile`` mirrors the record produced by the onboarding wizard.  Unset
values are ``None``; legacy records that stored an empty string for "unset"
or numbers with units (``"75 kg"``) are normalised by validators so that a
missing field can never pass silently as a value.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, validator

from .utils import parse_number

Sex = Literal["male", "female", "other"]
ActivityLevel = Literal["sedentary", "lightly_active", "active", "very_active"]
Experience = Literal["untrained", "beginner", "intermediate", "advanced"]
TrainingLocation = Literal["gym", "home"]
ProgressGoal = Literal["lose_weight", "gain_weight", "gain_muscle"]
MuscleGroup = Literal["chest", "back", "shoulders", "biceps", "triceps", "legs", "abs"]
Equipment = Literal["barbell", "dumbbell", "machine", "cable", "bodyweight"]
Difficulty = Literal["beginner", "intermediate", "advanced"]
Intensity = Literal["none", "normal", "intense"]

# Numeric fields that must be present and positive before generation.
REQUIRED_NUMERIC = ("age", "height_cm", "weight_kg", "progress_amount_kg")


class ProfileIncompleteError(ValueError):
    """Raised when a profile lacks a value the calculators depend on."""

    def __init__(self, fields: List[str]):
        self.fields = fields
        super().__init__("Profile is missing required values: " + ", ".join(fields))


class Profile(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    age: Optional[int] = None
    sex: Optional[Sex] = None
    height_cm: Optional[float] = None
    weight_kg: Optional[float] = None
    activity_level: Optional[ActivityLevel] = None
    goals: List[str] = Field(default_factory=list)
    experience: Optional[Experience] = None
    training_days: List[int] = Field(default_factory=list)
    session_duration_min: Optional[int] = None
    training_location: Optional[TrainingLocation] = None
    muscle_groups: Dict[str, Intensity] = Field(default_factory=dict)
    allergies: List[str] = Field(default_factory=list)
    dietary_preferences: List[str] = Field(default_factory=list)
    weekly_progress_goal: Optional[ProgressGoal] = None
    progress_amount_kg: Optional[float] = None

    @validator(
        "sex",
        "activity_level",
        "experience",
        "training_location",
        "weekly_progress_goal",
        pre=True,
    )
    def empty_is_unset(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @validator(
        "age",
        "height_cm",
        "weight_kg",
        "session_duration_min",
        "progress_amount_kg",
        pre=True,
    )
    def parse_loose_number(cls, v: Any) -> Any:
        if isinstance(v, str):
            return parse_number(v)
        return v

    @validator("session_duration_min")
    def check_session_duration(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v <= 0:
            raise ValueError("session_duration_min must be positive")
        return v

    @validator("training_days")
    def check_training_days(cls, v: List[int]) -> List[int]:
        seen: List[int] = []
        for day in v:
            if not 0 <= day <= 6:
                raise ValueError("training day must be between 0 and 6")
            if day not in seen:
                seen.append(day)
        return seen

    def missing_fields(self) -> List[str]:
        """Return required numeric fields that are unset or not positive."""
        missing = []
        for name in REQUIRED_NUMERIC:
            value = getattr(self, name)
            if value is None or value <= 0:
                missing.append(name)
        return missing

    def require_complete(self) -> None:
        """Raise :class:`ProfileIncompleteError` unless the profile can be planned."""
        missing = self.missing_fields()
        if missing:
            raise ProfileIncompleteError(missing)


class Exercise(BaseModel):
    """Static catalog entry with its default prescription."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    muscle_group: MuscleGroup
    equipment: Tuple[Equipment, ...]
    difficulty: Difficulty
    description: str = ""
    sets: int
    reps: str
    rest_seconds: int
    video_url: Optional[str] = None


class NutritionPlan(BaseModel):
    model_config = ConfigDict(frozen=True)

    bmr: int
    tdee: int
    calories: int
    protein_g: int
    carbs_g: int
    fat_g: int
    water_l: float
    meal_frequency: int


class MacroPercentages(BaseModel):
    """Share of calories per macro, recomputed from grams."""

    protein_pct: int = 0
    carbs_pct: int = 0
    fat_pct: int = 0


class WorkoutSession(BaseModel):
    day: str
    day_number: int
    focus_muscles: List[MuscleGroup]
    exercises: List[Exercise] = Field(default_factory=list)
    duration_min: int
    notes: str = ""


class WorkoutPlan(BaseModel):
    name: str
    days_per_week: int
    duration_weeks: int
    difficulty: Difficulty
    description: str
    sessions: List[WorkoutSession] = Field(default_factory=list)


class GeneratedPlans(BaseModel):
    """Both plans produced from one profile snapshot."""

    nutrition: NutritionPlan
    workout: WorkoutPlan
    generated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
