import pytest
from pydantic import ValidationError

from fitplan.core.schema import Profile
from fitplan.core.utils import parse_number, round_half_up


@pytest.mark.parametrize(
    "value,expected",
    [
        ("75 kg", 75.0),
        ("180cm", 180.0),
        ("0,5 кг", 0.5),
        (42, 42.0),
        (1.25, 1.25),
        ("", None),
        ("abc", None),
        (None, None),
        (True, None),
    ],
)
def test_parse_number(value, expected):
    assert parse_number(value) == expected


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(2.49) == 2
    assert round_half_up(-2.5) == -2


def test_legacy_profile_record():
    profile = Profile(
        age="25",
        sex="",
        height_cm="180 cm",
        weight_kg="75,5",
        activity_level="",
        experience="",
        training_location="",
        weekly_progress_goal="",
        progress_amount_kg="",
        session_duration_min="45 min",
    )
    assert profile.age == 25
    assert profile.height_cm == 180
    assert profile.weight_kg == 75.5
    assert profile.sex is None
    assert profile.activity_level is None
    assert profile.weekly_progress_goal is None
    assert profile.session_duration_min == 45
    assert profile.missing_fields() == ["progress_amount_kg"]


def test_unknown_category_is_rejected():
    with pytest.raises(ValidationError):
        Profile(sex="unknown")
    with pytest.raises(ValidationError):
        Profile(training_location="park")


def test_training_days_validation():
    assert Profile(training_days=[4, 1, 4, 0]).training_days == [4, 1, 0]
    with pytest.raises(ValidationError):
        Profile(training_days=[7])


def test_negative_numbers_are_incomplete():
    profile = Profile(age=30, height_cm=-170, weight_kg=70, progress_amount_kg=0.5)
    assert profile.missing_fields() == ["height_cm"]


@pytest.mark.parametrize("minutes", [0, -45, "-30 min"])
def test_session_length_must_be_positive(minutes):
    with pytest.raises(ValidationError):
        Profile(session_duration_min=minutes)
