import math

import pytest

from topspin.exceptions import RatingValidationException, RosterValidationException
from topspin.utils import generate_id, ordinal, set_log_level
from topspin.utils.validation import (
    validate_league_field,
    validate_pool_registrants,
    validate_pool_registrants_strict,
    validate_rating,
    validate_rating_strict,
    validate_roster,
)


@pytest.mark.parametrize("value, expected", [(0, 0.0), (1500, 1500.0), ("850", 850.0)])
def test_valid_ratings(value, expected):
    result = validate_rating(value)
    assert result
    assert result.sanitized_value == expected


@pytest.mark.parametrize("value", [-1, 10001, True, "strong", math.nan, math.inf])
def test_invalid_ratings(value):
    result = validate_rating(value)
    assert not result
    assert result.error_message


def test_missing_rating():
    assert validate_rating(None)
    assert not validate_rating(None, required=True)
    with pytest.raises(RatingValidationException):
        validate_rating_strict(None)
    assert validate_rating_strict("1200") == 1200.0


def test_roster_sizes():
    assert validate_roster([1, 2])
    assert validate_roster([1, 2, 3, 4])
    assert not validate_roster([1, 2, 3])
    assert not validate_roster([])


def test_league_field_size():
    assert validate_league_field(range(7))
    assert not validate_league_field(range(6))


def test_pool_registrants():
    assert validate_pool_registrants([1, 2])
    assert not validate_pool_registrants([])
    assert not validate_pool_registrants([1, 2, 3])
    with pytest.raises(RosterValidationException):
        validate_pool_registrants_strict([1])


def test_ordinals():
    assert [ordinal(n) for n in (1, 2, 3, 4, 11, 12, 13, 21, 102, 111)] == [
        "1st", "2nd", "3rd", "4th", "11th", "12th", "13th", "21st", "102nd", "111th",
    ]


def test_generate_id_prefix():
    first, second = generate_id("Team"), generate_id("Team")
    assert first.startswith("Team-")
    assert first != second


def test_set_log_level_rejects_unknown_names():
    with pytest.raises(ValueError):
        set_log_level("chatty")
