from itertools import combinations

import pytest

from topspin.exceptions import InvalidFieldSizeException, ScheduleException
from topspin.pairing.round_robin import (
    generate_phase_schedule,
    get_day_matchups,
    rotation_for_day,
)

OPPONENTS = [f"O{i}" for i in range(1, 8)]


def test_rotation_moves_last_to_front():
    assert rotation_for_day(1) == [0, 1, 2, 3, 4, 5, 6, 7]
    assert rotation_for_day(2) == [0, 7, 1, 2, 3, 4, 5, 6]
    assert rotation_for_day(3) == [0, 6, 7, 1, 2, 3, 4, 5]
    assert rotation_for_day(8) == rotation_for_day(1)


def test_day_one_fixtures():
    fixtures = get_day_matchups(1, "T", OPPONENTS)
    assert fixtures == [("T", "O7"), ("O6", "O1"), ("O2", "O5"), ("O4", "O3")]


@pytest.mark.parametrize("day", range(1, 8))
def test_every_day_covers_the_field_once(day):
    fixtures = get_day_matchups(day, "T", OPPONENTS)
    assert len(fixtures) == 4
    seen = [entrant for fixture in fixtures for entrant in fixture]
    assert sorted(seen) == sorted(["T"] + OPPONENTS)


def test_phase_is_a_full_round_robin():
    schedule = generate_phase_schedule("T", OPPONENTS)
    assert sorted(schedule) == list(range(1, 8))
    met = [frozenset(f) for fixtures in schedule.values() for f in fixtures]
    assert len(met) == 28
    assert set(met) == {frozenset(p) for p in combinations(["T"] + OPPONENTS, 2)}


def test_tracked_team_alternates_home_and_away():
    schedule = generate_phase_schedule("T", OPPONENTS)
    home_days = [day for day, fixtures in schedule.items() if fixtures[0][0] == "T"]
    assert home_days == [1, 3, 5, 7]


def test_wrong_field_size_is_rejected():
    with pytest.raises(InvalidFieldSizeException):
        get_day_matchups(1, "T", OPPONENTS[:6])
    with pytest.raises(InvalidFieldSizeException):
        get_day_matchups(1, "T", OPPONENTS + ["O8"])


def test_day_must_be_positive():
    with pytest.raises(ScheduleException):
        get_day_matchups(0, "T", OPPONENTS)
