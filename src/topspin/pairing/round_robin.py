"""Round robin day scheduling for an eight-team league field.

Uses the circle method: index 0 (the tracked team) stays fixed while the
other seven rotate one step per day. Home and away alternate with the
parity of ``day + pair_index`` so home fixtures balance over a phase.
"""

# Topspin
# Copyright (C) 2025  Topspin developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from typing import Dict, List, Sequence

from topspin.constants import LEAGUE_DAYS_PER_PHASE, LEAGUE_FIELD_SIZE
from topspin.exceptions import InvalidFieldSizeException, ScheduleException
from topspin.type_hints import Entrant, Fixture
from topspin.utils.validation import validate_league_field


def rotation_for_day(day: int) -> List[int]:
    """Field indices in circle order for ``day`` (1-indexed)."""
    rotating = list(range(1, LEAGUE_FIELD_SIZE))
    steps = (day - 1) % len(rotating)
    # Move the last index to the front once per step.
    rotating = rotating[-steps:] + rotating[:-steps] if steps else rotating
    return [0] + rotating


def get_day_matchups(
    day: int, tracked: Entrant, opponents: Sequence[Entrant]
) -> List[Fixture]:
    """Return the (home, away) fixtures of one league day.

    Args:
        day: League day, starting at 1
        tracked: The fixed entrant at index 0
        opponents: Exactly seven other entrants

    Returns:
        Four (home, away) fixtures covering all eight entrants once

    Raises:
        InvalidFieldSizeException: If ``opponents`` does not hold seven entries
        ScheduleException: If ``day`` is lower than 1
    """
    result = validate_league_field(opponents)
    if not result.is_valid:
        raise InvalidFieldSizeException(result.error_message)
    if day < 1:
        raise ScheduleException(f"League days start at 1, got {day}")

    field = [tracked, *opponents]
    order = rotation_for_day(day)
    fixtures = []
    for i in range(LEAGUE_FIELD_SIZE // 2):
        first = field[order[i]]
        second = field[order[LEAGUE_FIELD_SIZE - 1 - i]]
        if (day + i) % 2 == 0:
            fixtures.append((second, first))
        else:
            fixtures.append((first, second))
    return fixtures


def generate_phase_schedule(
    tracked: Entrant, opponents: Sequence[Entrant]
) -> Dict[int, List[Fixture]]:
    """Fixtures for every day of a phase, keyed by day number."""
    return {
        day: get_day_matchups(day, tracked, opponents)
        for day in range(1, LEAGUE_DAYS_PER_PHASE + 1)
    }
