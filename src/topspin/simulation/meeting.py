"""Meeting orchestration.

A meeting plays a fixed sequence of singles and doubles legs between two
rosters. Four-player rosters use the full 14-leg order; rosters of two or
fewer use the reduced 5-leg order.
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

import random
from typing import List, Optional, Sequence, Tuple

from topspin.constants import (
    DOUBLES_SLOTS,
    FULL_MEETING_ORDER,
    FULL_ROSTER_SIZE,
    REDUCED_MEETING_ORDER,
    REDUCED_ROSTER_SIZE,
)
from topspin.exceptions import InvalidRosterException
from topspin.models.competitor import Competitor
from topspin.models.factory import create_ghost_competitor
from topspin.models.meeting import Meeting
from topspin.simulation.doubles import create_doubles_pair
from topspin.simulation.match import simulate_match
from topspin.type_hints import MeetingLeg
from topspin.utils import generate_id, make_rng, setup_logger
from topspin.utils.validation import validate_roster

logger = setup_logger(__name__)


def meeting_order(home_roster_size: int) -> Tuple[MeetingLeg, ...]:
    """Leg order for a roster of the given size."""
    if home_roster_size <= REDUCED_ROSTER_SIZE:
        return REDUCED_MEETING_ORDER
    return FULL_MEETING_ORDER


def pad_roster(
    roster: Sequence[Competitor], size: int, ghost_prefix: str
) -> List[Competitor]:
    """Fill empty slots up to ``size`` with ghosts."""
    padded = list(roster)
    while len(padded) < size:
        padded.append(create_ghost_competitor(f"{ghost_prefix}-{len(padded)}"))
    return padded


def simulate_meeting(
    home_players: Sequence[Competitor],
    away_players: Sequence[Competitor],
    rng: Optional[random.Random] = None,
    meeting_id: Optional[str] = None,
    home_name: str = "",
    away_name: str = "",
    day_number: Optional[int] = None,
    phase: Optional[int] = None,
) -> Meeting:
    """Play every leg of a meeting and tally the team score.

    Args:
        home_players: Home roster in slot order
        away_players: Away roster in slot order
        rng: Random source shared by every leg
        meeting_id: Identifier for the meeting, generated when omitted
        home_name: Home team name
        away_name: Away team name
        day_number: League day, if scheduled
        phase: League phase, if scheduled

    Returns:
        The completed Meeting

    Raises:
        InvalidRosterException: If a roster holds more than four players
            or a competitor appears on both rosters
    """
    for side, roster in (("home", home_players), ("away", away_players)):
        if len(roster) > FULL_ROSTER_SIZE:
            raise InvalidRosterException(
                f"The {side} roster holds {len(roster)} players; at most "
                f"{FULL_ROSTER_SIZE} can be fielded"
            )
        result = validate_roster(roster)
        if not result.is_valid:
            logger.debug("%s roster padded with ghosts: %s", side, result.error_message)

    shared = sorted({p.id for p in home_players} & {p.id for p in away_players})
    if shared:
        raise InvalidRosterException(
            f"Competitors fielded by both teams: {', '.join(shared)}"
        )

    if rng is None:
        rng = make_rng()
    meeting_id = meeting_id or generate_id("Meeting")

    order = meeting_order(len(home_players))
    roster_size = FULL_ROSTER_SIZE if order is FULL_MEETING_ORDER else REDUCED_ROSTER_SIZE
    home = pad_roster(home_players, roster_size, f"{meeting_id}-home-ghost")
    away = pad_roster(away_players, roster_size, f"{meeting_id}-away-ghost")

    meeting = Meeting(
        id=meeting_id,
        home_name=home_name,
        away_name=away_name,
        home_players=[p.id for p in home],
        away_players=[p.id for p in away],
        day_number=day_number,
        phase=phase,
    )

    first, second = DOUBLES_SLOTS
    for home_slot, away_slot in order:
        if isinstance(home_slot, str):
            # Every doubles leg uses the same two slots on both sides.
            side_a = create_doubles_pair(
                home[first], home[second], f"{meeting_id}-home-{home_slot}"
            )
            side_b = create_doubles_pair(
                away[first], away[second], f"{meeting_id}-away-{away_slot}"
            )
        else:
            side_a = home[home_slot]
            side_b = away[away_slot]

        match = simulate_match(side_a, side_b, rng)
        meeting.matches.append(match)
        if match.winner_id == side_a.id:
            meeting.home_score += 1
        else:
            meeting.away_score += 1

    logger.debug(
        "Meeting %s: %s %d - %d %s",
        meeting_id,
        home_name or "home",
        meeting.home_score,
        meeting.away_score,
        away_name or "away",
    )
    return meeting
