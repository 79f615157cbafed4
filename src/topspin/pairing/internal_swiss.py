"""Internal Swiss-style tournament for the members of one roster.

Every round the field is sorted by running score and neighbours are paired.
With an odd field the lowest ranked competitor without a previous bye sits
out and receives the bye points.
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
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

from topspin.constants import (
    INTERNAL_BYE_POINTS,
    INTERNAL_LOSS_POINTS,
    INTERNAL_ROUNDS,
    INTERNAL_WIN_POINTS,
)
from topspin.exceptions import InsufficientCompetitorsException
from topspin.models.competitor import Competitor
from topspin.models.match import Match
from topspin.simulation.match import simulate_match
from topspin.utils import make_rng, setup_logger

logger = setup_logger(__name__)


@dataclass
class InternalStanding:
    """Running record of one competitor in an internal tournament."""

    competitor: Competitor
    score: int = 0
    wins: int = 0
    losses: int = 0
    byes: int = 0
    rank: int = 0

    @property
    def has_received_bye(self) -> bool:
        return self.byes > 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rank": self.rank,
            "competitor_id": self.competitor.id,
            "competitor_name": self.competitor.name,
            "rating": self.competitor.rating,
            "score": self.score,
            "wins": self.wins,
            "losses": self.losses,
            "byes": self.byes,
        }


@dataclass
class InternalRound:
    """Pairings and matches of one round."""

    round_number: int
    pairings: List[Tuple[str, str]] = field(default_factory=list)
    matches: List[Match] = field(default_factory=list)
    bye_competitor_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "round_number": self.round_number,
            "pairings": [list(p) for p in self.pairings],
            "matches": [m.to_dict() for m in self.matches],
            "bye_competitor_id": self.bye_competitor_id,
        }


@dataclass
class InternalTournamentResult:
    """Final standings plus the round by round record."""

    standings: List[InternalStanding]
    rounds: List[InternalRound]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "standings": [s.to_dict() for s in self.standings],
            "rounds": [r.to_dict() for r in self.rounds],
        }


def _select_bye(ordered: List[InternalStanding]) -> InternalStanding:
    """Lowest ranked competitor who has not had a bye yet."""
    for standing in reversed(ordered):
        if not standing.has_received_bye:
            return standing
    return ordered[-1]


def pair_round(
    standings: List[InternalStanding],
) -> Tuple[List[Tuple[InternalStanding, InternalStanding]], Optional[InternalStanding]]:
    """Pair neighbours by running score, splitting off a bye for odd fields."""
    ordered = sorted(standings, key=lambda s: s.score, reverse=True)
    bye = None
    if len(ordered) % 2:
        bye = _select_bye(ordered)
        ordered = [s for s in ordered if s is not bye]
    pairs = [(ordered[i], ordered[i + 1]) for i in range(0, len(ordered), 2)]
    return pairs, bye


def rank_standings(standings: Sequence[InternalStanding]) -> List[InternalStanding]:
    """Order by score, then rating, and assign 1-based ranks."""
    ranked = sorted(
        standings, key=lambda s: (s.score, s.competitor.rating), reverse=True
    )
    for index, standing in enumerate(ranked):
        standing.rank = index + 1
    return ranked


def simulate_internal_tournament(
    competitors: Sequence[Competitor],
    rng: Optional[random.Random] = None,
    num_rounds: int = INTERNAL_ROUNDS,
    bye_points: int = INTERNAL_BYE_POINTS,
) -> InternalTournamentResult:
    """Run a fixed number of Swiss rounds over a roster.

    Args:
        competitors: Everyone taking part
        rng: Random source for the matches
        num_rounds: Rounds to play
        bye_points: Points awarded for a bye; byes never change ratings

    Returns:
        InternalTournamentResult with ranked standings and every round

    Raises:
        InsufficientCompetitorsException: With fewer than two competitors
    """
    if len(competitors) < 2:
        raise InsufficientCompetitorsException(
            f"An internal tournament needs at least 2 competitors, got {len(competitors)}"
        )
    if rng is None:
        rng = make_rng()

    logger.info(
        "Internal tournament: %s competitors, %s rounds", len(competitors), num_rounds
    )
    standings = [InternalStanding(competitor=c) for c in competitors]
    rounds: List[InternalRound] = []

    for round_number in range(1, num_rounds + 1):
        pairs, bye = pair_round(standings)
        round_data = InternalRound(round_number=round_number)

        for first, second in pairs:
            match = simulate_match(first.competitor, second.competitor, rng)
            winner, loser = (
                (first, second)
                if match.winner_id == first.competitor.id
                else (second, first)
            )
            winner.wins += 1
            winner.score += INTERNAL_WIN_POINTS
            loser.losses += 1
            loser.score += INTERNAL_LOSS_POINTS
            round_data.pairings.append((first.competitor.id, second.competitor.id))
            round_data.matches.append(match)

        if bye is not None:
            bye.byes += 1
            bye.score += bye_points
            round_data.bye_competitor_id = bye.competitor.id
            logger.debug("Round %s bye: %s", round_number, bye.competitor.id)

        rounds.append(round_data)

    return InternalTournamentResult(standings=rank_standings(standings), rounds=rounds)
