"""Paired pool strategy.

Registrants enter in consecutive pairs. Each pair plays three rounds of a
five-leg fixture against freshly generated opponents; the pool points
earned decide the pair's place and division movement.
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

import math
import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from topspin.constants import (
    POOL_LEGS_TO_WIN,
    POOL_MOVEMENT_MAINTAINED,
    POOL_MOVEMENT_NOT_CLASSIFIED,
    POOL_MOVEMENT_PODIUM,
    POOL_MOVEMENT_PROMOTED,
    POOL_MOVEMENT_RELEGATED,
    POOL_OPPONENT_SPREAD,
    POOL_ROUND_LOSS_POINTS,
    POOL_ROUND_WIN_POINTS,
    POOL_ROUNDS,
)
from topspin.models.competition import (
    Competition,
    CompetitionResult,
    CompetitionTier,
)
from topspin.models.competitor import Competitor
from topspin.models.factory import CompetitorFactory
from topspin.simulation.doubles import create_doubles_pair
from topspin.simulation.match import simulate_match
from topspin.utils import make_rng, ordinal, setup_logger
from topspin.utils.validation import validate_pool_registrants

logger = setup_logger(__name__)


@dataclass
class MemberTally:
    """Singles record of one pair member across the pool."""

    wins: int = 0
    losses: int = 0
    rating_change: float = 0.0

    @property
    def matches_played(self) -> int:
        return self.wins + self.losses


def pool_outcome(pool_points: int, finals: bool = False) -> Tuple[int, str, str]:
    """Map pool points to ``(rank, label, movement)``.

    9 points finishes first, 7 or more second, 5 or more third, anything
    else fourth. Finals only distinguish the podium.
    """
    max_points = POOL_ROUNDS * POOL_ROUND_WIN_POINTS
    if pool_points >= max_points:
        rank, movement = 1, POOL_MOVEMENT_PROMOTED
    elif pool_points >= 7:
        rank, movement = 2, POOL_MOVEMENT_MAINTAINED
    elif pool_points >= 5:
        rank, movement = 3, POOL_MOVEMENT_MAINTAINED
    else:
        rank, movement = 4, POOL_MOVEMENT_RELEGATED

    if finals:
        movement = POOL_MOVEMENT_PODIUM if pool_points >= 7 else POOL_MOVEMENT_NOT_CLASSIFIED

    return rank, f"{ordinal(rank)} in pool ({movement})", movement


def _play_singles(
    player: Competitor,
    opponent: Competitor,
    tally: MemberTally,
    rng: random.Random,
) -> bool:
    match = simulate_match(player, opponent, rng)
    won = match.winner_id == player.id
    if won:
        tally.wins += 1
    else:
        tally.losses += 1
    tally.rating_change += match.rating_change_for(player.id)
    return won


def play_pool_round(
    first: Competitor,
    second: Competitor,
    opponent_first: Competitor,
    opponent_second: Competitor,
    tallies: Dict[str, MemberTally],
    rng: random.Random,
) -> int:
    """Play one five-leg round and return the legs won by the pair.

    Legs are first v opponent_first, second v opponent_second, doubles,
    first v opponent_second and second v opponent_first. Singles update
    ``tallies``; the doubles leg only counts toward the round.
    """
    legs_won = 0
    if _play_singles(first, opponent_first, tallies[first.id], rng):
        legs_won += 1
    if _play_singles(second, opponent_second, tallies[second.id], rng):
        legs_won += 1

    pair = create_doubles_pair(first, second, f"{first.id}+{second.id}")
    opposing_pair = create_doubles_pair(
        opponent_first, opponent_second, f"{opponent_first.id}+{opponent_second.id}"
    )
    if simulate_match(pair, opposing_pair, rng).winner_id == pair.id:
        legs_won += 1

    if _play_singles(first, opponent_second, tallies[first.id], rng):
        legs_won += 1
    if _play_singles(second, opponent_first, tallies[second.id], rng):
        legs_won += 1
    return legs_won


def _make_pairs(
    registrants: Sequence[Competitor],
) -> List[Tuple[Competitor, Competitor]]:
    result = validate_pool_registrants(registrants)
    if not result.is_valid:
        logger.warning(
            "%s; %s has no partner and is dropped",
            result.error_message,
            registrants[-1].id,
        )
    return [
        (registrants[i], registrants[i + 1])
        for i in range(0, len(registrants) - 1, 2)
    ]


def simulate_paired_pool(
    competition: Competition,
    registrants: Sequence[Competitor],
    rng: Optional[random.Random] = None,
) -> List[CompetitionResult]:
    """Simulate every pair's pool and return one result per paired member.

    Args:
        competition: The competition being played
        registrants: Registered competitors; consecutive entries form pairs
        rng: Random source for opponents and matches

    Returns:
        Results for both members of every pair, pair by pair
    """
    if not registrants:
        return []
    if rng is None:
        rng = make_rng()

    factory = CompetitorFactory(rng=rng)
    finals = competition.tier == CompetitionTier.FINALS
    results = []

    for pair_index, (first, second) in enumerate(_make_pairs(registrants)):
        tallies = {first.id: MemberTally(), second.id: MemberTally()}
        pool_points = 0

        for round_index in range(POOL_ROUNDS):
            pair_mean = (first.rating + second.rating) / 2
            target = (
                pair_mean
                + math.floor(rng.random() * 2 * POOL_OPPONENT_SPREAD)
                - POOL_OPPONENT_SPREAD
            )
            prefix = f"{competition.id}-pool-{pair_index}-{round_index}"
            opponent_first = factory.create_random_competitor(f"{prefix}-1", target)
            opponent_second = factory.create_random_competitor(f"{prefix}-2", target)

            legs_won = play_pool_round(
                first, second, opponent_first, opponent_second, tallies, rng
            )
            if legs_won >= POOL_LEGS_TO_WIN:
                pool_points += POOL_ROUND_WIN_POINTS
            else:
                pool_points += POOL_ROUND_LOSS_POINTS

        rank, label, movement = pool_outcome(pool_points, finals)
        logger.debug(
            "Pool pair %s/%s: %s points, %s", first.id, second.id, pool_points, label
        )
        for member, partner in ((first, second), (second, first)):
            tally = tallies[member.id]
            results.append(
                CompetitionResult(
                    competitor_id=member.id,
                    competitor_name=member.name,
                    rating=round(member.rating),
                    placement_label=label,
                    rating_change=tally.rating_change,
                    matches_played=tally.matches_played,
                    wins=tally.wins,
                    losses=tally.losses,
                    exact_rank=rank,
                    partner_name=partner.name,
                    division_level=competition.level,
                    pool_points=pool_points,
                    is_promoted=movement == POOL_MOVEMENT_PROMOTED,
                    is_relegated=movement == POOL_MOVEMENT_RELEGATED,
                )
            )

    logger.info("Pool %s: %s results", competition.id, len(results))
    return results
