"""Point outcome generator.

Each rally compares a noisy performance score for both sides and then rolls
once to decide how the point was won.
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
from typing import Dict, FrozenSet, Tuple

from topspin.constants import (
    ACE_THRESHOLD,
    ATTACK_WEIGHT,
    DEFENSE_WEIGHT,
    LUCKY_THRESHOLD,
    PERFORMANCE_NOISE,
    POINT_ACE,
    POINT_LUCKY,
    POINT_UNFORCED_ERROR,
    POINT_WINNER,
    RATING_WEIGHT,
    SIDE_A,
    SIDE_B,
    STYLE_MATCHUP_BONUS,
    UNFORCED_ERROR_THRESHOLD,
)
from topspin.models.competitor import Competitor, PlayStyle
from topspin.models.match import PointResult

# style -> (styles it beats, styles it loses to)
STYLE_COUNTERS: Dict[PlayStyle, Tuple[FrozenSet[PlayStyle], FrozenSet[PlayStyle]]] = {
    PlayStyle.ATTACKER: (
        frozenset({PlayStyle.BLOCKER, PlayStyle.CRAB}),
        frozenset({PlayStyle.DEFENDER, PlayStyle.MODERN_DEFENDER}),
    ),
}


def _one_way_bonus(style: PlayStyle, opponent_style: PlayStyle) -> int:
    beats, loses_to = STYLE_COUNTERS.get(style, (frozenset(), frozenset()))
    if opponent_style in beats:
        return STYLE_MATCHUP_BONUS
    if opponent_style in loses_to:
        return -STYLE_MATCHUP_BONUS
    return 0


def style_matchup_bonus(style: PlayStyle, opponent_style: PlayStyle) -> int:
    """Performance modifier for ``style`` facing ``opponent_style``.

    The table is read from both directions, so swapping the two styles
    flips the sign of the bonus.
    """
    bonus = _one_way_bonus(style, opponent_style)
    if bonus:
        return bonus
    return -_one_way_bonus(opponent_style, style)


def base_performance(player: Competitor, opponent: Competitor) -> float:
    """Deterministic part of a side's performance score."""
    return (
        player.rating * RATING_WEIGHT
        + player.attributes.attack * ATTACK_WEIGHT
        - opponent.attributes.defense * DEFENSE_WEIGHT
        + player.attributes.speed
    )


def describe_point(point_type: str, scorer: Competitor, faulter: Competitor) -> str:
    """Commentary line for a point."""
    if point_type == POINT_ACE:
        return "Service ace!"
    if point_type == POINT_LUCKY:
        return "Net and edge!"
    if point_type == POINT_UNFORCED_ERROR:
        return f"Unforced error by {faulter.first_name}."
    return f"Winning attack by {scorer.first_name}."


def classify_point(
    perf_a: float,
    perf_b: float,
    roll: float,
    player_a: Competitor,
    player_b: Competitor,
) -> PointResult:
    """Resolve a point from both performance scores and one roll in [0, 1).

    The side with the higher performance wins the rally unless it commits an
    unforced error. Equal scores favour side B.
    """
    stronger = SIDE_A if perf_a > perf_b else SIDE_B
    if stronger == SIDE_A:
        strong, weak = player_a, player_b
    else:
        strong, weak = player_b, player_a

    if roll > LUCKY_THRESHOLD:
        point_type = POINT_LUCKY
    elif roll > ACE_THRESHOLD and strong.attributes.technique > weak.attributes.tactical:
        point_type = POINT_ACE
    elif roll < UNFORCED_ERROR_THRESHOLD:
        point_type = POINT_UNFORCED_ERROR
    else:
        point_type = POINT_WINNER

    if point_type == POINT_UNFORCED_ERROR:
        winner = SIDE_B if stronger == SIDE_A else SIDE_A
        return PointResult(
            winner=winner,
            type=point_type,
            description=describe_point(point_type, weak, strong),
        )

    return PointResult(
        winner=stronger,
        type=point_type,
        description=describe_point(point_type, strong, weak),
    )


def simulate_point(
    player_a: Competitor, player_b: Competitor, rng: random.Random
) -> PointResult:
    """Play one rally between two competitors (or doubles composites)."""
    perf_a = base_performance(player_a, player_b) + rng.random() * PERFORMANCE_NOISE
    perf_b = base_performance(player_b, player_a) + rng.random() * PERFORMANCE_NOISE
    perf_a += style_matchup_bonus(player_a.style, player_b.style)
    return classify_point(perf_a, perf_b, rng.random(), player_a, player_b)
