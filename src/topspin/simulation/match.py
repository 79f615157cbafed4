"""Set and match simulation.

A set runs to 11 points with a two point margin; a match is best of five.
Placeholder (ghost) competitors forfeit against real opposition.
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
from typing import List, Optional, Tuple

from topspin.constants import (
    MIN_SET_MARGIN,
    POINTS_TO_WIN_SET,
    SET_POINT_CEILING,
    SETS_TO_WIN_MATCH,
    SIDE_A,
    WALKOVER_SET_SCORE,
)
from topspin.models.competitor import Competitor
from topspin.models.match import Match, PointResult, SetScore
from topspin.simulation.exchange import calculate_point_exchange
from topspin.simulation.point import simulate_point
from topspin.utils import make_rng, setup_logger

logger = setup_logger(__name__)


def is_set_complete(score_a: int, score_b: int) -> bool:
    """Whether a set with this score is over."""
    if score_a >= POINTS_TO_WIN_SET and score_a - score_b >= MIN_SET_MARGIN:
        return True
    if score_b >= POINTS_TO_WIN_SET and score_b - score_a >= MIN_SET_MARGIN:
        return True
    return score_a > SET_POINT_CEILING or score_b > SET_POINT_CEILING


def simulate_set(
    player_a: Competitor, player_b: Competitor, rng: random.Random
) -> Tuple[SetScore, List[PointResult]]:
    """Play points until the set is won or the safety ceiling is passed.

    Returns:
        The final score and the ordered point log
    """
    score_a = 0
    score_b = 0
    log: List[PointResult] = []
    while not is_set_complete(score_a, score_b):
        point = simulate_point(player_a, player_b, rng)
        log.append(point)
        if point.winner == SIDE_A:
            score_a += 1
        else:
            score_b += 1
    return SetScore(score_a, score_b), log


def _walkover(player_a: Competitor, player_b: Competitor) -> Match:
    winner, loser = (player_b, player_a) if player_a.is_placeholder else (player_a, player_b)
    won, lost = WALKOVER_SET_SCORE
    set_score = SetScore(won, lost) if winner is player_a else SetScore(lost, won)
    return Match(
        player_a_id=player_a.id,
        player_b_id=player_b.id,
        sets=[set_score] * SETS_TO_WIN_MATCH,
        winner_id=winner.id,
        exchange=calculate_point_exchange(winner.rating, loser.rating),
        is_walkover=True,
    )


def simulate_match(
    player_a: Competitor,
    player_b: Competitor,
    rng: Optional[random.Random] = None,
) -> Match:
    """Play a best-of-five match.

    Args:
        player_a: Side A, a competitor or a doubles composite
        player_b: Side B, a competitor or a doubles composite
        rng: Random source; a fresh unseeded one is used when omitted

    Returns:
        The match with its sets, winner, rating exchange and point log
    """
    if player_a.is_placeholder != player_b.is_placeholder:
        match = _walkover(player_a, player_b)
        logger.debug("Walkover: %s beats placeholder", match.winner_id)
        return match

    if rng is None:
        rng = make_rng()

    sets: List[SetScore] = []
    point_log: List[PointResult] = []
    wins_a = 0
    wins_b = 0
    while wins_a < SETS_TO_WIN_MATCH and wins_b < SETS_TO_WIN_MATCH:
        set_score, log = simulate_set(player_a, player_b, rng)
        sets.append(set_score)
        point_log.extend(log)
        if set_score.winner == SIDE_A:
            wins_a += 1
        else:
            wins_b += 1

    winner, loser = (player_a, player_b) if wins_a > wins_b else (player_b, player_a)
    match = Match(
        player_a_id=player_a.id,
        player_b_id=player_b.id,
        sets=sets,
        winner_id=winner.id,
        exchange=calculate_point_exchange(winner.rating, loser.rating),
        point_log=point_log,
    )
    logger.debug(
        "Match %s vs %s: %d-%d, winner %s",
        player_a.id,
        player_b.id,
        wins_a,
        wins_b,
        winner.id,
    )
    return match
