"""Ranked bracket strategy.

The field is filled up to the bracket size with generated competitors, then
everyone is placed by a noisy rating score. Results are derived from the
placement rather than from individually simulated matches.
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
from typing import Dict, List, Optional, Sequence, Tuple

from topspin.constants import (
    BRACKET_BASE_DELTA,
    BRACKET_DELTA_PER_PLACE,
    BRACKET_FILLER_SPREAD,
    BRACKET_PLACEMENT_NOISE,
    BRACKET_REGISTERED_BONUS,
    BRACKET_SIZE,
    FINALS_BRACKET_SIZE,
)
from topspin.models.competition import (
    Competition,
    CompetitionResult,
    CompetitionTier,
)
from topspin.models.competitor import Competitor
from topspin.models.factory import CompetitorFactory
from topspin.utils import make_rng, ordinal, setup_logger

logger = setup_logger(__name__)


def bracket_size(competition: Competition, entrant_count: int) -> int:
    """Bracket size for the tier, grown to a power of two for large fields."""
    size = (
        FINALS_BRACKET_SIZE
        if competition.tier == CompetitionTier.FINALS
        else BRACKET_SIZE
    )
    if entrant_count > size:
        size = 1 << (entrant_count - 1).bit_length()
    return size


def placement_record(
    placement: int, size: int, rng: random.Random
) -> Tuple[int, int]:
    """Wins and losses implied by a bracket placement."""
    rounds = size.bit_length() - 1
    if placement == 1:
        return rounds, 0
    if placement == 2:
        return rounds - 1, 1
    wins = max(0, math.floor(rounds - placement / 4))
    losses = max(1, math.ceil(rng.random() * 2))
    return wins, losses


def placement_label(placement: int) -> str:
    if placement == 1:
        return "Winner (1st)"
    if placement == 2:
        return "Finalist (2nd)"
    return ordinal(placement)


def simulate_ranked_bracket(
    competition: Competition,
    registrants: Sequence[Competitor],
    rng: Optional[random.Random] = None,
) -> List[CompetitionResult]:
    """Place registrants in a filled bracket and derive their results.

    Args:
        competition: The competition being played
        registrants: Registered competitors, in registration order
        rng: Random source for fillers and placement noise

    Returns:
        One CompetitionResult per registrant, in registration order
    """
    if not registrants:
        return []
    if rng is None:
        rng = make_rng()

    size = bracket_size(competition, len(registrants))
    mean_rating = sum(c.rating for c in registrants) / len(registrants)
    factory = CompetitorFactory(rng=rng)

    field: List[Competitor] = list(registrants)
    while len(field) < size:
        target = mean_rating + rng.uniform(-BRACKET_FILLER_SPREAD, BRACKET_FILLER_SPREAD)
        field.append(
            factory.create_random_competitor(
                f"{competition.id}-filler-{len(field)}", target
            )
        )

    registered_ids = {c.id for c in registrants}
    scored = []
    for competitor in field:
        score = competitor.rating + rng.uniform(0, BRACKET_PLACEMENT_NOISE)
        if competitor.id in registered_ids:
            score += BRACKET_REGISTERED_BONUS
        scored.append((score, competitor))
    scored.sort(key=lambda item: item[0], reverse=True)
    placements: Dict[str, int] = {
        competitor.id: index + 1 for index, (_, competitor) in enumerate(scored)
    }

    is_criterium = competition.tier == CompetitionTier.CRITERIUM
    results = []
    for competitor in registrants:
        placement = placements[competitor.id]
        wins, losses = placement_record(placement, size, rng)
        results.append(
            CompetitionResult(
                competitor_id=competitor.id,
                competitor_name=competitor.name,
                rating=round(competitor.rating),
                placement_label=placement_label(placement),
                rating_change=round(
                    BRACKET_BASE_DELTA - BRACKET_DELTA_PER_PLACE * placement
                ),
                matches_played=wins + losses,
                wins=wins,
                losses=losses,
                exact_rank=placement,
                division_level=competition.level,
                is_promoted=is_criterium and placement == 1,
                is_relegated=is_criterium and placement > size - 2,
                is_qualified=placement <= 2,
            )
        )

    logger.info(
        "Bracket %s: %s registrants in a bracket of %s",
        competition.id,
        len(registrants),
        size,
    )
    return results
