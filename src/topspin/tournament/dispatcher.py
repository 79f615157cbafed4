"""Competition dispatcher and eligibility filtering."""

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
from datetime import date
from typing import List, Optional, Sequence

from topspin.constants import DEFAULT_RATING_CAP
from topspin.exceptions import InvalidCompetitionException
from topspin.models.competition import (
    Competition,
    CompetitionResult,
    CompetitionShape,
)
from topspin.models.competitor import Competitor
from topspin.tournament.bracket import simulate_ranked_bracket
from topspin.tournament.fallback import simulate_fallback
from topspin.tournament.pool import simulate_paired_pool
from topspin.utils import make_rng, setup_logger

logger = setup_logger(__name__)


def filter_eligible(
    competition: Competition,
    competitors: Sequence[Competitor],
    on_date: Optional[date] = None,
) -> List[Competitor]:
    """Keep the competitors inside the competition's rating and age bounds.

    When the competition lists ``registered_ids``, competitors missing
    from that list are dropped as well.
    """
    registered = set(competition.registered_ids)
    eligible = [
        c
        for c in competitors
        if (not registered or c.id in registered)
        and competition.is_eligible(c, on_date)
    ]
    if len(eligible) < len(competitors):
        logger.info(
            "%s: %s of %s competitors eligible",
            competition.id,
            len(eligible),
            len(competitors),
        )
    return eligible


def simulate_competition(
    competition: Competition,
    registrants: Sequence[Competitor],
    rng: Optional[random.Random] = None,
    rating_cap: float = DEFAULT_RATING_CAP,
) -> List[CompetitionResult]:
    """Simulate a whole competition with the strategy named by its shape.

    Args:
        competition: Competition descriptor
        registrants: Registered competitors
        rng: Random source, created when omitted
        rating_cap: Skill cap for the fallback strategy when the
            competition has no ``max_rating``

    Returns:
        List of CompetitionResult, empty when nobody registered

    Raises:
        InvalidCompetitionException: If the shape is not a known strategy
    """
    if rng is None:
        rng = make_rng()

    logger.info(
        "Simulating %s (%s) with %s registrants",
        competition.name,
        competition.shape.value if competition.shape else None,
        len(registrants),
    )

    if competition.shape == CompetitionShape.RANKED_BRACKET:
        return simulate_ranked_bracket(competition, registrants, rng)
    if competition.shape == CompetitionShape.PAIRED_POOL:
        return simulate_paired_pool(competition, registrants, rng)
    if competition.shape == CompetitionShape.FALLBACK:
        return simulate_fallback(competition, registrants, rng, rating_cap)
    raise InvalidCompetitionException(
        f"Unknown competition shape: {competition.shape!r}"
    )
