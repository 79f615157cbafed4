"""Fallback strategy: a per-competitor heuristic result with no field."""

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
from typing import List, Optional, Sequence

from topspin.constants import (
    DEFAULT_RATING_CAP,
    FALLBACK_EXTRA_MATCHES,
    FALLBACK_LOSS_DELTA,
    FALLBACK_MIN_MATCHES,
    FALLBACK_NOISE_WEIGHT,
    FALLBACK_POOL_LABEL,
    FALLBACK_STAGES,
    FALLBACK_WIN_DELTA,
    FALLBACK_WIN_RATE,
)
from topspin.models.competition import Competition, CompetitionResult
from topspin.models.competitor import Competitor
from topspin.utils import make_rng, setup_logger

logger = setup_logger(__name__)


def simulate_fallback_result(
    competitor: Competitor,
    competition: Competition,
    rng: random.Random,
    rating_cap: float = DEFAULT_RATING_CAP,
) -> CompetitionResult:
    """Estimate one competitor's run from rating and luck.

    ``rating_cap`` replaces a missing or zero ``max_rating``.
    """
    skill = min(1.0, competitor.rating / (competition.max_rating or rating_cap))
    total = skill + rng.random() * FALLBACK_NOISE_WEIGHT

    played = FALLBACK_MIN_MATCHES + rng.randint(0, FALLBACK_EXTRA_MATCHES)
    wins = math.floor(played * total * FALLBACK_WIN_RATE)
    losses = played - wins
    change = FALLBACK_WIN_DELTA * wins - FALLBACK_LOSS_DELTA * losses

    label = FALLBACK_POOL_LABEL
    for stage, (threshold, stage_label, bonus) in enumerate(FALLBACK_STAGES):
        if total > threshold:
            label = stage_label
            change += bonus
            if stage < 3:
                # Winner, finalist and semifinalist lose exactly ``stage`` times
                wins, losses = played - stage, stage
            else:
                wins = max(1, wins)
                losses = played - wins
            break

    return CompetitionResult(
        competitor_id=competitor.id,
        competitor_name=competitor.name,
        rating=round(competitor.rating),
        placement_label=label,
        rating_change=change,
        matches_played=played,
        wins=wins,
        losses=losses,
        division_level=competition.level,
    )


def simulate_fallback(
    competition: Competition,
    registrants: Sequence[Competitor],
    rng: Optional[random.Random] = None,
    rating_cap: float = DEFAULT_RATING_CAP,
) -> List[CompetitionResult]:
    """Apply the fallback heuristic to every registrant independently."""
    if rng is None:
        rng = make_rng()
    results = [
        simulate_fallback_result(c, competition, rng, rating_cap) for c in registrants
    ]
    if results:
        logger.info("Fallback %s: %s results", competition.id, len(results))
    return results
