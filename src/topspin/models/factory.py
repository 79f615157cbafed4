"""Factory for creating Competitor objects.

This module implements the Factory pattern for Competitor creation,
providing a single point of entry for real competitors (with validation),
random opponents generated around a target rating, and ghosts that fill
empty roster slots.
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
from typing import Any, Dict, Optional

from topspin.constants import (
    DEFAULT_TARGET_RATING,
    FIRST_NAMES_MEN,
    FIRST_NAMES_WOMEN,
    GENERATED_AGE_SPAN,
    GHOST_NAME,
    LAST_NAMES,
    MAX_ATTRIBUTE,
    MAX_BASE_ATTRIBUTE,
    MIN_ATTRIBUTE,
    MIN_GENERATED_AGE,
    MIN_GENERATED_RATING,
)
from topspin.exceptions import InvalidCompetitorDataException
from topspin.models.competitor import Attributes, Competitor, PlayStyle
from topspin.utils import make_rng, setup_logger
from topspin.utils.validation import validate_rating

logger = setup_logger(__name__)


def rating_from_attributes(attributes: Attributes) -> int:
    """Estimate a rating from playing attributes (stamina is ignored)."""
    return round(
        500
        + attributes.attack * 3.5
        + attributes.defense * 3
        + attributes.speed * 3
        + attributes.mental * 4
        + attributes.technique * 3.5
        + attributes.tactical * 3
    )


def create_ghost_competitor(competitor_id: str) -> Competitor:
    """Create a zero-rated placeholder that forfeits every match."""
    return Competitor(
        id=competitor_id,
        name=GHOST_NAME,
        rating=0.0,
        attributes=Attributes(),
        style=PlayStyle.ALLROUND,
        fatigue=100.0,
        age=0,
        is_placeholder=True,
    )


def _clamp(value: float, low: float, high: float) -> float:
    return min(high, max(low, value))


class CompetitorFactory:
    """Factory for creating Competitor instances.

    Example:
        >>> factory = CompetitorFactory(rng=random.Random(7))
        >>> opponent = factory.create_random_competitor("opp-1", 1200)
        >>> ghost = create_ghost_competitor("ghost-1")
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        validate: bool = True,
        strict: bool = False,
    ):
        """Initialize the CompetitorFactory.

        Args:
            rng: Random source for generated competitors
            validate: Whether to validate input data
            strict: Whether to raise exceptions on validation errors
        """
        self.random = rng if rng is not None else make_rng()
        self.validate = validate
        self.strict = strict

    def create_competitor(
        self,
        name: str,
        rating: Optional[float] = None,
        attributes: Optional[Attributes] = None,
        style: Any = PlayStyle.ALLROUND,
        **kwargs,
    ) -> Competitor:
        """Create a real competitor.

        A missing rating is estimated from the attributes.

        Raises:
            InvalidCompetitorDataException: If validation fails and strict=True
        """
        attributes = attributes or Attributes()
        if self.validate:
            result = validate_rating(rating)
            if not result.is_valid:
                if self.strict:
                    raise InvalidCompetitorDataException(
                        f"Invalid competitor data: {result.error_message}"
                    )
                logger.warning(
                    "Invalid rating for %s: %s - estimating from attributes",
                    name,
                    result.error_message,
                )
                rating = None
        if rating is None:
            rating = rating_from_attributes(attributes)
        return Competitor(
            name=name,
            rating=float(rating),
            attributes=attributes,
            style=PlayStyle.parse(style),
            **kwargs,
        )

    def create_competitor_from_dict(self, data: Dict[str, Any]) -> Competitor:
        """Create a competitor from serialized data, estimating a missing rating."""
        if data.get("rating") is None:
            data = dict(data)
            data["rating"] = rating_from_attributes(
                Attributes.from_dict(data.get("attributes", {}))
            )
        elif self.validate:
            result = validate_rating(data["rating"])
            if not result.is_valid:
                raise InvalidCompetitorDataException(
                    f"Invalid competitor data: {result.error_message}"
                )
        return Competitor.from_dict(data)

    def create_random_competitor(
        self,
        competitor_id: str,
        target_rating: float = DEFAULT_TARGET_RATING,
        age: Optional[int] = None,
    ) -> Competitor:
        """Generate a plausible competitor rated around ``target_rating``."""
        base = _clamp((target_rating - 200) / 25, MIN_ATTRIBUTE, MAX_BASE_ATTRIBUTE)

        def attribute() -> float:
            variance = math.floor(self.random.random() * 20 - 10)
            return _clamp(base + variance, MIN_ATTRIBUTE, MAX_ATTRIBUTE)

        attributes = Attributes(
            attack=attribute(),
            defense=attribute(),
            speed=attribute(),
            mental=attribute(),
            stamina=60 + math.floor(self.random.random() * 40),
            technique=attribute(),
            tactical=attribute(),
        )
        rating = target_rating + math.floor(self.random.random() * 60 - 30)
        if age is None:
            age = MIN_GENERATED_AGE + math.floor(
                self.random.random() * GENERATED_AGE_SPAN
            )
        gender = "M" if self.random.random() > 0.5 else "F"
        first_names = FIRST_NAMES_MEN if gender == "M" else FIRST_NAMES_WOMEN

        return Competitor(
            id=competitor_id,
            name=f"{self.random.choice(first_names)} {self.random.choice(LAST_NAMES)}",
            rating=float(max(MIN_GENERATED_RATING, round(rating))),
            attributes=attributes,
            style=self.random.choice(list(PlayStyle)),
            fatigue=0.0,
            age=age,
            gender=gender,
        )
