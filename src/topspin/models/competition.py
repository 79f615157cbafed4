"""Competition descriptors and per-competitor results.

This module defines the data structures exchanged with the competition
dispatcher. The simulation strategy is carried explicitly by
:class:`CompetitionShape` and is decided when the descriptor is built.
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

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Optional

from topspin.exceptions import InvalidCompetitionException
from topspin.models.competitor import Competitor


class CompetitionShape(Enum):
    """Simulation strategy used for a competition."""

    RANKED_BRACKET = "ranked_bracket"
    PAIRED_POOL = "paired_pool"
    FALLBACK = "fallback"


class CompetitionTier(Enum):
    """Tier of a competition; drives bracket size and movement flags."""

    STANDARD = "standard"
    CRITERIUM = "criterium"  # Promotion and relegation between divisions
    FINALS = "finals"


def _parse_enum(enum_cls, value, field_name: str):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        raise InvalidCompetitionException(
            f"Invalid {field_name}: {value!r}"
        ) from None


@dataclass
class Competition:
    """Describes a competition and its registrations.

    Attributes:
        id: Competition identifier
        name: Display name
        shape: Simulation strategy; inferred from ``team_size`` when omitted
        tier: Competition tier
        level: Free-form level label copied onto results ("Regional", ...)
        team_size: 1 for individual events, 2 for paired events
        min_rating: Lowest rating allowed to register
        max_rating: Highest rating allowed to register; also the skill cap
        min_age: Youngest age allowed to register
        max_age: Oldest age allowed to register
        registered_ids: IDs of registered competitors; when set,
            filter_eligible drops anyone not listed
    """

    id: str
    name: str
    shape: Optional[CompetitionShape] = None
    tier: CompetitionTier = CompetitionTier.STANDARD
    level: Optional[str] = None
    team_size: int = 1
    min_rating: Optional[float] = None
    max_rating: Optional[float] = None
    min_age: Optional[int] = None
    max_age: Optional[int] = None
    registered_ids: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.team_size < 1:
            raise InvalidCompetitionException(
                f"Team size must be at least 1, got {self.team_size}"
            )
        if self.shape is None:
            self.shape = (
                CompetitionShape.PAIRED_POOL
                if self.team_size == 2
                else CompetitionShape.FALLBACK
            )

    def is_eligible(self, competitor: Competitor, on_date: Optional[date] = None) -> bool:
        """Check the rating and age bounds for one competitor.

        A competitor with no known age passes the age bounds.
        """
        if self.min_rating is not None and competitor.rating < self.min_rating:
            return False
        if self.max_rating is not None and competitor.rating > self.max_rating:
            return False
        age = competitor.age_on(on_date)
        if age is None:
            return True
        if self.min_age is not None and age < self.min_age:
            return False
        if self.max_age is not None and age > self.max_age:
            return False
        return True

    def to_dict(self) -> Dict[str, Any]:
        """Serialize competition to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "shape": self.shape.value,
            "tier": self.tier.value,
            "level": self.level,
            "team_size": self.team_size,
            "min_rating": self.min_rating,
            "max_rating": self.max_rating,
            "min_age": self.min_age,
            "max_age": self.max_age,
            "registered_ids": list(self.registered_ids),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Competition":
        """Deserialize competition from dictionary."""
        shape = data.get("shape")
        return cls(
            id=str(data["id"]),
            name=data.get("name", str(data["id"])),
            shape=_parse_enum(CompetitionShape, shape, "shape") if shape else None,
            tier=_parse_enum(
                CompetitionTier, data.get("tier", "standard"), "tier"
            ),
            level=data.get("level"),
            team_size=int(data.get("team_size", 1)),
            min_rating=data.get("min_rating"),
            max_rating=data.get("max_rating"),
            min_age=data.get("min_age"),
            max_age=data.get("max_age"),
            registered_ids=[str(i) for i in data.get("registered_ids", [])],
        )


@dataclass
class CompetitionResult:
    """Outcome of a competition for one registered competitor.

    Attributes:
        competitor_id: ID of the competitor
        competitor_name: Name of the competitor
        rating: Rating at entry, rounded
        placement_label: Human readable placement ("Winner (1st)", ...)
        rating_change: Rating delta to apply
        matches_played: Matches played
        wins: Matches won
        losses: Matches lost
        exact_rank: Numeric placement, when the strategy ranks exactly
        partner_name: Pair partner in paired events
        division_level: Level label of the competition
        pool_points: Pool points earned in paired events
        is_promoted: Moves up a division
        is_relegated: Moves down a division
        is_qualified: Qualifies for the next stage
    """

    competitor_id: str
    competitor_name: str
    rating: int
    placement_label: str
    rating_change: float
    matches_played: int
    wins: int
    losses: int
    exact_rank: Optional[int] = None
    partner_name: Optional[str] = None
    division_level: Optional[str] = None
    pool_points: Optional[int] = None
    is_promoted: bool = False
    is_relegated: bool = False
    is_qualified: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Serialize result to dictionary."""
        return {
            "competitor_id": self.competitor_id,
            "competitor_name": self.competitor_name,
            "rating": self.rating,
            "placement_label": self.placement_label,
            "rating_change": self.rating_change,
            "matches_played": self.matches_played,
            "wins": self.wins,
            "losses": self.losses,
            "exact_rank": self.exact_rank,
            "partner_name": self.partner_name,
            "division_level": self.division_level,
            "pool_points": self.pool_points,
            "is_promoted": self.is_promoted,
            "is_relegated": self.is_relegated,
            "is_qualified": self.is_qualified,
        }
