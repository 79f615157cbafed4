"""A rated table tennis competitor.

Competitors are supplied by callers and are never mutated by the engine;
simulations return rating deltas that the caller applies.
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

from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import date
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from dateutil.relativedelta import relativedelta

from topspin.exceptions import InvalidCompetitorDataException
from topspin.utils import generate_id


class PlayStyle(Enum):
    """Playing styles; some of them counter each other."""

    ATTACKER = "Topspin attacker"
    BLOCKER = "Blocker"
    DEFENDER = "Classic defender"
    MODERN_DEFENDER = "Modern defender"
    CRAB = "Crab (pimples)"
    PIVOT = "Pivot attacker"
    ALLROUND = "All-round"
    HITTER = "Hitter"

    @classmethod
    def parse(cls, value: Any) -> "PlayStyle":
        """Accept a PlayStyle, its value or its member name."""
        if isinstance(value, cls):
            return value
        for style in cls:
            if value in (style.value, style.name, style.name.lower()):
                return style
        raise InvalidCompetitorDataException(f"Unknown play style: {value!r}")


@dataclass(frozen=True)
class Attributes:
    """Numeric playing attributes, nominally 0-99."""

    attack: float = 0.0
    defense: float = 0.0
    speed: float = 0.0
    mental: float = 0.0
    stamina: float = 0.0
    technique: float = 0.0
    tactical: float = 0.0

    @classmethod
    def mean(cls, first: "Attributes", second: "Attributes") -> "Attributes":
        """Elementwise arithmetic mean of two attribute sets."""
        return cls(
            **{
                f.name: (getattr(first, f.name) + getattr(second, f.name)) / 2
                for f in fields(cls)
            }
        )

    def to_dict(self) -> Dict[str, float]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Attributes":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise InvalidCompetitorDataException(
                f"Unknown attributes: {', '.join(sorted(unknown))}"
            )
        return cls(**{name: float(value) for name, value in data.items()})


@dataclass
class Competitor:
    """Represents a competitor, real or synthetic.

    Attributes:
        name: Display name
        rating: Scalar skill rating ("points")
        attributes: Playing attributes
        style: Playing style
        fatigue: Fatigue level, 0-100
        age: Age in years when no date of birth is known
        date_of_birth: Date of birth, preferred over ``age``
        gender: Optional gender tag used for eligibility displays
        is_placeholder: Ghost filling an empty roster slot
        is_composite: Transient doubles pair stand-in
        member_ids: IDs of the two members of a composite
        id: Unique identifier
    """

    name: str
    rating: float = 0.0
    attributes: Attributes = field(default_factory=Attributes)
    style: PlayStyle = PlayStyle.ALLROUND
    fatigue: float = 0.0
    age: Optional[int] = None
    date_of_birth: Optional[date] = None
    gender: Optional[str] = None
    is_placeholder: bool = False
    is_composite: bool = False
    member_ids: Tuple[str, ...] = ()
    id: str = field(default_factory=lambda: generate_id("Competitor"))

    @property
    def first_name(self) -> str:
        parts = self.name.split()
        return parts[0] if parts else self.name

    def age_on(self, on_date: Optional[date] = None) -> Optional[int]:
        """Age in whole years on ``on_date`` (today by default)."""
        if self.date_of_birth is None:
            return self.age
        return relativedelta(on_date or date.today(), self.date_of_birth).years

    def to_dict(self) -> Dict[str, Any]:
        """Serialize competitor to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "rating": self.rating,
            "attributes": self.attributes.to_dict(),
            "style": self.style.value,
            "fatigue": self.fatigue,
            "age": self.age,
            "date_of_birth": (
                self.date_of_birth.isoformat() if self.date_of_birth else None
            ),
            "gender": self.gender,
            "is_placeholder": self.is_placeholder,
            "is_composite": self.is_composite,
            "member_ids": list(self.member_ids),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Competitor":
        """Deserialize competitor from dictionary."""
        try:
            dob = data.get("date_of_birth")
            kwargs: Dict[str, Any] = {
                "name": data["name"],
                "rating": float(data.get("rating", 0.0)),
                "attributes": Attributes.from_dict(data.get("attributes", {})),
                "style": PlayStyle.parse(data.get("style", PlayStyle.ALLROUND)),
                "fatigue": float(data.get("fatigue", 0.0)),
                "age": data.get("age"),
                "date_of_birth": date.fromisoformat(dob) if dob else None,
                "gender": data.get("gender"),
                "is_placeholder": bool(data.get("is_placeholder", False)),
                "is_composite": bool(data.get("is_composite", False)),
                "member_ids": tuple(data.get("member_ids", ())),
            }
        except KeyError as e:
            raise InvalidCompetitorDataException(f"Missing field: {e}") from e
        except (TypeError, ValueError) as e:
            raise InvalidCompetitorDataException(str(e)) from e
        if data.get("id"):
            kwargs["id"] = str(data["id"])
        return cls(**kwargs)
