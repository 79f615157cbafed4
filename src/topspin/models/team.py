"""A team entered in a league field."""

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
from typing import Any, Dict, List

from topspin.models.competitor import Competitor


@dataclass
class Team:
    """An ordered roster; the first players are the ones fielded."""

    id: str
    name: str
    players: List[Competitor] = field(default_factory=list)

    def lineup(self, size: int) -> List[Competitor]:
        """The first ``size`` players, possibly fewer."""
        return list(self.players[:size])

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "players": [p.to_dict() for p in self.players],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Team":
        return cls(
            id=str(data["id"]),
            name=data.get("name", str(data["id"])),
            players=[Competitor.from_dict(p) for p in data.get("players", [])],
        )
