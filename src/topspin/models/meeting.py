"""Team meeting model."""

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
from typing import Any, Dict, List, Optional

from topspin.models.match import Match
from topspin.type_hints import MeetingSide


@dataclass
class Meeting:
    """A team fixture made of an ordered sequence of matches.

    Attributes:
        id: Meeting identifier
        home_name: Name of the home team
        away_name: Name of the away team
        home_players: Home roster IDs, ghosts included
        away_players: Away roster IDs, ghosts included
        matches: Matches in template order
        home_score: Matches won by the home side
        away_score: Matches won by the away side
        home_id: Home team identifier, when known
        away_id: Away team identifier, when known
        day_number: League day, when scheduled
        phase: League phase, when scheduled
    """

    id: str
    home_name: str = ""
    away_name: str = ""
    home_players: List[str] = field(default_factory=list)
    away_players: List[str] = field(default_factory=list)
    matches: List[Match] = field(default_factory=list)
    home_score: int = 0
    away_score: int = 0
    home_id: Optional[str] = None
    away_id: Optional[str] = None
    day_number: Optional[int] = None
    phase: Optional[int] = None

    @property
    def winner(self) -> Optional[MeetingSide]:
        """Winning side, or None for a drawn meeting."""
        if self.home_score > self.away_score:
            return "home"
        if self.away_score > self.home_score:
            return "away"
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize meeting to dictionary."""
        return {
            "id": self.id,
            "home_name": self.home_name,
            "away_name": self.away_name,
            "home_players": list(self.home_players),
            "away_players": list(self.away_players),
            "matches": [m.to_dict() for m in self.matches],
            "home_score": self.home_score,
            "away_score": self.away_score,
            "home_id": self.home_id,
            "away_id": self.away_id,
            "day_number": self.day_number,
            "phase": self.phase,
        }
