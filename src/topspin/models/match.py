"""Data models for points, sets and matches."""

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

from topspin.constants import SIDE_A, SIDE_B
from topspin.type_hints import PointType, Side


@dataclass(frozen=True)
class PointResult:
    """Outcome of a single rally.

    Attributes
    ----------
    winner : str
        Side that won the point, ``"A"`` or ``"B"``
    type : str
        One of ACE, WINNER, UNFORCED_ERROR, LUCKY
    description : str
        Human readable commentary line
    """

    winner: Side
    type: PointType
    description: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "winner": self.winner,
            "type": self.type,
            "description": self.description,
        }


@dataclass(frozen=True)
class SetScore:
    """Final score of one set."""

    score_a: int
    score_b: int

    @property
    def winner(self) -> Side:
        return SIDE_A if self.score_a > self.score_b else SIDE_B

    def to_dict(self) -> Dict[str, int]:
        return {"score_a": self.score_a, "score_b": self.score_b}


@dataclass(frozen=True)
class RatingExchange:
    """Rating points won by the winner and lost (as a non-positive number) by the loser."""

    gain: float
    loss: float

    def to_dict(self) -> Dict[str, float]:
        return {"gain": self.gain, "loss": self.loss}


@dataclass
class Match:
    """A best-of-five singles or doubles match.

    Attributes
    ----------
    player_a_id : str
        ID of side A
    player_b_id : str
        ID of side B
    sets : list of SetScore
        Sets in the order they were played
    winner_id : str
        ID of the winning side
    exchange : RatingExchange
        Rating delta pair for the winner and the loser
    point_log : list of PointResult
        Every rally of the match, for playback
    is_walkover : bool
        True when one side was an empty roster slot
    """

    player_a_id: str
    player_b_id: str
    sets: List[SetScore]
    winner_id: str
    exchange: RatingExchange
    point_log: List[PointResult] = field(default_factory=list)
    is_walkover: bool = False

    @property
    def loser_id(self) -> str:
        return self.player_b_id if self.winner_id == self.player_a_id else self.player_a_id

    @property
    def sets_won_a(self) -> int:
        return sum(1 for s in self.sets if s.winner == SIDE_A)

    @property
    def sets_won_b(self) -> int:
        return sum(1 for s in self.sets if s.winner == SIDE_B)

    def rating_change_for(self, competitor_id: str) -> float:
        """Rating delta for one side of the match, 0 for anyone else."""
        if competitor_id == self.winner_id:
            return self.exchange.gain
        if competitor_id == self.loser_id:
            return self.exchange.loss
        return 0.0

    def to_dict(self, include_log: bool = False) -> Dict[str, Any]:
        """Serialize match to dictionary."""
        data: Dict[str, Any] = {
            "player_a_id": self.player_a_id,
            "player_b_id": self.player_b_id,
            "sets": [s.to_dict() for s in self.sets],
            "winner_id": self.winner_id,
            "exchange": self.exchange.to_dict(),
            "is_walkover": self.is_walkover,
        }
        if include_log:
            data["point_log"] = [p.to_dict() for p in self.point_log]
        return data
