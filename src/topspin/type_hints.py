"""Type hints used in Topspin."""

from typing import Literal, Tuple, TypeVar, Union

# Side of a single match
Side = Literal["A", "B"]

# Point outcome literals
PointType = Literal["ACE", "WINNER", "UNFORCED_ERROR", "LUCKY"]

# Side of a meeting
MeetingSide = Literal["home", "away"]

# A meeting template slot, either a roster index or a doubles leg name
Slot = Union[int, str]
# One leg of a meeting template
MeetingLeg = Tuple[Slot, Slot]

# Anything scheduled in a league field (a team, an id, ...)
Entrant = TypeVar("Entrant")
# One (home, away) fixture
Fixture = Tuple[Entrant, Entrant]
