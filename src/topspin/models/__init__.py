from topspin.models.competition import (
    Competition,
    CompetitionResult,
    CompetitionShape,
    CompetitionTier,
)
from topspin.models.competitor import Attributes, Competitor, PlayStyle
from topspin.models.factory import (
    CompetitorFactory,
    create_ghost_competitor,
    rating_from_attributes,
)
from topspin.models.match import Match, PointResult, RatingExchange, SetScore
from topspin.models.meeting import Meeting
from topspin.models.team import Team

__all__ = [
    "Attributes",
    "Competitor",
    "PlayStyle",
    "CompetitorFactory",
    "create_ghost_competitor",
    "rating_from_attributes",
    "Competition",
    "CompetitionResult",
    "CompetitionShape",
    "CompetitionTier",
    "Match",
    "PointResult",
    "RatingExchange",
    "SetScore",
    "Meeting",
    "Team",
]
