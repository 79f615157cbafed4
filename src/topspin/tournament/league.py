"""League day simulation and league standings."""

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
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence

from topspin.constants import (
    FULL_ROSTER_SIZE,
    LEAGUE_DRAW_POINTS,
    LEAGUE_LOSS_POINTS,
    LEAGUE_WIN_POINTS,
)
from topspin.models.meeting import Meeting
from topspin.models.team import Team
from topspin.pairing.round_robin import get_day_matchups
from topspin.simulation.meeting import pad_roster, simulate_meeting
from topspin.utils import make_rng, setup_logger

logger = setup_logger(__name__)


@dataclass
class LeagueEntry:
    """One line of the league table."""

    team_id: str
    name: str
    played: int = 0
    wins: int = 0
    draws: int = 0
    losses: int = 0
    points: int = 0
    matches_won: int = 0
    matches_lost: int = 0

    @property
    def match_difference(self) -> int:
        return self.matches_won - self.matches_lost

    def record(self, scored: int, conceded: int) -> None:
        """Add one meeting seen from this team's side."""
        self.played += 1
        self.matches_won += scored
        self.matches_lost += conceded
        if scored > conceded:
            self.wins += 1
            self.points += LEAGUE_WIN_POINTS
        elif scored < conceded:
            self.losses += 1
            self.points += LEAGUE_LOSS_POINTS
        else:
            self.draws += 1
            self.points += LEAGUE_DRAW_POINTS

    def to_dict(self) -> Dict[str, Any]:
        return {
            "team_id": self.team_id,
            "name": self.name,
            "played": self.played,
            "wins": self.wins,
            "draws": self.draws,
            "losses": self.losses,
            "points": self.points,
            "matches_won": self.matches_won,
            "matches_lost": self.matches_lost,
        }


def simulate_league_day(
    day: int,
    tracked_team: Team,
    opponents: Sequence[Team],
    rng: Optional[random.Random] = None,
    phase: int = 1,
    excluded_team_id: Optional[str] = None,
    include_tracked: bool = False,
) -> List[Meeting]:
    """Play the fixtures of one league day.

    The tracked team's own fixture is skipped unless ``include_tracked`` is
    set, so a caller can play it separately. Fixtures involving
    ``excluded_team_id`` are skipped too.

    Raises:
        InvalidFieldSizeException: If ``opponents`` does not hold seven teams
        ScheduleException: If ``day`` is lower than 1
    """
    fixtures = get_day_matchups(day, tracked_team, opponents)
    if rng is None:
        rng = make_rng()

    meetings = []
    for home, away in fixtures:
        if not include_tracked and tracked_team.id in (home.id, away.id):
            continue
        if excluded_team_id is not None and excluded_team_id in (home.id, away.id):
            continue

        meeting_id = f"league-{phase}-{day}-{home.id}-{away.id}"
        home_players = pad_roster(
            home.lineup(FULL_ROSTER_SIZE), FULL_ROSTER_SIZE, f"{meeting_id}-home-ghost"
        )
        away_players = pad_roster(
            away.lineup(FULL_ROSTER_SIZE), FULL_ROSTER_SIZE, f"{meeting_id}-away-ghost"
        )
        meeting = simulate_meeting(
            home_players,
            away_players,
            rng,
            meeting_id=meeting_id,
            home_name=home.name,
            away_name=away.name,
            day_number=day,
            phase=phase,
        )
        meeting.home_id = home.id
        meeting.away_id = away.id
        meetings.append(meeting)

    logger.info("League phase %s day %s: %s meetings played", phase, day, len(meetings))
    return meetings


def compute_league_standings(
    teams: Iterable[Team], meetings: Iterable[Meeting]
) -> List[LeagueEntry]:
    """Build the league table from completed meetings.

    Meetings whose teams are not in ``teams`` are ignored. The table is
    sorted by points, then match difference, then matches won.
    """
    table = {team.id: LeagueEntry(team_id=team.id, name=team.name) for team in teams}
    for meeting in meetings:
        home = table.get(meeting.home_id)
        away = table.get(meeting.away_id)
        if home is None or away is None:
            logger.debug("Meeting %s is outside the league table", meeting.id)
            continue
        home.record(meeting.home_score, meeting.away_score)
        away.record(meeting.away_score, meeting.home_score)

    return sorted(
        table.values(),
        key=lambda e: (e.points, e.match_difference, e.matches_won),
        reverse=True,
    )
