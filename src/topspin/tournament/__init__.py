"""Competition strategies, dispatcher and league simulation."""

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

from topspin.tournament.bracket import simulate_ranked_bracket
from topspin.tournament.dispatcher import filter_eligible, simulate_competition
from topspin.tournament.fallback import simulate_fallback
from topspin.tournament.league import (
    LeagueEntry,
    compute_league_standings,
    simulate_league_day,
)
from topspin.tournament.pool import pool_outcome, simulate_paired_pool

__all__ = [
    "simulate_competition",
    "filter_eligible",
    "simulate_ranked_bracket",
    "simulate_paired_pool",
    "pool_outcome",
    "simulate_fallback",
    "simulate_league_day",
    "compute_league_standings",
    "LeagueEntry",
]
