"""Topspin: table tennis match, meeting and competition simulation."""

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

__version__ = "0.1.0"

from topspin.config import SimulationConfig, load_config
from topspin.exceptions import TopspinException
from topspin.pairing import (
    generate_phase_schedule,
    get_day_matchups,
    simulate_internal_tournament,
)
from topspin.simulation import (
    calculate_point_exchange,
    create_doubles_pair,
    simulate_match,
    simulate_meeting,
    simulate_point,
    simulate_set,
)
from topspin.tournament import (
    compute_league_standings,
    filter_eligible,
    simulate_competition,
    simulate_league_day,
)

__all__ = [
    "__version__",
    "SimulationConfig",
    "load_config",
    "TopspinException",
    "calculate_point_exchange",
    "simulate_point",
    "simulate_set",
    "simulate_match",
    "create_doubles_pair",
    "simulate_meeting",
    "get_day_matchups",
    "generate_phase_schedule",
    "simulate_internal_tournament",
    "simulate_competition",
    "filter_eligible",
    "simulate_league_day",
    "compute_league_standings",
]
