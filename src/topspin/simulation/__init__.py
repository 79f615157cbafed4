"""Point, set, match and meeting simulation."""

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

from topspin.simulation.doubles import create_doubles_pair
from topspin.simulation.exchange import calculate_point_exchange, exchange_band
from topspin.simulation.match import is_set_complete, simulate_match, simulate_set
from topspin.simulation.meeting import meeting_order, simulate_meeting
from topspin.simulation.point import (
    classify_point,
    simulate_point,
    style_matchup_bonus,
)

__all__ = [
    "calculate_point_exchange",
    "exchange_band",
    "classify_point",
    "simulate_point",
    "style_matchup_bonus",
    "is_set_complete",
    "simulate_set",
    "simulate_match",
    "create_doubles_pair",
    "meeting_order",
    "simulate_meeting",
]
