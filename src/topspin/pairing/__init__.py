"""League scheduling and internal Swiss pairing."""

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

from topspin.pairing.internal_swiss import (
    InternalRound,
    InternalStanding,
    InternalTournamentResult,
    simulate_internal_tournament,
)
from topspin.pairing.round_robin import (
    generate_phase_schedule,
    get_day_matchups,
    rotation_for_day,
)

__all__ = [
    "get_day_matchups",
    "generate_phase_schedule",
    "rotation_for_day",
    "simulate_internal_tournament",
    "InternalStanding",
    "InternalRound",
    "InternalTournamentResult",
]
