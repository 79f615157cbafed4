"""Rank exchange table.

Converts the rating gap between a match winner and loser into the rating
points the winner gains and the loser gives up. Expected wins (winner rated
at least as high as the loser) are worth less as the gap grows; upsets are
worth more.
"""

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

from bisect import bisect_right

from topspin.constants import (
    EXCHANGE_BAND_THRESHOLDS,
    EXPECTED_WIN_GAIN,
    EXPECTED_WIN_LOSS,
    UPSET_WIN_GAIN,
    UPSET_WIN_LOSS,
)
from topspin.models.match import RatingExchange


def exchange_band(rating_gap: float) -> int:
    """Map an absolute rating gap to a table row, 0 (< 25) to 8 (>= 500)."""
    return bisect_right(EXCHANGE_BAND_THRESHOLDS, abs(rating_gap))


def calculate_point_exchange(
    winner_rating: float, loser_rating: float
) -> RatingExchange:
    """Look up the rating exchange for one match result.

    Args:
        winner_rating: Rating of the match winner
        loser_rating: Rating of the match loser

    Returns:
        RatingExchange with the winner's gain and the loser's (non-positive) loss
    """
    band = exchange_band(winner_rating - loser_rating)
    if winner_rating >= loser_rating:
        return RatingExchange(gain=EXPECTED_WIN_GAIN[band], loss=EXPECTED_WIN_LOSS[band])
    return RatingExchange(gain=UPSET_WIN_GAIN[band], loss=UPSET_WIN_LOSS[band])
