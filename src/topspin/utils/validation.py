"""Validation utilities for Topspin.

This module provides reusable validation functions with consistent error handling.
Callers use them to check inputs before handing them to the engine, which
itself pads or drops rather than failing.
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

import math
from typing import Any, Optional, Sized

from topspin.constants import (
    FULL_ROSTER_SIZE,
    LEAGUE_OPPONENT_COUNT,
    REDUCED_ROSTER_SIZE,
)
from topspin.exceptions import RatingValidationException, RosterValidationException

MAX_RATING = 10000


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Any = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Rating Validation ==========


def validate_rating(rating: Any, required: bool = False) -> ValidationResult:
    """Validate a competitor rating.

    Ratings are non-negative numbers; ghosts are rated 0.

    Args:
        rating: Rating value (number or numeric string)
        required: Whether a rating is required (None = invalid)

    Returns:
        ValidationResult with the rating as a float when valid
    """
    if rating is None or (isinstance(rating, str) and not rating.strip()):
        if required:
            return ValidationResult(
                is_valid=False,
                error_message="Rating is required",
            )
        return ValidationResult(is_valid=True, sanitized_value=None)

    if isinstance(rating, bool):
        return ValidationResult(
            is_valid=False,
            error_message=f"Rating must be a number: {rating!r}",
        )

    try:
        value = float(rating)
    except (TypeError, ValueError):
        return ValidationResult(
            is_valid=False,
            error_message=f"Rating must be a number: {rating!r}",
        )

    if math.isnan(value) or math.isinf(value):
        return ValidationResult(
            is_valid=False,
            error_message=f"Rating must be finite: {rating!r}",
        )

    if value < 0 or value > MAX_RATING:
        return ValidationResult(
            is_valid=False,
            error_message=f"Rating must be between 0 and {MAX_RATING}: {value}",
        )

    return ValidationResult(is_valid=True, sanitized_value=value)


def validate_rating_strict(rating: Any) -> float:
    """Validate a rating and raise exception if invalid.

    Raises:
        RatingValidationException: If rating is invalid
    """
    result = validate_rating(rating, required=True)
    if not result.is_valid:
        raise RatingValidationException(result.error_message)
    return result.sanitized_value


# ========== Roster Validation ==========


def validate_roster(roster: Sized) -> ValidationResult:
    """Check that a meeting roster holds two or four entries.

    Shorter rosters still play (ghosts fill the gaps) but the result is
    reported invalid so callers can warn about forfeited legs.
    """
    size = len(roster)
    if size in (REDUCED_ROSTER_SIZE, FULL_ROSTER_SIZE):
        return ValidationResult(is_valid=True, sanitized_value=size)
    return ValidationResult(
        is_valid=False,
        error_message=(
            f"Roster must hold {REDUCED_ROSTER_SIZE} or {FULL_ROSTER_SIZE} "
            f"competitors, got {size}"
        ),
    )


def validate_league_field(opponents: Sized) -> ValidationResult:
    """Check that a league field has exactly the expected opponent count."""
    size = len(opponents)
    if size == LEAGUE_OPPONENT_COUNT:
        return ValidationResult(is_valid=True, sanitized_value=size)
    return ValidationResult(
        is_valid=False,
        error_message=(
            f"League field needs exactly {LEAGUE_OPPONENT_COUNT} opponents, "
            f"got {size}"
        ),
    )


def validate_pool_registrants(registrants: Sized) -> ValidationResult:
    """Check that a paired competition has an even, non-empty registrant list."""
    size = len(registrants)
    if size == 0:
        return ValidationResult(
            is_valid=False,
            error_message="Paired competitions need at least one pair",
        )
    if size % 2:
        return ValidationResult(
            is_valid=False,
            error_message=(
                f"Paired competitions need an even registrant count, got {size}"
            ),
        )
    return ValidationResult(is_valid=True, sanitized_value=size)


def validate_pool_registrants_strict(registrants: Sized) -> None:
    """Validate pool registrants and raise exception if invalid.

    Raises:
        RosterValidationException: If the count is zero or odd
    """
    result = validate_pool_registrants(registrants)
    if not result.is_valid:
        raise RosterValidationException(result.error_message)
