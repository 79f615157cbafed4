"""Exceptions for use in Topspin"""

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


# ========== Base Application Exception ==========


class TopspinException(Exception):
    """Base exception for all Topspin errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Competitor Exceptions ==========


class CompetitorException(TopspinException):
    """Base exception for competitor-related errors."""

    pass


class InvalidCompetitorDataException(CompetitorException):
    """Raised when competitor data is invalid or incomplete."""

    pass


# ========== Simulation Exceptions ==========


class SimulationException(TopspinException):
    """Base exception for match and meeting simulation errors."""

    pass


class InvalidRosterException(SimulationException):
    """Raised when a roster cannot be used for a meeting."""

    pass


# ========== Schedule Exceptions ==========


class ScheduleException(TopspinException):
    """Base exception for league scheduling errors."""

    pass


class InvalidFieldSizeException(ScheduleException):
    """Raised when a league field does not hold exactly seven opponents."""

    pass


# ========== Pairing Exceptions ==========


class PairingException(TopspinException):
    """Base exception for pairing-related errors."""

    pass


class InsufficientCompetitorsException(PairingException):
    """Raised when too few competitors are supplied to pair a round."""

    pass


# ========== Competition Exceptions ==========


class CompetitionException(TopspinException):
    """Base exception for competition-related errors."""

    pass


class InvalidCompetitionException(CompetitionException):
    """Raised when a competition descriptor is invalid."""

    pass


# ========== Validation Exceptions ==========


class ValidationException(TopspinException):
    """Base exception for validation errors."""

    pass


class RatingValidationException(ValidationException):
    """Raised when a rating value is invalid."""

    pass


class RosterValidationException(ValidationException):
    """Raised when a roster or registrant list has the wrong size."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(TopspinException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass


class FileLoadException(ConfigurationException):
    """Raised when a configuration file cannot be loaded."""

    pass
