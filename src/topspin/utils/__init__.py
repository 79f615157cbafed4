"""Shared helpers for Topspin: logging, identifiers and random sources."""

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

import logging
import random
import uuid
from typing import Optional, Union

PACKAGE_LOGGER_NAME = "topspin"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_LOG_LEVEL = logging.WARNING


def _configure_package_logger() -> logging.Logger:
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
        package_logger.setLevel(DEFAULT_LOG_LEVEL)
    return package_logger


def setup_logger(name: str) -> logging.Logger:
    """Return a module logger that reports through the package handler.

    Args:
        name: Usually ``__name__`` of the calling module

    Returns:
        The configured logger
    """
    _configure_package_logger()
    return logging.getLogger(name)


def set_log_level(level: Union[int, str]) -> None:
    """Change the level of every Topspin logger.

    Args:
        level: A logging level number or name such as ``"DEBUG"``
    """
    if isinstance(level, str):
        number = logging.getLevelName(level.upper())
        if not isinstance(number, int):
            raise ValueError(f"Unknown log level: {level}")
        level = number
    _configure_package_logger().setLevel(level)


def generate_id(prefix: str = "id") -> str:
    """Generate a short unique identifier such as ``Competitor-1a2b3c4d``."""
    return f"{prefix}-{uuid.uuid4().hex[:8]}"


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Create an isolated random source, seeded when a seed is given."""
    return random.Random(seed) if seed is not None else random.Random()


def ordinal(number: int) -> str:
    """English ordinal for a placement: 1st, 2nd, 3rd, 4th, 11th, 22nd..."""
    if 10 <= number % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")
    return f"{number}{suffix}"
