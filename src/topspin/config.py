"""Simulation configuration."""

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

import json
import logging
import random
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

from topspin.constants import (
    DEFAULT_RATING_CAP,
    INTERNAL_BYE_POINTS,
    INTERNAL_ROUNDS,
)
from topspin.exceptions import FileLoadException, InvalidConfigurationException
from topspin.utils import make_rng, setup_logger

logger = setup_logger(__name__)


@dataclass
class SimulationConfig:
    """Tunable settings shared by the command line and library callers.

    Attributes:
        seed: Seed for a reproducible run; None draws a fresh random source
        internal_rounds: Rounds played in an internal tournament
        internal_bye_points: Points for an internal tournament bye
        default_rating_cap: Skill cap for competitions without a max rating
        log_level: Package log level name
    """

    seed: Optional[int] = None
    internal_rounds: int = INTERNAL_ROUNDS
    internal_bye_points: int = INTERNAL_BYE_POINTS
    default_rating_cap: float = DEFAULT_RATING_CAP
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.internal_rounds < 1:
            raise InvalidConfigurationException(
                f"internal_rounds must be at least 1, got {self.internal_rounds}"
            )
        if self.default_rating_cap <= 0:
            raise InvalidConfigurationException(
                f"default_rating_cap must be positive, got {self.default_rating_cap}"
            )
        if not isinstance(logging.getLevelName(str(self.log_level).upper()), int):
            raise InvalidConfigurationException(f"Unknown log level: {self.log_level}")

    def make_rng(self) -> random.Random:
        """Random source honouring ``seed``."""
        return make_rng(self.seed)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "seed": self.seed,
            "internal_rounds": self.internal_rounds,
            "internal_bye_points": self.internal_bye_points,
            "default_rating_cap": self.default_rating_cap,
            "log_level": self.log_level,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SimulationConfig":
        """Deserialize configuration from dictionary.

        Raises:
            InvalidConfigurationException: On unknown keys or bad values
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise InvalidConfigurationException(
                f"Unknown configuration keys: {', '.join(unknown)}"
            )
        try:
            return cls(
                seed=None if data.get("seed") is None else int(data["seed"]),
                internal_rounds=int(data.get("internal_rounds", INTERNAL_ROUNDS)),
                internal_bye_points=int(
                    data.get("internal_bye_points", INTERNAL_BYE_POINTS)
                ),
                default_rating_cap=float(
                    data.get("default_rating_cap", DEFAULT_RATING_CAP)
                ),
                log_level=str(data.get("log_level", "WARNING")).upper(),
            )
        except (TypeError, ValueError) as e:
            raise InvalidConfigurationException(f"Invalid configuration: {e}") from e


def load_config(path: Union[str, Path]) -> SimulationConfig:
    """Load a SimulationConfig from a JSON file.

    Raises:
        FileLoadException: If the file is missing or not valid JSON
        InvalidConfigurationException: If the content is not a valid config
    """
    config_path = Path(path)
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise FileLoadException(f"Failed to load configuration {path}: {e}") from e

    if not isinstance(data, dict):
        raise InvalidConfigurationException(
            f"Configuration {path} must hold a JSON object"
        )
    logger.info("Loaded configuration from: %s", config_path)
    return SimulationConfig.from_dict(data)
