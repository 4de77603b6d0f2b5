"""MatchmakingConfig data class."""

# Solo Queue
# Copyright (C) 2025  Solo Queue developers
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
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Union

from soloqueue.constants import (
    DEFAULT_ALL_DPS_TIMER_MS,
    DEFAULT_SINGLE_HEALER_DPS_TIMER_MS,
    DEFAULT_TEAM_SIZE,
    MAX_STACKING_LEVEL,
    MAX_TEAM_SIZE,
    MIN_STACKING_LEVEL,
    OPT_ALL_DPS_TIMER,
    OPT_AVOID_IGNORE,
    OPT_CLASS_STACK_MASK,
    OPT_FILTER_TALENTS,
    OPT_PREVENT_CLASS_STACKING,
    OPT_SINGLE_HEALER_TIMER,
    OPT_TEAM_SIZE,
)
from soloqueue.exceptions import (
    FileLoadException,
    InvalidConfigurationException,
    MissingConfigurationException,
)
from soloqueue.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class MatchmakingConfig:
    """Matchmaking configuration settings.

    Attributes
    ----------
    team_size : int
        Players per team.
    filter_talents : bool
        Enforce role-based composition (one healer per team).
    avoid_same_team_ignore : bool
        Use the ignore-list oracle as a secondary tie-break when splitting.
    all_dps_timer_ms : int
        Wait before an all-DPS match may start when no healer is queued.
    single_healer_dps_timer_ms : int
        Wait before an all-DPS match may start when a single healer is queued.
    prevent_class_stacking : int
        Class stacking prevention level, 0 (off) through 6.
    class_stack_mask : int
        Bitmask of classes subject to stacking prevention, 0 means all.
    """

    team_size: int = DEFAULT_TEAM_SIZE
    filter_talents: bool = False
    avoid_same_team_ignore: bool = True
    all_dps_timer_ms: int = DEFAULT_ALL_DPS_TIMER_MS
    single_healer_dps_timer_ms: int = DEFAULT_SINGLE_HEALER_DPS_TIMER_MS
    prevent_class_stacking: int = 0
    class_stack_mask: int = 0

    def validate(self) -> "MatchmakingConfig":
        """Check value ranges.

        Raises:
            InvalidConfigurationException: If any value is out of range
        """
        if not 1 <= self.team_size <= MAX_TEAM_SIZE:
            raise InvalidConfigurationException(
                f"team_size must be between 1 and {MAX_TEAM_SIZE}, got {self.team_size}"
            )
        if self.all_dps_timer_ms < 0 or self.single_healer_dps_timer_ms < 0:
            raise InvalidConfigurationException("Fallback timers must not be negative")
        if not MIN_STACKING_LEVEL <= self.prevent_class_stacking <= MAX_STACKING_LEVEL:
            raise InvalidConfigurationException(
                f"prevent_class_stacking must be between {MIN_STACKING_LEVEL} and "
                f"{MAX_STACKING_LEVEL}, got {self.prevent_class_stacking}"
            )
        if self.class_stack_mask < 0:
            raise InvalidConfigurationException("class_stack_mask must not be negative")
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "team_size": self.team_size,
            "filter_talents": self.filter_talents,
            "avoid_same_team_ignore": self.avoid_same_team_ignore,
            "all_dps_timer_ms": self.all_dps_timer_ms,
            "single_healer_dps_timer_ms": self.single_healer_dps_timer_ms,
            "prevent_class_stacking": self.prevent_class_stacking,
            "class_stack_mask": self.class_stack_mask,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatchmakingConfig":
        """Deserialize configuration from dictionary. Unknown keys are ignored."""
        try:
            config = cls(
                team_size=int(data.get("team_size", DEFAULT_TEAM_SIZE)),
                filter_talents=_parse_bool(data.get("filter_talents", False)),
                avoid_same_team_ignore=_parse_bool(
                    data.get("avoid_same_team_ignore", True)
                ),
                all_dps_timer_ms=int(
                    data.get("all_dps_timer_ms", DEFAULT_ALL_DPS_TIMER_MS)
                ),
                single_healer_dps_timer_ms=int(
                    data.get(
                        "single_healer_dps_timer_ms",
                        DEFAULT_SINGLE_HEALER_DPS_TIMER_MS,
                    )
                ),
                prevent_class_stacking=int(data.get("prevent_class_stacking", 0)),
                class_stack_mask=int(data.get("class_stack_mask", 0)),
            )
        except (TypeError, ValueError) as e:
            raise InvalidConfigurationException(f"Invalid configuration: {e}") from e
        return config.validate()

    @classmethod
    def from_options(cls, options: Dict[str, Any]) -> "MatchmakingConfig":
        """Build a configuration from dotted server option names.

        Timer options are given in seconds, as in the server configuration file.

        ``Solo.3v3.TeamSize`` and ``Solo.3v3.FilterTalents.SingleHealerDPSTimer``
        are options of this package only. Stock server configs have neither:
        they play a fixed 3v3 and have no separate single-healer timer, so
        without these keys the defaults apply.

        Raises:
            MissingConfigurationException: If no known option is present
            InvalidConfigurationException: If a value cannot be converted
        """
        data: Dict[str, Any] = {}
        if OPT_TEAM_SIZE in options:
            data["team_size"] = options[OPT_TEAM_SIZE]
        if OPT_FILTER_TALENTS in options:
            data["filter_talents"] = _parse_bool(options[OPT_FILTER_TALENTS])
        if OPT_AVOID_IGNORE in options:
            data["avoid_same_team_ignore"] = _parse_bool(options[OPT_AVOID_IGNORE])
        try:
            if OPT_ALL_DPS_TIMER in options:
                data["all_dps_timer_ms"] = int(options[OPT_ALL_DPS_TIMER]) * 1000
            if OPT_SINGLE_HEALER_TIMER in options:
                data["single_healer_dps_timer_ms"] = (
                    int(options[OPT_SINGLE_HEALER_TIMER]) * 1000
                )
        except (TypeError, ValueError) as e:
            raise InvalidConfigurationException(f"Invalid timer option: {e}") from e
        if OPT_PREVENT_CLASS_STACKING in options:
            data["prevent_class_stacking"] = options[OPT_PREVENT_CLASS_STACKING]
        if OPT_CLASS_STACK_MASK in options:
            data["class_stack_mask"] = options[OPT_CLASS_STACK_MASK]
        if not data:
            raise MissingConfigurationException("No recognised solo queue options found")
        return cls.from_dict(data)


def _parse_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


def load_config(path: Union[str, Path]) -> MatchmakingConfig:
    """Load a configuration from a JSON file.

    Args:
        path: JSON file holding either snake_case keys or dotted option names

    Returns:
        Validated configuration

    Raises:
        FileLoadException: If the file cannot be read or is not a JSON object
        InvalidConfigurationException: If values are out of range
    """
    config_path = Path(path)
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise FileLoadException(f"Cannot load config {config_path}: {e}") from e
    if not isinstance(data, dict):
        raise FileLoadException(f"Config {config_path} must contain a JSON object")

    if any(key.startswith("Solo.") for key in data):
        config = MatchmakingConfig.from_options(data)
    else:
        config = MatchmakingConfig.from_dict(data)
    logger.info(f"Loaded matchmaking config from {config_path}")
    return config


def save_config(config: MatchmakingConfig, path: Union[str, Path]) -> None:
    """Write a configuration to a JSON file."""
    Path(path).write_text(json.dumps(config.to_dict(), indent=2), encoding="utf-8")
