"""Enumerations shared across the matchmaking models."""

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

from enum import Enum


class Role(Enum):
    """Simplified two-valued role used by the matchmaking core.

    DPS covers both melee and ranged talent categories.
    """

    DPS = "DPS"
    HEALER = "HEALER"

    @classmethod
    def parse(cls, value: str) -> "Role":
        """Parse a role name, case-insensitively."""
        return cls[value.strip().upper()]


class TalentCategory(Enum):
    """Fine-grained role detected from spent talent points."""

    MELEE = "MELEE"
    RANGE = "RANGE"
    HEALER = "HEALER"

    def to_role(self) -> Role:
        """Collapse melee and ranged into DPS."""
        if self is TalentCategory.HEALER:
            return Role.HEALER
        return Role.DPS


class FailureReason(Enum):
    """Why an evaluation tick did not produce a match.

    None of these are errors: the queue manager simply tries again on the
    next tick with a fresh snapshot.
    """

    INSUFFICIENT_PLAYERS = "insufficient_players"
    NO_VALID_COMPOSITION = "no_valid_composition"
    NO_VALID_SPLIT = "no_valid_split"
