"""Exceptions for use in Solo Queue"""

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


# ========== Base Application Exception ==========


class SoloQueueException(Exception):
    """Base exception for all Solo Queue errors.

    All custom exceptions in the package inherit from this class.
    "No match possible yet" is not an error and is reported through
    result objects instead.
    """

    pass


# ========== Matchmaking Exceptions ==========


class MatchmakingException(SoloQueueException):
    """Base exception for matchmaking-related errors."""

    pass


class ContractViolationException(MatchmakingException):
    """Raised when the matchmaking core is called with malformed input.

    These indicate a caller bug, never a queue-state condition.
    """

    pass


class InvalidSelectionException(ContractViolationException):
    """Raised when a selection does not hold exactly two teams' worth of entrants."""

    pass


class InvalidTeamSizeException(ContractViolationException):
    """Raised when the team size is not positive or too large for exhaustive search."""

    pass


class InvalidStackingLevelException(ContractViolationException):
    """Raised when a class stacking level is outside the supported range."""

    pass


# ========== Entrant Exceptions ==========


class EntrantException(SoloQueueException):
    """Base exception for entrant-related errors."""

    pass


class InvalidEntrantException(EntrantException):
    """Raised when entrant data is invalid or incomplete."""

    pass


# ========== Queue Exceptions ==========


class QueueException(SoloQueueException):
    """Base exception for wait pool errors."""

    pass


class DuplicateEntrantException(QueueException):
    """Raised when attempting to queue an entrant that is already waiting."""

    pass


class EntrantNotFoundException(QueueException):
    """Raised when a requested entrant is not in the wait pool."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(SoloQueueException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass


class MissingConfigurationException(ConfigurationException):
    """Raised when required configuration is missing."""

    pass


# ========== File/Resource Exceptions ==========


class ResourceException(SoloQueueException):
    """Base exception for resource-related errors."""

    pass


class FileLoadException(ResourceException):
    """Raised when a file cannot be loaded."""

    pass
