"""Exceptions for use in Carom Tournament"""

# Carom Tournament
# Copyright (C) 2025  Carom Tournament developers
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


class CaromTournamentException(Exception):
    """Base exception for all Carom Tournament errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(CaromTournamentException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when a tournament cannot be scheduled with the given setup.

    Covers fewer than two teams, duplicate team ids, an odd or
    non power-of-two knockout field and a non-positive number of
    meetings per opponent.
    """

    pass


# ========== Team Exceptions ==========


class TeamException(CaromTournamentException):
    """Base exception for team-related errors."""

    pass


class UnresolvedReferenceException(TeamException):
    """Raised when a match refers to a team id that is not in the tournament."""

    pass


# ========== Result Exceptions ==========


class ResultException(CaromTournamentException):
    """Base exception for result recording errors."""

    pass


class MalformedScoreInputException(ResultException):
    """Raised when score text is neither empty nor a run of decimal digits."""

    pass


class AmbiguousOutcomeException(ResultException):
    """Raised when a completed knockout match is level and has no winner."""

    pass


class MatchNotFoundException(ResultException):
    """Raised when a requested match cannot be found."""

    pass


# ========== File/Resource Exceptions ==========


class ResourceException(CaromTournamentException):
    """Base exception for resource-related errors."""

    pass


class FileLoadException(ResourceException):
    """Raised when a snapshot file cannot be loaded."""

    pass


class FileSaveException(ResourceException):
    """Raised when a snapshot file cannot be saved."""

    pass
