"""Enumerations shared by the tournament models."""

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

from enum import Enum


class MatchStatus(str, Enum):
    """Lifecycle state of a match, derived from its scores."""

    SCHEDULED = "SCHEDULED"
    COMPLETED = "COMPLETED"


class MatchType(str, Enum):
    """Discriminant of the match variants."""

    GROUP = "GROUP"
    FINAL = "FINAL"
    KNOCKOUT = "KNOCKOUT"


class TournamentType(str, Enum):
    LEAGUE = "LEAGUE"
    KNOCKOUT = "KNOCKOUT"
