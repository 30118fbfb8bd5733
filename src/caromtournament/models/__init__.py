"""Data models for Carom Tournament."""

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

from caromtournament.models.enums import MatchStatus, MatchType, TournamentType
from caromtournament.models.match import (
    FinalMatch,
    KnockoutMatch,
    LeagueMatch,
    Match,
)
from caromtournament.models.team import (
    Team,
    TeamStats,
    default_team,
    default_teams,
    simple_league_teams,
)
from caromtournament.models.tournament import Tournament
from caromtournament.models.tournament_config import TournamentConfig

__all__ = [
    "MatchStatus",
    "MatchType",
    "TournamentType",
    "Match",
    "LeagueMatch",
    "FinalMatch",
    "KnockoutMatch",
    "Team",
    "TeamStats",
    "default_team",
    "default_teams",
    "simple_league_teams",
    "Tournament",
    "TournamentConfig",
]
