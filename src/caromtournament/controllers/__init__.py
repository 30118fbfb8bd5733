"""Tournament engines and the session that drives them.

This package provides schedule generation, standings, bracket progression,
final upkeep for the simple league and score recording, plus the session
orchestrating them.
"""

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

from caromtournament.controllers.bracket_progression import (
    bracket_rounds,
    champion,
    propagate_results,
    resolve_winner,
)
from caromtournament.controllers.league_final import (
    all_group_matches_completed,
    group_progress,
    maintain_league_final,
)
from caromtournament.controllers.result_recorder import ResultRecorder
from caromtournament.controllers.schedule_generator import (
    generate_knockout_schedule,
    generate_league_schedule,
    generate_schedule,
    knockout_round_name,
    round_display_name,
)
from caromtournament.controllers.standings_calculator import (
    calculate_standings,
    qualified_teams,
)
from caromtournament.controllers.tournament_session import (
    TournamentSession,
    create_simple_league,
    create_tournament,
)

__all__ = [
    "generate_league_schedule",
    "generate_knockout_schedule",
    "generate_schedule",
    "knockout_round_name",
    "round_display_name",
    "calculate_standings",
    "qualified_teams",
    "propagate_results",
    "resolve_winner",
    "bracket_rounds",
    "champion",
    "maintain_league_final",
    "group_progress",
    "all_group_matches_completed",
    "ResultRecorder",
    "TournamentSession",
    "create_tournament",
    "create_simple_league",
]
