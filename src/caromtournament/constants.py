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

# --- Constants ---
APP_NAME = "Carom Tournament"
SAVE_FILE_EXTENSION = ".json"
DEFAULT_SAVE_FILE = "tournament" + SAVE_FILE_EXTENSION
DATA_DIR_ENV_VAR = "CAROM_TOURNAMENT_HOME"

# Snapshot document keys
TOURNAMENT_SNAPSHOT_KEY = "carom_tournament"
MATCHES_SNAPSHOT_KEY = "carom_tournament_matches"

# League points per outcome
WIN_POINTS = 3
DRAW_POINTS = 1
LOSS_POINTS = 0

# Default number of meetings between each pair of league teams
DEFAULT_MATCHES_PER_OPPONENT = 2

# Placeholder team id for knockout slots that are not yet decided
TBD = "TBD"

# Match id prefix and the fixed id of the simple-mode final
MATCH_ID_PREFIX = "match_"
FINAL_MATCH_ID = "match_final"

# Knockout round labels (keyed by teams remaining in the round)
ROUND_FINAL = "final"
ROUND_SEMI = "semi"
ROUND_QUARTER = "quarter"
ROUND_LABEL_PREFIX = "round-"

KNOCKOUT_ROUND_LABELS = {
    2: ROUND_FINAL,
    4: ROUND_SEMI,
    8: ROUND_QUARTER,
}

# Human readable round names
ROUND_DISPLAY_NAMES = {
    ROUND_FINAL: "Final",
    ROUND_SEMI: "Semi Finals",
    ROUND_QUARTER: "Quarter Finals",
}

# Bracket slot parity
POSITION_TOP = "top"
POSITION_BOTTOM = "bottom"

# Tournament defaults
DEFAULT_TOURNAMENT_NAME = "Carom Tournament"
DEFAULT_TEAM_LOGO = "Circle"
TEAM_COLORS = [
    "text-red-500",
    "text-blue-500",
    "text-emerald-500",
    "text-amber-500",
    "text-purple-500",
    "text-pink-500",
    "text-cyan-500",
    "text-orange-500",
    "text-lime-500",
    "text-teal-500",
    "text-indigo-500",
    "text-rose-500",
]

# Fixed line-up of the simple three team league with a single final
SIMPLE_LEAGUE_TEAMS = [
    {"id": "team_a", "name": "Team A [SZ]", "color": "text-red-500", "logo": "🎱"},
    {"id": "team_b", "name": "Team B [SS]", "color": "text-blue-500", "logo": "🎯"},
    {"id": "team_c", "name": "Team C [IR]", "color": "text-emerald-500", "logo": "🎲"},
]
SIMPLE_LEAGUE_FINALISTS = 2
