"""Console front end for Carom Tournament.

This module provides a command-line interface for running a tournament:
- Creating league, knockout and simple three-team tournaments
- Entering and clearing scores
- Viewing the schedule, standings, bracket and match history

Use the unified CLI: carom
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

from caromtournament.console.__main__ import create_main_parser, main

__all__ = ["create_main_parser", "main"]
