"""Final match upkeep for the simple league mode.

Once every group match has a result the two best placed teams meet in a
single final. The final is re-derived from scratch after every score edit:
it follows the standings while they change and disappears again if a group
result is cleared.
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

from dataclasses import replace
from typing import List, Sequence

from caromtournament.constants import FINAL_MATCH_ID, SIMPLE_LEAGUE_FINALISTS
from caromtournament.controllers.standings_calculator import (
    calculate_standings,
    qualified_teams,
)
from caromtournament.models import FinalMatch, Match, MatchType, Team
from caromtournament.type_hints import Progress
from caromtournament.utils import setup_logger

logger = setup_logger(__name__)


def group_progress(matches: Sequence[Match]) -> Progress:
    """Return ``(completed, total)`` group matches."""
    group = [m for m in matches if m.match_type == MatchType.GROUP]
    return sum(1 for m in group if m.is_completed), len(group)


def all_group_matches_completed(matches: Sequence[Match]) -> bool:
    completed, total = group_progress(matches)
    return completed == total


def maintain_league_final(teams: Sequence[Team], matches: Sequence[Match]) -> List[Match]:
    """Create, re-target or remove the final so it matches the standings.

    - Group stage complete, no final: append one between the top two.
    - Group stage complete, final between other teams: move it to the top
      two and wipe its scores.
    - Group stage incomplete: drop any final.

    Args:
        teams: Tournament teams
        matches: Current match list

    Returns:
        New match list
    """
    result: List[Match] = list(matches)
    final_index = next(
        (i for i, m in enumerate(result) if m.match_type == MatchType.FINAL), None
    )

    if not all_group_matches_completed(result):
        if final_index is not None:
            logger.info("Group stage reopened, removing final %s", result[final_index].id)
            return [m for m in result if m.match_type != MatchType.FINAL]
        return result

    finalists = qualified_teams(calculate_standings(teams, result), SIMPLE_LEAGUE_FINALISTS)
    if len(finalists) < SIMPLE_LEAGUE_FINALISTS:
        logger.warning("Not enough teams to stage a final (%d)", len(finalists))
        return result
    home_id, away_id = finalists[0].id, finalists[1].id

    if final_index is None:
        logger.info("Group stage complete, final: %s vs %s", home_id, away_id)
        result.append(FinalMatch(id=FINAL_MATCH_ID, home_team_id=home_id, away_team_id=away_id))
        return result

    final = result[final_index]
    if (final.home_team_id, final.away_team_id) != (home_id, away_id):
        logger.info(
            "Standings changed, final moves from %s vs %s to %s vs %s",
            final.home_team_id,
            final.away_team_id,
            home_id,
            away_id,
        )
        result[final_index] = replace(
            final,
            home_team_id=home_id,
            away_team_id=away_id,
            home_score=None,
            away_score=None,
        )
    return result
