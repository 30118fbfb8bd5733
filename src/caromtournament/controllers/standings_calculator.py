"""League standings calculation.

Standings are never stored: they are folded from the completed group matches
every time they are needed.
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

from typing import Dict, Iterable, List, Sequence, Tuple

from caromtournament.constants import DRAW_POINTS, LOSS_POINTS, WIN_POINTS
from caromtournament.models import Match, MatchType, Team, TeamStats
from caromtournament.utils import setup_logger

logger = setup_logger(__name__)


def _ranking_key(stats: TeamStats) -> Tuple[int, int, int]:
    # Points, then goal difference, then goals for; all descending
    return (-stats.points, -stats.goal_difference, -stats.goals_for)


def _record_goals(stats: TeamStats, scored: int, conceded: int) -> None:
    stats.played += 1
    stats.goals_for += scored
    stats.goals_against += conceded
    stats.goal_difference = stats.goals_for - stats.goals_against


def _record_outcome(home: TeamStats, away: TeamStats, home_score: int, away_score: int) -> None:
    if home_score > away_score:
        home.won += 1
        home.points += WIN_POINTS
        away.lost += 1
        away.points += LOSS_POINTS
    elif home_score < away_score:
        away.won += 1
        away.points += WIN_POINTS
        home.lost += 1
        home.points += LOSS_POINTS
    else:
        home.drawn += 1
        home.points += DRAW_POINTS
        away.drawn += 1
        away.points += DRAW_POINTS


def calculate_standings(teams: Sequence[Team], matches: Iterable[Match]) -> List[TeamStats]:
    """Compute ranked league standings.

    Only completed group matches count. A match naming a team that is not in
    ``teams`` is skipped entirely.

    Ranking is by points, then goal difference, then goals for. Teams level
    on all three keep their order from ``teams``.

    Args:
        teams: Tournament teams in seeding order
        matches: Any match list; non-group and unplayed matches are ignored

    Returns:
        One TeamStats per team, best first
    """
    stats_by_id: Dict[str, TeamStats] = {team.id: TeamStats.for_team(team) for team in teams}

    for match in matches:
        if match.match_type != MatchType.GROUP or not match.is_completed:
            continue

        home = stats_by_id.get(match.home_team_id)
        away = stats_by_id.get(match.away_team_id)
        if home is None or away is None:
            logger.debug(
                "Skipping match %s: unknown team (%s vs %s)",
                match.id,
                match.home_team_id,
                match.away_team_id,
            )
            continue

        _record_goals(home, match.home_score, match.away_score)
        _record_goals(away, match.away_score, match.home_score)
        _record_outcome(home, away, match.home_score, match.away_score)

    # sorted() is stable, so full ties keep seeding order
    return sorted(stats_by_id.values(), key=_ranking_key)


def qualified_teams(standings: Sequence[TeamStats], count: int) -> List[TeamStats]:
    """Return the ``count`` best placed teams."""
    return list(standings[:count])
