"""Schedule generation for league and knockout tournaments.

This module builds the complete initial match list of a tournament. Both
generators are pure: they read the team list and return new matches.
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

from typing import List, Optional, Sequence

from caromtournament.constants import (
    DEFAULT_MATCHES_PER_OPPONENT,
    KNOCKOUT_ROUND_LABELS,
    MATCH_ID_PREFIX,
    ROUND_DISPLAY_NAMES,
    ROUND_LABEL_PREFIX,
    TBD,
)
from caromtournament.exceptions import InvalidConfigurationException
from caromtournament.models import (
    KnockoutMatch,
    LeagueMatch,
    Match,
    Team,
    TournamentType,
)
from caromtournament.utils import setup_logger

logger = setup_logger(__name__)


def _match_id(index: int) -> str:
    return f"{MATCH_ID_PREFIX}{index + 1}"


def _is_power_of_two(value: int) -> bool:
    return value > 0 and value & (value - 1) == 0


def knockout_round_name(teams_remaining: int) -> str:
    """Label of a knockout round by the number of teams still in it.

    >>> knockout_round_name(2), knockout_round_name(8), knockout_round_name(16)
    ('final', 'quarter', 'round-4')
    """
    if teams_remaining in KNOCKOUT_ROUND_LABELS:
        return KNOCKOUT_ROUND_LABELS[teams_remaining]
    return f"{ROUND_LABEL_PREFIX}{teams_remaining.bit_length() - 1}"


def round_display_name(knockout_round: str) -> str:
    """Human readable name for a round label, e.g. ``round-5`` -> Round of 32."""
    if knockout_round in ROUND_DISPLAY_NAMES:
        return ROUND_DISPLAY_NAMES[knockout_round]
    if knockout_round.startswith(ROUND_LABEL_PREFIX):
        depth = knockout_round[len(ROUND_LABEL_PREFIX) :]
        if depth.isdigit():
            return f"Round of {2 ** int(depth)}"
    return knockout_round


# ========== League ==========


def generate_league_schedule(
    teams: Sequence[Team],
    matches_per_opponent: int = DEFAULT_MATCHES_PER_OPPONENT,
) -> List[Match]:
    """Generate a round-robin schedule.

    Every unordered pair ``(i, j)`` with ``i < j`` meets
    ``matches_per_opponent`` times in a row. The lower-indexed team hosts the
    even-numbered meetings and the other team hosts the odd ones.

    Args:
        teams: Teams in seeding order (at least two)
        matches_per_opponent: Meetings per pair (at least one)

    Returns:
        List of unplayed group matches

    Raises:
        InvalidConfigurationException: If fewer than two teams are given or
            matches_per_opponent is below one
    """
    if len(teams) < 2:
        raise InvalidConfigurationException(
            f"A league needs at least 2 teams, got {len(teams)}"
        )
    if matches_per_opponent < 1:
        raise InvalidConfigurationException(
            f"Matches per opponent must be at least 1, got {matches_per_opponent}"
        )

    # Best-effort partition into passes; not conflict free for every size
    matches_per_round = len(teams) // 2
    matches: List[Match] = []

    for i in range(len(teams)):
        for j in range(i + 1, len(teams)):
            for occurrence in range(matches_per_opponent):
                home, away = (teams[i], teams[j]) if occurrence % 2 == 0 else (teams[j], teams[i])
                index = len(matches)
                matches.append(
                    LeagueMatch(
                        id=_match_id(index),
                        home_team_id=home.id,
                        away_team_id=away.id,
                        round=index // matches_per_round + 1,
                    )
                )

    logger.info(
        "Generated league schedule: %d teams, %d meetings per pair, %d matches",
        len(teams),
        matches_per_opponent,
        len(matches),
    )
    return matches


# ========== Knockout ==========


def generate_knockout_schedule(teams: Sequence[Team]) -> List[Match]:
    """Generate a single-elimination bracket.

    The first round pairs adjacent teams, ``(0, 1), (2, 3), ...``. Every
    later round is made of ``TBD`` placeholders filled in by bracket
    progression. Matches come out round by round, each round in slot order,
    and every match but the final knows the id of the match its winner
    advances to.

    Args:
        teams: Teams in seeding order; the count must be an even power of two

    Returns:
        List of ``len(teams) - 1`` knockout matches

    Raises:
        InvalidConfigurationException: If the team count is odd or not a
            power of two
    """
    team_count = len(teams)
    if team_count < 2 or team_count % 2 != 0:
        raise InvalidConfigurationException(
            f"A knockout needs an even number of teams, got {team_count}"
        )
    if not _is_power_of_two(team_count):
        raise InvalidConfigurationException(
            f"A knockout bracket needs a power of two teams (2, 4, 8, 16, ...), "
            f"got {team_count}"
        )

    matches: List[KnockoutMatch] = []
    teams_remaining = team_count
    round_index = 0
    while teams_remaining >= 2:
        label = knockout_round_name(teams_remaining)
        for slot in range(teams_remaining // 2):
            if round_index == 0:
                home_id, away_id = teams[2 * slot].id, teams[2 * slot + 1].id
            else:
                home_id = away_id = TBD
            matches.append(
                KnockoutMatch(
                    id=_match_id(len(matches)),
                    home_team_id=home_id,
                    away_team_id=away_id,
                    knockout_round=label,
                    round_index=round_index,
                    slot=slot,
                )
            )
        teams_remaining //= 2
        round_index += 1

    # Link every match to the slot its winner moves into
    by_slot = {(m.round_index, m.slot): m for m in matches}
    for match in matches:
        target = by_slot.get((match.round_index + 1, match.slot // 2))
        if target is not None:
            match.next_match_id = target.id

    logger.info(
        "Generated knockout bracket: %d teams, %d rounds, %d matches",
        team_count,
        round_index,
        len(matches),
    )
    return list(matches)


def generate_schedule(
    teams: Sequence[Team],
    tournament_type: TournamentType,
    matches_per_opponent: Optional[int] = None,
) -> List[Match]:
    """Generate the initial schedule for either tournament format."""
    if tournament_type == TournamentType.KNOCKOUT:
        return generate_knockout_schedule(teams)
    if matches_per_opponent is None:
        matches_per_opponent = DEFAULT_MATCHES_PER_OPPONENT
    return generate_league_schedule(teams, matches_per_opponent)
