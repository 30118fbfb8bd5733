"""Knockout bracket progression.

This module moves winners forward through a single-elimination bracket.
Each knockout match knows its ``round_index`` and ``slot``; the winner of
``(r, s)`` plays in ``(r + 1, s // 2)``, on the home side when ``s`` is even
and on the away side when it is odd.

Progression is a full recompute: every downstream side is set from its
feeder match on every call. A side whose feeder has no winner (unplayed,
cleared, level, or itself waiting on ``TBD``) goes back to ``TBD``, so a
changed upstream result never leaves a stale team behind. Scores of the
downstream match are left untouched.
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

from collections import OrderedDict
from dataclasses import replace
from typing import Dict, List, Optional, Sequence, Set

from caromtournament.constants import ROUND_FINAL, TBD
from caromtournament.exceptions import AmbiguousOutcomeException
from caromtournament.models import KnockoutMatch, Match, Team
from caromtournament.type_hints import BracketSlot, TeamId
from caromtournament.utils import setup_logger

logger = setup_logger(__name__)


def _knockout_matches(matches: Sequence[Match]) -> List[KnockoutMatch]:
    return [m for m in matches if isinstance(m, KnockoutMatch)]


def resolve_winner(match: KnockoutMatch, team_ids: Optional[Set[TeamId]] = None) -> Optional[TeamId]:
    """Return the team advancing from ``match`` or None if nobody advances.

    Args:
        match: A knockout match
        team_ids: Known team ids; a winner outside this set is not advanced

    Returns:
        Winner id, or None when unplayed, level, TBD-fed or unknown
    """
    try:
        winner = match.winner_id
    except AmbiguousOutcomeException as e:
        logger.warning("%s", e)
        return None

    if winner is not None and team_ids is not None and winner not in team_ids:
        logger.warning(
            "Match %s winner %r is not a tournament team, not advancing", match.id, winner
        )
        return None
    return winner


def propagate_results(
    matches: Sequence[Match], teams: Optional[Sequence[Team]] = None
) -> List[Match]:
    """Write knockout winners into their next-round slots.

    The input list is not modified. Non-knockout matches are passed through.

    Args:
        matches: Full match list of the tournament, in generation order
        teams: Tournament teams, used to reject winners with unknown ids

    Returns:
        New match list with downstream team ids brought up to date
    """
    result: List[Match] = list(matches)
    team_ids = {team.id for team in teams} if teams is not None else None

    index_by_slot: Dict[BracketSlot, int] = {
        (m.round_index, m.slot): i
        for i, m in enumerate(result)
        if isinstance(m, KnockoutMatch)
    }

    # Earlier rounds first so resets cascade within one pass
    for round_index, slot in sorted(index_by_slot):
        target_index = index_by_slot.get((round_index + 1, slot // 2))
        if target_index is None:
            continue

        source = result[index_by_slot[(round_index, slot)]]
        advancing = resolve_winner(source, team_ids) or TBD
        side = "home_team_id" if slot % 2 == 0 else "away_team_id"

        target = result[target_index]
        if getattr(target, side) != advancing:
            logger.debug(
                "Bracket: %s %s -> %s (%s)",
                target.id,
                side,
                advancing,
                "winner of " + source.id if advancing != TBD else "reset",
            )
            result[target_index] = replace(target, **{side: advancing})

    return result


def bracket_rounds(matches: Sequence[Match]) -> "OrderedDict[str, List[KnockoutMatch]]":
    """Group knockout matches by round label, earliest round first."""
    rounds: "OrderedDict[str, List[KnockoutMatch]]" = OrderedDict()
    for match in sorted(_knockout_matches(matches), key=lambda m: (m.round_index, m.slot)):
        rounds.setdefault(match.knockout_round, []).append(match)
    return rounds


def champion(matches: Sequence[Match]) -> Optional[TeamId]:
    """Winner of the bracket final, or None while it is undecided."""
    finals = [m for m in _knockout_matches(matches) if m.knockout_round == ROUND_FINAL]
    if not finals:
        return None
    return resolve_winner(finals[0])
