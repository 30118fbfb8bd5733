"""Result recording and validation for tournaments.

This module handles applying score edits to a match list with proper
validation. Invalid edits are logged and leave the match list as it was.
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

from typing import List, Optional, Sequence, Tuple

from caromtournament.exceptions import MalformedScoreInputException
from caromtournament.models import Match
from caromtournament.type_hints import MatchId, Score, ScoreText
from caromtournament.utils import setup_logger
from caromtournament.utils.validation import parse_score_text

logger = setup_logger(__name__)


class ResultRecorder:
    """Handles recording and clearing match scores.

    This class is responsible for:
    - Parsing score text ("" clears a side, digits set it)
    - Rejecting malformed input without touching prior state
    - Refusing scores for matches whose teams are not decided yet
    - Producing a new match list; the input is never modified
    """

    def record_score(
        self,
        matches: Sequence[Match],
        match_id: MatchId,
        home_text: ScoreText,
        away_text: ScoreText,
    ) -> List[Match]:
        """Apply a score edit to one match.

        Args:
            matches: Current match list
            match_id: Id of the match to edit
            home_text: Home score text, "" to unset
            away_text: Away score text, "" to unset

        Returns:
            New match list; equal to the input when the edit is rejected
        """
        result = list(matches)

        index = self._find_match(result, match_id)
        if index is None:
            logger.warning(f"Cannot record score: match {match_id} not found")
            return result

        scores = self._parse_scores(match_id, home_text, away_text)
        if scores is None:
            return result
        home_score, away_score = scores

        match = result[index]
        if not match.teams_known and (home_score is not None or away_score is not None):
            logger.warning(
                f"Cannot record score for {match_id}: teams not decided yet "
                f"({match.home_team_id} vs {match.away_team_id})"
            )
            return result

        updated = match.with_scores(home_score, away_score)
        result[index] = updated
        logger.debug(
            f"Recorded {match_id}: {match.home_team_id} {home_score} - "
            f"{away_score} {match.away_team_id} ({updated.status.value})"
        )
        return result

    def clear_score(self, matches: Sequence[Match], match_id: MatchId) -> List[Match]:
        """Reset a match to unplayed."""
        return self.record_score(matches, match_id, "", "")

    def _parse_scores(
        self, match_id: MatchId, home_text: ScoreText, away_text: ScoreText
    ) -> Optional[Tuple[Score, Score]]:
        """Parse both sides of an edit.

        Returns:
            (home, away) scores, or None if either side is malformed
        """
        try:
            return parse_score_text(home_text), parse_score_text(away_text)
        except MalformedScoreInputException as e:
            logger.warning(f"Ignoring score edit for {match_id}: {e}")
            return None

    @staticmethod
    def _find_match(matches: Sequence[Match], match_id: MatchId) -> Optional[int]:
        for index, match in enumerate(matches):
            if match.id == match_id:
                return index
        return None
