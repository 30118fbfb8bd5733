"""Match data classes.

A match is one of three variants sharing the :class:`Match` base:

- :class:`LeagueMatch` for round-robin group games,
- :class:`FinalMatch` for the single final of the simple league mode,
- :class:`KnockoutMatch` for elimination bracket games.

Each variant carries only the fields it needs; ``match_type`` is the
discriminant written to snapshots.
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

from dataclasses import dataclass, replace
from typing import Any, ClassVar, Dict, Optional

from caromtournament.constants import POSITION_BOTTOM, POSITION_TOP, TBD
from caromtournament.exceptions import AmbiguousOutcomeException
from caromtournament.models.enums import MatchStatus, MatchType
from caromtournament.type_hints import Position, Score, TeamId


@dataclass
class Match:
    """Fields and behaviour common to every match variant.

    Not built directly: use LeagueMatch, FinalMatch or KnockoutMatch.

    Attributes
    ----------
    id : str
        Unique within the tournament.
    home_team_id : str
        Team id, or ``TBD`` while a knockout slot is undecided.
    away_team_id : str
        Team id, or ``TBD`` while a knockout slot is undecided.
    home_score : int or None
        None while unplayed.
    away_score : int or None
        None while unplayed.
    """

    match_type: ClassVar[MatchType]

    id: str
    home_team_id: TeamId
    away_team_id: TeamId
    home_score: Score = None
    away_score: Score = None

    def __post_init__(self) -> None:
        if not hasattr(type(self), "match_type"):
            raise TypeError(
                f"{type(self).__name__} has no match type; "
                "build a LeagueMatch, FinalMatch or KnockoutMatch"
            )

    @property
    def status(self) -> MatchStatus:
        """COMPLETED iff both scores are set."""
        if self.home_score is not None and self.away_score is not None:
            return MatchStatus.COMPLETED
        return MatchStatus.SCHEDULED

    @property
    def is_completed(self) -> bool:
        return self.status == MatchStatus.COMPLETED

    @property
    def teams_known(self) -> bool:
        """Whether both sides hold a real team id."""
        return self.home_team_id != TBD and self.away_team_id != TBD

    @property
    def is_draw(self) -> bool:
        return self.is_completed and self.home_score == self.away_score

    @property
    def winner_id(self) -> Optional[TeamId]:
        """Id of the winning team, None when unplayed or drawn."""
        if not self.is_completed or self.home_score == self.away_score:
            return None
        return self.home_team_id if self.home_score > self.away_score else self.away_team_id

    @property
    def loser_id(self) -> Optional[TeamId]:
        winner = self.winner_id
        if winner is None:
            return None
        return self.away_team_id if winner == self.home_team_id else self.home_team_id

    def involves(self, team_id: TeamId) -> bool:
        return team_id in (self.home_team_id, self.away_team_id)

    def with_scores(self, home_score: Score, away_score: Score) -> "Match":
        """Return a copy carrying the given scores."""
        return replace(self, home_score=home_score, away_score=away_score)

    def cleared(self) -> "Match":
        """Return an unplayed copy."""
        return self.with_scores(None, None)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary."""
        return {
            "id": self.id,
            "type": self.match_type.value,
            "home_team_id": self.home_team_id,
            "away_team_id": self.away_team_id,
            "home_score": self.home_score,
            "away_score": self.away_score,
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Match":
        """Deserialize a match of any variant from dictionary.

        ``status`` is ignored on load: it is always re-derived from the scores.
        """
        match_type = MatchType(data.get("type", MatchType.GROUP.value))
        match_class = _MATCH_CLASSES[match_type]
        return match_class(**match_class._fields_from_dict(data))

    @classmethod
    def _fields_from_dict(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "id": data["id"],
            "home_team_id": data["home_team_id"],
            "away_team_id": data["away_team_id"],
            "home_score": data.get("home_score"),
            "away_score": data.get("away_score"),
        }


@dataclass
class LeagueMatch(Match):
    """A round-robin group match.

    ``round`` is the best-effort league pass the match belongs to (1-indexed).
    """

    match_type: ClassVar[MatchType] = MatchType.GROUP

    round: int = 1

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["round"] = self.round
        return data

    @classmethod
    def _fields_from_dict(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        fields = super()._fields_from_dict(data)
        fields["round"] = data.get("round", 1)
        return fields


@dataclass
class FinalMatch(Match):
    """The championship match between the top two league teams."""

    match_type: ClassVar[MatchType] = MatchType.FINAL


@dataclass
class KnockoutMatch(Match):
    """A single-elimination bracket match.

    Attributes
    ----------
    knockout_round : str
        Round label such as ``"quarter"``, ``"semi"`` or ``"final"``.
    round_index : int
        0-based round number; the first round is 0.
    slot : int
        0-based index of the match within its round.
    next_match_id : str or None
        Id of the match the winner advances to, None for the final.
    """

    match_type: ClassVar[MatchType] = MatchType.KNOCKOUT

    knockout_round: str = ""
    round_index: int = 0
    slot: int = 0
    next_match_id: Optional[str] = None

    @property
    def position(self) -> Position:
        """Slot parity within the round."""
        return POSITION_TOP if self.slot % 2 == 0 else POSITION_BOTTOM

    @property
    def winner_id(self) -> Optional[TeamId]:
        """Id of the team advancing from this match.

        Returns None while the match is unplayed or a side is still TBD.

        Raises:
            AmbiguousOutcomeException: If the match is completed and level
        """
        if not self.is_completed or not self.teams_known:
            return None
        if self.home_score == self.away_score:
            raise AmbiguousOutcomeException(
                f"Knockout match {self.id} ended level "
                f"({self.home_score}-{self.away_score}), no winner can advance"
            )
        return super().winner_id

    @property
    def loser_id(self) -> Optional[TeamId]:
        try:
            return super().loser_id
        except AmbiguousOutcomeException:
            return None

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update(
            {
                "knockout_round": self.knockout_round,
                "round_index": self.round_index,
                "slot": self.slot,
                "position": self.position,
                "next_match_id": self.next_match_id,
            }
        )
        return data

    @classmethod
    def _fields_from_dict(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        fields = super()._fields_from_dict(data)
        fields.update(
            {
                "knockout_round": data.get("knockout_round", ""),
                "round_index": data.get("round_index", 0),
                "slot": data.get("slot", 0),
                "next_match_id": data.get("next_match_id"),
            }
        )
        return fields


_MATCH_CLASSES = {
    MatchType.GROUP: LeagueMatch,
    MatchType.FINAL: FinalMatch,
    MatchType.KNOCKOUT: KnockoutMatch,
}
