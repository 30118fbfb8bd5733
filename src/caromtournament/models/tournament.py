"""Tournament snapshot: configuration, teams and the ordered match list."""

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

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from dateutil.parser import isoparse

from caromtournament.exceptions import (
    MatchNotFoundException,
    UnresolvedReferenceException,
)
from caromtournament.models.enums import MatchType, TournamentType
from caromtournament.models.match import Match
from caromtournament.models.team import Team
from caromtournament.models.tournament_config import TournamentConfig
from caromtournament.type_hints import MatchId, TeamId
from caromtournament.utils import setup_logger

logger = setup_logger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Tournament:
    """A tournament snapshot.

    The team list is fixed once the schedule is generated. Later edits only
    touch match scores and, in a knockout, placeholder team ids. Every edit
    produces a new snapshot through :meth:`with_matches`.

    Attributes
    ----------
    id : str
        Unique tournament identifier.
    config : TournamentConfig
        Name, format and format options.
    teams : list of Team
        Participating teams in seeding order.
    matches : list of Match
        Ordered match list as generated.
    created_at : datetime
        Creation time (UTC).
    """

    id: str
    config: TournamentConfig
    teams: List[Team] = field(default_factory=list)
    matches: List[Match] = field(default_factory=list)
    created_at: datetime = field(default_factory=_utcnow)

    # ========== Properties ==========

    @property
    def name(self) -> str:
        """Get tournament name."""
        return self.config.name

    @property
    def tournament_type(self) -> TournamentType:
        """Get tournament format."""
        return self.config.tournament_type

    @property
    def matches_per_opponent(self) -> Optional[int]:
        return self.config.matches_per_opponent

    @property
    def team_ids(self) -> List[TeamId]:
        return [team.id for team in self.teams]

    @property
    def group_matches(self) -> List[Match]:
        return [m for m in self.matches if m.match_type == MatchType.GROUP]

    @property
    def final_match(self) -> Optional[Match]:
        """The simple-mode final, if one has been created."""
        return next((m for m in self.matches if m.match_type == MatchType.FINAL), None)

    # ========== Lookups ==========

    def get_team(self, team_id: TeamId) -> Team:
        """Look up a team by id.

        Raises:
            UnresolvedReferenceException: If no team has this id
        """
        for team in self.teams:
            if team.id == team_id:
                return team
        raise UnresolvedReferenceException(
            f"Team {team_id!r} is not part of tournament {self.name!r}"
        )

    def get_match(self, match_id: MatchId) -> Match:
        """Look up a match by id.

        Raises:
            MatchNotFoundException: If no match has this id
        """
        for match in self.matches:
            if match.id == match_id:
                return match
        raise MatchNotFoundException(f"Match {match_id!r} does not exist")

    def team_name(self, team_id: TeamId) -> str:
        """Display name for ``team_id``; the raw id when it is a placeholder."""
        try:
            return self.get_team(team_id).name
        except UnresolvedReferenceException:
            return team_id

    def with_matches(self, matches: List[Match]) -> "Tournament":
        """Return a new snapshot carrying ``matches``."""
        return replace(self, matches=list(matches))

    # ========== Serialization ==========

    def to_dict(self) -> Dict[str, Any]:
        """Serialize tournament to dictionary.

        Returns:
            Dictionary containing all tournament data
        """
        return {
            "id": self.id,
            "config": self.config.to_dict(),
            "teams": [t.to_dict() for t in self.teams],
            "matches": [m.to_dict() for m in self.matches],
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Tournament":
        """Deserialize tournament from dictionary.

        Args:
            data: Dictionary containing tournament data

        Returns:
            Reconstructed Tournament object
        """
        created_at = data.get("created_at")
        tournament = cls(
            id=data["id"],
            config=TournamentConfig.from_dict(data.get("config", {})),
            teams=[Team.from_dict(t) for t in data.get("teams", [])],
            matches=[Match.from_dict(m) for m in data.get("matches", [])],
            created_at=isoparse(created_at) if created_at else _utcnow(),
        )
        logger.debug(
            "Deserialized tournament %s with %d teams and %d matches",
            tournament.name,
            len(tournament.teams),
            len(tournament.matches),
        )
        return tournament
