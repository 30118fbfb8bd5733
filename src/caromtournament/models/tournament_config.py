"""TournamentConfig data class."""

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

from dataclasses import dataclass
from typing import Any, Dict, Optional

from caromtournament.constants import DEFAULT_TOURNAMENT_NAME
from caromtournament.models.enums import TournamentType


@dataclass
class TournamentConfig:
    """Tournament configuration settings.

    Attributes
    ----------
    name : str
        Tournament name.
    tournament_type : TournamentType
        LEAGUE (round-robin) or KNOCKOUT (single elimination).
    matches_per_opponent : int or None
        Number of meetings between each pair of teams. League only.
    with_final : bool
        League only: once every group match is played the top two teams
        meet in a final that is kept in sync with the standings.
    """

    name: str
    tournament_type: TournamentType = TournamentType.LEAGUE
    matches_per_opponent: Optional[int] = None
    with_final: bool = False

    @property
    def is_knockout(self) -> bool:
        return self.tournament_type == TournamentType.KNOCKOUT

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "name": self.name,
            "type": self.tournament_type.value,
            "matches_per_opponent": self.matches_per_opponent,
            "with_final": self.with_final,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentConfig":
        """Deserialize configuration from dictionary."""
        return cls(
            name=data.get("name", DEFAULT_TOURNAMENT_NAME),
            tournament_type=TournamentType(data.get("type", TournamentType.LEAGUE.value)),
            matches_per_opponent=data.get("matches_per_opponent"),
            with_final=data.get("with_final", False),
        )
