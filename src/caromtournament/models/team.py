"""Team and derived per-team standings record."""

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

from dataclasses import asdict, dataclass
from typing import Any, Dict, List

from caromtournament.constants import (
    DEFAULT_TEAM_LOGO,
    SIMPLE_LEAGUE_TEAMS,
    TEAM_COLORS,
)


@dataclass
class Team:
    """A participating team.

    Attributes
    ----------
    id : str
        Unique identifier, stable for the tournament lifetime.
    name : str
        Display name.
    color : str
        Cosmetic colour tag.
    logo : str
        Cosmetic logo tag (icon name or emoji).
    """

    id: str
    name: str
    color: str = TEAM_COLORS[0]
    logo: str = DEFAULT_TEAM_LOGO

    def to_dict(self) -> Dict[str, Any]:
        """Serialize team to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "color": self.color,
            "logo": self.logo,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Team":
        """Deserialize team from dictionary."""
        return cls(
            id=data["id"],
            name=data["name"],
            color=data.get("color", TEAM_COLORS[0]),
            logo=data.get("logo", DEFAULT_TEAM_LOGO),
        )


@dataclass
class TeamStats(Team):
    """A team extended with its league record.

    Always derived from completed group matches, never stored.
    """

    played: int = 0
    won: int = 0
    drawn: int = 0
    lost: int = 0
    goals_for: int = 0
    goals_against: int = 0
    goal_difference: int = 0
    points: int = 0

    @classmethod
    def for_team(cls, team: Team) -> "TeamStats":
        """Create an empty record for ``team``."""
        return cls(id=team.id, name=team.name, color=team.color, logo=team.logo)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def default_team(index: int) -> Team:
    """Build the placeholder team shown for slot ``index`` (0-based)."""
    return Team(
        id=f"team_{index + 1}",
        name=f"Team {index + 1}",
        color=TEAM_COLORS[index % len(TEAM_COLORS)],
        logo=DEFAULT_TEAM_LOGO,
    )


def default_teams(count: int) -> List[Team]:
    """Build ``count`` placeholder teams: team_1 .. team_N."""
    return [default_team(i) for i in range(count)]


def simple_league_teams() -> List[Team]:
    """The three fixed teams of the simple league mode."""
    return [Team.from_dict(data) for data in SIMPLE_LEAGUE_TEAMS]
