"""Tournament session - orchestrates all tournament operations.

This is the primary interface for running a tournament. It holds the current
snapshot and, after every score edit, re-runs the engine that applies to the
tournament format:

- knockout: bracket progression moves winners forward,
- league with a final: the final is created, re-targeted or removed.

Standings are never stored; they are computed on demand.
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
from typing import List, Optional, Sequence

from caromtournament.constants import (
    DEFAULT_MATCHES_PER_OPPONENT,
    DEFAULT_TOURNAMENT_NAME,
)
from caromtournament.controllers.bracket_progression import (
    bracket_rounds,
    champion,
    propagate_results,
)
from caromtournament.controllers.league_final import (
    group_progress,
    maintain_league_final,
)
from caromtournament.controllers.result_recorder import ResultRecorder
from caromtournament.controllers.schedule_generator import generate_schedule
from caromtournament.controllers.standings_calculator import calculate_standings
from caromtournament.exceptions import InvalidConfigurationException
from caromtournament.models import (
    KnockoutMatch,
    Match,
    MatchType,
    Team,
    TeamStats,
    Tournament,
    TournamentConfig,
    TournamentType,
    simple_league_teams,
)
from caromtournament.type_hints import MatchId, Progress, ScoreText, TeamId
from caromtournament.utils import generate_id, setup_logger
from caromtournament.utils.snapshot_store import SnapshotStore
from caromtournament.utils.validation import validate_name

logger = setup_logger(__name__)


def create_tournament(
    name: str,
    teams: Sequence[Team],
    tournament_type: TournamentType = TournamentType.LEAGUE,
    matches_per_opponent: Optional[int] = None,
    with_final: bool = False,
) -> Tournament:
    """Create a tournament with its full initial schedule.

    Args:
        name: Tournament name; blank falls back to the default name
        teams: Participating teams in seeding order
        tournament_type: LEAGUE or KNOCKOUT
        matches_per_opponent: League only, meetings per pair (default 2)
        with_final: League only, stage a final between the top two

    Returns:
        The new tournament

    Raises:
        InvalidConfigurationException: If the teams cannot be scheduled in
            the requested format
    """
    if len(teams) < 2:
        raise InvalidConfigurationException(
            f"A tournament needs at least 2 teams, got {len(teams)}"
        )

    seen = set()
    for team in teams:
        if team.id in seen:
            raise InvalidConfigurationException(f"Duplicate team id: {team.id!r}")
        seen.add(team.id)
        if not validate_name(team.name):
            raise InvalidConfigurationException(f"Team {team.id!r} has no name")

    if tournament_type == TournamentType.KNOCKOUT:
        matches_per_opponent = None
        with_final = False
    elif matches_per_opponent is None:
        matches_per_opponent = DEFAULT_MATCHES_PER_OPPONENT

    config = TournamentConfig(
        name=validate_name(name, required=False).sanitized_value or DEFAULT_TOURNAMENT_NAME,
        tournament_type=tournament_type,
        matches_per_opponent=matches_per_opponent,
        with_final=with_final,
    )
    matches = generate_schedule(teams, tournament_type, matches_per_opponent)

    tournament = Tournament(
        id=generate_id("tournament"),
        config=config,
        teams=list(teams),
        matches=matches,
    )
    logger.info(
        f"Created {tournament_type.value.lower()} tournament {config.name!r}: "
        f"{len(teams)} teams, {len(matches)} matches"
    )
    return tournament


def create_simple_league(name: str = DEFAULT_TOURNAMENT_NAME) -> Tournament:
    """The fixed three-team double round-robin followed by a final."""
    return create_tournament(
        name,
        simple_league_teams(),
        TournamentType.LEAGUE,
        matches_per_opponent=DEFAULT_MATCHES_PER_OPPONENT,
        with_final=True,
    )


class TournamentSession:
    """Holds the live tournament and applies score edits one at a time.

    Attributes:
        tournament: Current snapshot, replaced on every edit
        store: Optional snapshot store, written after every edit
        bare_snapshot: Persist only the match list (simple league mode)
    """

    def __init__(
        self,
        tournament: Tournament,
        store: Optional[SnapshotStore] = None,
        bare_snapshot: bool = False,
    ) -> None:
        self.tournament = tournament
        self.store = store
        self.bare_snapshot = bare_snapshot
        self.result_recorder = ResultRecorder()

    # ========== Construction ==========

    @classmethod
    def create(
        cls,
        name: str,
        teams: Sequence[Team],
        tournament_type: TournamentType = TournamentType.LEAGUE,
        matches_per_opponent: Optional[int] = None,
        with_final: bool = False,
        store: Optional[SnapshotStore] = None,
    ) -> "TournamentSession":
        """Create a tournament and save its first snapshot."""
        tournament = create_tournament(
            name, teams, tournament_type, matches_per_opponent, with_final
        )
        session = cls(tournament, store=store)
        session.save()
        return session

    @classmethod
    def load(cls, store: SnapshotStore) -> Optional["TournamentSession"]:
        """Resume the tournament saved in ``store``; None if there is none."""
        tournament = store.load_tournament()
        if tournament is None:
            return None
        return cls(tournament, store=store)

    @classmethod
    def simple_league(cls, store: Optional[SnapshotStore] = None) -> "TournamentSession":
        """Open the simple three-team league, resuming its saved matches if any.

        Resumed matches go through the same final upkeep as a score edit, so a
        saved list with a finished group stage gets its final on load.
        """
        tournament = create_simple_league()
        saved = store.load_matches() if store is not None else None
        if saved is not None:
            logger.info(f"Resuming simple league with {len(saved)} saved matches")
            tournament = tournament.with_matches(saved)
        session = cls(tournament, store=store, bare_snapshot=True)
        if saved is None:
            session.save()
            return session

        recomputed = session._recompute(session.matches)
        if recomputed != session.matches:
            session.tournament = session.tournament.with_matches(recomputed)
            session.save()
        return session

    # ========== Properties ==========

    @property
    def name(self) -> str:
        return self.tournament.name

    @property
    def teams(self) -> List[Team]:
        return self.tournament.teams

    @property
    def matches(self) -> List[Match]:
        return self.tournament.matches

    @property
    def is_knockout(self) -> bool:
        return self.tournament.config.is_knockout

    # ========== Score Management ==========

    def submit_score(
        self, match_id: MatchId, home_text: ScoreText, away_text: ScoreText
    ) -> List[Match]:
        """Set or clear the score of one match.

        Each text is "" (unset) or a run of digits; any other input leaves
        the tournament unchanged.

        Returns:
            The updated match list
        """
        recorded = self.result_recorder.record_score(
            self.matches, match_id, home_text, away_text
        )
        if recorded == self.matches:
            return self.matches

        self.tournament = self.tournament.with_matches(self._recompute(recorded))
        logger.info(f"Score for {match_id} set to {home_text or '-'}:{away_text or '-'}")
        self.save()
        return self.matches

    def clear_score(self, match_id: MatchId) -> List[Match]:
        """Reset a match to unplayed."""
        return self.submit_score(match_id, "", "")

    def reset(self) -> None:
        """Throw away every result and regenerate the original schedule."""
        config = self.tournament.config
        matches = generate_schedule(
            self.teams, config.tournament_type, config.matches_per_opponent
        )
        self.tournament = self.tournament.with_matches(matches)
        logger.info(f"Tournament {self.name!r} reset")
        self.save()

    def _recompute(self, matches: List[Match]) -> List[Match]:
        if self.is_knockout:
            return propagate_results(matches, self.teams)
        if self.tournament.config.with_final:
            return maintain_league_final(self.teams, matches)
        return matches

    # ========== Derived views ==========

    def standings(self) -> List[TeamStats]:
        """Current league table."""
        return calculate_standings(self.teams, self.matches)

    def group_progress(self) -> Progress:
        """``(completed, total)`` group matches."""
        return group_progress(self.matches)

    def match_history(self) -> List[Match]:
        """Completed matches, most recent first."""
        return [m for m in reversed(self.matches) if m.is_completed]

    def bracket(self) -> "OrderedDict[str, List[KnockoutMatch]]":
        """Knockout matches grouped by round, earliest round first."""
        return bracket_rounds(self.matches)

    def champion(self) -> Optional[TeamId]:
        """Tournament winner once the deciding match is played."""
        if self.is_knockout:
            return champion(self.matches)
        final = self.tournament.final_match
        if final is not None:
            return final.winner_id
        return None

    def describe_result(self, match: Match) -> str:
        """One-line summary of a completed match.

        Example: ``Team A defeated Team B by 3 points``.
        """
        if not match.is_completed:
            return (
                f"{self.tournament.team_name(match.home_team_id)} vs "
                f"{self.tournament.team_name(match.away_team_id)}: not played yet"
            )
        if match.is_draw:
            plural = "" if match.home_score == 1 else "s"
            return (
                f"Game ended in a draw with both sides scoring "
                f"{match.home_score} point{plural}"
            )

        winner_id = match.home_team_id if match.home_score > match.away_score else match.away_team_id
        loser_id = match.away_team_id if winner_id == match.home_team_id else match.home_team_id
        margin = abs(match.home_score - match.away_score)
        summary = (
            f"{self.tournament.team_name(winner_id)} defeated "
            f"{self.tournament.team_name(loser_id)} by {margin} "
            f"point{'' if margin == 1 else 's'}"
        )
        if match.match_type == MatchType.FINAL or (
            isinstance(match, KnockoutMatch) and match.next_match_id is None
        ):
            summary += " to win the championship!"
        return summary

    # ========== Persistence ==========

    def save(self) -> None:
        """Write the current snapshot to the attached store, if any."""
        if self.store is None:
            return
        if self.bare_snapshot:
            self.store.save_matches(self.matches)
        else:
            self.store.save_tournament(self.tournament)
