from datetime import datetime, timezone

import pytest

from caromtournament.constants import TBD
from caromtournament.exceptions import (
    AmbiguousOutcomeException,
    MatchNotFoundException,
    UnresolvedReferenceException,
)
from caromtournament.models import (
    FinalMatch,
    KnockoutMatch,
    LeagueMatch,
    Match,
    MatchStatus,
    Team,
    Tournament,
    TournamentConfig,
    default_teams,
    simple_league_teams,
)


def test_status_requires_both_scores():
    match = LeagueMatch(id="m", home_team_id="A", away_team_id="B")

    assert match.status == MatchStatus.SCHEDULED
    assert match.with_scores(1, None).status == MatchStatus.SCHEDULED
    assert match.with_scores(1, 0).status == MatchStatus.COMPLETED
    assert match.with_scores(1, 0).cleared().status == MatchStatus.SCHEDULED


def test_winner_and_loser():
    match = LeagueMatch(id="m", home_team_id="A", away_team_id="B", home_score=1, away_score=4)

    assert (match.winner_id, match.loser_id) == ("B", "A")
    assert match.with_scores(2, 2).winner_id is None
    assert match.with_scores(2, 2).is_draw


def test_knockout_tie_is_ambiguous():
    match = KnockoutMatch(id="k", home_team_id="A", away_team_id="B", home_score=3, away_score=3)

    with pytest.raises(AmbiguousOutcomeException):
        match.winner_id
    assert match.loser_id is None


def test_knockout_with_placeholder_has_no_winner():
    match = KnockoutMatch(id="k", home_team_id="A", away_team_id=TBD, home_score=3, away_score=0)

    assert not match.teams_known
    assert match.winner_id is None


@pytest.mark.parametrize(
    "match",
    [
        LeagueMatch(id="g", home_team_id="A", away_team_id="B", home_score=2, round=3),
        FinalMatch(id="f", home_team_id="A", away_team_id="B", home_score=1, away_score=0),
        KnockoutMatch(
            id="k",
            home_team_id=TBD,
            away_team_id=TBD,
            knockout_round="semi",
            round_index=1,
            slot=1,
            next_match_id="n",
        ),
    ],
)
def test_match_dict_restores_variant(match):
    data = match.to_dict()

    assert Match.from_dict(data) == match
    assert data["status"] == match.status.value


def test_knockout_dict_carries_position():
    match = KnockoutMatch(id="k", home_team_id="A", away_team_id="B", slot=3)

    assert match.to_dict()["position"] == "bottom"


def test_default_teams():
    teams = default_teams(3)

    assert [t.id for t in teams] == ["team_1", "team_2", "team_3"]
    assert [t.name for t in teams] == ["Team 1", "Team 2", "Team 3"]
    assert len({t.color for t in teams}) == 3


def test_simple_league_teams():
    assert [t.id for t in simple_league_teams()] == ["team_a", "team_b", "team_c"]


def test_tournament_lookups():
    tournament = Tournament(
        id="t",
        config=TournamentConfig(name="Cup"),
        teams=[Team(id="A", name="Alpha")],
        matches=[LeagueMatch(id="m1", home_team_id="A", away_team_id=TBD)],
    )

    assert tournament.get_team("A").name == "Alpha"
    assert tournament.team_name(TBD) == TBD
    assert tournament.get_match("m1").away_team_id == TBD
    with pytest.raises(UnresolvedReferenceException):
        tournament.get_team("Z")
    with pytest.raises(MatchNotFoundException):
        tournament.get_match("m2")


def test_tournament_dict_round_trip():
    tournament = Tournament(
        id="t",
        config=TournamentConfig(name="Cup"),
        teams=[Team(id="A", name="Alpha"), Team(id="B", name="Beta")],
        matches=[LeagueMatch(id="m1", home_team_id="A", away_team_id="B")],
        created_at=datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc),
    )

    restored = Tournament.from_dict(tournament.to_dict())

    assert restored == tournament
    assert restored.created_at.year == 2024


def test_base_match_cannot_be_built():
    with pytest.raises(TypeError):
        Match(id="m", home_team_id="A", away_team_id="B")
