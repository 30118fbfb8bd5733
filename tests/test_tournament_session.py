import pytest

from caromtournament.constants import DEFAULT_TOURNAMENT_NAME, FINAL_MATCH_ID, TBD
from caromtournament.controllers import (
    TournamentSession,
    create_simple_league,
    create_tournament,
)
from caromtournament.exceptions import InvalidConfigurationException
from caromtournament.models import MatchType, Team, TournamentType
from caromtournament.utils.snapshot_store import SnapshotStore

from conftest import make_teams

SIMPLE_RESULTS = [
    ("match_1", "0", "2"),
    ("match_2", "2", "0"),
    ("match_3", "3", "0"),
    ("match_4", "0", "3"),
    ("match_5", "1", "1"),
    ("match_6", "1", "1"),
]


@pytest.fixture
def store(tmp_path):
    return SnapshotStore(tmp_path / "tournament.json")


def test_create_league_defaults(four_teams):
    tournament = create_tournament("", four_teams)

    assert tournament.name == DEFAULT_TOURNAMENT_NAME
    assert tournament.matches_per_opponent == 2
    assert len(tournament.matches) == 12


def test_create_knockout_ignores_league_options(four_teams):
    tournament = create_tournament(
        "Cup", four_teams, TournamentType.KNOCKOUT, matches_per_opponent=3, with_final=True
    )

    assert tournament.matches_per_opponent is None
    assert tournament.config.with_final is False
    assert len(tournament.matches) == 3


@pytest.mark.parametrize(
    "teams, tournament_type",
    [
        (make_teams("A"), TournamentType.LEAGUE),
        (make_teams("A", "B", "C"), TournamentType.KNOCKOUT),
        (make_teams("A", "A"), TournamentType.LEAGUE),
        ([Team(id="a", name="A"), Team(id="b", name="  ")], TournamentType.LEAGUE),
    ],
)
def test_create_rejects_invalid_setup(teams, tournament_type):
    with pytest.raises(InvalidConfigurationException):
        create_tournament("Bad", teams, tournament_type)


def test_knockout_session_scenario(four_teams):
    session = TournamentSession(create_tournament("Cup", four_teams, TournamentType.KNOCKOUT))

    session.submit_score("match_1", "2", "1")
    final = session.tournament.get_match("match_3")
    assert final.home_team_id == "A"

    session.submit_score("match_2", "0", "3")
    final = session.tournament.get_match("match_3")
    assert (final.home_team_id, final.away_team_id) == ("A", "D")
    assert session.champion() is None

    session.submit_score("match_3", "1", "4")
    assert session.champion() == "D"
    assert session.describe_result(session.tournament.get_match("match_3")) == (
        "D defeated A by 3 points to win the championship!"
    )

    session.clear_score("match_1")
    final = session.tournament.get_match("match_3")
    assert final.home_team_id == TBD
    assert (final.home_score, final.away_score) == (1, 4)
    assert session.champion() is None


def test_malformed_score_leaves_session_untouched(four_teams):
    session = TournamentSession(create_tournament("League", four_teams))
    before = session.matches

    assert session.submit_score("match_1", "x", "1") == before
    assert session.submit_score("nope", "1", "1") == before


def test_league_standings_are_derived(four_teams):
    session = TournamentSession(create_tournament("League", four_teams, matches_per_opponent=1))

    session.submit_score("match_1", "5", "2")

    leader = session.standings()[0]
    assert (leader.id, leader.points, leader.goal_difference) == ("A", 3, 3)
    assert session.group_progress() == (1, 6)


def test_simple_league_final_follows_the_table():
    session = TournamentSession(create_simple_league())
    for match_id, home, away in SIMPLE_RESULTS:
        assert session.tournament.final_match is None
        session.submit_score(match_id, home, away)

    final = session.tournament.final_match
    assert final is not None
    assert (final.home_team_id, final.away_team_id) == ("team_b", "team_a")

    session.submit_score(FINAL_MATCH_ID, "3", "1")
    assert session.champion() == "team_b"

    session.clear_score("match_5")
    assert session.tournament.final_match is None
    assert session.champion() is None


def test_match_history_and_descriptions():
    session = TournamentSession(create_simple_league())
    session.submit_score("match_1", "4", "3")
    session.submit_score("match_5", "2", "2")

    history = session.match_history()

    assert [m.id for m in history] == ["match_5", "match_1"]
    assert session.describe_result(history[1]) == (
        "Team A [SZ] defeated Team B [SS] by 1 point"
    )
    assert session.describe_result(history[0]) == (
        "Game ended in a draw with both sides scoring 2 points"
    )


def test_reset_restores_schedule(four_teams):
    session = TournamentSession(create_tournament("Cup", four_teams, TournamentType.KNOCKOUT))
    original = session.matches
    session.submit_score("match_1", "2", "1")

    session.reset()

    assert session.matches == original


def test_session_persists_every_edit(store, four_teams):
    session = TournamentSession.create(
        "Cup", four_teams, TournamentType.KNOCKOUT, store=store
    )
    session.submit_score("match_1", "2", "1")

    resumed = TournamentSession.load(SnapshotStore(store.path))

    assert resumed is not None
    assert resumed.tournament.id == session.tournament.id
    assert resumed.matches == session.matches
    assert resumed.is_knockout


def test_load_without_snapshot_returns_none(store):
    assert TournamentSession.load(store) is None


def test_simple_league_resumes_bare_match_list(store):
    session = TournamentSession.simple_league(store)
    session.submit_score("match_2", "7", "1")

    assert store.load_tournament() is None
    resumed = TournamentSession.simple_league(SnapshotStore(store.path))

    assert resumed.tournament.get_match("match_2").home_score == 7
    assert all(m.match_type != MatchType.FINAL for m in resumed.matches)


def test_simple_league_resume_stages_pending_final(store):
    matches = create_simple_league().matches
    results = {match_id: (int(home), int(away)) for match_id, home, away in SIMPLE_RESULTS}
    store.save_matches([m.with_scores(*results[m.id]) for m in matches])

    resumed = TournamentSession.simple_league(SnapshotStore(store.path))

    final = resumed.tournament.final_match
    assert final is not None
    assert (final.home_team_id, final.away_team_id) == ("team_b", "team_a")
    assert any(m.id == FINAL_MATCH_ID for m in store.load_matches())
