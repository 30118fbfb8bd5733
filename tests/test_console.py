import pytest

from caromtournament.console import create_main_parser, main
from caromtournament.console.__main__ import (
    COMMANDS,
    create_completer,
    handle_line,
    print_command_help,
)
from caromtournament.utils.snapshot_store import SnapshotStore


@pytest.fixture
def snapshot(tmp_path):
    return str(tmp_path / "tournament.json")


def run(snapshot, *args):
    return main(["--file", snapshot, *args])


def test_parser_knows_every_command():
    parser = create_main_parser()

    args = parser.parse_args(["new", "--type", "knockout", "--teams", "A", "B"])

    assert args.type == "knockout"
    assert args.teams == ["A", "B"]
    for command in COMMANDS:
        assert parser.parse_args(_minimal_args(command)).command == command


def _minimal_args(command):
    if command == "score":
        return ["score", "match_1", "1", "0"]
    if command == "clear":
        return ["clear", "match_1"]
    return [command]


def test_knockout_flow(snapshot, capsys):
    assert run(snapshot, "new", "--name", "Cup", "--type", "knockout", "--count", "4") == 0
    assert run(snapshot, "score", "match_1", "2", "1") == 0
    assert run(snapshot, "score", "match_2", "0", "3") == 0
    assert run(snapshot, "score", "match_3", "5", "1") == 0
    assert run(snapshot, "bracket") == 0

    out = capsys.readouterr().out
    assert "Created 'Cup': 4 teams, 3 matches" in out
    assert "Team 1 defeated Team 2 by 1 point" in out
    assert "to win the championship!" in out
    assert "Semi Finals" in out
    assert "Champion: Team 1" in out


def test_league_with_named_teams(snapshot, capsys):
    assert run(
        snapshot, "new", "--teams", "Reds", "Blues", "--matches-per-opponent", "1"
    ) == 0
    assert run(snapshot, "score", "match_1", "3", "3") == 0
    assert run(snapshot, "standings") == 0
    assert run(snapshot, "history") == 0

    out = capsys.readouterr().out
    assert "Reds" in out and "Blues" in out
    assert "Game ended in a draw with both sides scoring 3 points" in out
    tournament = SnapshotStore(snapshot).load_tournament()
    assert tournament.get_match("match_1").home_score == 3


def test_simple_mode_is_saved_as_match_list(snapshot, capsys):
    assert run(snapshot, "simple") == 0
    assert run(snapshot, "score", "match_1", "1", "0") == 0
    assert run(snapshot, "matches", "--pending") == 0

    store = SnapshotStore(snapshot)
    assert store.load_tournament() is None
    assert len(store.load_matches()) == 6
    out = capsys.readouterr().out
    assert "match_1 " not in out.split("Game Schedule")[1]
    assert "1 / 6 group games played" in out


def test_rejected_score_returns_error(snapshot, capsys):
    run(snapshot, "new", "--count", "2")

    assert run(snapshot, "score", "match_1", "x", "1") == 1
    assert "Score not applied" in capsys.readouterr().out


def test_reset(snapshot):
    run(snapshot, "new", "--count", "2", "--matches-per-opponent", "1")
    run(snapshot, "score", "match_1", "1", "0")

    assert run(snapshot, "reset") == 0
    assert SnapshotStore(snapshot).load_tournament().matches[0].home_score is None


def test_missing_tournament_is_reported(snapshot, capsys):
    assert run(snapshot, "standings") == 1
    assert "No tournament" in capsys.readouterr().out


def test_invalid_configuration_is_reported(snapshot, capsys):
    assert run(snapshot, "new", "--type", "knockout", "--count", "6") == 1
    assert "power of two" in capsys.readouterr().out


def test_bracket_on_league(snapshot, capsys):
    run(snapshot, "new", "--count", "3")

    assert run(snapshot, "bracket") == 1
    assert "no knockout bracket" in capsys.readouterr().out


def test_help_output(capsys):
    print_command_help("score")
    print_command_help("nonsense")

    out = capsys.readouterr().out
    assert "carom score" in out
    assert "match_id" in out
    assert "Unknown command: nonsense" in out


def test_completer_offers_commands_and_their_options():
    completer = create_completer()

    assert set(completer.options) == set(COMMANDS) | {"help"}
    assert "/score" not in completer.options


def test_clear_unknown_or_unplayed_match_fails(snapshot, capsys):
    run(snapshot, "new", "--count", "2")

    assert run(snapshot, "clear", "match_99") == 1
    assert run(snapshot, "clear", "match_1") == 1
    assert "Nothing cleared" in capsys.readouterr().out


def test_clear_played_match(snapshot, capsys):
    run(snapshot, "new", "--count", "2")
    run(snapshot, "score", "match_1", "4", "1")

    assert run(snapshot, "clear", "match_1") == 0
    assert "Cleared match_1" in capsys.readouterr().out
    assert SnapshotStore(snapshot).load_tournament().matches[0].home_score is None


def test_prompt_lines(snapshot, capsys):
    parser = create_main_parser()

    assert handle_line("simple", parser, snapshot)
    assert handle_line('score match_1 "2" 0', parser, snapshot)
    assert handle_line("help", parser, snapshot)
    assert handle_line("bogus", parser, snapshot)
    assert handle_line("score match_1", parser, snapshot)
    assert handle_line('score "unbalanced', parser, snapshot)
    assert handle_line("   ", parser, snapshot)
    assert not handle_line("quit", parser, snapshot)

    out = capsys.readouterr().out
    assert "Team A [SZ] defeated Team B [SS] by 2 points" in out
    assert "Commands:" in out
    assert "Unknown command: bogus" in out
    assert SnapshotStore(snapshot).load_matches()[0].home_score == 2
