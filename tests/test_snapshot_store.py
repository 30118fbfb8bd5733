import json

import pytest

from caromtournament.controllers import create_simple_league, create_tournament
from caromtournament.exceptions import FileLoadException
from caromtournament.models import TournamentType
from caromtournament.utils.snapshot_store import (
    SnapshotStore,
    default_data_dir,
    default_snapshot_path,
)


@pytest.fixture
def store(tmp_path):
    return SnapshotStore(tmp_path / "nested" / "tournament.json")


def test_absent_file_loads_as_nothing(store):
    assert store.load_tournament() is None
    assert store.load_matches() is None


def test_tournament_round_trip(store, four_teams):
    tournament = create_tournament("Cup", four_teams, TournamentType.KNOCKOUT)

    store.save_tournament(tournament)
    loaded = store.load_tournament()

    assert loaded == tournament


def test_matches_and_tournament_share_one_file(store):
    tournament = create_simple_league()

    store.save_matches(tournament.matches)
    store.save_tournament(tournament)

    document = json.loads(store.path.read_text(encoding="utf-8"))
    assert set(document) == {"carom_tournament", "carom_tournament_matches"}
    assert store.load_matches() == tournament.matches


def test_saved_json_is_readable(store, four_teams):
    store.save_tournament(create_tournament("Cup", four_teams))

    data = json.loads(store.path.read_text(encoding="utf-8"))["carom_tournament"]
    assert data["config"]["type"] == "LEAGUE"
    assert data["matches"][0]["status"] == "SCHEDULED"
    assert data["matches"][0]["type"] == "GROUP"


def test_corrupt_file_raises(store):
    store.path.parent.mkdir(parents=True)
    store.path.write_text("{not json", encoding="utf-8")

    with pytest.raises(FileLoadException):
        store.load_tournament()


def test_corrupt_snapshot_raises(store):
    store.path.parent.mkdir(parents=True)
    store.path.write_text(json.dumps({"carom_tournament": {"teams": []}}), encoding="utf-8")

    with pytest.raises(FileLoadException):
        store.load_tournament()


def test_save_over_corrupt_file_recovers(store, four_teams):
    store.path.parent.mkdir(parents=True)
    store.path.write_text("garbage", encoding="utf-8")

    store.save_tournament(create_tournament("Cup", four_teams))

    assert store.load_tournament().name == "Cup"


def test_clear_removes_file(store, four_teams):
    store.save_tournament(create_tournament("Cup", four_teams))

    store.clear()

    assert not store.path.exists()
    assert store.load_tournament() is None


def test_data_dir_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("CAROM_TOURNAMENT_HOME", str(tmp_path))

    assert default_data_dir() == tmp_path
    assert default_snapshot_path().parent == tmp_path
    assert SnapshotStore().path == default_snapshot_path()
