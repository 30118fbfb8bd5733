import pytest

from caromtournament.models import Team


def make_teams(*names):
    return [Team(id=name, name=name) for name in names]


@pytest.fixture
def four_teams():
    return make_teams("A", "B", "C", "D")


@pytest.fixture
def eight_teams():
    return make_teams("A", "B", "C", "D", "E", "F", "G", "H")
