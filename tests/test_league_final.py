from caromtournament.constants import FINAL_MATCH_ID
from caromtournament.controllers import (
    all_group_matches_completed,
    generate_league_schedule,
    group_progress,
    maintain_league_final,
)
from caromtournament.models import FinalMatch, MatchType, simple_league_teams

# match_1 a-b, match_2 b-a, match_3 a-c, match_4 c-a, match_5 b-c, match_6 c-b
B_TOPS_THE_TABLE = {
    "match_1": (0, 2),
    "match_2": (2, 0),
    "match_3": (3, 0),
    "match_4": (0, 3),
    "match_5": (1, 1),
    "match_6": (1, 1),
}


def _play(matches, results):
    return [
        m.with_scores(*results[m.id]) if m.id in results else m
        for m in matches
    ]


def _finals(matches):
    return [m for m in matches if m.match_type == MatchType.FINAL]


def _completed_group_stage():
    teams = simple_league_teams()
    matches = _play(generate_league_schedule(teams), B_TOPS_THE_TABLE)
    return teams, matches


def test_no_final_while_group_stage_is_open():
    teams = simple_league_teams()
    matches = _play(generate_league_schedule(teams), {"match_1": (1, 0)})

    assert maintain_league_final(teams, matches) == matches
    assert group_progress(matches) == (1, 6)


def test_final_created_between_top_two():
    teams, matches = _completed_group_stage()
    assert all_group_matches_completed(matches)

    result = maintain_league_final(teams, matches)

    (final,) = _finals(result)
    assert isinstance(final, FinalMatch)
    assert final.id == FINAL_MATCH_ID
    assert (final.home_team_id, final.away_team_id) == ("team_b", "team_a")
    assert final.home_score is None and final.away_score is None
    assert result[-1] is final


def test_final_removed_when_group_score_cleared():
    teams, matches = _completed_group_stage()
    matches = maintain_league_final(teams, matches)
    matches = [m.cleared() if m.id == "match_3" else m for m in matches]

    result = maintain_league_final(teams, matches)

    assert _finals(result) == []
    assert len(result) == 6


def test_final_kept_when_standings_unchanged():
    teams, matches = _completed_group_stage()
    matches = maintain_league_final(teams, matches)
    matches = _play(matches, {FINAL_MATCH_ID: (4, 2)})

    result = maintain_league_final(teams, matches)

    assert result == matches


def test_final_retargeted_and_wiped_when_leaders_change():
    teams, matches = _completed_group_stage()
    matches = maintain_league_final(teams, matches)
    matches = _play(matches, {FINAL_MATCH_ID: (4, 2), "match_1": (5, 0)})

    result = maintain_league_final(teams, matches)

    (final,) = _finals(result)
    assert (final.home_team_id, final.away_team_id) == ("team_a", "team_b")
    assert final.home_score is None and final.away_score is None


def test_input_not_modified():
    teams, matches = _completed_group_stage()
    before = list(matches)

    maintain_league_final(teams, matches)

    assert matches == before
