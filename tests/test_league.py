import pytest

from topspin.exceptions import InvalidFieldSizeException
from topspin.models import Meeting
from topspin.tournament.league import compute_league_standings, simulate_league_day


@pytest.fixture
def league(make_team):
    teams = [make_team(f"T{i}") for i in range(8)]
    return teams[0], teams[1:]


def test_tracked_fixture_is_skipped_by_default(league, rng):
    tracked, opponents = league
    meetings = simulate_league_day(1, tracked, opponents, rng)
    assert len(meetings) == 3
    for meeting in meetings:
        assert "T0" not in (meeting.home_id, meeting.away_id)
        assert len(meeting.matches) == 14


def test_include_tracked_plays_every_fixture(league, rng):
    tracked, opponents = league
    meetings = simulate_league_day(1, tracked, opponents, rng, include_tracked=True)
    assert len(meetings) == 4
    assert meetings[0].id == "league-1-1-T0-T7"


def test_meeting_ids_and_metadata(league, rng):
    tracked, opponents = league
    meetings = simulate_league_day(1, tracked, opponents, rng, phase=2)
    assert [m.id for m in meetings] == [
        "league-2-1-T6-T1",
        "league-2-1-T2-T5",
        "league-2-1-T4-T3",
    ]
    first = meetings[0]
    assert (first.home_name, first.away_name) == ("Team T6", "Team T1")
    assert first.day_number == 1
    assert first.phase == 2


def test_excluded_team_is_skipped(league, rng):
    tracked, opponents = league
    meetings = simulate_league_day(1, tracked, opponents, rng, excluded_team_id="T1")
    assert [m.id for m in meetings] == ["league-1-1-T2-T5", "league-1-1-T4-T3"]


def test_short_teams_are_padded_to_four(make_team, rng):
    tracked = make_team("T0")
    opponents = [make_team(f"T{i}", size=2) for i in range(1, 8)]
    for meeting in simulate_league_day(1, tracked, opponents, rng):
        assert len(meeting.home_players) == 4
        assert len(meeting.matches) == 14


def test_wrong_field_size_is_rejected(league, rng):
    tracked, opponents = league
    with pytest.raises(InvalidFieldSizeException):
        simulate_league_day(1, tracked, opponents[:5], rng)


def test_standings_points_and_order(make_team):
    teams = [make_team("A"), make_team("B"), make_team("C")]
    meetings = [
        Meeting(id="1", home_id="A", away_id="B", home_score=10, away_score=4),
        Meeting(id="2", home_id="C", away_id="A", home_score=7, away_score=7),
        Meeting(id="3", home_id="B", away_id="C", home_score=8, away_score=6),
        Meeting(id="4", home_id="A", away_id="Z", home_score=14, away_score=0),
    ]
    table = compute_league_standings(teams, meetings)
    assert [e.team_id for e in table] == ["A", "B", "C"]

    a, b, c = table
    assert (a.points, a.wins, a.draws, a.losses, a.played) == (5, 1, 1, 0, 2)
    assert (a.matches_won, a.matches_lost) == (17, 11)
    assert (b.points, b.wins, b.losses) == (4, 1, 1)
    assert (c.points, c.draws, c.losses) == (3, 1, 1)


def test_standings_break_ties_on_match_difference(make_team):
    teams = [make_team("A"), make_team("B"), make_team("C"), make_team("D")]
    meetings = [
        Meeting(id="1", home_id="A", away_id="C", home_score=8, away_score=6),
        Meeting(id="2", home_id="B", away_id="D", home_score=12, away_score=2),
    ]
    table = compute_league_standings(teams, meetings)
    assert [e.team_id for e in table] == ["B", "A", "C", "D"]


def test_full_phase_standings(league, rng):
    tracked, opponents = league
    meetings = []
    for day in range(1, 8):
        meetings.extend(
            simulate_league_day(day, tracked, opponents, rng, include_tracked=True)
        )
    table = compute_league_standings([tracked, *opponents], meetings)
    assert all(entry.played == 7 for entry in table)
    assert sum(entry.matches_won for entry in table) == 28 * 14
    points = [entry.points for entry in table]
    assert points == sorted(points, reverse=True)
