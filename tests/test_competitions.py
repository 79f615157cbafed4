import logging
import random
from datetime import date

import pytest

from topspin.exceptions import InvalidCompetitionException
from topspin.models import (
    Competition,
    CompetitionShape,
    CompetitionTier,
    Competitor,
    create_ghost_competitor,
)
from topspin.simulation.exchange import calculate_point_exchange
from topspin.tournament import pool as pool_module
from topspin.tournament.bracket import (
    bracket_size,
    placement_label,
    simulate_ranked_bracket,
)
from topspin.tournament.dispatcher import filter_eligible, simulate_competition
from topspin.tournament.fallback import simulate_fallback, simulate_fallback_result
from topspin.tournament.pool import (
    MemberTally,
    play_pool_round,
    pool_outcome,
    simulate_paired_pool,
)


class FixedRandom:
    """Stand-in random source returning fixed draws."""

    def __init__(self, value, extra_matches=3):
        self.value = value
        self.extra_matches = extra_matches

    def random(self):
        return self.value

    def randint(self, low, high):
        return self.extra_matches


def _fixed_competitor(rating):
    return Competitor(id="fixed", name="Fixed Player", rating=rating)


def bracket(tier=CompetitionTier.STANDARD):
    return Competition(
        id="crit", name="Criterium", shape=CompetitionShape.RANKED_BRACKET, tier=tier
    )


# ========== Competition descriptor ==========


def test_shape_is_inferred_from_team_size():
    assert Competition(id="c", name="Doubles", team_size=2).shape == CompetitionShape.PAIRED_POOL
    assert Competition(id="c", name="Singles").shape == CompetitionShape.FALLBACK
    explicit = Competition(id="c", name="x", shape=CompetitionShape.RANKED_BRACKET, team_size=2)
    assert explicit.shape == CompetitionShape.RANKED_BRACKET


def test_invalid_team_size_is_rejected():
    with pytest.raises(InvalidCompetitionException):
        Competition(id="c", name="x", team_size=0)


def test_competition_round_trips_through_dict():
    competition = Competition(
        id="c",
        name="Finals",
        shape=CompetitionShape.RANKED_BRACKET,
        tier=CompetitionTier.FINALS,
        level="National",
        max_rating=1500,
    )
    assert Competition.from_dict(competition.to_dict()) == competition
    with pytest.raises(InvalidCompetitionException):
        Competition.from_dict({"id": "c", "shape": "knockout"})


def test_filter_eligible_checks_rating_and_age(make_competitor):
    competition = Competition(
        id="youth", name="Youth", min_rating=600, max_rating=1200, max_age=15
    )
    young = make_competitor("young", rating=800, date_of_birth=date(2012, 6, 1))
    old = make_competitor("old", rating=800, date_of_birth=date(1990, 1, 1))
    strong = make_competitor("strong", rating=1500, age=12)
    unknown_age = make_competitor("unknown", rating=700)
    eligible = filter_eligible(
        competition, [young, old, strong, unknown_age], on_date=date(2025, 9, 1)
    )
    assert [c.id for c in eligible] == ["young", "unknown"]


def test_filter_eligible_keeps_registered_only(make_competitor):
    competition = Competition(
        id="open", name="Open", max_rating=1200, registered_ids=["a", "c"]
    )
    a = make_competitor("a", rating=900)
    b = make_competitor("b", rating=900)
    c = make_competitor("c", rating=1500)
    assert [x.id for x in filter_eligible(competition, [a, b, c])] == ["a"]
    competition.registered_ids = []
    assert [x.id for x in filter_eligible(competition, [a, b, c])] == ["a", "b"]


# ========== Ranked bracket ==========


def test_bracket_sizes():
    assert bracket_size(bracket(), 3) == 16
    assert bracket_size(bracket(CompetitionTier.FINALS), 3) == 32
    assert bracket_size(bracket(), 20) == 32
    assert bracket_size(bracket(), 16) == 16


def test_placement_labels():
    assert placement_label(1) == "Winner (1st)"
    assert placement_label(2) == "Finalist (2nd)"
    assert placement_label(3) == "3rd"
    assert placement_label(11) == "11th"
    assert placement_label(22) == "22nd"


def test_bracket_winner_takes_every_round(make_competitor, rng):
    star = make_competitor("star", rating=9000)
    novice = make_competitor("novice", rating=0)
    results = simulate_ranked_bracket(bracket(CompetitionTier.CRITERIUM), [star, novice], rng)

    assert [r.competitor_id for r in results] == ["star", "novice"]
    winner, last = results
    assert winner.exact_rank == 1
    assert winner.wins == 4
    assert winner.losses == 0
    assert winner.placement_label == "Winner (1st)"
    assert winner.rating_change == 37
    assert winner.is_promoted and winner.is_qualified

    assert last.exact_rank == 16
    assert last.placement_label == "16th"
    assert last.rating_change == -8
    assert last.is_relegated
    assert not last.is_qualified
    assert last.losses >= 1
    assert last.matches_played == last.wins + last.losses


def test_finals_bracket_has_five_rounds(make_competitor, rng):
    star = make_competitor("star", rating=9000)
    results = simulate_ranked_bracket(
        bracket(CompetitionTier.FINALS), [star, make_competitor("x", rating=0)], rng
    )
    assert results[0].wins == 5
    assert not results[0].is_promoted


def test_large_field_grows_the_bracket(make_competitor, rng):
    field = [make_competitor(f"p{i}", rating=1000 + i) for i in range(20)]
    results = simulate_ranked_bracket(bracket(), field, rng)
    ranks = [r.exact_rank for r in results]
    assert len(set(ranks)) == 20
    assert all(1 <= rank <= 32 for rank in ranks)


def test_empty_registrants_give_empty_results(rng):
    for shape in CompetitionShape:
        competition = Competition(id="c", name="c", shape=shape)
        assert simulate_competition(competition, [], rng) == []


# ========== Paired pool ==========


def test_pool_outcomes():
    assert pool_outcome(9) == (1, "1st in pool (Promoted)", "Promoted")
    assert pool_outcome(7) == (2, "2nd in pool (Maintained)", "Maintained")
    assert pool_outcome(5) == (3, "3rd in pool (Maintained)", "Maintained")
    assert pool_outcome(3) == (4, "4th in pool (Relegated)", "Relegated")
    assert pool_outcome(9, finals=True) == (1, "1st in pool (Podium)", "Podium")
    assert pool_outcome(7, finals=True)[2] == "Podium"
    assert pool_outcome(5, finals=True)[2] == "Not classified"


def test_pool_round_against_forfeits(make_competitor, rng):
    first = make_competitor("p1", rating=300)
    second = make_competitor("p2", rating=300)
    tallies = {"p1": MemberTally(), "p2": MemberTally()}
    legs = play_pool_round(
        first,
        second,
        create_ghost_competitor("g1"),
        create_ghost_competitor("g2"),
        tallies,
        rng,
    )
    assert legs == 5
    expected_gain = calculate_point_exchange(300, 0).gain
    for tally in tallies.values():
        # The doubles leg never touches the individual record
        assert tally.wins == 2
        assert tally.losses == 0
        assert tally.rating_change == 2 * expected_gain


@pytest.mark.parametrize(
    "legs_won, points, promoted, relegated",
    [(5, 9, True, False), (3, 9, True, False), (2, 3, False, True), (0, 3, False, True)],
)
def test_pool_points_from_rounds(monkeypatch, make_competitor, rng, legs_won, points, promoted, relegated):
    monkeypatch.setattr(pool_module, "play_pool_round", lambda *args: legs_won)
    competition = Competition(id="youth", name="Youth pairs", team_size=2, level="Regional")
    results = simulate_paired_pool(
        competition, [make_competitor("a"), make_competitor("b")], rng
    )
    assert len(results) == 2
    for result in results:
        assert result.pool_points == points
        assert result.is_promoted is promoted
        assert result.is_relegated is relegated
        assert result.division_level == "Regional"
    assert results[0].partner_name == "Player b"
    assert results[1].partner_name == "Player a"


def test_finals_pool_never_moves_divisions(monkeypatch, make_competitor, rng):
    monkeypatch.setattr(pool_module, "play_pool_round", lambda *args: 0)
    competition = Competition(id="f", name="Finals", team_size=2, tier=CompetitionTier.FINALS)
    results = simulate_paired_pool(competition, [make_competitor("a"), make_competitor("b")], rng)
    assert results[0].placement_label == "4th in pool (Not classified)"
    assert not results[0].is_relegated


def test_pool_plays_six_singles_per_member(make_competitor, rng):
    competition = Competition(id="youth", name="Youth pairs", team_size=2)
    players = [make_competitor(f"p{i}", rating=900) for i in range(4)]
    results = simulate_competition(competition, players, rng)
    assert [r.competitor_id for r in results] == ["p0", "p1", "p2", "p3"]
    for result in results:
        assert result.matches_played == 6
        assert result.wins + result.losses == 6
        assert result.pool_points in (3, 5, 7, 9)
        assert result.is_promoted == (result.pool_points == 9)


def test_odd_pool_entrant_is_dropped(make_competitor, rng, caplog):
    competition = Competition(id="youth", name="Youth pairs", team_size=2)
    players = [make_competitor(f"p{i}") for i in range(3)]
    with caplog.at_level(logging.WARNING, logger="topspin"):
        results = simulate_paired_pool(competition, players, rng)
    assert [r.competitor_id for r in results] == ["p0", "p1"]
    assert "p2" in caplog.text


# ========== Fallback ==========


def test_fallback_winner():
    competition = Competition(id="open", name="Open", max_rating=3000)
    result = simulate_fallback_result(
        _fixed_competitor(3000), competition, FixedRandom(0.9)
    )
    # total = 1 + 0.45, six matches
    assert result.placement_label == "Winner"
    assert result.matches_played == 6
    assert (result.wins, result.losses) == (6, 0)
    assert result.rating_change == 8 * 5 - 6 * 1 + 30


def test_fallback_finalist():
    competition = Competition(id="open", name="Open", max_rating=3000)
    result = simulate_fallback_result(
        _fixed_competitor(3000), competition, FixedRandom(0.5)
    )
    # total = 1.25: floor(6 * 1.25 * 0.6) = 4 wins before the stage bonus
    assert result.placement_label == "Finalist"
    assert (result.wins, result.losses) == (5, 1)
    assert result.rating_change == 8 * 4 - 6 * 2 + 20


def test_fallback_quarterfinal():
    competition = Competition(id="open", name="Open")
    result = simulate_fallback_result(
        _fixed_competitor(2250), competition, FixedRandom(0.0, extra_matches=0)
    )
    # skill 0.75 against the default cap, three matches
    assert result.placement_label == "Quarterfinal"
    assert result.wins == 1
    assert result.wins + result.losses == 3
    assert result.rating_change == 8 * 1 - 6 * 2 + 5


def test_fallback_weak_player_stays_in_pool_stage(make_competitor):
    competition = Competition(id="open", name="Open", level="Club")
    results = simulate_fallback(
        competition, [make_competitor(f"p{i}", rating=0) for i in range(20)], random.Random(3)
    )
    for result in results:
        assert result.placement_label == "Pool stage"
        assert 3 <= result.matches_played <= 6
        assert result.wins <= 1
        assert result.rating_change == 8 * result.wins - 6 * result.losses
        assert result.division_level == "Club"
        assert result.exact_rank is None


def test_fallback_uses_rating_cap_when_uncapped(make_competitor):
    competition = Competition(id="open", name="Open")
    low_cap = simulate_fallback_result(
        make_competitor("p", rating=1000), competition, FixedRandom(0.0), rating_cap=1000
    )
    assert low_cap.placement_label == "Semifinal"
