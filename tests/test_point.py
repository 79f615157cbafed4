import random

from topspin.models import PlayStyle
from topspin.simulation.point import (
    base_performance,
    classify_point,
    simulate_point,
    style_matchup_bonus,
)


def test_lucky_point_goes_to_stronger_side(make_competitor):
    a = make_competitor("a")
    b = make_competitor("b")
    point = classify_point(600, 500, 0.97, a, b)
    assert point.winner == "A"
    assert point.type == "LUCKY"


def test_ace_needs_technique_above_opponent_tactics(make_competitor):
    a = make_competitor("a")
    b = make_competitor("b", level=40)
    point = classify_point(600, 500, 0.92, a, b)
    assert point.type == "ACE"
    assert point.winner == "A"

    even = make_competitor("c")
    point = classify_point(600, 500, 0.92, a, even)
    assert point.type == "WINNER"
    assert point.winner == "A"


def test_unforced_error_hands_point_to_weaker_side(make_competitor):
    a = make_competitor("a")
    b = make_competitor("b")
    point = classify_point(600, 500, 0.05, a, b)
    assert point.type == "UNFORCED_ERROR"
    assert point.winner == "B"
    assert "Player" in point.description


def test_tie_favours_side_b(make_competitor):
    a = make_competitor("a")
    b = make_competitor("b")
    point = classify_point(500, 500, 0.5, a, b)
    assert point.winner == "B"
    assert point.type == "WINNER"


def test_threshold_edges(make_competitor):
    a = make_competitor("a")
    b = make_competitor("b")
    # Thresholds are strict: 0.95 is not lucky and 0.10 is not an error
    assert classify_point(600, 500, 0.95, a, b).type == "WINNER"
    assert classify_point(600, 500, 0.10, a, b).type == "WINNER"


def test_classification_is_deterministic(make_competitor):
    a = make_competitor("a")
    b = make_competitor("b", level=30)
    for roll in (0.0, 0.05, 0.3, 0.91, 0.99):
        assert classify_point(700, 650, roll, a, b) == classify_point(700, 650, roll, a, b)


def test_style_matchup_is_antisymmetric():
    assert style_matchup_bonus(PlayStyle.ATTACKER, PlayStyle.BLOCKER) == 30
    assert style_matchup_bonus(PlayStyle.BLOCKER, PlayStyle.ATTACKER) == -30
    assert style_matchup_bonus(PlayStyle.ATTACKER, PlayStyle.DEFENDER) == -30
    assert style_matchup_bonus(PlayStyle.MODERN_DEFENDER, PlayStyle.ATTACKER) == 30
    assert style_matchup_bonus(PlayStyle.ALLROUND, PlayStyle.HITTER) == 0
    for style in PlayStyle:
        for other in PlayStyle:
            assert style_matchup_bonus(style, other) == -style_matchup_bonus(other, style)


def test_base_performance_formula(make_competitor):
    a = make_competitor("a", rating=1000, level=50)
    b = make_competitor("b", rating=800, level=20)
    assert base_performance(a, b) == 1000 * 0.4 + 50 * 1.5 - 20 * 0.5 + 50


def test_simulated_points_are_reproducible(make_competitor):
    a = make_competitor("a", rating=1200)
    b = make_competitor("b", rating=900)
    first = [simulate_point(a, b, random.Random(5)) for _ in range(3)]
    second = [simulate_point(a, b, random.Random(5)) for _ in range(3)]
    assert first == second
    assert all(p.winner in ("A", "B") for p in first)


def test_much_stronger_player_wins_most_points(make_competitor, rng):
    strong = make_competitor("strong", rating=3000, level=90)
    weak = make_competitor("weak", rating=500, level=10)
    wins = sum(simulate_point(strong, weak, rng).winner == "A" for _ in range(500))
    assert wins > 400
