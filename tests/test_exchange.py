import pytest

from topspin.simulation.exchange import calculate_point_exchange, exchange_band


def test_equal_ratings_use_first_band():
    exchange = calculate_point_exchange(1000, 1000)
    assert exchange.gain == 6
    assert exchange.loss == -5


def test_large_upset_uses_last_band():
    exchange = calculate_point_exchange(800, 1400)
    assert exchange.gain == 40
    assert exchange.loss == -29


def test_expected_win_over_large_gap_is_worth_nothing():
    exchange = calculate_point_exchange(1400, 800)
    assert exchange.gain == 0
    assert exchange.loss == 0


@pytest.mark.parametrize(
    "gap, band",
    [(0, 0), (24, 0), (25, 1), (49.5, 1), (50, 2), (299, 5), (300, 6), (499, 7), (500, 8), (5000, 8)],
)
def test_band_boundaries(gap, band):
    assert exchange_band(gap) == band
    assert exchange_band(-gap) == band


def test_upset_rewards_more_than_expected_win():
    for gap in (30, 120, 250, 450):
        expected = calculate_point_exchange(1000 + gap, 1000)
        upset = calculate_point_exchange(1000, 1000 + gap)
        assert upset.gain > expected.gain
        assert upset.loss < expected.loss


def test_signs_hold_everywhere():
    for winner in range(0, 2000, 37):
        for loser in range(0, 2000, 53):
            exchange = calculate_point_exchange(winner, loser)
            assert exchange.gain >= 0
            assert exchange.loss <= 0
