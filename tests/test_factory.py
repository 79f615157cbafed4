import random
from datetime import date

import pytest

from topspin.exceptions import InvalidCompetitorDataException
from topspin.models import (
    Attributes,
    Competitor,
    CompetitorFactory,
    PlayStyle,
    create_ghost_competitor,
    rating_from_attributes,
)


def test_rating_from_attributes():
    assert rating_from_attributes(Attributes()) == 500
    attributes = Attributes(attack=10, defense=10, speed=10, mental=10, technique=10, tactical=10)
    assert rating_from_attributes(attributes) == 500 + 10 * (3.5 + 3 + 3 + 4 + 3.5 + 3)


def test_ghost_competitor():
    ghost = create_ghost_competitor("g1")
    assert ghost.id == "g1"
    assert ghost.rating == 0
    assert ghost.is_placeholder
    assert ghost.attributes == Attributes()


def test_random_competitor_bounds():
    factory = CompetitorFactory(rng=random.Random(21))
    for i in range(200):
        competitor = factory.create_random_competitor(f"r{i}", 1200)
        assert 1170 <= competitor.rating < 1230
        assert 6 <= competitor.age <= 50
        assert competitor.gender in ("M", "F")
        assert isinstance(competitor.style, PlayStyle)
        for name in ("attack", "defense", "speed", "mental", "technique", "tactical"):
            assert 10 <= getattr(competitor.attributes, name) <= 99
        assert 60 <= competitor.attributes.stamina < 100


def test_random_competitor_rating_floor():
    factory = CompetitorFactory(rng=random.Random(4))
    for i in range(50):
        assert factory.create_random_competitor(f"r{i}", 100).rating >= 500


def test_random_competitor_is_reproducible():
    first = CompetitorFactory(rng=random.Random(8)).create_random_competitor("x", 900, age=12)
    second = CompetitorFactory(rng=random.Random(8)).create_random_competitor("x", 900, age=12)
    assert first == second
    assert first.age == 12


def test_create_competitor_estimates_missing_rating():
    factory = CompetitorFactory()
    competitor = factory.create_competitor("Ana Silva", attributes=Attributes(attack=20))
    assert competitor.rating == 570
    assert competitor.first_name == "Ana"


def test_strict_factory_rejects_bad_rating():
    with pytest.raises(InvalidCompetitorDataException):
        CompetitorFactory(strict=True).create_competitor("Bad", rating=-5)
    lenient = CompetitorFactory().create_competitor("Bad", rating=-5)
    assert lenient.rating == 500


def test_competitor_from_dict():
    factory = CompetitorFactory()
    competitor = factory.create_competitor_from_dict(
        {
            "id": "c1",
            "name": "Jo Lee",
            "attributes": {"attack": 40},
            "style": "attacker",
            "date_of_birth": "2010-03-15",
        }
    )
    assert competitor.id == "c1"
    assert competitor.rating == 640
    assert competitor.style == PlayStyle.ATTACKER
    assert competitor.age_on(date(2025, 3, 14)) == 14
    assert competitor.age_on(date(2025, 3, 15)) == 15
    assert Competitor.from_dict(competitor.to_dict()) == competitor


def test_competitor_from_dict_errors():
    factory = CompetitorFactory()
    with pytest.raises(InvalidCompetitorDataException):
        factory.create_competitor_from_dict({"name": "X", "rating": "lots"})
    with pytest.raises(InvalidCompetitorDataException):
        Competitor.from_dict({"rating": 1000})
    with pytest.raises(InvalidCompetitorDataException):
        Competitor.from_dict({"name": "X", "attributes": {"power": 5}})
    with pytest.raises(InvalidCompetitorDataException):
        Competitor.from_dict({"name": "X", "style": "penhold"})
