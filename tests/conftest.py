import random

import pytest

from topspin.models import Attributes, Competitor, PlayStyle, Team


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def make_competitor():
    def _make(competitor_id, rating=1000.0, level=50.0, style=PlayStyle.ALLROUND, **kwargs):
        attributes = Attributes(
            attack=level,
            defense=level,
            speed=level,
            mental=level,
            stamina=level,
            technique=level,
            tactical=level,
        )
        return Competitor(
            id=competitor_id,
            name=f"Player {competitor_id}",
            rating=rating,
            attributes=attributes,
            style=style,
            **kwargs,
        )

    return _make


@pytest.fixture
def make_team(make_competitor):
    def _make(team_id, size=4, rating=1000.0):
        players = [
            make_competitor(f"{team_id}-p{i}", rating=rating) for i in range(size)
        ]
        return Team(id=team_id, name=f"Team {team_id}", players=players)

    return _make
