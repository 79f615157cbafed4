"""Doubles composer: averages two competitors into one transient side."""

# Topspin
# Copyright (C) 2025  Topspin developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from topspin.constants import DOUBLES_NAME
from topspin.models.competitor import Attributes, Competitor, PlayStyle


def create_doubles_pair(first: Competitor, second: Competitor, pair_id: str) -> Competitor:
    """Build the composite competitor that plays a doubles leg.

    The composite is never rated or stored; it only lives for one match.
    It forfeits like a ghost only when both members are ghosts.
    """
    return Competitor(
        id=pair_id,
        name=DOUBLES_NAME,
        rating=(first.rating + second.rating) / 2,
        attributes=Attributes.mean(first.attributes, second.attributes),
        style=PlayStyle.ALLROUND,
        fatigue=(first.fatigue + second.fatigue) / 2,
        is_placeholder=first.is_placeholder and second.is_placeholder,
        is_composite=True,
        member_ids=(first.id, second.id),
    )
