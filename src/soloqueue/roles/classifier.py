"""Role classification and rating resolution for queued players.

These helpers turn host data (spent talent points, rating records) into
the flat role and rating values carried by an :class:`Entrant`.
"""

# Solo Queue
# Copyright (C) 2025  Solo Queue developers
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

from typing import Dict, Hashable, Mapping, Optional

from soloqueue.constants import DEFAULT_START_RATING
from soloqueue.models.enums import Role, TalentCategory

# Scan order; on equal points the earlier category wins
CATEGORY_ORDER = (TalentCategory.MELEE, TalentCategory.RANGE, TalentCategory.HEALER)


def tally_talent_points(
    spent: Mapping[Hashable, int],
    tab_categories: Mapping[Hashable, TalentCategory],
) -> Dict[TalentCategory, int]:
    """Sum spent talent points per category.

    Args:
        spent: Points spent per talent tab
        tab_categories: Category of each known talent tab; unknown tabs are ignored

    Returns:
        Points per category, every category present
    """
    totals = {category: 0 for category in CATEGORY_ORDER}
    for tab, points in spent.items():
        category = tab_categories.get(tab)
        if category is not None:
            totals[category] += points
    return totals


def classify_talent_category(points: Mapping[TalentCategory, int]) -> TalentCategory:
    """Pick the category with the most points.

    A category only takes over when it has strictly more points than every
    category scanned before it, so a player with no points is MELEE.
    """
    best = TalentCategory.MELEE
    best_points = 0
    for category in CATEGORY_ORDER:
        count = points.get(category, 0)
        if count > best_points:
            best = category
            best_points = count
    return best


def classify_role(points: Mapping[TalentCategory, int]) -> Role:
    """Collapsed matchmaking role for a talent point distribution."""
    return classify_talent_category(points).to_role()


def resolve_rating(
    queue_rating: int = 0,
    member_rating: Optional[int] = None,
    team_rating: Optional[int] = None,
    start_rating: int = DEFAULT_START_RATING,
) -> int:
    """Resolve the rating used for balancing.

    Args:
        queue_rating: Rating recorded on the queue entry, 0 if unset
        member_rating: Personal matchmaker rating, None if not a team member
        team_rating: Rating of the player's solo team, None if no team exists
        start_rating: Rating for players without any team

    Returns:
        The first meaningful value in that order of precedence
    """
    if queue_rating > 0:
        return queue_rating
    if team_rating is None:
        return start_rating
    if member_rating is not None and member_rating > 0:
        return member_rating
    return team_rating
