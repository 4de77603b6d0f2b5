"""Team split search (phase 3).

Exhaustively enumerates every way to split a selection into two equal teams
and keeps the split with the smallest rating difference that satisfies the
role composition and class stacking constraints. Ties on rating difference
are broken by the number of same-team pairs flagged by the avoidance oracle;
remaining ties keep the first split found in increasing combination order.

The search visits ``C(2n, n)`` partitions (20 for 3v3), which is only
acceptable because team sizes are small and bounded by ``MAX_TEAM_SIZE``.
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

from typing import Iterator, Optional, Sequence

from soloqueue.constants import MAX_STACKING_LEVEL, MAX_TEAM_SIZE, MIN_STACKING_LEVEL
from soloqueue.exceptions import (
    InvalidSelectionException,
    InvalidStackingLevelException,
    InvalidTeamSizeException,
)
from soloqueue.matching.constraints import (
    count_avoid_pairs,
    has_class_stacking_conflict,
    satisfies_role_composition,
)
from soloqueue.models.entrant import Entrant
from soloqueue.models.results import TeamSplitResult
from soloqueue.type_hints import AvoidanceOracle, IndexSet
from soloqueue.utils import setup_logger

logger = setup_logger(__name__)


def iter_team_indices(n: int, team_size: int) -> Iterator[IndexSet]:
    """Yield every ``team_size``-combination of ``range(n)`` in lexicographic order.

    Uses a single fixed-size index array that is advanced in place, the
    same order as ``itertools.combinations(range(n), team_size)``.
    """
    if team_size > n:
        return
    combo = list(range(team_size))
    while True:
        yield tuple(combo)
        # Rightmost position that can still move forward
        pos = team_size - 1
        while pos >= 0 and combo[pos] == n - team_size + pos:
            pos -= 1
        if pos < 0:
            return
        combo[pos] += 1
        for k in range(pos + 1, team_size):
            combo[k] = combo[k - 1] + 1


def complement_indices(team: IndexSet, n: int) -> IndexSet:
    """Indices of ``range(n)`` not in the increasing tuple ``team``."""
    members = set(team)
    return tuple(i for i in range(n) if i not in members)


def _validate_split_arguments(
    selected: Sequence[Entrant], team_size: int, stacking_level: int
) -> None:
    if not 1 <= team_size <= MAX_TEAM_SIZE:
        raise InvalidTeamSizeException(
            f"team_size must be between 1 and {MAX_TEAM_SIZE}, got {team_size}"
        )
    if len(selected) != team_size * 2:
        raise InvalidSelectionException(
            f"Expected {team_size * 2} selected entrants, got {len(selected)}"
        )
    if not MIN_STACKING_LEVEL <= stacking_level <= MAX_STACKING_LEVEL:
        raise InvalidStackingLevelException(
            f"Stacking level must be between {MIN_STACKING_LEVEL} and "
            f"{MAX_STACKING_LEVEL}, got {stacking_level}"
        )


def find_best_team_split(
    selected: Sequence[Entrant],
    team_size: int,
    enforce_roles: bool,
    all_dps_match: bool,
    stacking_level: int = 0,
    class_stack_mask: int = 0,
    avoid: Optional[AvoidanceOracle] = None,
) -> TeamSplitResult:
    """
    Find the most rating-balanced legal split of ``selected`` into two teams.

    Parameters
    ----------
    selected : sequence of Entrant
        Exactly ``2 * team_size`` entrants, usually a selector result.
    team_size : int
        Players per team.
    enforce_roles : bool
        Apply the healer composition rule.
    all_dps_match : bool
        With ``enforce_roles``, require zero healers per team instead of one.
    stacking_level : int
        Class stacking prevention level, 0 (off) through 6.
    class_stack_mask : int
        Classes subject to stacking prevention, 0 means all.
    avoid : callable, optional
        ``avoid(id_a, id_b)`` returns True when the two entrants should not
        share a team. Only used to break rating ties.

    Returns
    -------
    TeamSplitResult
        The best split, or an invalid result with ``NO_VALID_SPLIT``.

    Raises
    ------
    InvalidSelectionException
        If ``selected`` does not hold exactly ``2 * team_size`` entrants.
    InvalidTeamSizeException
        If ``team_size`` is outside ``1..MAX_TEAM_SIZE``.
    InvalidStackingLevelException
        If ``stacking_level`` is outside ``0..6``.
    """
    _validate_split_arguments(selected, team_size, stacking_level)
    n = len(selected)
    ratings = [e.rating for e in selected]
    total_rating = sum(ratings)

    best_team1: Optional[IndexSet] = None
    best_team2: IndexSet = ()
    best_diff = 0
    best_avoid = 0
    evaluated = 0

    for team1 in iter_team_indices(n, team_size):
        team2 = complement_indices(team1, n)
        evaluated += 1

        if enforce_roles and not satisfies_role_composition(
            team1, team2, selected, all_dps_match
        ):
            continue

        if stacking_level > 0 and (
            has_class_stacking_conflict(team1, selected, stacking_level, class_stack_mask)
            or has_class_stacking_conflict(
                team2, selected, stacking_level, class_stack_mask
            )
        ):
            continue

        sum1 = sum(ratings[i] for i in team1)
        diff = abs(total_rating - 2 * sum1)
        avoid_pairs = count_avoid_pairs(team1, selected, avoid) + count_avoid_pairs(
            team2, selected, avoid
        )

        if (
            best_team1 is None
            or diff < best_diff
            or (diff == best_diff and avoid_pairs < best_avoid)
        ):
            best_team1 = team1
            best_team2 = team2
            best_diff = diff
            best_avoid = avoid_pairs

    if best_team1 is None:
        logger.debug("No legal split among %s partitions", evaluated)
        return TeamSplitResult.invalid()

    logger.debug(
        "Best split %s vs %s: rating diff %s, avoid pairs %s",
        best_team1,
        best_team2,
        best_diff,
        best_avoid,
    )
    return TeamSplitResult(
        valid=True,
        team1=best_team1,
        team2=best_team2,
        rating_diff=best_diff,
        avoid_pairs=best_avoid,
    )
