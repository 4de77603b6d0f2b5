"""Hard and soft constraints evaluated on candidate teams.

Every function here is a pure predicate over a set of indices into the
selected entrants. The splitter calls each of them once per team for every
enumerated partition, so none of them may keep or mutate state.
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

from typing import Optional, Sequence

from soloqueue.constants import (
    CLASS_DRUID,
    CLASS_NONE,
    GAP_CLASS_MASK_BIT,
    MAX_CONTIGUOUS_CLASS_ID,
    STACKING_ALL,
    STACKING_DPS,
    STACKING_HEALER_DPS,
    STACKING_HEALER_DPS_ALT,
    STACKING_MELEE,
    STACKING_RANGED,
)
from soloqueue.models.entrant import Entrant
from soloqueue.models.enums import Role
from soloqueue.type_hints import AvoidanceOracle

# Levels 2 and 3 name melee-only and ranged-only pairs. With
# the collapsed role model they behave exactly like level 4.
_DPS_PAIR_LEVELS = frozenset({STACKING_MELEE, STACKING_RANGED, STACKING_DPS})
_HEALER_DPS_LEVELS = frozenset({STACKING_HEALER_DPS, STACKING_HEALER_DPS_ALT})


def count_healers(indices: Sequence[int], selected: Sequence[Entrant]) -> int:
    """Number of healers among ``selected[i]`` for ``i`` in ``indices``."""
    return sum(1 for i in indices if selected[i].role is Role.HEALER)


def satisfies_role_composition(
    team1: Sequence[int],
    team2: Sequence[int],
    selected: Sequence[Entrant],
    all_dps_match: bool,
) -> bool:
    """Check the healer count of both teams.

    An all-DPS match must have no healer at all; otherwise each team needs
    exactly one healer.
    """
    h1 = count_healers(team1, selected)
    h2 = count_healers(team2, selected)
    if all_dps_match:
        return h1 == 0 and h2 == 0
    return h1 == 1 and h2 == 1


def class_id_to_mask_bit(class_id: int) -> int:
    """Convert a class id to its stacking-mask bit.

    Classes 1-9 map to ``1 << (class_id - 1)``. Class 11 skips the unused
    slot 10 and maps to bit 10. Anything else has no bit.
    """
    if 1 <= class_id <= MAX_CONTIGUOUS_CLASS_ID:
        return 1 << (class_id - 1)
    if class_id == CLASS_DRUID:
        return GAP_CLASS_MASK_BIT
    return 0


def is_class_conflict(a: Entrant, b: Entrant, level: int) -> bool:
    """Whether two same-class entrants may not share a team at ``level``."""
    if level == STACKING_ALL:
        return True
    if level in _DPS_PAIR_LEVELS:
        return a.role is Role.DPS and b.role is Role.DPS
    if level in _HEALER_DPS_LEVELS:
        return a.role is not b.role
    return False


def has_class_stacking_conflict(
    indices: Sequence[int],
    selected: Sequence[Entrant],
    level: int,
    class_mask: int = 0,
) -> bool:
    """Return True if the team holds a same-class pair that conflicts.

    Args:
        indices: Positions of the team members in ``selected``
        selected: The full selection being split
        level: Stacking prevention level, 0 disables the check
        class_mask: Classes to check, 0 means every class

    Returns:
        True when at least one conflicting pair exists
    """
    if level <= 0:
        return False
    for pos, i in enumerate(indices):
        a = selected[i]
        if a.class_id == CLASS_NONE:
            continue
        for j in indices[pos + 1 :]:
            b = selected[j]
            if a.class_id != b.class_id:
                continue
            if class_mask and not class_mask & class_id_to_mask_bit(a.class_id):
                continue
            if is_class_conflict(a, b, level):
                return True
    return False


def count_avoid_pairs(
    indices: Sequence[int],
    selected: Sequence[Entrant],
    avoid: Optional[AvoidanceOracle],
) -> int:
    """Count same-team pairs the avoidance oracle flags.

    Used only as a tie-break between splits with the same rating difference.
    """
    if avoid is None:
        return 0
    pairs = 0
    for pos, i in enumerate(indices):
        for j in indices[pos + 1 :]:
            if avoid(selected[i].id, selected[j].id):
                pairs += 1
    return pairs
