"""Candidate selection and team split search."""

from soloqueue.matching.composer import ComposeOutcome, MatchComposer
from soloqueue.matching.constraints import (
    class_id_to_mask_bit,
    count_avoid_pairs,
    count_healers,
    has_class_stacking_conflict,
    is_class_conflict,
    satisfies_role_composition,
)
from soloqueue.matching.selector import select_candidates
from soloqueue.matching.splitter import (
    complement_indices,
    find_best_team_split,
    iter_team_indices,
)

__all__ = [
    "ComposeOutcome",
    "MatchComposer",
    "class_id_to_mask_bit",
    "complement_indices",
    "count_avoid_pairs",
    "count_healers",
    "find_best_team_split",
    "has_class_stacking_conflict",
    "is_class_conflict",
    "iter_team_indices",
    "satisfies_role_composition",
    "select_candidates",
]
