"""Type hints used in Solo Queue."""

from typing import TYPE_CHECKING, Callable, Hashable, Sequence, Tuple

if TYPE_CHECKING:
    from soloqueue.models.entrant import Entrant

# Opaque entrant identifier (player GUID equivalent)
EntrantId = Hashable

# Increasing tuple of positions into a selection
IndexSet = Tuple[int, ...]

# FIFO-ordered view of waiting entrants
Snapshot = Sequence["Entrant"]

# Given two entrant ids, True if they should not be placed on the same team
AvoidanceOracle = Callable[[EntrantId, EntrantId], bool]

#  LocalWords:  IndexSet AvoidanceOracle
