"""Result data classes for candidate selection and team splitting."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from soloqueue.models.entrant import Entrant
from soloqueue.models.enums import FailureReason
from soloqueue.type_hints import EntrantId, IndexSet


@dataclass(frozen=True, slots=True)
class SelectionResult:
    """Outcome of candidate selection for a single match.

    Attributes
    ----------
    selected : tuple of Entrant
        Exactly ``2 * team_size`` entrants on success, empty on failure.
    all_dps_match : bool
        True when one of the timed all-DPS fallbacks produced the selection.
    failure : FailureReason or None
        Why no selection could be made, ``None`` on success.
    """

    selected: Tuple[Entrant, ...] = ()
    all_dps_match: bool = False
    failure: Optional[FailureReason] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def failed(cls, reason: FailureReason) -> "SelectionResult":
        return cls(failure=reason)


@dataclass(frozen=True, slots=True)
class TeamSplitResult:
    """Best split of a selection into two teams.

    Attributes
    ----------
    valid : bool
        False when constraints eliminated every partition.
    team1 : tuple of int
        Increasing indices into the selection for team 1.
    team2 : tuple of int
        Complement of ``team1``, also increasing.
    rating_diff : int
        ``|sum(team1 ratings) - sum(team2 ratings)|``.
    avoid_pairs : int
        Same-team pairs flagged by the avoidance oracle (secondary key).
    failure : FailureReason or None
        ``NO_VALID_SPLIT`` when invalid.
    """

    valid: bool = False
    team1: IndexSet = ()
    team2: IndexSet = ()
    rating_diff: int = 0
    avoid_pairs: int = 0
    failure: Optional[FailureReason] = None

    def __bool__(self) -> bool:
        return self.valid

    @classmethod
    def invalid(cls) -> "TeamSplitResult":
        return cls(valid=False, failure=FailureReason.NO_VALID_SPLIT)


@dataclass(slots=True)
class MatchProposal:
    """A formed match: the selection plus its chosen split.

    Handed back to the queue manager, which moves the entrants out of the
    wait pool.
    """

    selection: SelectionResult
    split: TeamSplitResult
    created_at: int = 0
    match_number: int = 0
    notes: List[str] = field(default_factory=list)

    @property
    def all_dps_match(self) -> bool:
        return self.selection.all_dps_match

    @property
    def rating_diff(self) -> int:
        return self.split.rating_diff

    def team1_entrants(self) -> List[Entrant]:
        return [self.selection.selected[i] for i in self.split.team1]

    def team2_entrants(self) -> List[Entrant]:
        return [self.selection.selected[i] for i in self.split.team2]

    def team_ratings(self) -> Tuple[int, int]:
        """Summed rating of each team."""
        return (
            sum(e.rating for e in self.team1_entrants()),
            sum(e.rating for e in self.team2_entrants()),
        )

    def entrant_ids(self) -> List[EntrantId]:
        return [e.id for e in self.selection.selected]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize proposal to dictionary."""
        return {
            "match_number": self.match_number,
            "created_at": self.created_at,
            "all_dps_match": self.all_dps_match,
            "rating_diff": self.rating_diff,
            "avoid_pairs": self.split.avoid_pairs,
            "team1": [e.to_dict() for e in self.team1_entrants()],
            "team2": [e.to_dict() for e in self.team2_entrants()],
            "notes": list(self.notes),
        }


#  LocalWords:  SelectionResult TeamSplitResult MatchProposal
