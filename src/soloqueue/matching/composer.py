"""Run candidate selection and team splitting for one evaluation tick."""

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

from dataclasses import dataclass
from typing import Optional

from soloqueue.matching.selector import select_candidates
from soloqueue.matching.splitter import find_best_team_split
from soloqueue.models.config import MatchmakingConfig
from soloqueue.models.enums import FailureReason
from soloqueue.models.results import MatchProposal, SelectionResult, TeamSplitResult
from soloqueue.type_hints import AvoidanceOracle, Snapshot
from soloqueue.utils import setup_logger

logger = setup_logger(__name__)


@dataclass(frozen=True, slots=True)
class ComposeOutcome:
    """Either a formed match or the reason none could be formed."""

    proposal: Optional[MatchProposal] = None
    failure: Optional[FailureReason] = None

    def __bool__(self) -> bool:
        return self.proposal is not None


class MatchComposer:
    """Glue between a matchmaking configuration and the two pure phases.

    The composer holds only its configuration, so one instance can be shared
    between queues and called repeatedly with fresh snapshots.
    """

    def __init__(self, config: MatchmakingConfig):
        self.config = config.validate()

    def select(self, candidates: Snapshot, now: int) -> SelectionResult:
        return select_candidates(
            candidates,
            self.config.team_size,
            self.config.filter_talents,
            self.config.all_dps_timer_ms,
            self.config.single_healer_dps_timer_ms,
            now,
        )

    def split(
        self,
        selection: SelectionResult,
        avoid: Optional[AvoidanceOracle] = None,
    ) -> TeamSplitResult:
        return find_best_team_split(
            selection.selected,
            self.config.team_size,
            self.config.filter_talents,
            selection.all_dps_match,
            self.config.prevent_class_stacking,
            self.config.class_stack_mask,
            avoid if self.config.avoid_same_team_ignore else None,
        )

    def compose(
        self,
        candidates: Snapshot,
        now: int,
        avoid: Optional[AvoidanceOracle] = None,
    ) -> ComposeOutcome:
        """Try to form one match from a FIFO snapshot.

        Args:
            candidates: Waiting entrants in FIFO order
            now: Current timestamp in milliseconds
            avoid: Optional oracle flagging pairs that should not be teamed

        Returns:
            ComposeOutcome holding the proposal, or the failure reason
        """
        selection = self.select(candidates, now)
        if not selection:
            return ComposeOutcome(failure=selection.failure)

        split = self.split(selection, avoid)
        if not split:
            logger.debug(
                "Selection of %s entrants has no legal split", len(selection.selected)
            )
            return ComposeOutcome(failure=split.failure)

        proposal = MatchProposal(selection=selection, split=split, created_at=now)
        if selection.all_dps_match:
            proposal.notes.append("all-dps fallback")
        if split.avoid_pairs:
            proposal.notes.append(f"{split.avoid_pairs} ignore pair(s) on same team")

        logger.info(
            f"Formed {self.config.team_size}v{self.config.team_size} match, "
            f"rating diff {split.rating_diff}"
            f"{' (all DPS)' if selection.all_dps_match else ''}"
        )
        return ComposeOutcome(proposal=proposal)
