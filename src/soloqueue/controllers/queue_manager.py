"""Wait pool management for the solo queue.

This module holds the shared, mutable wait pool. On every evaluation tick it
hands an immutable FIFO snapshot to the matchmaking core, then applies the
returned teams by removing the matched entrants from the pool.
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

from typing import Dict, List, Optional, Tuple

from soloqueue.controllers.social import IgnoreRegistry
from soloqueue.exceptions import DuplicateEntrantException, EntrantNotFoundException
from soloqueue.matching.composer import MatchComposer
from soloqueue.models.config import MatchmakingConfig
from soloqueue.models.entrant import Entrant
from soloqueue.models.enums import FailureReason
from soloqueue.models.results import MatchProposal
from soloqueue.type_hints import EntrantId
from soloqueue.utils import setup_logger

logger = setup_logger(__name__)


class QueueManager:
    """Manages the wait pool and forms matches from it.

    This class is responsible for:
    - Tracking queued entrants and their join order
    - Producing FIFO snapshots for the matchmaking core
    - Removing matched entrants and recording formed matches

    It is not thread-safe; callers must serialise access.
    """

    def __init__(
        self,
        config: Optional[MatchmakingConfig] = None,
        ignore_registry: Optional[IgnoreRegistry] = None,
    ):
        """Initialize the queue manager.

        Args:
            config: Matchmaking configuration, defaults if omitted
            ignore_registry: Ignore lists used as the split tie-break
        """
        self.config = config or MatchmakingConfig()
        self.composer = MatchComposer(self.config)
        self.ignore_registry = ignore_registry or IgnoreRegistry()
        self.history: List[MatchProposal] = []
        self.last_failure: Optional[FailureReason] = None
        self._entrants: Dict[EntrantId, Entrant] = {}
        self._arrival = 0
        self._arrival_order: Dict[EntrantId, int] = {}

    def __len__(self) -> int:
        return len(self._entrants)

    def __contains__(self, entrant_id: object) -> bool:
        return entrant_id in self._entrants

    @property
    def matches_formed(self) -> int:
        return len(self.history)

    def join(self, entrant: Entrant) -> None:
        """Add an entrant to the wait pool.

        Raises:
            DuplicateEntrantException: If the entrant is already queued
        """
        if entrant.id in self._entrants:
            raise DuplicateEntrantException(f"Entrant {entrant.id!r} is already queued")
        self._entrants[entrant.id] = entrant
        self._arrival_order[entrant.id] = self._arrival
        self._arrival += 1
        logger.debug(
            f"Entrant {entrant.id!r} joined as {entrant.role.value} "
            f"({len(self._entrants)} waiting)"
        )

    def leave(self, entrant_id: EntrantId) -> Entrant:
        """Remove an entrant from the wait pool.

        Returns:
            The removed entrant

        Raises:
            EntrantNotFoundException: If the entrant is not queued
        """
        entrant = self._entrants.pop(entrant_id, None)
        if entrant is None:
            raise EntrantNotFoundException(f"Entrant {entrant_id!r} is not queued")
        del self._arrival_order[entrant_id]
        logger.debug(f"Entrant {entrant_id!r} left the queue")
        return entrant

    def snapshot(self) -> Tuple[Entrant, ...]:
        """Immutable FIFO view of the wait pool.

        Ordered by join time; equal join times keep arrival order.
        """
        return tuple(
            sorted(
                self._entrants.values(),
                key=lambda e: (e.join_time, self._arrival_order[e.id]),
            )
        )

    def evaluate(self, now: int) -> Optional[MatchProposal]:
        """Try to form one match.

        Args:
            now: Current timestamp in milliseconds

        Returns:
            The formed match, or None if no match is possible yet. The reason
            is kept in ``last_failure``.
        """
        outcome = self.composer.compose(
            self.snapshot(), now, self.ignore_registry.as_oracle()
        )
        if outcome.proposal is None:
            self.last_failure = outcome.failure
            return None

        proposal = outcome.proposal
        proposal.match_number = len(self.history) + 1
        for entrant_id in proposal.entrant_ids():
            self.leave(entrant_id)
        self.history.append(proposal)
        self.last_failure = None

        logger.info(
            f"Match {proposal.match_number} formed at {now}ms, "
            f"{len(self._entrants)} entrant(s) still waiting"
        )
        return proposal

    def drain(self, now: int) -> List[MatchProposal]:
        """Form matches until the pool cannot produce another one."""
        formed = []
        while True:
            proposal = self.evaluate(now)
            if proposal is None:
                return formed
            formed.append(proposal)
