"""Solo Queue - role-aware, rating-balanced matchmaking for solo queues.

The matchmaking core is two pure functions: :func:`select_candidates` picks
a fair, composition-valid subset of the wait pool and
:func:`find_best_team_split` divides it into the most balanced legal teams.
:class:`QueueManager` wires both onto a mutable wait pool.
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

from soloqueue.controllers import IgnoreRegistry, QueueManager
from soloqueue.matching import MatchComposer, find_best_team_split, select_candidates
from soloqueue.models import (
    Entrant,
    FailureReason,
    MatchmakingConfig,
    MatchProposal,
    Role,
    SelectionResult,
    TeamSplitResult,
)

__version__ = "0.1.0"

__all__ = [
    "Entrant",
    "FailureReason",
    "IgnoreRegistry",
    "MatchComposer",
    "MatchProposal",
    "MatchmakingConfig",
    "QueueManager",
    "Role",
    "SelectionResult",
    "TeamSplitResult",
    "find_best_team_split",
    "select_candidates",
]
