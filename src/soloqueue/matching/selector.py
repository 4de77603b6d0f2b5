"""Candidate selection (phase 2).

Picks a composition-valid set of entrants for a single match from the
FIFO-ordered wait pool. Within each role bucket the oldest entrants always
go first, so nobody is skipped in favour of a later joiner of the same role.
When the ideal composition cannot be met, timed all-DPS fallbacks trade some
of that fairness for throughput.
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

from typing import List, Sequence, Tuple

from soloqueue.constants import HEALERS_PER_MATCH
from soloqueue.exceptions import InvalidTeamSizeException
from soloqueue.models.entrant import Entrant
from soloqueue.models.enums import FailureReason, Role
from soloqueue.models.results import SelectionResult
from soloqueue.utils import setup_logger

logger = setup_logger(__name__)


def _split_by_role(candidates: Sequence[Entrant]) -> Tuple[List[Entrant], List[Entrant]]:
    """Separate healers and DPS, preserving FIFO order within each bucket."""
    healers: List[Entrant] = []
    dps: List[Entrant] = []
    for c in candidates:
        if c.role is Role.HEALER:
            healers.append(c)
        else:
            dps.append(c)
    return healers, dps


def _timed_dps(dps: Sequence[Entrant], wait_ms: int, now: int) -> List[Entrant]:
    """DPS entrants whose wait timer has elapsed, still in FIFO order."""
    return [c for c in dps if c.join_time + wait_ms <= now]


def select_candidates(
    candidates: Sequence[Entrant],
    team_size: int,
    enforce_roles: bool,
    all_dps_wait_ms: int,
    single_healer_wait_ms: int,
    now: int,
) -> SelectionResult:
    """
    Select the entrants for a single match.

    Parameters
    ----------
    candidates : sequence of Entrant
        All eligible queued entrants, in FIFO order.
    team_size : int
        Players per team.
    enforce_roles : bool
        Enforce one healer per team. When False the oldest
        ``2 * team_size`` entrants are taken regardless of role.
    all_dps_wait_ms : int
        Wait before an all-DPS match is allowed when no healer is queued.
    single_healer_wait_ms : int
        Wait before an all-DPS match is allowed when exactly one healer is
        queued. The lone healer stays in queue.
    now : int
        Current timestamp in milliseconds.

    Returns
    -------
    SelectionResult
        ``2 * team_size`` entrants on success, otherwise a failure of
        ``INSUFFICIENT_PLAYERS`` or ``NO_VALID_COMPOSITION``.

    Raises
    ------
    InvalidTeamSizeException
        If ``team_size`` is not positive.
    """
    if team_size < 1:
        raise InvalidTeamSizeException(f"team_size must be positive, got {team_size}")

    match_size = team_size * 2
    if len(candidates) < match_size:
        logger.debug(
            "Only %s candidates queued, %s needed", len(candidates), match_size
        )
        return SelectionResult.failed(FailureReason.INSUFFICIENT_PLAYERS)

    if not enforce_roles:
        return SelectionResult(selected=tuple(candidates[:match_size]))

    healers, dps = _split_by_role(candidates)

    # A single-player "team" needs no healer
    healers_needed = HEALERS_PER_MATCH if team_size > 1 else 0
    dps_needed = match_size - healers_needed

    if len(healers) >= healers_needed and len(dps) >= dps_needed:
        return SelectionResult(
            selected=tuple(healers[:healers_needed]) + tuple(dps[:dps_needed])
        )

    if not healers:
        wait_ms = all_dps_wait_ms
    elif len(healers) == 1:
        # One healer plus 2n-1 DPS can never be split fairly, so the healer
        # keeps waiting for a second one.
        wait_ms = single_healer_wait_ms
    else:
        logger.debug(
            "No valid composition: %s healers, %s DPS", len(healers), len(dps)
        )
        return SelectionResult.failed(FailureReason.NO_VALID_COMPOSITION)

    timed = _timed_dps(dps, wait_ms, now)
    if len(timed) >= match_size:
        logger.debug(
            "All-DPS fallback with %s healer(s) queued, %s DPS past %sms",
            len(healers),
            len(timed),
            wait_ms,
        )
        return SelectionResult(selected=tuple(timed[:match_size]), all_dps_match=True)

    logger.debug(
        "All-DPS fallback not ready: %s of %s DPS past %sms",
        len(timed),
        match_size,
        wait_ms,
    )
    return SelectionResult.failed(FailureReason.NO_VALID_COMPOSITION)
