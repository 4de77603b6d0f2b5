"""Match Checker - independent validation of formed matches.

Re-derives every rule a formed match must satisfy from the wait pool it was
drawn from, without reusing the selector or splitter, so that simulations
and tests can cross-check the matchmaking core.

Criteria
--------
S1  Team shape: two disjoint teams of ``team_size`` covering the selection
S2  Role composition: one healer per team, or none in an all-DPS match
S3  Class stacking: no conflicting same-class pair on a team
S4  Optimality: no legal split has a smaller rating difference
S5  FIFO fairness: selected entrants are the oldest of their role bucket
S6  Fallback timers: every all-DPS entrant has waited long enough
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

from dataclasses import dataclass, field
from enum import Enum
from itertools import combinations
from typing import Dict, List, Optional, Sequence

from soloqueue.matching.constraints import class_id_to_mask_bit, is_class_conflict
from soloqueue.models.config import MatchmakingConfig
from soloqueue.models.entrant import Entrant
from soloqueue.models.enums import Role
from soloqueue.models.results import MatchProposal
from soloqueue.utils import setup_logger

logger = setup_logger(__name__)


class CriterionStatus(Enum):
    """Status of a single criterion check."""

    COMPLIANT = "COMPLIANT"
    VIOLATION = "VIOLATION"
    NOT_APPLICABLE = "NOT_APPLICABLE"


@dataclass
class CriterionResult:
    """Result of validating a single criterion."""

    criterion: str
    status: CriterionStatus
    description: str = ""
    details: Dict[str, object] = field(default_factory=dict)

    @property
    def criterion_id(self) -> str:
        """Extract criterion ID from criterion string."""
        return self.criterion.split(":")[0].strip()

    @property
    def message(self) -> str:
        return self.description


@dataclass
class ValidationReport:
    """Complete validation report for one match."""

    criteria_results: List[CriterionResult]
    summary: str = ""

    @property
    def violations(self) -> List[CriterionResult]:
        return [
            r for r in self.criteria_results if r.status is CriterionStatus.VIOLATION
        ]

    @property
    def is_compliant(self) -> bool:
        return not self.violations

    @property
    def compliance_percentage(self) -> float:
        applicable = [
            r
            for r in self.criteria_results
            if r.status is not CriterionStatus.NOT_APPLICABLE
        ]
        if not applicable:
            return 100.0
        compliant = len(applicable) - len(self.violations)
        return (compliant / len(applicable)) * 100.0

    def to_dict(self) -> Dict[str, object]:
        return {
            "summary": self.summary,
            "compliance_percentage": self.compliance_percentage,
            "violations": [
                {
                    "criterion": v.criterion_id,
                    "status": v.status.value,
                    "message": v.message,
                }
                for v in self.violations
            ],
        }


def _rating_diff(team1: Sequence[Entrant], team2: Sequence[Entrant]) -> int:
    return abs(sum(e.rating for e in team1) - sum(e.rating for e in team2))


def _healers(team: Sequence[Entrant]) -> int:
    return sum(1 for e in team if e.role is Role.HEALER)


class MatchChecker:
    """Validates formed matches against the matchmaking rules."""

    def __init__(self, config: MatchmakingConfig):
        self.config = config

    def check(
        self, pool: Sequence[Entrant], proposal: MatchProposal, now: int
    ) -> ValidationReport:
        """Validate one match.

        Args:
            pool: FIFO snapshot the match was drawn from
            proposal: The formed match
            now: Timestamp the match was formed at

        Returns:
            ValidationReport covering criteria S1 to S6
        """
        selected = list(proposal.selection.selected)
        team1 = proposal.team1_entrants()
        team2 = proposal.team2_entrants()

        results = [
            self._check_team_shape(proposal, len(selected)),
            self._check_role_composition(team1, team2, proposal.all_dps_match),
            self._check_class_stacking(team1, team2),
            self._check_optimality(selected, proposal),
            self._check_fifo(pool, selected, proposal.all_dps_match, now),
            self._check_timers(pool, selected, proposal.all_dps_match, now),
        ]
        report = ValidationReport(criteria_results=results)
        if report.is_compliant:
            report.summary = f"Match {proposal.match_number}: all criteria satisfied"
        else:
            ids = ", ".join(v.criterion_id for v in report.violations)
            report.summary = f"Match {proposal.match_number}: violations in {ids}"
            logger.warning(report.summary)
        return report

    def _check_team_shape(self, proposal: MatchProposal, n: int) -> CriterionResult:
        team1, team2 = proposal.split.team1, proposal.split.team2
        size = self.config.team_size
        ok = (
            n == size * 2
            and len(team1) == size
            and len(team2) == size
            and sorted(team1 + team2) == list(range(n))
        )
        return CriterionResult(
            "S1: team shape",
            CriterionStatus.COMPLIANT if ok else CriterionStatus.VIOLATION,
            "" if ok else f"Teams {team1} / {team2} do not partition {n} entrants",
        )

    def _check_role_composition(
        self, team1: List[Entrant], team2: List[Entrant], all_dps_match: bool
    ) -> CriterionResult:
        if not self.config.filter_talents:
            return CriterionResult("S2: role composition", CriterionStatus.NOT_APPLICABLE)
        expected = 0 if all_dps_match else 1
        h1, h2 = _healers(team1), _healers(team2)
        ok = h1 == expected and h2 == expected
        return CriterionResult(
            "S2: role composition",
            CriterionStatus.COMPLIANT if ok else CriterionStatus.VIOLATION,
            "" if ok else f"Healers per team {h1}/{h2}, expected {expected}",
            {"team1_healers": h1, "team2_healers": h2},
        )

    def _team_has_stack(self, team: Sequence[Entrant]) -> Optional[str]:
        level = self.config.prevent_class_stacking
        mask = self.config.class_stack_mask
        for a, b in combinations(team, 2):
            if a.class_id == 0 or a.class_id != b.class_id:
                continue
            if mask and not mask & class_id_to_mask_bit(a.class_id):
                continue
            if is_class_conflict(a, b, level):
                return f"{a.id!r} and {b.id!r} share class {a.class_name}"
        return None

    def _check_class_stacking(
        self, team1: List[Entrant], team2: List[Entrant]
    ) -> CriterionResult:
        if self.config.prevent_class_stacking <= 0:
            return CriterionResult("S3: class stacking", CriterionStatus.NOT_APPLICABLE)
        problem = self._team_has_stack(team1) or self._team_has_stack(team2)
        return CriterionResult(
            "S3: class stacking",
            CriterionStatus.VIOLATION if problem else CriterionStatus.COMPLIANT,
            problem or "",
        )

    def _is_legal(
        self, team1: Sequence[Entrant], team2: Sequence[Entrant], all_dps_match: bool
    ) -> bool:
        if self.config.filter_talents:
            expected = 0 if all_dps_match else 1
            if _healers(team1) != expected or _healers(team2) != expected:
                return False
        if self.config.prevent_class_stacking > 0:
            if self._team_has_stack(team1) or self._team_has_stack(team2):
                return False
        return True

    def _check_optimality(
        self, selected: List[Entrant], proposal: MatchProposal
    ) -> CriterionResult:
        n = len(selected)
        best: Optional[int] = None
        for combo in combinations(range(n), self.config.team_size):
            team1 = [selected[i] for i in combo]
            team2 = [selected[i] for i in range(n) if i not in combo]
            if not self._is_legal(team1, team2, proposal.all_dps_match):
                continue
            diff = _rating_diff(team1, team2)
            if best is None or diff < best:
                best = diff
        ok = best is not None and proposal.rating_diff <= best
        return CriterionResult(
            "S4: optimality",
            CriterionStatus.COMPLIANT if ok else CriterionStatus.VIOLATION,
            ""
            if ok
            else f"Rating diff {proposal.rating_diff}, best legal split is {best}",
            {"best_diff": best},
        )

    def _fallback_timer(self, pool: Sequence[Entrant]) -> int:
        healers = sum(1 for e in pool if e.role is Role.HEALER)
        if healers == 0:
            return self.config.all_dps_timer_ms
        return self.config.single_healer_dps_timer_ms

    def _check_fifo(
        self,
        pool: Sequence[Entrant],
        selected: List[Entrant],
        all_dps_match: bool,
        now: int,
    ) -> CriterionResult:
        chosen = {e.id for e in selected}
        if not self.config.filter_talents:
            buckets = {"any": list(pool)}
        elif all_dps_match:
            wait = self._fallback_timer(pool)
            buckets = {
                "timed DPS": [
                    e
                    for e in pool
                    if e.role is Role.DPS and e.join_time + wait <= now
                ]
            }
        else:
            buckets = {
                role.value: [e for e in pool if e.role is role] for role in Role
            }

        for name, bucket in buckets.items():
            picked = [i for i, e in enumerate(bucket) if e.id in chosen]
            if picked != list(range(len(picked))):
                skipped = next(
                    e.id for i, e in enumerate(bucket) if i < len(picked) and e.id not in chosen
                )
                return CriterionResult(
                    "S5: FIFO fairness",
                    CriterionStatus.VIOLATION,
                    f"{skipped!r} skipped in the {name} bucket",
                )
        return CriterionResult("S5: FIFO fairness", CriterionStatus.COMPLIANT)

    def _check_timers(
        self,
        pool: Sequence[Entrant],
        selected: List[Entrant],
        all_dps_match: bool,
        now: int,
    ) -> CriterionResult:
        if not all_dps_match:
            return CriterionResult("S6: fallback timers", CriterionStatus.NOT_APPLICABLE)
        wait = self._fallback_timer(pool)
        early = [e.id for e in selected if e.waited_ms(now) < wait]
        return CriterionResult(
            "S6: fallback timers",
            CriterionStatus.VIOLATION if early else CriterionStatus.COMPLIANT,
            f"Entrants {early} waited less than {wait}ms" if early else "",
        )


def create_match_checker(config: MatchmakingConfig) -> MatchChecker:
    """Factory for a checker bound to ``config``."""
    return MatchChecker(config)
