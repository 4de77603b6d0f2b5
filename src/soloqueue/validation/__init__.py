from soloqueue.validation.match_checker import (
    CriterionResult,
    CriterionStatus,
    MatchChecker,
    ValidationReport,
    create_match_checker,
)

__all__ = [
    "CriterionResult",
    "CriterionStatus",
    "MatchChecker",
    "ValidationReport",
    "create_match_checker",
]
