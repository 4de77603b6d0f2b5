from soloqueue.models.config import MatchmakingConfig, load_config, save_config
from soloqueue.models.entrant import Entrant
from soloqueue.models.enums import FailureReason, Role, TalentCategory
from soloqueue.models.results import MatchProposal, SelectionResult, TeamSplitResult

__all__ = [
    "Entrant",
    "FailureReason",
    "MatchProposal",
    "MatchmakingConfig",
    "Role",
    "SelectionResult",
    "TalentCategory",
    "TeamSplitResult",
    "load_config",
    "save_config",
]
