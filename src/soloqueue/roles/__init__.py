from soloqueue.roles.classifier import (
    classify_role,
    classify_talent_category,
    resolve_rating,
    tally_talent_points,
)

__all__ = [
    "classify_role",
    "classify_talent_category",
    "resolve_rating",
    "tally_talent_points",
]
