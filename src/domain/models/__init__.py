"""Domain models package."""

from .identifiers import ProblemIdentifier
from .problem import (
    EnrichedProblem,
    FilterCriteria,
    ProblemRecord,
    ProblemStatistic,
    ProblemsetData,
)

__all__ = [
    "EnrichedProblem",
    "FilterCriteria",
    "ProblemIdentifier",
    "ProblemRecord",
    "ProblemStatistic",
    "ProblemsetData",
]
