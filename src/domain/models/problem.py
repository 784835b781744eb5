"""Domain models for Codeforces problems."""

from dataclasses import dataclass, field
from typing import Any

from .identifiers import ProblemIdentifier


@dataclass(frozen=True)
class ProblemRecord:
    """A problem as returned by ``problemset.problems``."""

    contest_id: int
    index: str
    name: str
    rating: int | None = None
    tags: tuple[str, ...] = ()

    @property
    def identifier(self) -> ProblemIdentifier:
        return ProblemIdentifier(contest_id=self.contest_id, index=self.index)

    @property
    def problem_id(self) -> str:
        return self.identifier.problem_id

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "ProblemRecord":
        return cls(
            contest_id=int(data["contestId"]),
            index=str(data["index"]),
            name=data.get("name", ""),
            rating=data.get("rating"),
            tags=tuple(data.get("tags", [])),
        )


@dataclass(frozen=True)
class ProblemStatistic:
    """Solve count for one problem."""

    contest_id: int
    index: str
    solved_count: int = 0

    @property
    def key(self) -> tuple[int, str]:
        return (self.contest_id, self.index)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "ProblemStatistic":
        return cls(
            contest_id=int(data["contestId"]),
            index=str(data["index"]),
            solved_count=int(data.get("solvedCount", 0)),
        )


@dataclass(frozen=True)
class EnrichedProblem:
    """A sampled problem with its solve count attached."""

    contest_id: int
    index: str
    name: str
    rating: int | None
    tags: tuple[str, ...]
    solved_count: int

    @property
    def identifier(self) -> ProblemIdentifier:
        return ProblemIdentifier(contest_id=self.contest_id, index=self.index)

    @property
    def problem_id(self) -> str:
        return self.identifier.problem_id

    @classmethod
    def from_record(cls, record: ProblemRecord, solved_count: int) -> "EnrichedProblem":
        return cls(
            contest_id=record.contest_id,
            index=record.index,
            name=record.name,
            rating=record.rating,
            tags=record.tags,
            solved_count=solved_count,
        )


@dataclass
class ProblemsetData:
    """Raw result of one ``problemset.problems`` call."""

    problems: list[ProblemRecord] = field(default_factory=list)
    statistics: list[ProblemStatistic] = field(default_factory=list)


@dataclass(frozen=True)
class FilterCriteria:
    """User selection for one fetch action."""

    target_rating: int
    include_tags: tuple[str, ...] = ()
    exclude_tags: tuple[str, ...] = ()
    quantity: int = 10
