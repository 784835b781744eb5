"""Value objects for problem identification."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProblemIdentifier:
    """Identifies a specific Codeforces problem."""

    contest_id: int
    index: str

    @property
    def problem_id(self) -> str:
        """Compact id as shown to users, e.g. ``1350B1``."""
        return f"{self.contest_id}{self.index}"

    @property
    def key(self) -> tuple[int, str]:
        return (self.contest_id, self.index)

    def __str__(self) -> str:
        """String representation."""
        return f"{self.contest_id}/{self.index}"
