"""Per-action state shared between the service and the presentation layer."""

from dataclasses import dataclass, field

from domain.export import format_problem_ids, join_statements
from domain.models import EnrichedProblem


@dataclass
class SessionState:
    """Results of the current fetch action."""

    problems: list[EnrichedProblem] = field(default_factory=list)
    statements: list[str] = field(default_factory=list)
    error: str | None = None
    message: str | None = None

    def clear(self) -> None:
        self.problems = []
        self.statements = []
        self.error = None
        self.message = None

    @property
    def problem_ids(self) -> str:
        return format_problem_ids(self.problems)

    @property
    def statements_text(self) -> str:
        return join_statements(self.statements)
