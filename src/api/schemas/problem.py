"""Pydantic schemas for problem API endpoints."""

from pydantic import BaseModel

from domain.export import format_count, rating_class, results_label
from domain.models import EnrichedProblem
from domain.session import SessionState


class ProblemCardResponse(BaseModel):
    """One problem card."""

    id: str  # e.g. "1350B1"
    contest_id: int
    index: str
    name: str
    url: str
    rating: int | None = None
    rating_class: str | None = None  # CSS class for the rating badge
    tags: list[str]
    solved_count: int
    solved_label: str  # e.g. "12.3K"

    class Config:
        from_attributes = True

    @classmethod
    def from_problem(cls, problem: EnrichedProblem, url: str) -> "ProblemCardResponse":
        return cls(
            id=problem.problem_id,
            contest_id=problem.contest_id,
            index=problem.index,
            name=problem.name,
            url=url,
            rating=problem.rating,
            rating_class=rating_class(problem.rating),
            tags=list(problem.tags),
            solved_count=problem.solved_count,
            solved_label=format_count(problem.solved_count),
        )


class ProblemSetResponse(BaseModel):
    """Result of one fetch action."""

    problems: list[ProblemCardResponse]
    count: int
    results_label: str | None = None
    message: str | None = None  # Set when nothing matched
    problem_ids: str  # Newline-joined ids for the clipboard
    statements: str | None = None  # Joined statements, when requested


class StatementRequest(BaseModel):
    """Request for a single problem statement."""

    url: str
    name: str | None = None


class StatementResponse(BaseModel):
    """Plain-text statement for a single problem."""

    problem_id: str
    url: str
    statement: str


class ErrorResponse(BaseModel):
    """Plain-text error shown to the user."""

    error: str


def build_problem_set_response(
    session: SessionState, problem_urls: list[str], with_statements: bool
) -> ProblemSetResponse:
    cards = [
        ProblemCardResponse.from_problem(problem, url)
        for problem, url in zip(session.problems, problem_urls)
    ]
    return ProblemSetResponse(
        problems=cards,
        count=len(cards),
        results_label=results_label(len(cards)) if cards else None,
        message=session.message,
        problem_ids=session.problem_ids,
        statements=session.statements_text if with_statements and session.statements else None,
    )
