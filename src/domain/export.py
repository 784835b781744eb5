"""Text helpers for problem cards and clipboard exports."""

from collections.abc import Iterable

from domain.models import EnrichedProblem

STATEMENT_SEPARATOR = "\n\n" + "=" * 60 + "\n\n"

NO_RESULTS_MESSAGE = "No problems found matching your criteria. Try adjusting the rating or tags."


def format_problem_ids(problems: Iterable[EnrichedProblem]) -> str:
    return "\n".join(problem.problem_id for problem in problems)


def join_statements(statements: Iterable[str]) -> str:
    return STATEMENT_SEPARATOR.join(statements)


def rating_class(rating: int | None) -> str | None:
    """CSS class for a rating badge, rounded down to the nearest hundred."""
    if rating is None:
        return None
    return f"rating-{rating // 100 * 100}"


def format_count(num: int) -> str:
    """Shorten large counts: 1234 -> 1.2K, 2500000 -> 2.5M."""
    if num >= 1_000_000:
        return f"{num / 1_000_000:.1f}M"
    if num >= 1_000:
        return f"{num / 1_000:.1f}K"
    return str(num)


def results_label(count: int) -> str:
    return f"{count} problem{'s' if count != 1 else ''} found"
