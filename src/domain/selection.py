"""Rating/tag filtering and random sampling of problems."""

import random
from collections.abc import Iterable, Sequence
from typing import TypeVar

from loguru import logger

from domain.models import EnrichedProblem, ProblemRecord, ProblemStatistic

T = TypeVar("T")


def index_statistics(
    statistics: Iterable[ProblemStatistic],
) -> dict[tuple[int, str], ProblemStatistic]:
    """Map (contest_id, index) to its statistic."""
    return {stat.key: stat for stat in statistics}


def matches(problem: ProblemRecord, target_rating: int, exclude_tags: set[str]) -> bool:
    """Check a single problem against the rating and excluded tags."""
    # A missing or zero rating never matches
    if not problem.rating:
        return False

    if problem.rating != target_rating:
        return False

    if exclude_tags:
        problem_tags = {tag.lower() for tag in problem.tags}
        if problem_tags & exclude_tags:
            return False

    return True


def shuffle(items: Sequence[T], rng: random.Random | None = None) -> list[T]:
    """
    Return a shuffled copy of ``items`` (Fisher-Yates).

    Walks from the last position down, swapping position i with a uniformly
    chosen position in [0, i].
    """
    rng = rng or random.Random()
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def select_problems(
    problems: Iterable[ProblemRecord],
    statistics: Iterable[ProblemStatistic],
    target_rating: int,
    exclude_tags: Iterable[str],
    quantity: int,
    rng: random.Random | None = None,
) -> list[EnrichedProblem]:
    """
    Filter problems by exact rating and excluded tags, then sample.

    Args:
        problems: Problems returned by the API
        statistics: Solve counts returned alongside the problems
        target_rating: Rating a problem must have exactly
        exclude_tags: Tags (any case) that disqualify a problem
        quantity: Maximum number of problems to return
        rng: Random source, mainly for tests

    Returns:
        At most ``quantity`` problems in random order, with solve counts
    """
    stats_map = index_statistics(statistics)
    excluded = {tag.lower() for tag in exclude_tags}

    filtered = [p for p in problems if matches(p, target_rating, excluded)]
    logger.debug(f"{len(filtered)} problem(s) rated {target_rating} after tag exclusion")

    sampled = shuffle(filtered, rng)[: max(quantity, 0)]

    result = []
    for problem in sampled:
        stat = stats_map.get((problem.contest_id, problem.index))
        result.append(EnrichedProblem.from_record(problem, stat.solved_count if stat else 0))

    return result
