"""Service for picking problems and collecting their statements."""

import asyncio
import random
from collections.abc import Sequence

from loguru import logger

from domain.exceptions import ApiFailure, NetworkFailure, StatementExtractionFailure
from domain.export import NO_RESULTS_MESSAGE
from domain.models import EnrichedProblem, FilterCriteria
from domain.selection import select_problems
from domain.session import SessionState
from infrastructure.parsers import ProblemsetClientProtocol, StatementFetcherProtocol


class ProblemService:
    """Runs one fetch action: list, filter, sample, then optional statements."""

    def __init__(
        self,
        *,
        api_client: ProblemsetClientProtocol,
        statement_fetcher: StatementFetcherProtocol,
        statement_delay: float = 0.3,
        rng: random.Random | None = None,
    ):
        """Initialize service with dependencies."""
        self.api_client = api_client
        self.statement_fetcher = statement_fetcher
        self.statement_delay = statement_delay
        self.rng = rng

    async def generate(
        self,
        session: SessionState,
        criteria: FilterCriteria,
        fetch_statements: bool = False,
    ) -> SessionState:
        """
        Fill ``session`` with problems matching ``criteria``.

        Raises:
            NetworkFailure: If the problem list could not be downloaded
            ApiFailure: If Codeforces rejected the request
        """
        session.clear()
        logger.info(
            f"Picking {criteria.quantity} problem(s) rated {criteria.target_rating} "
            f"(tags={list(criteria.include_tags)}, excluded={list(criteria.exclude_tags)})"
        )

        try:
            problemset = await self.api_client.fetch_problems(criteria.include_tags)
        except (NetworkFailure, ApiFailure) as e:
            session.error = str(e)
            raise

        session.problems = select_problems(
            problemset.problems,
            problemset.statistics,
            criteria.target_rating,
            criteria.exclude_tags,
            criteria.quantity,
            rng=self.rng,
        )

        if not session.problems:
            logger.info("No problems matched the criteria")
            session.message = NO_RESULTS_MESSAGE
            return session

        logger.info(f"Selected {len(session.problems)} problem(s)")

        if fetch_statements:
            session.statements = await self.fetch_statements(session.problems)

        return session

    async def fetch_statements(self, problems: Sequence[EnrichedProblem]) -> list[str]:
        """Fetch statements one at a time, pausing between requests."""
        statements: list[str] = []
        total = len(problems)

        for i, problem in enumerate(problems):
            logger.info(f"Fetching statement {i + 1}/{total}: {problem.problem_id}")

            try:
                statement = await self.statement_fetcher.fetch_statement(
                    problem.contest_id, problem.index, problem.name
                )
            except StatementExtractionFailure as e:
                logger.warning(f"Failed to fetch statement for {problem.problem_id}: {e}")
                statement = f"=== {problem.problem_id}: {problem.name} ===\n[Failed to fetch statement]\n"

            statements.append(statement)

            if i < total - 1:
                await asyncio.sleep(self.statement_delay)

        return statements
