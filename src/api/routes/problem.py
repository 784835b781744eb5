"""API routes for picking problems."""

from litestar import Controller, get, post
from litestar.status_codes import HTTP_200_OK
from loguru import logger

from api.schemas.problem import (
    ProblemSetResponse,
    StatementRequest,
    StatementResponse,
    build_problem_set_response,
)
from domain.criteria import build_criteria
from domain.session import SessionState
from infrastructure.config import get_settings
from infrastructure.parsers import URLParser
from services import ProblemService


class ProblemController(Controller):
    """Controller for problem selection."""

    path = "/problems"

    @get("/", status_code=HTTP_200_OK)
    async def get_problems(
        self,
        service: ProblemService,
        rating: str | None = None,
        quantity: str | None = None,
        tags: str | None = None,
        exclude_tags: str | None = None,
        fetch_statements: bool = False,
    ) -> ProblemSetResponse:
        """
        Pick random problems with an exact rating.

        Query parameters:
        - rating: Target rating, 800-3500 (default 1200)
        - quantity: Number of problems, clamped to 1-50 (default 10)
        - tags: Comma-separated tags every problem must have
        - exclude_tags: Comma-separated tags no problem may have
        - fetch_statements: Also scrape each problem's statement
        """
        logger.debug(
            f"API request for problems: rating={rating}, quantity={quantity}, "
            f"tags={tags}, exclude_tags={exclude_tags}, fetch_statements={fetch_statements}"
        )

        # Raises ValidationFailure before anything touches the network
        criteria = build_criteria(rating, quantity, tags, exclude_tags)

        session = await service.generate(SessionState(), criteria, fetch_statements)

        base = get_settings().problem_url_base
        urls = [URLParser.build_problem_url(p.identifier, base) for p in session.problems]
        return build_problem_set_response(session, urls, fetch_statements)


class StatementController(Controller):
    """Controller for single statements."""

    path = "/statement"

    @post("/", status_code=HTTP_200_OK)
    async def get_statement(
        self, data: StatementRequest, service: ProblemService
    ) -> StatementResponse:
        """
        Get the plain-text statement for a problem URL.

        The statement text always comes back, with an inline error block when
        the page could not be fetched or read.
        """
        logger.debug(f"API request for statement: url={data.url}")

        identifier = URLParser.parse(data.url)
        statement = await service.statement_fetcher.fetch_statement(
            identifier.contest_id, identifier.index, data.name or identifier.problem_id
        )

        return StatementResponse(
            problem_id=identifier.problem_id,
            url=URLParser.build_problem_url(identifier, get_settings().problem_url_base),
            statement=statement,
        )

