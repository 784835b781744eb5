"""Litestar dependency providers."""

from loguru import logger

from services import ProblemService, create_problem_service


async def provide_problem_service() -> ProblemService:
    """Build a fresh service for each request."""
    logger.debug("Creating problem service for request")
    return create_problem_service()
