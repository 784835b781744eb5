"""Litestar application exposing the problem picker."""

from collections.abc import Callable
from typing import Any

from litestar import Litestar, Request, Response, get
from litestar.di import Provide
from litestar.status_codes import HTTP_400_BAD_REQUEST, HTTP_502_BAD_GATEWAY
from loguru import logger

from api.dependencies import provide_problem_service
from api.schemas.problem import ErrorResponse
from api.routes import ProblemController, StatementController
from domain.exceptions import ApiFailure, NetworkFailure, ValidationFailure
from infrastructure.config import get_settings
from infrastructure.logging_config import setup_logging
from infrastructure.parsers import URLParsingError


def _error_response(status_code: int) -> Callable[[Request, Exception], Response]:
    def handler(request: Request, exc: Exception) -> Response:
        logger.warning(f"{request.method} {request.url.path} failed: {exc}")
        body = ErrorResponse(error=str(exc)).model_dump()
        return Response(content=body, status_code=status_code)

    return handler


@get("/health", sync_to_thread=False)
def health() -> dict[str, str]:
    return {"status": "ok"}


def create_app(service_provider: Callable[..., Any] = provide_problem_service) -> Litestar:
    """Build the application; ``service_provider`` can be swapped in tests."""
    settings = get_settings()
    setup_logging(settings.log_level)

    return Litestar(
        route_handlers=[health, ProblemController, StatementController],
        dependencies={"service": Provide(service_provider)},
        exception_handlers={
            ValidationFailure: _error_response(HTTP_400_BAD_REQUEST),
            URLParsingError: _error_response(HTTP_400_BAD_REQUEST),
            NetworkFailure: _error_response(HTTP_502_BAD_GATEWAY),
            ApiFailure: _error_response(HTTP_502_BAD_GATEWAY),
        },
    )


app = create_app()


def main() -> None:
    import uvicorn

    uvicorn.run("app:app", host="127.0.0.1", port=8000)


if __name__ == "__main__":
    main()
