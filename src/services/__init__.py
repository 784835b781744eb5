from services.problem import ProblemService


def create_problem_service() -> ProblemService:
    """Factory function to create problem service with all dependencies."""
    from infrastructure.codeforces_client import CodeforcesApiClient
    from infrastructure.config import get_settings
    from infrastructure.http_client import AsyncHTTPClient
    from infrastructure.parsers import ProblemPageParser

    settings = get_settings()

    # Create infrastructure dependencies
    http_client = AsyncHTTPClient(timeout=settings.http_timeout, impersonate=settings.impersonate)
    api_client = CodeforcesApiClient(http_client, api_url=settings.api_url)
    statement_fetcher = ProblemPageParser(http_client, problem_url_base=settings.problem_url_base)

    return ProblemService(
        api_client=api_client,
        statement_fetcher=statement_fetcher,
        statement_delay=settings.statement_delay,
    )


__all__ = ["ProblemService", "create_problem_service"]
