"""Protocol interfaces for parsers and clients."""

from collections.abc import Sequence
from typing import Protocol

from curl_cffi.requests import Response

from domain.models import ProblemIdentifier, ProblemsetData


class URLParserProtocol(Protocol):
    """Protocol for URL parsing."""

    @classmethod
    def parse(cls, url: str) -> ProblemIdentifier:
        """Parse URL to extract problem identifier."""
        ...

    @classmethod
    def build_problem_url(cls, identifier: ProblemIdentifier, base: str = ...) -> str:
        """Build problem URL from identifier."""
        ...


class StatementFetcherProtocol(Protocol):
    """Protocol for fetching plain-text problem statements."""

    async def fetch_statement(self, contest_id: int, index: str, name: str) -> str:
        """Fetch a statement; never raises."""
        ...


class ProblemsetClientProtocol(Protocol):
    """Protocol for the Codeforces problemset API client."""

    async def fetch_problems(self, include_tags: Sequence[str] = ()) -> ProblemsetData:
        """Fetch problems and statistics."""
        ...


class HTTPClientProtocol(Protocol):
    """Protocol for HTTP client."""

    async def get(self, url: str) -> Response:
        """GET a URL."""
        ...

    async def get_text(self, url: str) -> str:
        """Get text content from URL."""
        ...
