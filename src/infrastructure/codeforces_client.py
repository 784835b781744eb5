"""Client for the Codeforces problemset API."""

from collections.abc import Sequence
from typing import TYPE_CHECKING
from urllib.parse import quote

from loguru import logger

from domain.exceptions import ApiFailure, NetworkFailure
from domain.models import ProblemRecord, ProblemStatistic, ProblemsetData
from infrastructure.config import DEFAULT_API_URL

# Characters encodeURIComponent leaves unescaped, besides alphanumerics and -_.~
URI_COMPONENT_SAFE = "!'()*"

if TYPE_CHECKING:
    from infrastructure.parsers.interfaces import HTTPClientProtocol


class CodeforcesApiClient:
    """Fetches problems and their solve statistics in a single request."""

    def __init__(self, http_client: "HTTPClientProtocol", api_url: str = DEFAULT_API_URL):
        self.http_client = http_client
        self.api_url = api_url

    def build_url(self, include_tags: Sequence[str]) -> str:
        """Build the request URL; tags go in one ``;``-joined, escaped parameter."""
        if not include_tags:
            return self.api_url
        return f"{self.api_url}?tags={quote(';'.join(include_tags), safe=URI_COMPONENT_SAFE)}"

    @staticmethod
    def _with_contest(entries: list[dict]) -> list[dict]:
        """Drop entries without a contestId (e.g. acmsguru problems); they can never match."""
        kept = [entry for entry in entries if entry.get("contestId") is not None]
        if len(kept) != len(entries):
            logger.debug(f"Skipped {len(entries) - len(kept)} entries without contestId")
        return kept

    async def fetch_problems(self, include_tags: Sequence[str] = ()) -> ProblemsetData:
        """
        Fetch the problemset, optionally narrowed server-side by tags.

        Raises:
            NetworkFailure: Transport error or non-2xx status
            ApiFailure: Envelope status other than "OK" or unreadable body
        """
        url = self.build_url(include_tags)
        logger.info(f"Fetching problems from Codeforces: {url}")

        response = await self.http_client.get(url)

        if not 200 <= response.status_code < 300:
            logger.error(f"Codeforces API returned HTTP {response.status_code}")
            raise NetworkFailure(
                f"API request failed: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"Codeforces API returned a non-JSON body: {e}")
            raise ApiFailure("Malformed response from Codeforces API") from e

        if not isinstance(data, dict) or data.get("status") != "OK":
            comment = data.get("comment") if isinstance(data, dict) else None
            logger.error(f"Codeforces API reported failure: {comment}")
            raise ApiFailure(comment or "Failed to fetch problems")

        result = data.get("result") or {}
        problemset = ProblemsetData(
            problems=[
                ProblemRecord.from_api(p) for p in self._with_contest(result.get("problems", []))
            ],
            statistics=[
                ProblemStatistic.from_api(s)
                for s in self._with_contest(result.get("problemStatistics", []))
            ],
        )

        logger.info(
            f"Fetched {len(problemset.problems)} problems and "
            f"{len(problemset.statistics)} statistics"
        )
        return problemset
