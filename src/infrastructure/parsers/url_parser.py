"""Parser for Codeforces problem URLs."""

import re
from urllib.parse import urlparse

from loguru import logger

from domain.models.identifiers import ProblemIdentifier
from infrastructure.config import DEFAULT_PROBLEM_URL_BASE

from .interfaces import URLParserProtocol


class URLParsingError(ValueError):
    """Invalid URL format or unable to parse URL."""

    pass


class URLParser(URLParserProtocol):
    """Parser for Codeforces problem URL formats."""

    # problemset/problem/1234/A and contest/1234/problem/A
    PROBLEMSET_PATTERN = r"codeforces\.(?:com|ru)/problemset/problem/(\d+)/([A-Za-z]\d*)"
    CONTEST_PATTERN = r"codeforces\.(?:com|ru)/contest/(\d+)/problem/([A-Za-z]\d*)"

    @classmethod
    def parse(cls, url: str) -> ProblemIdentifier:
        """
        Parse Codeforces problem URL and extract problem identifier.
        """
        logger.debug(f"Parsing URL: {url}")

        parsed = urlparse(url)
        if not parsed.scheme or not parsed.netloc:
            raise URLParsingError(f"Invalid URL format: {url}")

        for pattern in (cls.PROBLEMSET_PATTERN, cls.CONTEST_PATTERN):
            match = re.search(pattern, url)
            if match:
                contest_id, index = match.groups()
                identifier = ProblemIdentifier(contest_id=int(contest_id), index=index.upper())
                logger.debug(f"Parsed URL to problem: {identifier}")
                return identifier

        raise URLParsingError(
            f"Unrecognized Codeforces URL format: {url}. "
            "Expected format: https://codeforces.com/problemset/problem/<contest_id>/<index>"
        )

    @classmethod
    def build_problem_url(
        cls, identifier: ProblemIdentifier, base: str = DEFAULT_PROBLEM_URL_BASE
    ) -> str:
        """
        Build problem URL from identifier.
        """
        url = f"{base}/{identifier.contest_id}/{identifier.index}"

        logger.debug(f"Built problem URL: {url}")
        return url


def parse_problem_url(url: str) -> ProblemIdentifier:
    """Convenience wrapper around ``URLParser.parse``."""
    return URLParser.parse(url)
