"""Extracting plain-text statements from Codeforces problem pages."""

from typing import TYPE_CHECKING, Optional

from bs4 import BeautifulSoup, Tag
from loguru import logger

from domain.exceptions import StatementExtractionFailure
from domain.models.identifiers import ProblemIdentifier
from infrastructure.config import DEFAULT_PROBLEM_URL_BASE

from .interfaces import StatementFetcherProtocol
from .url_parser import URLParser

if TYPE_CHECKING:
    from .interfaces import HTTPClientProtocol

UNPARSEABLE_PLACEHOLDER = "[Could not parse problem statement]"

SECTION_SELECTOR = ".header, .time-limit, .memory-limit, .input-specification, .output-specification"


def _text(node: Tag) -> str:
    return node.get_text().strip()


def _collapsed(node: Tag) -> str:
    return " ".join(node.get_text().split())


def extract_statement(html: str) -> str:
    """
    Heuristically turn a problem page into plain text.

    Best effort only: pages that do not follow the usual Codeforces markup
    produce partial output rather than errors.

    Args:
        html: Raw problem page HTML

    Returns:
        Title, limits, specification sections, paragraphs, samples and note
    """
    soup = BeautifulSoup(html, "lxml")

    container = soup.find("div", class_="problem-statement")
    if not container:
        return UNPARSEABLE_PLACEHOLDER

    parts: list[str] = []

    title = container.find(class_="title")
    if title:
        parts.append(_text(title) + "\n\n")

    # .time-limit sits inside .header, so its text appears twice
    for section in container.select(SECTION_SELECTOR):
        parts.append(_collapsed(section) + "\n")

    for paragraph in container.find_all("p"):
        text = _text(paragraph)
        if text:
            parts.append("\n" + text)

    sample_tests = container.find(class_="sample-tests")
    if sample_tests:
        parts.append("\n\n--- Sample Tests ---\n")
        inputs = sample_tests.select(".input pre")
        outputs = sample_tests.select(".output pre")

        for i, input_pre in enumerate(inputs, start=1):
            parts.append(f"\nInput {i}:\n{_text(input_pre)}\n")
            if i <= len(outputs):
                parts.append(f"\nOutput {i}:\n{_text(outputs[i - 1])}\n")

    note = container.find(class_="note")
    if note:
        parts.append("\n\n--- Note ---\n" + _text(note))

    return "".join(parts)


def statement_header(contest_id: int, index: str, name: str) -> str:
    return f"=== {contest_id}{index}: {name} ===\n"


class ProblemPageParser(StatementFetcherProtocol):
    """Fetches problem pages and converts them to plain text."""

    def __init__(
        self,
        http_client: Optional["HTTPClientProtocol"] = None,
        problem_url_base: str = DEFAULT_PROBLEM_URL_BASE,
    ):
        """
        Initialize parser.

        Args:
            http_client: Async HTTP client instance
            problem_url_base: Base of canonical problem URLs
        """
        self.http_client = http_client
        self.problem_url_base = problem_url_base

    async def fetch_statement(self, contest_id: int, index: str, name: str) -> str:
        """
        Fetch and extract one statement.

        Never raises: failures become an inline ``[Error fetching: ...]`` block.
        """
        header = statement_header(contest_id, index, name)
        try:
            return header + await self._fetch_body(contest_id, index)
        except StatementExtractionFailure as e:
            logger.warning(f"Statement for {contest_id}{index} unavailable: {e}")
            return f"{header}[Error fetching: {e}]\n"

    async def _fetch_body(self, contest_id: int, index: str) -> str:
        identifier = ProblemIdentifier(contest_id=contest_id, index=index)
        url = URLParser.build_problem_url(identifier, self.problem_url_base)
        logger.debug(f"Fetching problem statement: {url}")

        if not self.http_client:
            raise StatementExtractionFailure(f"HTTP client not initialized for {url}")

        try:
            html = await self.http_client.get_text(url)
        except Exception as e:
            raise StatementExtractionFailure(str(e)) from e

        try:
            body = extract_statement(html)
        except Exception as e:
            logger.exception(f"Failed to extract statement from {url}")
            raise StatementExtractionFailure(f"Failed to parse problem page {url}: {e}") from e

        if body == UNPARSEABLE_PLACEHOLDER:
            logger.warning(f"No problem statement found on {url}")
        else:
            logger.debug(f"Successfully extracted statement: {identifier}")

        return f"URL: {url}\n\n{body}"
