"""Parsers for extracting data from external sources."""

from .interfaces import (
    HTTPClientProtocol,
    ProblemsetClientProtocol,
    StatementFetcherProtocol,
    URLParserProtocol,
)
from .problem_page_parser import (
    UNPARSEABLE_PLACEHOLDER,
    ProblemPageParser,
    extract_statement,
)
from .url_parser import URLParser, URLParsingError, parse_problem_url

__all__ = [
    "HTTPClientProtocol",
    "ProblemPageParser",
    "ProblemsetClientProtocol",
    "StatementFetcherProtocol",
    "UNPARSEABLE_PLACEHOLDER",
    "URLParser",
    "URLParserProtocol",
    "URLParsingError",
    "extract_statement",
    "parse_problem_url",
]
