"""Turning raw user input into filter criteria."""

import re
from collections.abc import Iterable

from domain.exceptions import ValidationFailure
from domain.models import FilterCriteria

MIN_RATING = 800
MAX_RATING = 3500
DEFAULT_RATING = 1200

MIN_QUANTITY = 1
MAX_QUANTITY = 50
DEFAULT_QUANTITY = 10

LEADING_INT = re.compile(r"\s*[+-]?\d+")


def _to_int(value: int | str | None, default: int) -> int:
    """Read the leading integer ("1500abc" -> 1500); empty, zero or garbage gives ``default``."""
    if value is None:
        return default
    match = LEADING_INT.match(str(value))
    if not match:
        return default
    return int(match.group()) or default


def parse_tags(value: str | Iterable[str] | None) -> tuple[str, ...]:
    """Split comma-separated tags, trimming and lowercasing each."""
    if not value:
        return ()

    parts = value.split(",") if isinstance(value, str) else value
    return tuple(tag.strip().lower() for tag in parts if tag and tag.strip())


def build_criteria(
    rating: int | str | None = None,
    quantity: int | str | None = None,
    tags: str | Iterable[str] | None = None,
    exclude_tags: str | Iterable[str] | None = None,
) -> FilterCriteria:
    """
    Validate user input and build criteria for one fetch.

    Raises:
        ValidationFailure: If the rating is outside the supported range
    """
    target_rating = _to_int(rating, DEFAULT_RATING)
    if target_rating < MIN_RATING or target_rating > MAX_RATING:
        raise ValidationFailure(f"Rating must be between {MIN_RATING} and {MAX_RATING}")

    count = min(max(_to_int(quantity, DEFAULT_QUANTITY), MIN_QUANTITY), MAX_QUANTITY)

    return FilterCriteria(
        target_rating=target_rating,
        include_tags=parse_tags(tags),
        exclude_tags=parse_tags(exclude_tags),
        quantity=count,
    )
