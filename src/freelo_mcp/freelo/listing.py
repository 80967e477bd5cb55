"""Listing responses: bare sequences vs. paginated envelopes.

Some Freelo listings come back as a plain JSON array, others wrapped in a
``{total, count, page, per_page, data}`` envelope, and at least one
(``/all-comments``) has been seen to answer either way. ``parse_listing``
classifies a payload and ``normalize_listing`` turns both shapes into a
``PaginatedResult``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from pydantic import ValidationError

from freelo_mcp.freelo.errors import UnexpectedResponseError
from freelo_mcp.freelo.models import PaginatedResult


@dataclass(frozen=True)
class BareListing:
    items: list[dict[str, Any]]


@dataclass(frozen=True)
class PagedListing:
    result: PaginatedResult


ListingResponse = Union[BareListing, PagedListing]


def parse_listing(payload: Any) -> ListingResponse:
    if isinstance(payload, list):
        return BareListing(items=payload)
    if not isinstance(payload, dict):
        raise UnexpectedResponseError(
            f"Invalid listing response: expected an object or array, got {type(payload).__name__}"
        )
    if not isinstance(payload.get("data"), list):
        raise UnexpectedResponseError(
            f"Invalid listing response: data is not an array, got {type(payload.get('data')).__name__}"
        )
    try:
        return PagedListing(result=PaginatedResult.model_validate(payload))
    except ValidationError as e:
        raise UnexpectedResponseError(f"Invalid listing response: {e}") from e


def normalize_listing(listing: ListingResponse, page: int = 0) -> PaginatedResult:
    if isinstance(listing, BareListing):
        size = len(listing.items)
        return PaginatedResult(total=size, count=size, page=page, per_page=size, data=listing.items)
    return listing.result


def paginate(payload: Any, page: int = 0) -> PaginatedResult:
    """Parse and normalize a raw listing payload in one step."""
    return normalize_listing(parse_listing(payload), page)
