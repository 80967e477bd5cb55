from freelo_mcp.freelo.client import DEFAULT_BASE_URL, FreeloClient
from freelo_mcp.freelo.errors import (
    FreeloAPIError,
    FreeloAuthenticationError,
    FreeloNotFoundError,
    FreeloPermissionError,
    FreeloRateLimitError,
    FreeloValidationError,
    UnexpectedResponseError,
)
from freelo_mcp.freelo.listing import (
    BareListing,
    ListingResponse,
    PagedListing,
    normalize_listing,
    paginate,
    parse_listing,
)

__all__ = [
    "DEFAULT_BASE_URL",
    "FreeloClient",
    "FreeloAPIError",
    "FreeloAuthenticationError",
    "FreeloNotFoundError",
    "FreeloPermissionError",
    "FreeloRateLimitError",
    "FreeloValidationError",
    "UnexpectedResponseError",
    "BareListing",
    "ListingResponse",
    "PagedListing",
    "normalize_listing",
    "paginate",
    "parse_listing",
]
