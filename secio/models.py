"""Data models for the sec-api.io client."""

import copy
from datetime import date
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, Field

from secio.config import DEFAULTS


class InvalidArgumentError(ValueError):
    """Raised for caller input that can never be valid, before any request."""


class ResultError(Exception):
    """Raised when unwrapping a failed result."""

    def __init__(self, error: Any) -> None:
        super().__init__(f"Request failed: {error!r}")
        self.error = error


class FilingType(str, Enum):
    """Filing classifications understood by the extractor."""

    TEN_K = "10-K"
    TEN_Q = "10-Q"
    EIGHT_K = "8-K"


class MappingDimension(str, Enum):
    """Lookup dimensions supported by the mapping endpoint."""

    CIK = "cik"
    TICKER = "ticker"
    CUSIP = "cusip"
    NAME = "name"
    EXCHANGE = "exchange"
    SECTOR = "sector"
    INDUSTRY = "industry"


class HttpError(BaseModel):
    """Non-200 response from the service."""

    status: int
    body: Any = None


class Ok(BaseModel):
    """Successful outcome carrying the decoded response payload."""

    value: Any = None
    is_ok: Literal[True] = True

    def unwrap(self) -> Any:
        return self.value


class Err(BaseModel):
    """Failed outcome carrying a transport error, an HttpError or a message."""

    error: Any
    is_ok: Literal[False] = False

    def unwrap(self) -> Any:
        raise ResultError(self.error)


Result = Ok | Err


class _AuthOptions(BaseModel):
    """Credential plus auth placement shared by every request option set."""

    api_key: str = Field(min_length=1, repr=False)
    use_auth_header: bool = DEFAULTS.use_auth_header


class SearchOptions(_AuthOptions):
    """Pagination and sorting for query-style searches."""

    offset: int = Field(default=DEFAULTS.offset, ge=0)
    size: int = Field(default=DEFAULTS.size, ge=1, le=DEFAULTS.max_size)
    sort: list[dict[str, dict[str, str]]] = Field(
        default_factory=lambda: copy.deepcopy(DEFAULTS.sort)
    )


class FullTextSearchOptions(_AuthOptions):
    """Optional filters for a full-text search."""

    form_types: list[str] | None = None
    start_date: date | str | None = None
    end_date: date | str | None = None
    ciks: list[str] | None = None
    page: int | None = None


class MappingOptions(_AuthOptions):
    """Options for mapping lookups."""


class ExtractOptions(_AuthOptions):
    """Options for section extraction.

    ``return_type`` and ``force_filing_type`` are plain strings so that the
    extractor can report bad values itself.
    """

    return_type: str = DEFAULTS.return_type
    force_filing_type: str | None = None


class DownloadOptions(BaseModel):
    """Options for archive downloads and PDF generation."""

    api_key: str = Field(min_length=1, repr=False)


class ApiRequest(BaseModel):
    """Transport-neutral description of one outbound HTTP request."""

    method: Literal["GET", "POST"]
    url: str
    params: dict[str, str] = Field(default_factory=dict)
    headers: dict[str, str] = Field(default_factory=dict, repr=False)
    body: dict[str, Any] | None = None
    raw: bool = False
