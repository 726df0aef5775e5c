"""Shared defaults and endpoint settings for the sec-api.io client."""

from pydantic import BaseModel, ConfigDict, Field


def _default_sort() -> list[dict[str, dict[str, str]]]:
    return [{"filedAt": {"order": "desc"}}]


class RequestDefaults(BaseModel):
    """Defaults applied by every request builder."""

    model_config = ConfigDict(frozen=True)

    offset: int = 0
    size: int = 50
    max_size: int = 50
    sort: list[dict[str, dict[str, str]]] = Field(default_factory=_default_sort)
    use_auth_header: bool = True
    return_type: str = "text"


class ApiSettings(BaseModel):
    """Base URLs and transport timeout for the remote service."""

    query_url: str = "https://api.sec-api.io"
    directors_url: str = "https://api.sec-api.io/directors-and-board-members"
    full_text_url: str = "https://api.sec-api.io/full-text-search"
    mapping_url: str = "https://api.sec-api.io/mapping"
    extractor_url: str = "https://api.sec-api.io/extractor"
    archive_url: str = "https://archive.sec-api.io"
    pdf_url: str = "https://api.sec-api.io/filing-reader"
    stream_url: str = "wss://stream.sec-api.io"
    timeout_s: float = 30.0


DEFAULTS = RequestDefaults()
