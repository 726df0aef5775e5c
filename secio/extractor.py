"""Extractor API: pull a single section out of a 10-K, 10-Q or 8-K filing.

Every request is checked before it leaves the process:

1. the filing type is taken from ``force_filing_type`` or inferred from the URL,
2. the item must be one of the sections defined for that filing type,
3. the return type must be ``text`` or ``html``.

A forced filing type outside ``10-K``/``10-Q``/``8-K`` raises
:class:`InvalidArgumentError`; the other failures come back as ``Err``.
"""

import logging

from secio.base import BaseApi, auth_placement
from secio.models import (
    ApiRequest,
    Err,
    ExtractOptions,
    FilingType,
    InvalidArgumentError,
    Ok,
    Result,
)

logger = logging.getLogger(__name__)

TEN_K_ITEMS = frozenset(
    ["1", "1A", "1B", "1C", "2", "3", "4", "5", "6", "7", "7A", "8", "9", "9A", "9B", "10", "11", "12", "13", "14", "15"]
)
TEN_Q_ITEMS = frozenset(
    [
        "part1item1", "part1item2", "part1item3", "part1item4",
        "part2item1", "part2item1a", "part2item2", "part2item3", "part2item4", "part2item5", "part2item6",
    ]
)
EIGHT_K_ITEMS = frozenset(
    [
        "1-1", "1-2", "1-3", "1-4", "1-5",
        "2-1", "2-2", "2-3", "2-4", "2-5", "2-6",
        "3-1", "3-2", "3-3",
        "4-1", "4-2",
        "5-1", "5-2", "5-3", "5-4", "5-5", "5-6", "5-7", "5-8",
        "6-1", "6-2", "6-3", "6-4", "6-5", "6-6", "6-10",
        "7-1", "8-1", "9-1", "signature",
    ]
)

VALID_ITEMS: dict[FilingType, frozenset[str]] = {
    FilingType.TEN_K: TEN_K_ITEMS,
    FilingType.TEN_Q: TEN_Q_ITEMS,
    FilingType.EIGHT_K: EIGHT_K_ITEMS,
}

# Checked in order; first match wins
URL_MARKERS: list[tuple[FilingType, tuple[str, ...]]] = [
    (FilingType.TEN_K, ("10-k", "10k")),
    (FilingType.TEN_Q, ("10-q", "10q")),
    (FilingType.EIGHT_K, ("8-k", "8k")),
]

RETURN_TYPES = ("text", "html")

UNKNOWN_FILING_TYPE = "Cannot determine filing type from URL"
INVALID_ITEM = "Invalid item for filing type"
INVALID_RETURN_TYPE = "Invalid return type"


def determine_filing_type(url: str) -> Result:
    """
    Infer the filing type from markers in the filing URL.

    Args:
        url: Filing document URL (matched case-insensitively)

    Returns:
        Ok(FilingType) or Err with UNKNOWN_FILING_TYPE
    """
    lowered = url.lower()
    for filing_type, markers in URL_MARKERS:
        if any(marker in lowered for marker in markers):
            return Ok(value=filing_type)
    return Err(error=UNKNOWN_FILING_TYPE)


def parse_forced_filing_type(label: str) -> FilingType:
    """
    Convert a caller-supplied label into a FilingType.

    Raises:
        InvalidArgumentError: If the label is not exactly "10-K", "10-Q" or "8-K"
    """
    try:
        return FilingType(label)
    except ValueError:
        raise InvalidArgumentError(
            f"Invalid force_filing_type {label!r}; expected one of {[t.value for t in FilingType]}"
        ) from None


def resolve_filing_type(url: str, force_filing_type: str | None = None) -> Result:
    """Use the forced filing type when given, otherwise infer it from the URL."""
    if force_filing_type is not None:
        return Ok(value=parse_forced_filing_type(force_filing_type))
    return determine_filing_type(url)


def validate_item(filing_type: FilingType, item: str) -> Result:
    if item in VALID_ITEMS[filing_type]:
        return Ok(value=item)
    return Err(error=INVALID_ITEM)


def validate_return_type(return_type: str) -> Result:
    if return_type in RETURN_TYPES:
        return Ok(value=return_type)
    return Err(error=INVALID_RETURN_TYPE)


def filing_type_label(filing_type: FilingType) -> str:
    """Human-readable label sent to the service, e.g. "10-K"."""
    return filing_type.value


def build_extract_request(base_url: str, url: str, item: str, options: ExtractOptions) -> ApiRequest:
    """
    Build the GET request for an extraction that has already been validated.

    When the filing type is forced its label is sent as ``filingType``.
    """
    headers, params = auth_placement(options.api_key, options.use_auth_header)
    params.update({"url": url, "item": item, "type": options.return_type})
    if options.force_filing_type is not None:
        params["filingType"] = filing_type_label(parse_forced_filing_type(options.force_filing_type))
    return ApiRequest(method="GET", url=base_url, headers=headers, params=params)


class ExtractorApi(BaseApi):
    """Client for the extractor endpoint."""

    def extract(self, url: str, item: str, options: ExtractOptions) -> Result:
        """
        Extract one section from a filing.

        Args:
            url: Filing document URL
            item: Section identifier, e.g. "1A" for 10-K risk factors
            options: Credential, return type and optional forced filing type

        Returns:
            Ok with the section content, or Err describing why nothing was sent

        Raises:
            InvalidArgumentError: If force_filing_type is not a known label
        """
        filing_type = resolve_filing_type(url, options.force_filing_type)
        if not filing_type.is_ok:
            return filing_type

        checked = validate_item(filing_type.value, item)
        if not checked.is_ok:
            logger.debug("Rejected item %r for %s", item, filing_type.value.value)
            return checked

        checked = validate_return_type(options.return_type)
        if not checked.is_ok:
            return checked

        return self._dispatch(build_extract_request(self._settings.extractor_url, url, item, options))
