"""Full-text search across EDGAR filing documents."""

from typing import Any

from secio.base import BaseApi, auth_placement
from secio.models import ApiRequest, FullTextSearchOptions, Result


def build_full_text_payload(query: str, options: FullTextSearchOptions) -> dict[str, Any]:
    """
    Build the JSON body for a full-text search.

    Only filters that were supplied appear as keys. A start date without an
    end date (or the reverse) is sent as given.
    """
    payload: dict[str, Any] = {"query": query}

    if options.form_types:
        payload["formTypes"] = list(options.form_types)

    if options.start_date is not None:
        payload["startDate"] = str(options.start_date)
    if options.end_date is not None:
        payload["endDate"] = str(options.end_date)

    if options.ciks is not None:
        payload["ciks"] = list(options.ciks)

    # The service expects the page number as a string
    if options.page is not None:
        payload["page"] = str(options.page)

    return payload


def build_full_text_request(url: str, query: str, options: FullTextSearchOptions) -> ApiRequest:
    headers, params = auth_placement(options.api_key, options.use_auth_header)
    return ApiRequest(
        method="POST",
        url=url,
        headers=headers,
        params=params,
        body=build_full_text_payload(query, options),
    )


def exact_phrase_query(phrase: str) -> str:
    return f'"{phrase}"'


def any_of_query(terms: list[str]) -> str:
    return " OR ".join(exact_phrase_query(term) for term in terms)


class FullTextSearchApi(BaseApi):
    """Client for the full-text search endpoint."""

    def search(self, query: str, options: FullTextSearchOptions) -> Result:
        """
        Search filing text.

        Args:
            query: Search term or phrase
            options: Credential and optional form type, date, CIK and page filters

        Returns:
            Ok with {"total": ..., "filings": [...]} on success, Err otherwise
        """
        return self._dispatch(build_full_text_request(self._settings.full_text_url, query, options))

    def search_exact_phrase(self, phrase: str, options: FullTextSearchOptions) -> Result:
        """Search for the phrase wrapped in double quotes."""
        return self.search(exact_phrase_query(phrase), options)

    def search_wildcard(self, term: str, options: FullTextSearchOptions) -> Result:
        """Search for words starting with ``term``."""
        return self.search(f"{term}*", options)

    def search_any_of(self, terms: list[str], options: FullTextSearchOptions) -> Result:
        """Search for any of the quoted terms, joined with OR."""
        return self.search(any_of_query(terms), options)
