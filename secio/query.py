"""Query API and Directors & Board Members API."""

from datetime import date

from secio.base import BaseApi, auth_placement
from secio.models import ApiRequest, Result, SearchOptions


def build_search_request(url: str, query: str, options: SearchOptions) -> ApiRequest:
    """
    Build the POST request for a query-syntax search.

    Args:
        url: Search endpoint
        query: Query string in the service's Lucene-like syntax
        options: Credential, pagination and sort

    Returns:
        ApiRequest with a {query, from, size, sort} JSON body
    """
    headers, params = auth_placement(options.api_key, options.use_auth_header)
    payload = {
        "query": query,
        "from": options.offset,
        "size": options.size,
        "sort": options.sort,
    }
    return ApiRequest(method="POST", url=url, headers=headers, params=params, body=payload)


def date_range_query(start_date: date | str, end_date: date | str) -> str:
    return f"filedAt:[{start_date} TO {end_date}]"


class _SearchApi(BaseApi):
    """Search endpoint accepting query-syntax POST bodies."""

    # Name of the ApiSettings field holding the endpoint URL
    url_setting: str

    def search(self, query: str, options: SearchOptions) -> Result:
        """
        Run a search against the endpoint.

        Args:
            query: Query string, e.g. 'formType:"10-Q"'
            options: SearchOptions with the credential

        Returns:
            Ok with {"total": ..., ...} on success, Err otherwise
        """
        return self._dispatch(build_search_request(getattr(self._settings, self.url_setting), query, options))

    def search_by_ticker(self, ticker: str, options: SearchOptions) -> Result:
        return self.search(f"ticker:{ticker}", options)

    def search_by_date_range(self, start_date: date | str, end_date: date | str, options: SearchOptions) -> Result:
        return self.search(date_range_query(start_date, end_date), options)

    def search_by_cik(self, cik: str, options: SearchOptions) -> Result:
        return self.search(f"cik:{cik}", options)


class QueryApi(_SearchApi):
    """Search filings by form type, ticker, CIK and filing date."""

    url_setting = "query_url"

    def search_form_type(self, form_type: str, options: SearchOptions) -> Result:
        """Search filings of one form type, e.g. "10-K"."""
        return self.search(f'formType:"{form_type}"', options)


class DirectorsApi(_SearchApi):
    """Search directors and board members of public companies."""

    url_setting = "directors_url"

    def search_by_name(self, name: str, options: SearchOptions) -> Result:
        return self.search(f"directors.name:{name}", options)
