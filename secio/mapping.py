"""Mapping API: resolve CIKs, tickers, CUSIPs and names to company records."""

from urllib.parse import quote

from secio.base import BaseApi, auth_placement
from secio.models import ApiRequest, MappingDimension, MappingOptions, Result


def build_mapping_request(base_url: str, dimension: MappingDimension | str, value: str, options: MappingOptions) -> ApiRequest:
    """
    Build the GET request for ``{base_url}/{dimension}/{value}``.

    The value is percent-escaped in both auth modes, so names such as
    "Auto Manufacturers" or "S&P" form a single path segment.
    """
    dimension = MappingDimension(dimension)
    headers, params = auth_placement(options.api_key, options.use_auth_header)
    url = f"{base_url.rstrip('/')}/{dimension.value}/{quote(value, safe='')}"
    return ApiRequest(method="GET", url=url, headers=headers, params=params)


class MappingApi(BaseApi):
    """Client for the mapping endpoint."""

    def lookup(self, dimension: MappingDimension | str, value: str, options: MappingOptions) -> Result:
        """
        Look up company records along one dimension.

        Args:
            dimension: One of cik, ticker, cusip, name, exchange, sector, industry
            value: Value to match
            options: MappingOptions with the credential

        Returns:
            Ok with a list of company records, Err otherwise

        Raises:
            ValueError: If the dimension is not supported
        """
        return self._dispatch(build_mapping_request(self._settings.mapping_url, dimension, value, options))

    def map_cik(self, cik: str, options: MappingOptions) -> Result:
        return self.lookup(MappingDimension.CIK, cik, options)

    def map_ticker(self, ticker: str, options: MappingOptions) -> Result:
        return self.lookup(MappingDimension.TICKER, ticker, options)

    def map_cusip(self, cusip: str, options: MappingOptions) -> Result:
        return self.lookup(MappingDimension.CUSIP, cusip, options)

    def map_name(self, name: str, options: MappingOptions) -> Result:
        return self.lookup(MappingDimension.NAME, name, options)

    def list_by_exchange(self, exchange: str, options: MappingOptions) -> Result:
        """List all companies on an exchange, e.g. "NASDAQ"."""
        return self.lookup(MappingDimension.EXCHANGE, exchange, options)

    def list_by_sector(self, sector: str, options: MappingOptions) -> Result:
        return self.lookup(MappingDimension.SECTOR, sector, options)

    def list_by_industry(self, industry: str, options: MappingOptions) -> Result:
        return self.lookup(MappingDimension.INDUSTRY, industry, options)
