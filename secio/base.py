"""Shared transport wrapper and response normalization for every endpoint."""

import logging
from typing import Any

import httpx

from secio.config import ApiSettings
from secio.models import ApiRequest, Err, HttpError, Ok, Result

logger = logging.getLogger(__name__)


def auth_placement(api_key: str, use_auth_header: bool) -> tuple[dict[str, str], dict[str, str]]:
    """
    Return the (headers, params) pair carrying the credential.

    Header mode sends the key in ``Authorization``; token mode sends it as a
    ``token`` query parameter.
    """
    if use_auth_header:
        return {"Authorization": api_key}, {}
    return {}, {"token": api_key}


def _decode_body(response: httpx.Response) -> Any:
    if "json" in response.headers.get("content-type", ""):
        try:
            return response.json()
        except ValueError:
            # Proxies and gateways mislabel HTML or empty bodies as JSON
            return response.text
    return response.text


def normalize_response(response: httpx.Response, raw: bool = False) -> Result:
    """
    Map an HTTP response onto a Result.

    Args:
        response: Response returned by the transport
        raw: Return the undecoded body bytes on success

    Returns:
        Ok with the body for status 200, otherwise Err with an HttpError
    """
    if response.status_code == 200:
        return Ok(value=response.content if raw else _decode_body(response))
    return Err(error=HttpError(status=response.status_code, body=_decode_body(response)))


def _loggable_url(request: ApiRequest) -> httpx.URL:
    params = {key: value for key, value in request.params.items() if key != "token"}
    return httpx.URL(request.url, params=params)


class BaseApi:
    """Base class for endpoint groups sharing one HTTP transport."""

    def __init__(self, settings: ApiSettings | None = None, http: httpx.Client | None = None) -> None:
        """
        Initialize with endpoint settings and an optional shared transport.

        Args:
            settings: Base URLs and timeout (default: ApiSettings())
            http: Shared httpx.Client; one is created and owned if omitted
        """
        self._settings = settings or ApiSettings()
        self._owns_http = http is None
        self._http = http or httpx.Client(timeout=self._settings.timeout_s, follow_redirects=True)

    def close(self) -> None:
        """Close the transport if this instance created it."""
        if self._owns_http:
            self._http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _dispatch(self, request: ApiRequest) -> Result:
        """Send a request descriptor and normalize whatever comes back."""
        log_url = _loggable_url(request)
        logger.debug("%s %s", request.method, log_url)

        try:
            response = self._http.request(
                request.method,
                request.url,
                params=request.params or None,
                headers=request.headers or None,
                json=request.body,
            )
        except httpx.RequestError as e:
            logger.warning("%s %s failed: %s", request.method, log_url, type(e).__name__)
            return Err(error=e)

        logger.debug("%s %s -> %s", request.method, log_url, response.status_code)
        return normalize_response(response, raw=request.raw)
