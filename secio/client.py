"""Single entry point bundling every sec-api.io endpoint group."""

import httpx

from secio.config import ApiSettings
from secio.download import DownloadApi
from secio.extractor import ExtractorApi
from secio.full_text_search import FullTextSearchApi
from secio.mapping import MappingApi
from secio.query import DirectorsApi, QueryApi
from secio.stream import MessageHandler, StreamSession, default_handler


class SecApiClient:
    """Client for the sec-api.io query, search, mapping, extractor, download and stream APIs."""

    def __init__(self, settings: ApiSettings | None = None, http: httpx.Client | None = None) -> None:
        """
        Initialize every endpoint group on one shared transport.

        Args:
            settings: Base URLs and timeout (default: ApiSettings())
            http: Shared httpx.Client; one is created and owned if omitted
        """
        self._settings = settings or ApiSettings()
        self._owns_http = http is None
        self._http = http or httpx.Client(timeout=self._settings.timeout_s, follow_redirects=True)

        self.query = QueryApi(self._settings, self._http)
        self.directors = DirectorsApi(self._settings, self._http)
        self.full_text = FullTextSearchApi(self._settings, self._http)
        self.mapping = MappingApi(self._settings, self._http)
        self.extractor = ExtractorApi(self._settings, self._http)
        self.download = DownloadApi(self._settings, self._http)

    def stream(self, api_key: str, handler: MessageHandler = default_handler) -> StreamSession:
        """
        Open a stream session bound to ``handler``.

        Returns:
            StreamSession in the open state; call run() or start() to receive
        """
        return StreamSession(api_key, handler, url=self._settings.stream_url).open()

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "SecApiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
