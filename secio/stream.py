"""Real-time filing feed over WebSocket.

A session owns one connection and one handler for its whole life. Frames are
decoded and handed to the handler one at a time, in arrival order. A frame
that is not valid JSON ends the session with the decode error. There is no
reconnect: once closed, a session stays closed.

Usage::

    def on_filing(message):
        for filing in message:
            print(filing["formType"], filing["linkToFilingDetails"])

    with StreamSession(api_key, on_filing) as session:
        session.run()
"""

import json
import logging
import threading
from collections.abc import Callable
from enum import Enum
from typing import Any
from urllib.parse import urlencode

from websockets.sync.client import connect as ws_connect

from secio.config import ApiSettings
from secio.models import InvalidArgumentError

logger = logging.getLogger(__name__)

MessageHandler = Callable[[Any], None]


def default_handler(message: Any) -> None:
    """Log each decoded message."""
    logger.info("Stream message: %r", message)


class StreamState(str, Enum):
    IDLE = "idle"
    CONNECTING = "connecting"
    OPEN = "open"
    CLOSED = "closed"


class StreamSession:
    """One WebSocket connection bound to one message handler."""

    def __init__(
        self,
        api_key: str,
        handler: MessageHandler = default_handler,
        url: str | None = None,
        connect: Callable[[str], Any] | None = None,
    ) -> None:
        """
        Initialize without connecting.

        Args:
            api_key: Credential sent as the ``apiKey`` query parameter
            handler: Called with every decoded message (default: default_handler)
            url: Stream endpoint (default: ApiSettings().stream_url)
            connect: Factory returning an open connection for a URL
                (default: websockets.sync.client.connect)

        Raises:
            InvalidArgumentError: If api_key is empty
        """
        if not api_key:
            raise InvalidArgumentError("api_key is required")

        self._api_key = api_key
        self._handler = handler
        self._url = url or ApiSettings().stream_url
        self._connect = connect or ws_connect
        self._connection = None
        self._thread: threading.Thread | None = None
        self._error: BaseException | None = None
        self.state = StreamState.IDLE

    @property
    def handler(self) -> MessageHandler:
        return self._handler

    def open(self) -> "StreamSession":
        """Perform the WebSocket handshake."""
        if self.state != StreamState.IDLE:
            raise RuntimeError(f"Cannot open a session that is {self.state.value}")

        self.state = StreamState.CONNECTING
        logger.info("Connecting to %s", self._url)
        try:
            self._connection = self._connect(f"{self._url}?{urlencode({'apiKey': self._api_key})}")
        except Exception:
            self.state = StreamState.CLOSED
            raise

        self.state = StreamState.OPEN
        return self

    def run(self) -> None:
        """
        Receive frames until the connection closes.

        Raises:
            json.JSONDecodeError: If a text frame is not valid JSON
        """
        if self.state == StreamState.IDLE:
            self.open()
        if self.state != StreamState.OPEN:
            raise RuntimeError(f"Cannot run a session that is {self.state.value}")

        try:
            for frame in self._connection:
                if isinstance(frame, bytes):
                    logger.warning("Ignoring binary frame (%d bytes)", len(frame))
                    continue
                self._handler(json.loads(frame))
        finally:
            self.close()

    def start(self) -> "StreamSession":
        """Connect, then receive frames on a background thread."""
        if self._thread is not None and self._thread.is_alive():
            raise RuntimeError("Session is already receiving on a background thread")
        if self.state == StreamState.IDLE:
            self.open()
        self._thread = threading.Thread(target=self._run_in_thread, name="secio-stream", daemon=True)
        self._thread.start()
        return self

    def _run_in_thread(self) -> None:
        try:
            self.run()
        except Exception as e:
            logger.error("Stream session ended with %s", type(e).__name__)
            self._error = e

    def join(self, timeout: float | None = None) -> None:
        """
        Wait for a session started with start() to finish.

        Raises:
            Exception: Whatever ended the receive loop, if it failed
        """
        if self._thread is not None:
            self._thread.join(timeout)
        if self._error is not None:
            raise self._error

    def close(self) -> None:
        """Close the connection. The session cannot be reopened."""
        if self._connection is not None and self.state != StreamState.CLOSED:
            self._connection.close()
            logger.info("Closed connection to %s", self._url)
        self.state = StreamState.CLOSED

    def __enter__(self) -> "StreamSession":
        if self.state == StreamState.IDLE:
            self.open()
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
