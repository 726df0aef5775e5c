"""Shared fixtures for sec-api.io client tests."""

import json
from pathlib import Path

import httpx
import pytest

from secio.config import ApiSettings

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str):
    with open(FIXTURES_DIR / name) as f:
        return json.load(f)


class RecordingTransport:
    """Mock transport that records requests and replays a canned outcome."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.response = httpx.Response(200, json={})
        self.error: Exception | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.response

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def settings():
    return ApiSettings()


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def http(transport):
    with httpx.Client(transport=httpx.MockTransport(transport.handler)) as client:
        yield client


def sent_json(request: httpx.Request) -> dict:
    return json.loads(request.content)
