"""Shared fixtures: a recording fake transport returning real requests.Response objects."""

import json

import pytest
import requests

from pageviews.client import PageviewsClient
from pageviews.config import ClientConfig


def make_response(status_code: int = 200, body=None) -> requests.Response:
    """Build a requests.Response; dict/list bodies are JSON-encoded, str bodies sent as is."""
    response = requests.Response()
    response.status_code = status_code
    if isinstance(body, (dict, list)):
        body = json.dumps(body)
    response._content = (body or "").encode("utf-8")
    response.encoding = "utf-8"
    return response


class FakeSession:
    """Stands in for requests.Session; records every get() call."""

    def __init__(self, response=None, error: Exception | None = None):
        self.response = response if response is not None else make_response(200, {"items": []})
        self.error = error
        self.calls: list[dict] = []

    def get(self, url, headers=None, timeout=None):
        self.calls.append({"url": url, "headers": headers, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def client(session):
    return PageviewsClient(ClientConfig(base_url="https://example.test/api"), session=session)
