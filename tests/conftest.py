"""Fixtures compartidas: cliente con `httpx.MockTransport` y helpers de wire."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any
from urllib.parse import parse_qsl

import httpx
import pytest

from elastic_email import ClientSettings, ElasticEmailClient

API_BASE = "https://api.test/v2"
API_KEY = "test-key"


def envelope(data: Any = None, *, success: bool = True, error: str | None = None) -> httpx.Response:
    return httpx.Response(200, json={"success": success, "error": error, "data": data})


def form_items(request: httpx.Request) -> list[tuple[str, str]]:
    return parse_qsl(request.content.decode("ascii"), keep_blank_values=True)


class Recorder:
    """Handler de MockTransport que guarda las requests y responde con `respond`."""

    def __init__(self, respond: Callable[[httpx.Request], httpx.Response] | httpx.Response) -> None:
        self._respond = respond
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self._respond, httpx.Response):
            return self._respond
        return self._respond(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def settings() -> ClientSettings:
    return ClientSettings(api_key=API_KEY, base_url=API_BASE)


@pytest.fixture
def make_client(settings: ClientSettings) -> Callable[[Callable[[httpx.Request], httpx.Response]], ElasticEmailClient]:
    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> ElasticEmailClient:
        return ElasticEmailClient(settings, transport=httpx.MockTransport(handler))

    return _make
