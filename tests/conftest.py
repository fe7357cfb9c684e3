"""Fixtures compartidas.

`RecordingTransport` envuelve `httpx.MockTransport` y guarda cada request,
así los tests comprueban URL, query, cabeceras y cookies sin red.
"""

from __future__ import annotations

from typing import Callable

import httpx
import pytest

from core.config import AppSettings
from core.domain.models import SessionCredential

Handler = Callable[[httpx.Request], httpx.Response]


class RecordingTransport(httpx.MockTransport):
    def __init__(self, handler: Handler) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)

    @property
    def pages(self) -> list[int]:
        return [int(r.url.params["page"]) for r in self.requests]


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None, user_session=None, user_session_secure=None)


@pytest.fixture
def session() -> SessionCredential:
    return SessionCredential.from_values("session-token", "secure-token")


@pytest.fixture
def recording_transport() -> Callable[[Handler], RecordingTransport]:
    return RecordingTransport
