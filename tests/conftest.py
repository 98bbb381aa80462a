from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from typing import Any, Callable

import httpx
import pytest

from sigpair_admin import AdminSettings, SigpairAdmin

BASE_URL = "http://localhost:8080"
ADMIN_TOKEN = "1ec3804afc23258f767b9d38825dc7ab0a2ea44ef4adf3254e4d7c6059c3b55a"


@dataclass
class RecordingNode:
    """Fake Sigpair node: records every request and answers via `respond`."""

    respond: Callable[[httpx.Request], httpx.Response]
    requests: list[httpx.Request] = field(default_factory=list)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.respond(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    def body(self, index: int = -1) -> Any:
        return json.loads(self.requests[index].content)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    for key in list(os.environ):
        if key.upper().startswith("SIGPAIR_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings() -> AdminSettings:
    return AdminSettings(http_timeout_seconds=5.0)


def json_node(status: int, payload: Any) -> RecordingNode:
    return RecordingNode(lambda request: httpx.Response(status, json=payload))


@pytest.fixture
def make_client(settings: AdminSettings) -> Callable[[RecordingNode], SigpairAdmin]:
    def _make(node: RecordingNode) -> SigpairAdmin:
        return SigpairAdmin(BASE_URL, ADMIN_TOKEN, settings=settings, transport=node.transport)

    return _make
