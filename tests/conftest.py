"""Shared fixtures: a fake DocuSeal API behind httpx.MockTransport."""

import json
from typing import Any

import httpx
import pytest

from shared.config import DocuSealSettings, Settings
from docuseal_mcp.client import DocuSealClient
from docuseal_mcp.server import build_router

BASE_URL = "https://docuseal.test"
API_KEY = "test-key"


class FakeDocuSeal:
    """Records every request and answers with a canned response."""
    
    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.payload: Any = {"id": 1}
        self.text: str | None = None
    
    def respond(self, status_code: int, payload: Any = None, text: str | None = None) -> None:
        self.status_code = status_code
        self.payload = payload
        self.text = text
    
    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.payload)
    
    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)
    
    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]
    
    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def api() -> FakeDocuSeal:
    return FakeDocuSeal()


@pytest.fixture
def docuseal_settings() -> DocuSealSettings:
    return DocuSealSettings(api_key=API_KEY, base_url=BASE_URL)


@pytest.fixture
def client(api, docuseal_settings) -> DocuSealClient:
    return DocuSealClient(docuseal_settings, transport=api.transport)


@pytest.fixture
def router(client):
    return build_router(Settings(validate_input=True, enable_audit=True), client)


@pytest.fixture
def keyless_router(api):
    client = DocuSealClient(
        DocuSealSettings(api_key=None, base_url=BASE_URL),
        transport=api.transport
    )
    return build_router(Settings(), client)
