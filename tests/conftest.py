from pathlib import Path
import json
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

import httpx
import pytest

from core.config import HandlerConfig
from core.handler import IdeaGenerationHandler


class StubUpstream:
    """Records outbound requests and answers each with a fixed reply."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.reply: object = {"candidates": [{"content": {"parts": [{"text": "1. Idea A"}]}}]}
        self.error: Exception | None = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if isinstance(self.reply, str):
            return httpx.Response(self.status_code, text=self.reply)
        return httpx.Response(self.status_code, json=self.reply)

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def sent_payload(self, index: int = -1) -> dict:
        return json.loads(self.requests[index].content)


@pytest.fixture
def upstream():
    return StubUpstream()


@pytest.fixture
def make_handler(upstream):
    def _make(api_key: str = "test-key") -> IdeaGenerationHandler:
        http = httpx.Client(transport=httpx.MockTransport(upstream))
        return IdeaGenerationHandler(HandlerConfig(api_key=api_key), http_client=http)
    return _make


@pytest.fixture
def post_event():
    def _event(body) -> dict:
        if not isinstance(body, str) and body is not None:
            body = json.dumps(body)
        return {"httpMethod": "POST", "body": body}
    return _event
