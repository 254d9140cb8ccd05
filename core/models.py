"""Data models for the idea generator function."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from core.errors import ErrorKind, Failure

JSON_HEADERS: dict[str, str] = {"content-type": "application/json"}
TEXT_HEADERS: dict[str, str] = {"content-type": "text/plain"}


@dataclass(frozen=True)
class IdeaRequest:
    prompt: str

    @classmethod
    def from_dict(cls, data: Any) -> IdeaRequest | None:
        """Build a request from a parsed body, or None when no usable prompt is present."""
        if not isinstance(data, dict):
            return None
        prompt = data.get("prompt")
        if not isinstance(prompt, str) or not prompt:
            return None
        return cls(prompt=prompt)


@dataclass
class IdeaResponse:
    ideas: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"ideas": list(self.ideas)}


@dataclass
class ErrorResponse:
    error: str

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.error}


@dataclass
class HttpResponse:
    """An outward response, rendered into the serverless platform's dict shape."""

    status_code: int
    body: str
    headers: dict[str, str] = field(default_factory=lambda: dict(JSON_HEADERS))

    @classmethod
    def json(cls, status_code: int, payload: IdeaResponse | ErrorResponse) -> HttpResponse:
        return cls(status_code=status_code, body=json.dumps(payload.to_dict()))

    @classmethod
    def text(cls, status_code: int, body: str) -> HttpResponse:
        return cls(status_code=status_code, body=body, headers=dict(TEXT_HEADERS))

    @classmethod
    def from_failure(cls, failure: Failure) -> HttpResponse:
        if failure.kind is ErrorKind.METHOD_NOT_ALLOWED:
            return cls.text(failure.status_code, failure.message)
        return cls.json(failure.status_code, ErrorResponse(error=failure.message))

    def to_dict(self) -> dict[str, Any]:
        return {
            "statusCode": self.status_code,
            "headers": dict(self.headers),
            "body": self.body,
        }
