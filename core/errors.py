"""Error taxonomy and step results for the idea generation handler."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")

METHOD_NOT_ALLOWED_MESSAGE = "Method Not Allowed"
NO_PROMPT_MESSAGE = "No prompt provided."
MISSING_API_KEY_MESSAGE = (
    "API key is not configured on the server. "
    "Please set the GOOGLE_API_KEY environment variable in your Netlify site settings."
)
INVALID_STRUCTURE_MESSAGE = "Invalid response structure from API."
INTERNAL_ERROR_MESSAGE = "An internal server error occurred."


class ErrorKind(str, Enum):
    METHOD_NOT_ALLOWED = "method_not_allowed"
    INPUT = "input"
    CONFIGURATION = "configuration"
    UPSTREAM = "upstream"
    SAFETY_BLOCK = "safety_block"
    MALFORMED_RESPONSE = "malformed_response"
    INTERNAL = "internal"


@dataclass(frozen=True)
class Failure:
    """A failed step, carrying everything needed to answer the caller."""

    kind: ErrorKind
    status_code: int
    message: str

    @classmethod
    def method_not_allowed(cls) -> Failure:
        return cls(ErrorKind.METHOD_NOT_ALLOWED, 405, METHOD_NOT_ALLOWED_MESSAGE)

    @classmethod
    def no_prompt(cls) -> Failure:
        return cls(ErrorKind.INPUT, 400, NO_PROMPT_MESSAGE)

    @classmethod
    def missing_api_key(cls) -> Failure:
        return cls(ErrorKind.CONFIGURATION, 500, MISSING_API_KEY_MESSAGE)

    @classmethod
    def upstream(cls, status_code: int, body: str) -> Failure:
        return cls(ErrorKind.UPSTREAM, status_code, f"Google AI API error: {body}")

    @classmethod
    def safety_block(cls, reason: str) -> Failure:
        return cls(ErrorKind.SAFETY_BLOCK, 400, f"Request blocked by safety settings: {reason}")

    @classmethod
    def malformed_response(cls) -> Failure:
        return cls(ErrorKind.MALFORMED_RESPONSE, 500, INVALID_STRUCTURE_MESSAGE)

    @classmethod
    def internal(cls) -> Failure:
        return cls(ErrorKind.INTERNAL, 500, INTERNAL_ERROR_MESSAGE)


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of one handler step: either a value or a failure."""

    value: T | None = None
    failure: Failure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, value: T) -> Result[T]:
        return cls(value=value)

    @classmethod
    def fail(cls, failure: Failure) -> Result[T]:
        return cls(failure=failure)
