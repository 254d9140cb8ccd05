"""Runtime configuration for the idea generator function."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_MODEL = "gemini-2.0-flash"
DEFAULT_API_BASE = "https://generativelanguage.googleapis.com/v1beta"
API_KEY_ENV = "GOOGLE_API_KEY"


def resolve_api_key(explicit: str | None, *env_names: str) -> str:
    """Return the explicit key if set, otherwise the first non-empty environment variable."""
    if explicit and explicit.strip():
        return explicit.strip()
    for name in env_names:
        value = os.environ.get(name, "").strip()
        if value:
            return value
    return ""


@dataclass(frozen=True)
class HandlerConfig:
    api_key: str = ""
    model: str = DEFAULT_MODEL
    api_base: str = DEFAULT_API_BASE
    # None leaves the request deadline to the hosting platform.
    timeout: float | None = None

    @property
    def available(self) -> bool:
        return bool(self.api_key)

    @classmethod
    def from_env(cls, api_key: str | None = None) -> HandlerConfig:
        return cls(api_key=resolve_api_key(api_key, API_KEY_ENV))
