"""Thin HTTP client for the Google Generative Language generateContent endpoint."""

from __future__ import annotations

import logging

import httpx

from core.config import DEFAULT_API_BASE, DEFAULT_MODEL
from core.prompt_builder import build_payload

logger = logging.getLogger(__name__)


class GeminiClient:
    """Issues a single generateContent call per prompt. No retries, no streaming."""

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        api_base: str = DEFAULT_API_BASE,
        timeout: float | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        if not api_key:
            raise ValueError("Google API key is required. Set GOOGLE_API_KEY or pass api_key.")
        self.api_key = api_key
        self.model = model
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout
        self._http = http_client

    @property
    def endpoint(self) -> str:
        return f"{self.api_base}/models/{self.model}:generateContent"

    def generate_content(self, full_prompt: str) -> httpx.Response:
        """POST the prompt upstream and return the raw response, whatever its status."""
        payload = build_payload(full_prompt)
        logger.info("Calling Gemini model=%s (%d prompt chars)", self.model, len(full_prompt))

        if self._http is not None:
            return self._post(self._http, payload)

        with httpx.Client(timeout=self.timeout) as http:
            return self._post(http, payload)

    def _post(self, http: httpx.Client, payload: dict) -> httpx.Response:
        return http.post(
            self.endpoint,
            params={"key": self.api_key},
            headers={"Content-Type": "application/json"},
            json=payload,
        )
