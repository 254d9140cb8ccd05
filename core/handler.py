"""Idea generation handler: validate, call Gemini, translate the reply."""

from __future__ import annotations

import base64
import binascii
import json
import logging
from typing import Any

import httpx

from core.config import HandlerConfig
from core.errors import Failure, Result
from core.gemini_client import GeminiClient
from core.models import HttpResponse, IdeaRequest, IdeaResponse
from core.postprocess import interpret_reply
from core.prompt_builder import build_full_prompt

logger = logging.getLogger(__name__)


class IdeaGenerationHandler:
    """Turns one inbound serverless event into one response.

    Each step returns a ``Result``; the first failure decides the response.
    The handler keeps no state between calls, so identical events against a
    deterministic upstream produce identical responses.
    """

    def __init__(self, config: HandlerConfig, http_client: httpx.Client | None = None) -> None:
        self.config = config
        self._http = http_client

    def handle(self, event: dict[str, Any]) -> HttpResponse:
        try:
            return self._handle(event)
        except Exception:
            logger.exception("Function error")
            return HttpResponse.from_failure(Failure.internal())

    def _handle(self, event: dict[str, Any]) -> HttpResponse:
        method = self.check_method(event)
        if not method.ok:
            return HttpResponse.from_failure(method.failure)

        request = self.parse_request(event)
        if not request.ok:
            return HttpResponse.from_failure(request.failure)

        client = self.build_client()
        if not client.ok:
            return HttpResponse.from_failure(client.failure)

        reply = self.call_upstream(client.value, request.value)
        if not reply.ok:
            return HttpResponse.from_failure(reply.failure)

        ideas = self.decode_reply(reply.value)
        if not ideas.ok:
            return HttpResponse.from_failure(ideas.failure)

        logger.info("Generated %d ideas", len(ideas.value))
        return HttpResponse.json(200, IdeaResponse(ideas=ideas.value))

    @staticmethod
    def check_method(event: dict[str, Any]) -> Result[str]:
        method = event.get("httpMethod")
        if method != "POST":
            logger.warning("Rejected %s request", method)
            return Result.fail(Failure.method_not_allowed())
        return Result.success(method)

    @staticmethod
    def parse_request(event: dict[str, Any]) -> Result[IdeaRequest]:
        body = event.get("body")
        if body is None:
            logger.warning("Request has no body")
            return Result.fail(Failure.no_prompt())

        try:
            if event.get("isBase64Encoded"):
                body = base64.b64decode(body).decode("utf-8")
            data = json.loads(body)
        except (binascii.Error, UnicodeDecodeError, TypeError, ValueError, RecursionError) as e:
            logger.warning("Could not parse request body: %s", e)
            return Result.fail(Failure.no_prompt())

        request = IdeaRequest.from_dict(data)
        if request is None:
            logger.warning("Request body has no usable prompt")
            return Result.fail(Failure.no_prompt())
        return Result.success(request)

    def build_client(self) -> Result[GeminiClient]:
        if not self.config.available:
            logger.warning("GOOGLE_API_KEY is not configured")
            return Result.fail(Failure.missing_api_key())
        return Result.success(GeminiClient(
            api_key=self.config.api_key,
            model=self.config.model,
            api_base=self.config.api_base,
            timeout=self.config.timeout,
            http_client=self._http,
        ))

    @staticmethod
    def call_upstream(client: GeminiClient, request: IdeaRequest) -> Result[httpx.Response]:
        full_prompt = build_full_prompt(request)
        try:
            response = client.generate_content(full_prompt)
        except httpx.HTTPError as e:
            logger.error("Gemini request failed: %s", e)
            return Result.fail(Failure.internal())

        if not response.is_success:
            error_text = response.text
            logger.error("Google AI API Error: %s", error_text)
            return Result.fail(Failure.upstream(response.status_code, error_text))
        return Result.success(response)

    @staticmethod
    def decode_reply(response: httpx.Response) -> Result[list[str]]:
        try:
            data = response.json()
        except ValueError as e:
            logger.error("Could not decode Gemini response: %s", e)
            return Result.fail(Failure.internal())
        return interpret_reply(data)
