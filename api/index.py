"""Serverless entrypoint for the idea generator function.

The hosting platform calls ``handler`` with a proxy-style event
(``httpMethod``, ``body``, optional ``isBase64Encoded``). The Google API key
is read from ``GOOGLE_API_KEY`` on every invocation and never leaves the
server.
"""

from __future__ import annotations

import logging

from dotenv import load_dotenv

from core.config import HandlerConfig
from core.handler import IdeaGenerationHandler

load_dotenv()
logging.basicConfig(level=logging.INFO)

# httpx logs full request URLs at INFO, and the API key travels in the query string.
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)


def handler(event, context=None):
    """Serverless function handler."""
    config = HandlerConfig.from_env()
    response = IdeaGenerationHandler(config).handle(event or {})
    return response.to_dict()
