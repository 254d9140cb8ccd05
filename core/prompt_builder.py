"""Prompt builder that turns an idea request into the upstream payload."""

from __future__ import annotations

import logging
from typing import Any

from core.models import IdeaRequest
from prompts.templates import TEMPLATES

logger = logging.getLogger(__name__)


def build_full_prompt(request: IdeaRequest, template_name: str = "idea_list") -> str:
    """Embed the caller's prompt verbatim into the instruction template."""
    template = TEMPLATES[template_name]
    # Substituted values are never re-parsed, so "$" or quotes in the prompt survive as-is.
    full_prompt = template.substitute(prompt=request.prompt)
    logger.debug("Built full prompt (%d chars)", len(full_prompt))
    return full_prompt


def build_payload(full_prompt: str) -> dict[str, Any]:
    """Wrap a prompt in the generateContent request body."""
    return {
        "contents": [{
            "parts": [{"text": full_prompt}],
        }],
    }
