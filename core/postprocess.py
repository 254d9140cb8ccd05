"""Post-processing of upstream replies: safety blocks, malformed bodies, and idea splitting."""

from __future__ import annotations

import logging
from typing import Any

from core.errors import Failure, Result

logger = logging.getLogger(__name__)


def split_ideas(text: str) -> list[str]:
    """Split generated text into ideas, dropping blank lines and keeping order."""
    return [idea for idea in text.split("\n") if idea.strip() != ""]


def _present(value: Any) -> bool:
    # Empty objects and arrays count as present, as in the JS clients of this API.
    if isinstance(value, (dict, list)):
        return True
    return bool(value)


def _first_candidate(data: dict[str, Any]) -> Any:
    candidates = data.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        return None
    return candidates[0]


def _first_text(content: Any) -> str | None:
    if not isinstance(content, dict):
        return None
    parts = content.get("parts")
    if not isinstance(parts, list) or not parts or not isinstance(parts[0], dict):
        return None
    text = parts[0].get("text")
    return text if isinstance(text, str) else None


def _block_reason(data: dict[str, Any]) -> Any:
    feedback = data.get("promptFeedback")
    if not isinstance(feedback, dict):
        return None
    reason = feedback.get("blockReason")
    return reason if _present(reason) else None


def interpret_reply(data: Any) -> Result[list[str]]:
    """Map a parsed, successful upstream body to ideas or a failure.

    Only the first candidate is used. A candidate whose content has no
    readable text part is an internal error rather than a malformed reply,
    since the content block itself was present. So is a null body or a
    null first candidate.
    """
    if data is None:
        logger.error("Upstream reply is null")
        return Result.fail(Failure.internal())
    if not isinstance(data, dict):
        logger.error("Upstream reply is not a JSON object: %r", type(data).__name__)
        return Result.fail(Failure.malformed_response())

    candidates = data.get("candidates")
    if isinstance(candidates, list) and candidates and candidates[0] is None:
        logger.error("First candidate is null")
        return Result.fail(Failure.internal())

    first = _first_candidate(data)
    content = first.get("content") if isinstance(first, dict) else None
    if _present(content):
        text = _first_text(content)
        if text is None:
            logger.error("First candidate has content but no text part: %r", content)
            return Result.fail(Failure.internal())
        return Result.success(split_ideas(text))

    reason = _block_reason(data)
    if reason is not None:
        logger.warning("Upstream blocked the prompt: %s", reason)
        return Result.fail(Failure.safety_block(str(reason)))

    logger.error("Invalid response structure from API: keys=%s", sorted(data))
    return Result.fail(Failure.malformed_response())
