"""
Lenient JSON Decoding for Model Output

Claude is asked for bare JSON but sometimes wraps it in code fences, adds a
sentence of preamble, or emits stray control characters. Decoding degrades
through three tiers:

1. Direct parse of the cleaned text
2. Parse of the outermost {...} span
3. A caller-supplied fallback structure

Decoding never raises.
"""

import copy
import json
import logging
import re
from typing import Any, Dict, Tuple

logger = logging.getLogger(__name__)


_CODE_FENCE = re.compile(r"```(?:json)?\s*", re.IGNORECASE)
# Control characters except \n and \r, which are legal JSON whitespace
_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]")
_OBJECT_SPAN = re.compile(r"\{[\s\S]*\}")


def clean_model_output(text: str) -> str:
    """Strip code fences and characters that would break json.loads."""
    text = _CODE_FENCE.sub("", text or "").strip()
    text = _CONTROL_CHARS.sub(" ", text)
    return text.replace("\t", " ")


def _parse_object(text: str) -> Dict[str, Any]:
    # Literal newlines inside string values are tolerated
    data = json.loads(text, strict=False)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
    return data


def decode_lenient(text: str, fallback: Dict[str, Any]) -> Tuple[Dict[str, Any], str]:
    """
    Decode a JSON object from model output.

    Args:
        text: Raw model output
        fallback: Structure returned (as a deep copy) when both parses fail

    Returns:
        (data, method) where method is "direct", "extracted" or "fallback"
    """
    cleaned = clean_model_output(text)

    try:
        return _parse_object(cleaned), "direct"
    except ValueError as e:
        logger.debug(f"Direct JSON parse failed: {e}")

    match = _OBJECT_SPAN.search(cleaned)
    if match:
        try:
            return _parse_object(match.group()), "extracted"
        except ValueError as e:
            logger.debug(f"Extracted JSON parse failed: {e}")

    logger.warning(
        f"Could not decode model output as JSON, using fallback structure "
        f"(first 200 chars: {cleaned[:200]!r})"
    )
    return copy.deepcopy(fallback), "fallback"
