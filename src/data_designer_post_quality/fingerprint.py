"""Deterministic fingerprints for generation requests.

A fingerprint is the SHA-256 of a canonical JSON rendering of the request
input, its settings and its reference content. Browser and server producers
must agree on it byte for byte, so the canonical form mirrors what
``JSON.stringify`` emits for the same literal:

* keys in a fixed order: ``input``, ``settings``, ``referenceContent``;
  settings as ``tone, style, length, language, purpose, audience,
  emojiUsage, includeCTA, customInstructions``; each reference entry as
  ``url, content, error`` with ``error`` dropped when absent,
* compact separators and raw (unescaped) non-ASCII characters,
* ECMAScript whitespace trimming and UTF-16 code unit truncation.
"""

from __future__ import annotations

import hashlib
import json
import logging
import re
from typing import Any, Mapping

from data_designer_post_quality.models import HashableContent

logger = logging.getLogger(__name__)

REFERENCE_CONTENT_MAX_CHARS = 1000

_JS_WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680"
    + "".join(chr(c) for c in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000\ufeff"
)
_LONE_SURROGATE_RE = re.compile("[\ud800-\udfff]")


def _js_trim(text: str) -> str:
    return text.strip(_JS_WHITESPACE)


def _truncate_utf16(text: str, limit: int) -> str:
    # Every code point is at least one UTF-16 unit, so the cut lies inside text[:limit].
    head = text[:limit]
    encoded = head.encode("utf-16-le", "surrogatepass")
    if len(encoded) <= limit * 2:
        return head
    return encoded[: limit * 2].decode("utf-16-le", "surrogatepass")


def _coerce(content: HashableContent | Mapping[str, Any]) -> HashableContent:
    if isinstance(content, HashableContent):
        return content
    return HashableContent.model_validate(content)


def normalize_content(content: HashableContent | Mapping[str, Any]) -> dict[str, Any]:
    """Build the ordered record that gets hashed.

    Raises:
        pydantic.ValidationError: if ``content`` is a mapping missing required
            settings fields or carrying values of the wrong type.
    """
    data = _coerce(content)
    s = data.settings
    return {
        "input": _js_trim(data.input),
        "settings": {
            "tone": s.tone,
            "style": s.style,
            "length": s.length,
            "language": s.language,
            "purpose": s.purpose,
            "audience": s.audience,
            "emojiUsage": s.emoji_usage,
            "includeCTA": s.include_cta,
            "customInstructions": _js_trim(s.custom_instructions or ""),
        },
        "referenceContent": [_normalize_reference(ref.url, ref.content, ref.error) for ref in data.reference_content],
    }


def _normalize_reference(url: str, content: str | None, error: str | None) -> dict[str, Any]:
    entry: dict[str, Any] = {
        "url": url,
        "content": _truncate_utf16(content, REFERENCE_CONTENT_MAX_CHARS) if content else "",
    }
    if error is not None:
        entry["error"] = error
    return entry


def canonical_json(content: HashableContent | Mapping[str, Any]) -> str:
    """Serialize ``content`` to the canonical string that :func:`fingerprint` hashes."""
    dumped = json.dumps(normalize_content(content), ensure_ascii=False, separators=(",", ":"))
    # JSON.stringify escapes unpaired surrogates instead of emitting them raw.
    return _LONE_SURROGATE_RE.sub(lambda m: f"\\u{ord(m.group()):04x}", dumped)


def fingerprint(content: HashableContent | Mapping[str, Any]) -> str:
    """Return the lowercase hex SHA-256 fingerprint of a generation request.

    Equal fingerprints mean the request would produce the same generation, so
    callers use the value as a cache key. Leading and trailing whitespace of the
    input and custom instructions is ignored, as is reference content past its
    first 1000 characters.

    Args:
        content: A :class:`HashableContent` or a mapping with the same shape
            (snake_case or camelCase keys).

    Returns:
        A 64-character lowercase hexadecimal digest.

    Raises:
        pydantic.ValidationError: if required settings fields are missing.
    """
    canonical = canonical_json(content)
    digest = hashlib.sha256(canonical.encode("utf-8")).hexdigest()
    logger.debug("fingerprint %s over %d canonical chars", digest, len(canonical))
    return digest
