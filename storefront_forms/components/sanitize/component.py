"""
Sanitize component.

Cleans user-entered values before they are displayed or submitted.
Missing input becomes an empty string (or None for URLs), never an error.

This is regex-based stripping for plain form fields, not a full HTML
sanitizer.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

from storefront_forms.components.validation import (
    DEFAULT_URL_POLICY,
    UrlPolicy,
    parse_url,
)

from .models import DEFAULT_OPTIONS, SanitizeOptions
from .ports import SanitizeRulesPort

logger = logging.getLogger(__name__)

TAG_PATTERN = re.compile(r"<[^>]*>")
ANGLE_BRACKET_PATTERN = re.compile(r"[<>]")
JS_PROTOCOL_PATTERN = re.compile(r"javascript:", re.IGNORECASE)
EVENT_HANDLER_PATTERN = re.compile(r"on\w+\s*=", re.IGNORECASE | re.ASCII)
NUMERIC_ENTITY_PATTERN = re.compile(r"&#x?[0-9a-f]+;", re.IGNORECASE)

SCRIPT_BLOCK_PATTERN = re.compile(
    r"<script\b[^<]*(?:(?!</script>)<[^<]*)*</script>",
    re.IGNORECASE | re.ASCII,
)
QUOTED_HANDLER_PATTERN = re.compile(
    r"on\w+\s*=\s*[\"'][^\"']*[\"']",
    re.IGNORECASE | re.ASCII,
)
NON_DIGIT_PATTERN = re.compile(r"[^0-9]")


def sanitize_input(value: object, options: SanitizeOptions = DEFAULT_OPTIONS) -> str:
    """
    Strip markup and script vectors from a form value.

    Args:
        value: Raw value. None becomes "", other non-strings are str()-ed
            and returned without further cleaning.
        options: Length limit, HTML allowance and trimming

    Returns:
        Cleaned string, at most ``options.max_length`` characters
    """
    if value is None:
        return ""

    if not isinstance(value, str):
        return str(value)

    sanitized = value

    if options.trim:
        sanitized = sanitized.strip()

    if not options.allow_html:
        sanitized = TAG_PATTERN.sub("", sanitized)

    sanitized = ANGLE_BRACKET_PATTERN.sub("", sanitized)
    sanitized = JS_PROTOCOL_PATTERN.sub("", sanitized)
    sanitized = EVENT_HANDLER_PATTERN.sub("", sanitized)
    sanitized = NUMERIC_ENTITY_PATTERN.sub("", sanitized)

    if len(sanitized) > options.max_length:
        logger.debug(f"Truncating input from {len(sanitized)} to {options.max_length} chars")
        sanitized = sanitized[: options.max_length]

    return sanitized


def sanitize_html(html: object) -> str:
    """Remove script blocks, quoted event handlers and javascript: URLs."""
    if not html or not isinstance(html, str):
        return ""

    cleaned = SCRIPT_BLOCK_PATTERN.sub("", html)
    cleaned = QUOTED_HANDLER_PATTERN.sub("", cleaned)
    return JS_PROTOCOL_PATTERN.sub("", cleaned)


def sanitize_email(email: object) -> str:
    if not email or not isinstance(email, str):
        return ""
    return ANGLE_BRACKET_PATTERN.sub("", email.strip().lower())


def sanitize_phone(phone: object) -> str:
    """Digits only, at most 10."""
    if not phone or not isinstance(phone, str):
        return ""
    return NON_DIGIT_PATTERN.sub("", phone)[:10]


def sanitize_url(url: object, policy: UrlPolicy = DEFAULT_URL_POLICY) -> str | None:
    """
    Return the serialized URL, or None if it is not an acceptable URL.

    Serialization lowercases the scheme and host, drops a default port and
    gives an empty path a single "/". Hosts with forbidden characters such
    as ``<`` never parse, so no markup survives.
    """
    parsed = parse_url(url, policy)
    return None if parsed is None else str(parsed)


def sanitize_mapping(obj: Any, options: SanitizeOptions = DEFAULT_OPTIONS) -> Any:
    """
    Recursively sanitize a decoded form payload.

    Mapping keys are sanitized with ``options.key_max_length``; string
    values and string list items with ``options``. A top-level value that
    is not a list or mapping is returned unchanged.
    """
    if isinstance(obj, list):
        return [_sanitize_value(item, options) for item in obj]

    if not isinstance(obj, Mapping):
        return obj

    key_options = SanitizeOptions(max_length=options.key_max_length)
    return {
        sanitize_input(key, key_options): _sanitize_value(value, options)
        for key, value in obj.items()
    }


def _sanitize_value(value: Any, options: SanitizeOptions) -> Any:
    if isinstance(value, str):
        return sanitize_input(value, options)
    if isinstance(value, (list, Mapping)):
        return sanitize_mapping(value, options)
    return value


def run(payload: Any, rules: SanitizeRulesPort | None = None) -> Any:
    """Sanitize a payload using options from rules (defaults when None)."""
    options = DEFAULT_OPTIONS if rules is None else rules.get_sanitize_options()
    return sanitize_mapping(payload, options)
