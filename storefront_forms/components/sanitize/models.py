"""
Sanitize component models.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SanitizeOptions:
    """Options for sanitize_input / sanitize_mapping."""

    max_length: int = 10000
    allow_html: bool = False
    trim: bool = True
    key_max_length: int = 100  # Mapping keys only


DEFAULT_OPTIONS = SanitizeOptions()
