"""
Sanitize component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from .models import SanitizeOptions


class SanitizeRulesPort(Protocol):
    """Port for accessing sanitize rules configuration."""

    def get_sanitize_options(self) -> SanitizeOptions:
        """Get default sanitize options."""
        ...
