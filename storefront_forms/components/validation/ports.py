"""
Validation component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from .models import PasswordPolicy, UrlPolicy


class ValidationRulesPort(Protocol):
    """Port for accessing validation rules configuration."""

    def get_password_policy(self) -> PasswordPolicy:
        """Get password strength policy."""
        ...

    def get_url_policy(self) -> UrlPolicy:
        """Get accepted URL schemes."""
        ...
