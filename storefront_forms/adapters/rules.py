"""
Rules adapter.

Serves policies from a loaded rules file to the validation and sanitize
components (ValidationRulesPort, SanitizeRulesPort).
"""

from __future__ import annotations

from pathlib import Path

from storefront_forms.components.sanitize import SanitizeOptions
from storefront_forms.components.validation import PasswordPolicy, UrlPolicy
from storefront_forms.rules.loader import load_rules
from storefront_forms.rules.models import Rules


class RulesAdapter:
    def __init__(self, rules: Rules) -> None:
        self._rules = rules

    @classmethod
    def from_file(cls, path: Path | None = None) -> RulesAdapter:
        return cls(load_rules(path))

    def get_password_policy(self) -> PasswordPolicy:
        password = self._rules.validation.password
        return PasswordPolicy(
            min_length=password.min_length,
            allowed_symbols=password.allowed_symbols,
        )

    def get_url_policy(self) -> UrlPolicy:
        return UrlPolicy(
            allowed_schemes=frozenset(s.lower() for s in self._rules.validation.url.allowed_schemes)
        )

    def get_sanitize_options(self) -> SanitizeOptions:
        sanitize = self._rules.sanitize
        return SanitizeOptions(
            max_length=sanitize.max_length,
            allow_html=sanitize.allow_html,
            trim=sanitize.trim,
            key_max_length=sanitize.key_max_length,
        )
