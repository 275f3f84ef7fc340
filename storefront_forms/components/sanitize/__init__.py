"""
Sanitize component.

Cleans form values (text, HTML, email, phone, URL, nested payloads).
"""

from storefront_forms.components.sanitize.component import (
    run,
    sanitize_email,
    sanitize_html,
    sanitize_input,
    sanitize_mapping,
    sanitize_phone,
    sanitize_url,
)
from storefront_forms.components.sanitize.models import DEFAULT_OPTIONS, SanitizeOptions
from storefront_forms.components.sanitize.ports import SanitizeRulesPort

__all__ = [
    # Component
    "run",
    # Pure functions
    "sanitize_input",
    "sanitize_html",
    "sanitize_email",
    "sanitize_phone",
    "sanitize_url",
    "sanitize_mapping",
    # Models
    "SanitizeOptions",
    "DEFAULT_OPTIONS",
    # Ports
    "SanitizeRulesPort",
]
