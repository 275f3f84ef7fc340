"""
Validation component.

Storefront form input checks: email, phone, password, pincode, URL, length.
"""

from storefront_forms.components.validation.component import (
    DEFAULT_MESSAGES,
    EMAIL_REGEX,
    PHONE_REGEX,
    PINCODE_REGEX,
    check_field,
    is_valid_email,
    is_valid_phone,
    is_valid_pincode,
    is_valid_url,
    parse_url,
    run,
    validate_length,
    validate_password,
    validate_phone_number,
)
from storefront_forms.components.validation.models import (
    DEFAULT_PASSWORD_POLICY,
    DEFAULT_URL_POLICY,
    CheckKind,
    FieldCheck,
    FieldError,
    PasswordPolicy,
    UnknownCheckError,
    UrlPolicy,
    ValidateFormInput,
    ValidateFormOutput,
    ValidationComponentError,
    ValidationResult,
)
from storefront_forms.components.validation.ports import ValidationRulesPort

__all__ = [
    # Component
    "run",
    "check_field",
    # Pure functions
    "is_valid_email",
    "is_valid_phone",
    "validate_password",
    "is_valid_pincode",
    "is_valid_url",
    "parse_url",
    "validate_length",
    "validate_phone_number",
    # Constants
    "EMAIL_REGEX",
    "PHONE_REGEX",
    "PINCODE_REGEX",
    "DEFAULT_MESSAGES",
    "DEFAULT_PASSWORD_POLICY",
    "DEFAULT_URL_POLICY",
    # Models
    "ValidationResult",
    "PasswordPolicy",
    "UrlPolicy",
    "CheckKind",
    # Input/Output
    "FieldCheck",
    "ValidateFormInput",
    "FieldError",
    "ValidateFormOutput",
    # Errors
    "ValidationComponentError",
    "UnknownCheckError",
    # Ports
    "ValidationRulesPort",
]
