"""
Validation component.

Functional core for storefront form checks. Every check is total: missing,
empty or non-text input is an ordinary invalid result, never an exception.

Key behaviors:
- Email: syntactic local@domain.tld check on the trimmed value
- Phone: Indian mobile numbers (10 digits, leading 6-9), separators ignored
- Password: length, then upper + lower + digit from a restricted charset
- Pincode: Indian PIN code (6 digits, no leading zero)
- URL: absolute URL with an allowed scheme (http/https by default)
- Length: trimmed length within [min, max]

Digit classes are ASCII-only.
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache

from pydantic import AnyUrl, TypeAdapter, ValidationError

from .models import (
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
    ValidationResult,
)
from .ports import ValidationRulesPort

logger = logging.getLogger(__name__)

# --- Patterns ---

EMAIL_REGEX = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PHONE_REGEX = re.compile(r"[6-9][0-9]{9}")
PINCODE_REGEX = re.compile(r"[1-9][0-9]{5}")
NON_DIGIT_REGEX = re.compile(r"[^0-9]")

_URL_ADAPTER = TypeAdapter(AnyUrl)

PASSWORD_REQUIRED = "Password is required"
PASSWORD_COMPLEXITY = "Password must contain uppercase, lowercase, and at least one number"
TEXT_REQUIRED = "Text is required"


@lru_cache(maxsize=32)
def _password_pattern(policy: PasswordPolicy) -> re.Pattern[str]:
    charset = "A-Za-z0-9" + re.escape(policy.allowed_symbols)
    return re.compile(
        rf"(?=.*[a-z])(?=.*[A-Z])(?=.*[0-9])[{charset}]{{{policy.min_length},}}"
    )


# --- Pure Functions (Functional Core) ---


def is_valid_email(email: object) -> bool:
    """Check email format (no DNS/MX lookup)."""
    if not email or not isinstance(email, str):
        return False
    return EMAIL_REGEX.fullmatch(email.strip()) is not None


def is_valid_phone(phone: object) -> bool:
    """Check an Indian mobile number. Spaces, dashes etc. are stripped first."""
    if not phone or not isinstance(phone, str):
        return False
    return PHONE_REGEX.fullmatch(NON_DIGIT_REGEX.sub("", phone)) is not None


def validate_password(
    password: object,
    policy: PasswordPolicy = DEFAULT_PASSWORD_POLICY,
) -> ValidationResult:
    """
    Check password strength. Rules run in order and the first failure wins.

    Characters outside letters, digits and ``policy.allowed_symbols`` fail
    the complexity rule even when upper, lower and digit are all present.

    Args:
        password: Raw password value
        policy: Minimum length and allowed symbols

    Returns:
        ValidationResult with the first failing rule's message
    """
    if not password or not isinstance(password, str):
        return ValidationResult(is_valid=False, message=PASSWORD_REQUIRED)

    if len(password) < policy.min_length:
        return ValidationResult(
            is_valid=False,
            message=f"Password must be at least {policy.min_length} characters long",
        )

    if _password_pattern(policy).fullmatch(password) is None:
        return ValidationResult(is_valid=False, message=PASSWORD_COMPLEXITY)

    return ValidationResult(is_valid=True)


def is_valid_pincode(pincode: object) -> bool:
    """Check an Indian PIN code."""
    if not pincode or not isinstance(pincode, str):
        return False
    return PINCODE_REGEX.fullmatch(pincode.strip()) is not None


def parse_url(url: object, policy: UrlPolicy = DEFAULT_URL_POLICY) -> AnyUrl | None:
    """
    Parse an absolute URL the way a browser does, or return None.

    Parsing follows the WHATWG URL rules: forbidden host characters, bad
    ports and relative URLs fail; ``http:example.com`` gets its missing
    slashes; default ports are dropped. The scheme must be allowed by
    ``policy``.
    """
    if not url or not isinstance(url, str):
        return None

    try:
        parsed = _URL_ADAPTER.validate_python(url.strip())
    except ValidationError:
        return None

    if parsed.scheme not in {s.lower() for s in policy.allowed_schemes}:
        return None
    if not parsed.host:
        return None
    return parsed


def is_valid_url(url: object, policy: UrlPolicy = DEFAULT_URL_POLICY) -> bool:
    """Check that the value parses as an absolute URL with an allowed scheme."""
    return parse_url(url, policy) is not None


def validate_length(
    text: object,
    min_length: int = 0,
    max_length: int | None = None,
) -> ValidationResult:
    """Check trimmed text length against [min_length, max_length]."""
    if not text or not isinstance(text, str):
        return ValidationResult(is_valid=False, message=TEXT_REQUIRED)

    length = len(text.strip())

    if length < min_length:
        return ValidationResult(
            is_valid=False,
            message=f"Must be at least {min_length} characters",
        )

    if max_length is not None and length > max_length:
        return ValidationResult(
            is_valid=False,
            message=f"Must be no more than {max_length} characters",
        )

    return ValidationResult(is_valid=True)


def validate_phone_number(phone: object) -> ValidationResult:
    """
    Live status for a digit-only phone field (coupon claim).

    Empty input is invalid with no message so nothing is shown before the
    user starts typing.
    """
    if not phone or not isinstance(phone, str):
        return ValidationResult(is_valid=False)

    if len(phone) < 10:
        return ValidationResult(is_valid=False, message="Phone number must be 10 digits")

    if PHONE_REGEX.fullmatch(phone) is None:
        return ValidationResult(
            is_valid=False,
            message="Phone number must start with 6, 7, 8, or 9",
        )

    return ValidationResult(is_valid=True, message="Valid phone number")


# --- Form Runner ---

DEFAULT_MESSAGES: dict[CheckKind, str] = {
    CheckKind.EMAIL: "Please enter a valid email address",
    CheckKind.PHONE: "Please enter a valid 10-digit mobile number",
    CheckKind.PINCODE: "Please enter a valid 6-digit pincode",
    CheckKind.URL: "Please enter a valid URL",
}


def _coerce_kind(kind: CheckKind | str) -> CheckKind:
    if isinstance(kind, CheckKind):
        return kind
    try:
        return CheckKind(kind)
    except ValueError:
        raise UnknownCheckError(kind) from None


def check_field(
    check: FieldCheck,
    password_policy: PasswordPolicy = DEFAULT_PASSWORD_POLICY,
    url_policy: UrlPolicy = DEFAULT_URL_POLICY,
) -> ValidationResult:
    """Run one field check, turning boolean checks into a ValidationResult."""
    kind = _coerce_kind(check.kind)

    if kind is CheckKind.PASSWORD:
        return validate_password(check.value, password_policy)
    if kind is CheckKind.LENGTH:
        return validate_length(check.value, check.min_length, check.max_length)

    if kind is CheckKind.EMAIL:
        ok = is_valid_email(check.value)
    elif kind is CheckKind.PHONE:
        ok = is_valid_phone(check.value)
    elif kind is CheckKind.PINCODE:
        ok = is_valid_pincode(check.value)
    else:
        ok = is_valid_url(check.value, url_policy)

    if ok:
        return ValidationResult(is_valid=True)
    return ValidationResult(is_valid=False, message=DEFAULT_MESSAGES[kind])


def _build_policies(
    rules: ValidationRulesPort | None,
) -> tuple[PasswordPolicy, UrlPolicy]:
    """Build policies from rules port."""
    if rules is None:
        return DEFAULT_PASSWORD_POLICY, DEFAULT_URL_POLICY
    return rules.get_password_policy(), rules.get_url_policy()


def run(
    input_data: ValidateFormInput,
    rules: ValidationRulesPort | None = None,
) -> ValidateFormOutput:
    """
    Validate every field of a form.

    All checks run; the output collects one error per failing field check.

    Raises:
        UnknownCheckError: If a check names a kind that does not exist
    """
    password_policy, url_policy = _build_policies(rules)
    errors: list[FieldError] = []

    for check in input_data.checks:
        result = check_field(check, password_policy, url_policy)
        if not result.is_valid:
            kind = _coerce_kind(check.kind)
            logger.debug(f"Field check failed: field={check.field} kind={kind.value}")
            errors.append(FieldError(field=check.field, kind=kind, message=result.message))

    return ValidateFormOutput(is_valid=len(errors) == 0, errors=tuple(errors))
