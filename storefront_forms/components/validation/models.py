"""
Validation component models.

Result records, policies and form-level input/output for storefront
form checks (signup, login, checkout, contact, coupon claim).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

# --- Result Record ---


@dataclass(frozen=True)
class ValidationResult:
    """Validity flag plus a human-readable reason (empty when valid)."""

    is_valid: bool
    message: str = ""


# --- Policies ---


@dataclass(frozen=True)
class PasswordPolicy:
    """Password strength policy."""

    min_length: int = 8
    allowed_symbols: str = "@$!%*?&"  # Only these non-alphanumerics may appear


@dataclass(frozen=True)
class UrlPolicy:
    """Accepted URL schemes."""

    allowed_schemes: frozenset[str] = frozenset({"http", "https"})


DEFAULT_PASSWORD_POLICY = PasswordPolicy()
DEFAULT_URL_POLICY = UrlPolicy()


# --- Form Input/Output ---


class CheckKind(Enum):
    """Field check to run."""

    EMAIL = "email"
    PHONE = "phone"
    PASSWORD = "password"
    PINCODE = "pincode"
    URL = "url"
    LENGTH = "length"


@dataclass(frozen=True)
class FieldCheck:
    """A single field to check."""

    field: str
    kind: CheckKind | str
    value: object = None
    min_length: int = 0  # LENGTH only
    max_length: int | None = None  # LENGTH only, None = unbounded


@dataclass(frozen=True)
class ValidateFormInput:
    """Input for validating a whole form."""

    checks: tuple[FieldCheck, ...]


@dataclass(frozen=True)
class FieldError:
    """A failed field check."""

    field: str
    kind: CheckKind
    message: str


@dataclass(frozen=True)
class ValidateFormOutput:
    """Output from form validation."""

    is_valid: bool
    errors: tuple[FieldError, ...] = field(default_factory=tuple)

    def errors_for(self, field_name: str) -> tuple[FieldError, ...]:
        return tuple(e for e in self.errors if e.field == field_name)


# --- Error Types ---


class ValidationComponentError(Exception):
    """Base validation component error."""

    pass


class UnknownCheckError(ValidationComponentError):
    """Requested check kind does not exist."""

    def __init__(self, kind: object) -> None:
        self.kind = kind
        super().__init__(f"Unknown check kind: {kind!r}")
