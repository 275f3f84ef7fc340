from pydantic import BaseModel, Field


class PasswordRules(BaseModel):
    min_length: int = Field(default=8, ge=1)
    allowed_symbols: str = "@$!%*?&"

class UrlRules(BaseModel):
    allowed_schemes: list[str] = Field(default_factory=lambda: ["http", "https"])

class ValidationRules(BaseModel):
    password: PasswordRules = Field(default_factory=PasswordRules)
    url: UrlRules = Field(default_factory=UrlRules)

class SanitizeRules(BaseModel):
    max_length: int = Field(default=10000, ge=0)
    key_max_length: int = Field(default=100, ge=0)
    allow_html: bool = False
    trim: bool = True

class Rules(BaseModel):
    rules_version: str
    validation: ValidationRules = Field(default_factory=ValidationRules)
    sanitize: SanitizeRules = Field(default_factory=SanitizeRules)
