from __future__ import annotations

from core.exceptions import ValidationError


class AuthValidationMixin:
    @staticmethod
    def _validate_registration(name: str, email: str, password: str) -> None:
        if not (name or "").strip():
            raise ValidationError("Name is required.", code="NAME_REQUIRED")
        if not (email or "").strip():
            raise ValidationError("Email is required.", code="EMAIL_REQUIRED")
        if "@" not in email:
            raise ValidationError("Invalid email format.", code="INVALID_EMAIL")
        if not password:
            raise ValidationError("Password is required.", code="PASSWORD_REQUIRED")
