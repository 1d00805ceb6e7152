# credvault/core/validation.py

from dataclasses import dataclass
from typing import Dict, List

from email_validator import EmailNotValidError, validate_email

from credvault.core.errors import ValidationError, field_error
from credvault.core.security import BCRYPT_MAX_BYTES


# -------------------------------
# Strong password policy
# -------------------------------

@dataclass(frozen=True)
class PasswordPolicy:
    """
    Character-class minimums a signup password must meet.
    Defaults follow express-validator's isStrongPassword.
    """
    min_length: int = 8
    min_lowercase: int = 1
    min_uppercase: int = 1
    min_numbers: int = 1
    min_symbols: int = 1

    @classmethod
    def from_settings(cls, settings) -> "PasswordPolicy":
        return cls(
            min_length=settings.PASSWORD_MIN_LENGTH,
            min_lowercase=settings.PASSWORD_MIN_LOWERCASE,
            min_uppercase=settings.PASSWORD_MIN_UPPERCASE,
            min_numbers=settings.PASSWORD_MIN_NUMBERS,
            min_symbols=settings.PASSWORD_MIN_SYMBOLS,
        )

    def is_strong(self, password: str) -> bool:
        lower = sum(1 for c in password if c.islower())
        upper = sum(1 for c in password if c.isupper())
        numbers = sum(1 for c in password if c.isdigit())
        symbols = sum(1 for c in password if not c.isalnum())
        return (
            len(password) >= self.min_length
            and lower >= self.min_lowercase
            and upper >= self.min_uppercase
            and numbers >= self.min_numbers
            and symbols >= self.min_symbols
        )


# -------------------------------
# Field rules
# -------------------------------

def is_valid_email(email: str) -> bool:
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def validate_signup(username: str, email: str, password: str, policy: PasswordPolicy) -> None:
    errors: List[Dict[str, str]] = []

    if not username.strip():
        errors.append(field_error("username", "Username cannot be empty"))
    if not is_valid_email(email):
        errors.append(field_error("email", "Enter a valid email address"))
    if len(password) < policy.min_length:
        errors.append(field_error("password", f"Password must be at least {policy.min_length} characters"))
    if not policy.is_strong(password):
        errors.append(field_error("password", "Please enter a strong password"))
    if "\x00" in password:
        errors.append(field_error("password", "Password cannot contain NUL characters"))
    try:
        if len(password.encode("utf-8")) > BCRYPT_MAX_BYTES:
            errors.append(field_error("password", f"Password cannot be longer than {BCRYPT_MAX_BYTES} bytes"))
    except UnicodeEncodeError:
        errors.append(field_error("password", "Password contains invalid characters"))

    if errors:
        raise ValidationError(errors)


def validate_login(email: str, password: str) -> None:
    errors: List[Dict[str, str]] = []

    if not email:
        errors.append(field_error("email", "Email cannot be empty"))
    elif not is_valid_email(email):
        errors.append(field_error("email", "Enter a valid email address"))
    if not password:
        errors.append(field_error("password", "Password cannot be empty"))

    if errors:
        raise ValidationError(errors)
