from dataclasses import dataclass

import email_validator


MAX_EMAIL_LENGTH = 254

DISPOSABLE_EMAIL_DOMAINS = frozenset(
    {
        "10minutemail.com",
        "mailinator.com",
        "guerrillamail.com",
        "tempmail.org",
        "throwaway.email",
        "temp-mail.org",
        "getairmail.com",
        "sharklasers.com",
    }
)

COMMON_DOMAIN_TYPOS = {
    "gmial.com": "gmail.com",
    "gmai.com": "gmail.com",
    "yahooo.com": "yahoo.com",
    "hotmial.com": "hotmail.com",
    "outlok.com": "outlook.com",
}

INVALID_FORMAT = "Invalid email format"
TOO_LONG = "Email address is too long"
DISPOSABLE = "Disposable email addresses are not allowed. Please use a permanent email address."


@dataclass(frozen=True)
class EmailValidationResult:
    is_valid: bool
    error: str | None = None


def validate_email(email: str) -> EmailValidationResult:
    """Check format, length and domain of an email address without any network access."""

    try:
        parsed = email_validator.validate_email(email, check_deliverability=False, allow_quoted_local=True)
    except email_validator.EmailNotValidError:
        return EmailValidationResult(False, INVALID_FORMAT)

    if not parsed.normalized:
        return EmailValidationResult(False, INVALID_FORMAT)

    if len(email) > MAX_EMAIL_LENGTH:
        return EmailValidationResult(False, TOO_LONG)

    local_part, _, domain = email.rpartition("@")
    domain = domain.lower()

    if domain in DISPOSABLE_EMAIL_DOMAINS:
        return EmailValidationResult(False, DISPOSABLE)

    if suggestion := COMMON_DOMAIN_TYPOS.get(domain):
        return EmailValidationResult(False, f"Did you mean {local_part}@{suggestion}?")

    return EmailValidationResult(True)
