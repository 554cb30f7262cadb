import re


MAX_LOGGED_LENGTH = 200

SUSPICIOUS_PATTERNS = [
    re.compile(r"\b(select|union|insert|delete|from|drop table|where|script)\s\b", re.IGNORECASE),
    re.compile(r"<script\b[^>]*>(.*?)</script>", re.IGNORECASE),
    re.compile(r"[<>]javascript:", re.IGNORECASE),
    re.compile(r"\b(admin|root|password|passwd|pwd)\s\b", re.IGNORECASE),
]


def is_suspicious(*values: str) -> bool:
    return any(pattern.search(value) for pattern in SUSPICIOUS_PATTERNS for value in values)


def truncate(value: str, length: int = MAX_LOGGED_LENGTH) -> str:
    return value[:length] + "..." if len(value) > length else value
