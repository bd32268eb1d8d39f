"""Input validation for user-supplied values."""

from __future__ import annotations

import re

MAX_URL_LENGTH = 2048

SHELL_METACHARS = (";", "&", "|", "$", "`", "\n", "\r", "<", ">", "(", ")", "{", "}")

_GIT_URL_PATTERN = re.compile(r"^(https://|git@|ssh://).+")


class ValidationError(ValueError):
    """Raised when an input fails validation."""


def validate_git_url(url: str) -> None:
    """Check that a string is an acceptable git remote URL; raise ValidationError if not."""
    if url == "":
        raise ValidationError("URL cannot be empty")
    if len(url.encode("utf-8")) > MAX_URL_LENGTH:
        raise ValidationError(
            f"URL exceeds maximum length of {MAX_URL_LENGTH} characters"
        )
    if contains_shell_metachars(url):
        raise ValidationError("URL contains shell metacharacters")
    if not _GIT_URL_PATTERN.match(url):
        raise ValidationError(
            "invalid git URL format; must start with https://, git@, or ssh://"
        )


def sanitize_input(text: str, max_len: int) -> str:
    """Trim whitespace and check basic constraints; return the trimmed text."""
    sanitized = text.strip()
    if sanitized == "":
        raise ValidationError("input cannot be empty or whitespace only")
    if len(sanitized.encode("utf-8")) > max_len:
        raise ValidationError(f"input exceeds maximum length of {max_len} characters")
    if "\n" in sanitized:
        raise ValidationError("multiline input not allowed")
    return sanitized


def contains_shell_metachars(s: str) -> bool:
    """Return True if the string holds any shell metacharacter."""
    return any(char in s for char in SHELL_METACHARS)