"""Text normalization helpers shared by the entity and the directory."""

from typing import Optional, Tuple

from ..config.settings import PHONE_STRIP_PATTERN


def normalize_phone(value: str) -> str:
    """Strip every character that is not a digit or ``+``.

    Idempotent: ``normalize_phone(normalize_phone(x)) == normalize_phone(x)``.
    """
    return PHONE_STRIP_PATTERN.sub("", value)


def to_none_if_empty(value: Optional[str]) -> Optional[str]:
    """Map ``""`` (and ``None``) to ``None``; leave anything else untouched."""
    return value or None


def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def split_full_name(full_name: str) -> Tuple[str, Optional[str]]:
    """
    Split a full name into ``(first_name, last_name)``.

    Tokens are separated by single spaces and blank tokens are ignored, so
    ``"John Doe "`` gives ``("John", "Doe")`` and ``"John"`` gives
    ``("John", None)``.

    Raises:
        ValueError: if the name holds more than two tokens, or none at all.
    """
    parts = [part for part in full_name.split(" ") if part.strip()]
    if len(parts) == 1:
        return parts[0], None
    if len(parts) == 2:
        return parts[0], parts[1]
    raise ValueError(
        f"FullName must contain only first name and last name, current split result: {parts}"
    )
