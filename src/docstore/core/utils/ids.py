"""Identifier generation for stored documents"""

from uuid import uuid4


def new_id() -> str:
    """Return a fresh random identifier (uuid4, canonical 36-char form)."""
    return str(uuid4())


def is_blank(value: str | None) -> bool:
    """True for None, the empty string, or whitespace-only strings."""
    return value is None or not value.strip()
