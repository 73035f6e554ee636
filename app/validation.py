# app/validation.py
import logging
from enum import Enum
from typing import Optional, Type, TypeVar

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


def positive_int(value, field: str) -> Optional[int]:
    """Return value if it is a positive int, otherwise None (caller keeps the old value)."""
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        logger.warning("Ignoring invalid %s: %r", field, value)
        return None
    return value


def enum_member(value, enum_cls: Type[E], field: str) -> Optional[E]:
    if value is None:
        return None
    try:
        return enum_cls(value)
    except ValueError:
        logger.warning("Ignoring unknown %s: %r", field, value)
        return None


def non_blank(text: Optional[str]) -> Optional[str]:
    """Blank custom text counts as absent; anything else is kept verbatim."""
    if text is None:
        return None
    if not isinstance(text, str) or not text.strip():
        logger.warning("Ignoring blank custom text")
        return None
    return text
