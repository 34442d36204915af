"""Field shape checks for attendee contact details."""
import re
from typing import Any

_EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+", re.IGNORECASE)
_CONTACT_NUMBER_RE = re.compile(r"\d{10}", re.ASCII)


def is_valid_email(value: Any) -> bool:
    """True for ``local@domain.tld`` shapes: no whitespace or extra ``@``, a dot in the domain."""
    return isinstance(value, str) and _EMAIL_RE.fullmatch(value) is not None


def is_valid_contact_number(value: Any) -> bool:
    """True for exactly ten ASCII digits."""
    return isinstance(value, str) and _CONTACT_NUMBER_RE.fullmatch(value) is not None
