"""
URL-safe identifiers derived from free text.

`slugify` is total: any input, including emoji, control characters or a
string of pure symbols, yields a (possibly empty) slug and never raises.
"""
import re
import secrets
import unicodedata
from typing import Any

_NOT_SLUG = re.compile(r"[^a-z0-9]+")
SLUG_PATTERN = re.compile(r"(?:[a-z0-9]+(?:-[a-z0-9]+)*)?")


def _to_ascii(text: str) -> str:
    # NFKD splits "é" into "e" + combining accent; the accent (and anything
    # else without an ASCII form) is lost on encode
    decomposed = unicodedata.normalize("NFKD", text)
    return decomposed.encode("ascii", "ignore").decode("ascii")


def slugify(text: Any) -> str:
    if text is None:
        return ""
    if not isinstance(text, str):
        text = str(text)
    folded = _to_ascii(text.casefold()).lower()
    return _NOT_SLUG.sub("-", folded).strip("-")


def is_slug(value: Any) -> bool:
    return isinstance(value, str) and SLUG_PATTERN.fullmatch(value) is not None


def generate_url(text: Any, base_url: str) -> str:
    """
    Absolute URL for `text` under `base_url`.

    An empty slug still yields a usable URL: the base itself.
    """
    return f"{base_url.rstrip('/')}/{slugify(text)}"


def fallback_slug(prefix: str = "user") -> str:
    """Placeholder identifier for text that slugified to nothing."""
    return f"{slugify(prefix) or 'item'}-{secrets.token_hex(4)}"
