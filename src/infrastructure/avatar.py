"""Gravatar URL construction."""

import hashlib
from urllib.parse import urlencode

from core.config import settings


def gravatar_url(email: str, size: int = 200, rating: str = "pg", default: str = "mm") -> str:
    """Build the gravatar URL for an email address."""
    digest = hashlib.md5(email.strip().lower().encode("utf-8")).hexdigest()
    query = urlencode({"s": size, "r": rating, "d": default})
    return f"{settings.gravatar_base_url}/{digest}?{query}"
