# norte_api/slugs.py
"""URL slugs for catalog listings.

Every slug the service produces or compares goes through `normalize`, so a
listing shared from the catalog and the slug the preview route receives
always agree.
"""
import re

_DISALLOWED = re.compile(r"[^a-z0-9_\s-]")
_SEPARATORS = re.compile(r"[\s_-]+")
_ENCODED_SPACE = re.compile(r"%20", re.IGNORECASE)


def normalize(name) -> str:
    if not name:
        return ""
    text = str(name).lower().strip()
    text = _DISALLOWED.sub("", text)
    text = _SEPARATORS.sub("-", text)
    return text.strip("-")


def extract_slug_token(raw) -> str:
    """Keep the part of a raw route slug before the first space or ``%20``.

    Shared links sometimes arrive with the message text glued after the slug
    (``/auto/vw-gol%20mirá%20este``).
    """
    if not raw:
        return ""
    token = _ENCODED_SPACE.split(str(raw), maxsplit=1)[0]
    token = token.split(" ", 1)[0]
    return token.lower()
