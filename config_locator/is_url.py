"""Predicate for recognizing fully qualified URLs."""

from urllib.parse import urlsplit

# Schemes accepted as fully qualified URLs. Anything else (including Windows
# drive letters such as "C:") is treated as a plain path.
KNOWN_SCHEMES = frozenset({"file", "http", "https", "ftp"})


def is_url(text: str | None) -> bool:
    """Check if the text is a URL with a known scheme.

    Raises ``ValueError`` if the text looks like a URL but cannot be parsed
    (e.g. an unterminated IPv6 host).
    """
    if not text:
        return False
    scheme = urlsplit(text).scheme.lower()
    if scheme not in KNOWN_SCHEMES:
        return False
    # Force netloc validation, which urlsplit performs lazily for some inputs.
    urlsplit(text).port  # noqa: B018
    return True
