from __future__ import annotations

PATH_LIMIT = 2000
URL_LIMIT = 2000
LANGUAGE_LIMIT = 10
USER_AGENT_LIMIT = 200
REFERRER_LIMIT = 200
OS_LIMIT = 20
BROWSER_LIMIT = 20


def shorten(value: str, max_bytes: int) -> str:
    """Cut ``value`` to at most ``max_bytes`` UTF-8 bytes.

    The limit counts bytes, not characters. A multi-byte character split by the cut is
    dropped entirely, so the result may be a few bytes shorter than the limit. Bytes
    that are not valid UTF-8, such as lone surrogates from undecodable input, are
    dropped as well.
    """
    limit = max(0, max_bytes)
    encoded = value.encode("utf-8", errors="surrogatepass")
    return encoded[:limit].decode("utf-8", errors="ignore")


def valid_text(value: str) -> str:
    """``value`` without characters that cannot be encoded as UTF-8."""
    return value.encode("utf-8", errors="surrogatepass").decode("utf-8", errors="ignore")


def optional(value: str) -> str | None:
    return value or None
