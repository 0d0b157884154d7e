from __future__ import annotations

from typing import Iterable
from urllib.parse import urlsplit, urlunsplit

from .domains import is_blacklisted
from .request import RequestInfo

# Checked in order when the Referer header is missing, first non-empty value wins.
REFERRER_QUERY_PARAMS = ("ref", "referer", "referrer")


def referrer_from_request(request: RequestInfo) -> str:
    referrer = request.header("Referer")
    if referrer:
        return referrer

    for param in REFERRER_QUERY_PARAMS:
        value = request.query(param)
        if value:
            return value
    return ""


def get_referrer(
    request: RequestInfo,
    domain_blacklist: Iterable[str] = (),
    include_subdomains: bool = False,
) -> str | None:
    """Referrer URL without query and fragment, or None.

    None is returned when there is no referrer, when it cannot be parsed or has no
    hostname, and when its hostname is blacklisted.
    """
    referrer = referrer_from_request(request)
    if not referrer:
        return None

    try:
        parts = urlsplit(referrer.strip())
        hostname = parts.hostname
    except ValueError:
        return None

    if not hostname:
        return None

    if is_blacklisted(hostname, domain_blacklist, include_subdomains):
        return None

    return urlunsplit((parts.scheme, parts.netloc, parts.path, "", "")) or None
