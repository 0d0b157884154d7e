from __future__ import annotations

from typing import Iterable


def strip_subdomain(hostname: str) -> str:
    """Reduce ``hostname`` to its last two labels.

    Not public-suffix aware: ``a.example.co.uk`` becomes ``co.uk``.
    """
    if not hostname:
        return ""
    return ".".join(hostname.split(".")[-2:])


def is_blacklisted(hostname: str, blacklist: Iterable[str], include_subdomains: bool = False) -> bool:
    if include_subdomains:
        hostname = strip_subdomain(hostname)
    return hostname.lower() in {entry.lower() for entry in blacklist}
