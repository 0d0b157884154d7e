from __future__ import annotations

import hashlib

from .request import RequestInfo

# Proxy headers carrying the client address, most specific first.
IP_HEADERS = ("CF-Connecting-IP", "True-Client-IP", "X-Forwarded-For", "X-Real-IP")


def _strip_port(address: str) -> str:
    address = address.strip()
    if address.startswith("["):
        return address[1:].split("]", 1)[0]
    if address.count(":") == 1:
        return address.split(":", 1)[0]
    return address


def get_ip(request: RequestInfo) -> str:
    for name in IP_HEADERS:
        value = request.header(name)
        if value:
            # X-Forwarded-For lists the originating client first.
            first = value.split(",", 1)[0].strip()
            if first:
                return _strip_port(first)
    return _strip_port(request.remote_addr)


def fingerprint(request: RequestInfo, salt: str) -> str:
    """Salted one-way visitor identifier.

    The same salt, user agent and client IP always give the same 64 character hex
    digest. Rotating the salt starts a new set of visitor identities.
    """
    digest = hashlib.sha256()
    digest.update(salt.encode("utf-8", errors="surrogatepass"))
    digest.update(b"\x00")
    digest.update(request.user_agent.encode("utf-8", errors="surrogatepass"))
    digest.update(b"\x00")
    digest.update(get_ip(request).encode("utf-8", errors="surrogatepass"))
    return digest.hexdigest()
