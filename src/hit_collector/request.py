from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping
from urllib.parse import parse_qs, urlsplit


@dataclass(frozen=True)
class RequestInfo:
    """The parts of an inbound HTTP request a hit is built from.

    ``url`` is the URL as received, ``request_uri`` the raw request-target
    (``/path?query``). Header names are matched case-insensitively.
    """

    url: str
    request_uri: str = ""
    headers: Mapping[str, str] = field(default_factory=dict)
    remote_addr: str = ""

    def __post_init__(self) -> None:
        normalized: dict[str, str] = {}
        for name, value in self.headers.items():
            normalized.setdefault(name.strip().lower(), value)
        object.__setattr__(self, "headers", normalized)

    @classmethod
    def from_url(cls, url: str, headers: Mapping[str, str] | None = None, remote_addr: str = "") -> RequestInfo:
        try:
            parts = urlsplit(url)
        except ValueError:
            return cls(url=url, request_uri=url, headers=headers or {}, remote_addr=remote_addr)

        request_uri = parts.path or "/"
        if parts.query:
            request_uri = f"{request_uri}?{parts.query}"
        return cls(url=url, request_uri=request_uri, headers=headers or {}, remote_addr=remote_addr)

    def header(self, name: str) -> str:
        return self.headers.get(name.lower(), "")

    @property
    def user_agent(self) -> str:
        return self.header("User-Agent")

    @property
    def path(self) -> str:
        try:
            parts = urlsplit(self.url)
        except ValueError:
            return ""
        if parts.netloc and not parts.path:
            return "/"
        return parts.path

    def query(self, name: str) -> str:
        try:
            values = parse_qs(urlsplit(self.url).query).get(name)
        except ValueError:
            return ""
        return values[0] if values else ""
