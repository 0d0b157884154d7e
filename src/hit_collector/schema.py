from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator

OPTIONAL_TEXT_FIELDS = (
    "path",
    "url",
    "language",
    "user_agent",
    "referrer",
    "os",
    "os_version",
    "browser",
    "browser_version",
)


class Hit(BaseModel):
    """A single accepted page view, ready to be stored.

    Optional text fields are either None or non-empty. None means the value could not
    be determined for the request.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    tenant_id: int | None = None
    fingerprint: str = Field(min_length=1)
    session: datetime | None = None
    path: str | None = None
    url: str | None = None
    language: str | None = None
    user_agent: str | None = None
    referrer: str | None = None
    os: str | None = None
    os_version: str | None = None
    browser: str | None = None
    browser_version: str | None = None
    desktop: bool = False
    mobile: bool = False
    time: datetime

    @field_validator(*OPTIONAL_TEXT_FIELDS)
    @classmethod
    def _reject_empty(cls, value: str | None) -> str | None:
        if value is not None and value == "":
            raise ValueError("optional text fields must be None or non-empty")
        return value

    def __str__(self) -> str:
        return self.model_dump_json()


class HitOptions(BaseModel):
    """Per-call settings for building a hit. Never modified by the pipeline."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    # Splits the data between multiple tenants.
    tenant_id: int | None = None
    # Overwrites the stored path, the URL is rewritten to match. Empty keeps the request path.
    path: str = ""
    # Referrers from these hostnames are not stored, e.g. your own site.
    referrer_domain_blacklist: tuple[str, ...] = ()
    # Fold referrer hostnames to their last two labels before matching, so
    # blog.example.com is treated like example.com.
    referrer_domain_blacklist_includes_subdomains: bool = False
    # First time this visitor was seen. None disables session tracking.
    session: datetime | None = None


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
