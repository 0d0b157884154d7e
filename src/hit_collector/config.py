from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .bots import BOT_USER_AGENT_TOKENS
from .schema import HitOptions

TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class CollectorConfig:
    salt: str
    referrer_domain_blacklist: tuple[str, ...]
    include_subdomains: bool
    extra_bot_tokens: tuple[str, ...]
    store_path: Path

    @property
    def bot_tokens(self) -> tuple[str, ...]:
        return BOT_USER_AGENT_TOKENS + self.extra_bot_tokens

    def hit_options(self, path: str = "", tenant_id: int | None = None) -> HitOptions:
        return HitOptions(
            tenant_id=tenant_id,
            path=path,
            referrer_domain_blacklist=self.referrer_domain_blacklist,
            referrer_domain_blacklist_includes_subdomains=self.include_subdomains,
        )


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def _split_list(value: str | None, lower: bool = False) -> tuple[str, ...]:
    if not value:
        return ()
    items = [part.strip() for part in value.split(",") if part.strip()]
    if lower:
        items = [item.lower() for item in items]
    return tuple(items)


def load_config(env_file: str | None = None) -> CollectorConfig:
    if env_file:
        load_dotenv(env_file, override=False)
    else:
        load_dotenv(override=False)

    salt = _clean(os.getenv("HIT_SALT"))
    if not salt:
        raise RuntimeError("HIT_SALT is not configured")

    return CollectorConfig(
        salt=salt,
        referrer_domain_blacklist=_split_list(_clean(os.getenv("HIT_REFERRER_BLACKLIST")), lower=True),
        include_subdomains=(_clean(os.getenv("HIT_REFERRER_BLACKLIST_SUBDOMAINS")) or "").lower() in TRUE_VALUES,
        extra_bot_tokens=_split_list(_clean(os.getenv("HIT_BOT_TOKENS")), lower=True),
        store_path=Path(_clean(os.getenv("HIT_STORE_PATH")) or "hits.jsonl").expanduser(),
    )
