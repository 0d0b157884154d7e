from __future__ import annotations

import logging
from typing import Iterable

from .bots import BOT_USER_AGENT_TOKENS, ignore_hit
from .hit import hit_from_request
from .request import RequestInfo
from .schema import Hit, HitOptions
from .storage import Store

logger = logging.getLogger(__name__)


class Tracker:
    """Filters requests and stores a hit for each accepted one.

    Holds no mutable state of its own, so one tracker can serve concurrent requests
    as long as the store can.
    """

    def __init__(
        self,
        store: Store,
        salt: str,
        bot_tokens: Iterable[str] = BOT_USER_AGENT_TOKENS,
        options: HitOptions | None = None,
    ) -> None:
        if not salt:
            raise ValueError("salt cannot be empty")
        self.store = store
        self.salt = salt
        self.bot_tokens = tuple(token.lower() for token in bot_tokens)
        self.options = options or HitOptions()

    def hit(self, request: RequestInfo, options: HitOptions | None = None) -> Hit | None:
        if ignore_hit(request, self.bot_tokens):
            logger.debug("ignoring request for %s", request.path)
            return None

        hit = hit_from_request(request, self.salt, options or self.options)
        self.store.save_hits([hit])
        logger.debug("tracked hit for %s", hit.path)
        return hit
