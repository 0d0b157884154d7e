from __future__ import annotations

from .bots import BOT_USER_AGENT_TOKENS, ignore_hit
from .fingerprint import fingerprint
from .hit import hit_from_request
from .request import RequestInfo
from .schema import Hit, HitOptions
from .tracker import Tracker

__all__ = [
    "BOT_USER_AGENT_TOKENS",
    "Hit",
    "HitOptions",
    "RequestInfo",
    "Tracker",
    "fingerprint",
    "hit_from_request",
    "ignore_hit",
]
