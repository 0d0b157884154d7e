from __future__ import annotations

from typing import Iterable

from .request import RequestInfo

PREFETCH_PURPOSES = ("prefetch", "preview")

# Lower-case substrings of User-Agent headers sent by crawlers, monitors and tools.
# Treated as immutable process-wide configuration.
BOT_USER_AGENT_TOKENS: tuple[str, ...] = (
    "bot",
    "crawler",
    "spider",
    "crawling",
    "googlebot",
    "bingbot",
    "yandex",
    "baiduspider",
    "duckduckbot",
    "slurp",
    "facebookexternalhit",
    "facebookcatalog",
    "twitterbot",
    "linkedinbot",
    "embedly",
    "quora link preview",
    "pinterest",
    "slackbot",
    "vkshare",
    "w3c_validator",
    "whatsapp",
    "telegrambot",
    "discordbot",
    "applebot",
    "petalbot",
    "semrush",
    "ahrefs",
    "mj12bot",
    "dotbot",
    "headlesschrome",
    "phantomjs",
    "lighthouse",
    "pingdom",
    "uptimerobot",
    "statuscake",
    "gtmetrix",
    "curl",
    "wget",
    "python-requests",
    "python-urllib",
    "httpx",
    "aiohttp",
    "go-http-client",
    "java/",
    "okhttp",
    "libwww-perl",
    "apache-httpclient",
    "scrapy",
    "postman",
    "insomnia",
)


def ignore_hit(request: RequestInfo, bot_tokens: Iterable[str] = BOT_USER_AGENT_TOKENS) -> bool:
    """True when the request should not be tracked.

    Rejects empty User-Agents, browser prefetch and preview requests and User-Agents
    containing one of ``bot_tokens``.
    """
    user_agent = request.user_agent.strip().lower()
    if not user_agent:
        return True

    x_purpose = request.header("X-Purpose")
    purpose = request.header("Purpose")
    if request.header("X-Moz") == "prefetch" or x_purpose in PREFETCH_PURPOSES or purpose in PREFETCH_PURPOSES:
        return True

    return any(token.lower() in user_agent for token in bot_tokens if token)
