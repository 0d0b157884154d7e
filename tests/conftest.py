import pytest

from hit_collector.request import RequestInfo

CHROME_UA = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
IPHONE_UA = (
    "Mozilla/5.0 (iPhone; CPU iPhone OS 17_1 like Mac OS X) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/17.1 Mobile/15E148 Safari/604.1"
)


@pytest.fixture
def chrome_ua() -> str:
    return CHROME_UA


@pytest.fixture
def iphone_ua() -> str:
    return IPHONE_UA


@pytest.fixture
def browser_request(chrome_ua: str) -> RequestInfo:
    return RequestInfo.from_url(
        "https://example.com/blog/post?utm_source=news",
        headers={
            "User-Agent": chrome_ua,
            "Accept-Language": "de-DE,de;q=0.9,en;q=0.8",
            "Referer": "https://news.ycombinator.com/item?id=1#comments",
        },
        remote_addr="203.0.113.7:51234",
    )
