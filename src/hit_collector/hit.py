from __future__ import annotations

from urllib.parse import quote, urlsplit, urlunsplit

from .fingerprint import fingerprint
from .language import get_language
from .referrer import get_referrer
from .request import RequestInfo
from .schema import Hit, HitOptions, utc_now
from .text import (
    BROWSER_LIMIT,
    LANGUAGE_LIMIT,
    OS_LIMIT,
    PATH_LIMIT,
    REFERRER_LIMIT,
    URL_LIMIT,
    USER_AGENT_LIMIT,
    optional,
    shorten,
    valid_text,
)
from .useragent import parse_user_agent


# RFC 3986 pchar delimiters kept as-is in an overridden path.
PATH_SAFE_CHARS = "/%:@!$&'()*+,;="


def _override_path(request: RequestInfo, path: str) -> str:
    try:
        urlsplit(request.request_uri)
        parts = urlsplit(request.url)
    except ValueError:
        return request.url

    escaped = quote(valid_text(path), safe=PATH_SAFE_CHARS)
    return urlunsplit(parts._replace(path=escaped))


def hit_from_request(request: RequestInfo, salt: str, options: HitOptions | None = None) -> Hit:
    """Build a Hit for ``request``.

    The salt must stay the same between calls to recognize returning visitors. Run
    ``ignore_hit`` first, this function does not filter bots.
    """
    now = utc_now()  # first, to stay close to the time the request was received

    if options is None:
        options = HitOptions()

    if options.path:
        path = options.path
        request_url = _override_path(request, options.path)
    else:
        path = request.path
        request_url = request.url

    user_agent = request.user_agent
    ua_info = parse_user_agent(user_agent)
    referrer = get_referrer(
        request,
        options.referrer_domain_blacklist,
        options.referrer_domain_blacklist_includes_subdomains,
    )

    return Hit(
        tenant_id=options.tenant_id,
        fingerprint=fingerprint(request, salt),
        session=options.session,
        path=optional(shorten(path, PATH_LIMIT)),
        url=optional(shorten(request_url, URL_LIMIT)),
        language=optional(shorten(get_language(request.header("Accept-Language")) or "", LANGUAGE_LIMIT)),
        user_agent=optional(shorten(user_agent, USER_AGENT_LIMIT)),
        referrer=optional(shorten(referrer or "", REFERRER_LIMIT)),
        os=optional(shorten(ua_info.os, OS_LIMIT)),
        os_version=optional(shorten(ua_info.os_version, OS_LIMIT)),
        browser=optional(shorten(ua_info.browser, BROWSER_LIMIT)),
        browser_version=optional(shorten(ua_info.browser_version, BROWSER_LIMIT)),
        desktop=ua_info.is_desktop(),
        mobile=ua_info.is_mobile(),
        time=now,
    )
