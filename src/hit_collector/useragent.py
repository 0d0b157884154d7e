from __future__ import annotations

import re
from dataclasses import dataclass

OS_WINDOWS = "Windows"
OS_WINDOWS_PHONE = "Windows Phone"
OS_MAC = "Mac"
OS_LINUX = "Linux"
OS_ANDROID = "Android"
OS_IOS = "iOS"

BROWSER_CHROME = "Chrome"
BROWSER_FIREFOX = "Firefox"
BROWSER_SAFARI = "Safari"
BROWSER_OPERA = "Opera"
BROWSER_EDGE = "Edge"
BROWSER_IE = "IE"

DESKTOP_OS = {OS_WINDOWS, OS_MAC, OS_LINUX}
MOBILE_OS = {OS_ANDROID, OS_IOS, OS_WINDOWS_PHONE}

# Order matters: Windows Phone before Windows, iOS before Mac, Android before Linux.
_OS_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    (OS_WINDOWS_PHONE, re.compile(r"windows phone(?: os)? ([\d.]+)?", re.IGNORECASE)),
    (OS_WINDOWS, re.compile(r"windows nt ([\d.]+)?", re.IGNORECASE)),
    (OS_IOS, re.compile(r"(?:iphone|ipad|ipod).*? os ([\d_]+)?", re.IGNORECASE)),
    (OS_MAC, re.compile(r"mac os x ?([\d_.]+)?", re.IGNORECASE)),
    (OS_ANDROID, re.compile(r"android ?([\d.]+)?", re.IGNORECASE)),
    (OS_LINUX, re.compile(r"linux", re.IGNORECASE)),
)

_BROWSER_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    (BROWSER_EDGE, re.compile(r"edg(?:e|a|ios)?/([\d.]+)", re.IGNORECASE)),
    (BROWSER_OPERA, re.compile(r"(?:opr|opera)/([\d.]+)", re.IGNORECASE)),
    (BROWSER_FIREFOX, re.compile(r"(?:firefox|fxios)/([\d.]+)", re.IGNORECASE)),
    (BROWSER_CHROME, re.compile(r"(?:chrome|crios)/([\d.]+)", re.IGNORECASE)),
    (BROWSER_SAFARI, re.compile(r"version/([\d.]+).*safari/", re.IGNORECASE)),
    (BROWSER_IE, re.compile(r"(?:msie |trident/.*rv:)([\d.]+)", re.IGNORECASE)),
)


@dataclass(frozen=True)
class UserAgentInfo:
    os: str = ""
    os_version: str = ""
    browser: str = ""
    browser_version: str = ""

    def is_desktop(self) -> bool:
        return self.os in DESKTOP_OS

    def is_mobile(self) -> bool:
        return self.os in MOBILE_OS


def _match(patterns: tuple[tuple[str, re.Pattern[str]], ...], user_agent: str) -> tuple[str, str]:
    for name, pattern in patterns:
        found = pattern.search(user_agent)
        if found:
            version = found.group(1) if found.groups() else None
            return name, (version or "").replace("_", ".").strip(".")
    return "", ""


def parse_user_agent(user_agent: str) -> UserAgentInfo:
    """Coarse OS and browser classification of a User-Agent string."""
    if not user_agent:
        return UserAgentInfo()

    os_name, os_version = _match(_OS_PATTERNS, user_agent)
    browser, browser_version = _match(_BROWSER_PATTERNS, user_agent)
    return UserAgentInfo(os=os_name, os_version=os_version, browser=browser, browser_version=browser_version)
