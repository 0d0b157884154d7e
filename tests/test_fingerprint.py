from hit_collector.fingerprint import fingerprint, get_ip
from hit_collector.request import RequestInfo

USER_AGENT = "Mozilla/5.0 (X11; Linux x86_64; rv:121.0) Gecko/20100101 Firefox/121.0"


def _request(**headers: str) -> RequestInfo:
    return RequestInfo.from_url("https://example.com/", headers={"User-Agent": USER_AGENT, **headers}, remote_addr="198.51.100.4:443")


def test_fingerprint_is_deterministic() -> None:
    assert fingerprint(_request(), "salt") == fingerprint(_request(), "salt")


def test_fingerprint_depends_on_salt() -> None:
    request = _request()
    values = {fingerprint(request, f"salt-{i}") for i in range(200)}
    assert len(values) == 200


def test_fingerprint_does_not_contain_ip() -> None:
    value = fingerprint(_request(), "salt")
    assert len(value) == 64
    assert "198.51.100.4" not in value
    int(value, 16)


def test_fingerprint_depends_on_user_agent_and_ip() -> None:
    base = fingerprint(_request(), "salt")
    other_ua = RequestInfo.from_url("https://example.com/", headers={"User-Agent": "Other"}, remote_addr="198.51.100.4:443")
    other_ip = RequestInfo.from_url("https://example.com/", headers={"User-Agent": USER_AGENT}, remote_addr="198.51.100.5:443")
    assert fingerprint(other_ua, "salt") != base
    assert fingerprint(other_ip, "salt") != base


def test_fingerprint_ignores_remote_port() -> None:
    a = RequestInfo.from_url("https://example.com/", headers={"User-Agent": USER_AGENT}, remote_addr="198.51.100.4:1000")
    b = RequestInfo.from_url("https://example.com/", headers={"User-Agent": USER_AGENT}, remote_addr="198.51.100.4:2000")
    assert fingerprint(a, "salt") == fingerprint(b, "salt")


def test_get_ip_prefers_proxy_headers() -> None:
    assert get_ip(_request()) == "198.51.100.4"
    assert get_ip(_request(**{"X-Real-IP": "10.0.0.1"})) == "10.0.0.1"
    assert get_ip(_request(**{"X-Forwarded-For": "192.0.2.1, 10.0.0.2", "X-Real-IP": "10.0.0.1"})) == "192.0.2.1"
    assert get_ip(_request(**{"CF-Connecting-IP": "192.0.2.9", "X-Forwarded-For": "192.0.2.1"})) == "192.0.2.9"


def test_get_ip_ipv6() -> None:
    request = RequestInfo.from_url("https://example.com/", remote_addr="[2001:db8::1]:8080")
    assert get_ip(request) == "2001:db8::1"
    request = RequestInfo.from_url("https://example.com/", headers={"X-Real-IP": "2001:db8::2"})
    assert get_ip(request) == "2001:db8::2"


def test_fingerprint_accepts_undecodable_user_agent() -> None:
    request = RequestInfo.from_url("https://example.com/", headers={"User-Agent": "Mozilla\udcff"}, remote_addr="198.51.100.4")
    value = fingerprint(request, "salt\ud800")
    assert value == fingerprint(request, "salt\ud800")
    assert len(value) == 64
