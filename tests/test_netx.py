import ipaddress
import socket
from unittest import mock

import pytest

from gdkit import netx


@pytest.fixture(autouse=True)
def _clear_cache():
    netx.get_ipv4.cache_clear()
    netx.get_ipv16.cache_clear()
    yield
    netx.get_ipv4.cache_clear()
    netx.get_ipv16.cache_clear()


def _info(family, address):
    return (family, socket.SOCK_STREAM, 6, "", (address, 0))


def _is_loopback(text):
    try:
        return ipaddress.ip_address(text).is_loopback
    except ValueError:
        return False


def test_get_ipv4_real():
    got = netx.get_ipv4()
    assert got
    assert not _is_loopback(got)


def test_get_ipv16_real():
    got = netx.get_ipv16()
    assert got
    assert not _is_loopback(got)


def test_get_ipv4_skips_loopback():
    infos = [_info(socket.AF_INET, "127.0.0.1"), _info(socket.AF_INET, "10.1.2.3")]
    with mock.patch("socket.getaddrinfo", return_value=infos):
        assert netx.get_ipv4() == "10.1.2.3"


def test_get_ipv16_accepts_ipv6():
    infos = [_info(socket.AF_INET6, "::1"), _info(socket.AF_INET6, "fe80::1%eth0")]
    with mock.patch("socket.getaddrinfo", return_value=infos):
        assert netx.get_ipv16() == "fe80::1"


def test_unavailable():
    infos = [_info(socket.AF_INET, "127.0.0.1")]
    with mock.patch("socket.getaddrinfo", return_value=infos), mock.patch(
        "socket.socket", side_effect=OSError("no route")
    ):
        assert netx.get_ipv4() == "ip v4: unavailable"
        assert netx.get_ipv16() == "ip v16: unavailable"


def test_lookup_error_message():
    with mock.patch(
        "socket.getaddrinfo", side_effect=socket.gaierror("lookup failed")
    ), mock.patch("socket.socket", side_effect=OSError("no route")):
        assert netx.get_ipv4() == "lookup failed"


def test_result_is_cached():
    infos = [_info(socket.AF_INET, "10.1.2.3")]
    with mock.patch("socket.getaddrinfo", return_value=infos) as lookup:
        first = netx.get_ipv4()
        second = netx.get_ipv4()
    assert first == second == "10.1.2.3"
    assert lookup.call_count == 1