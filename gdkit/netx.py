"""Discovery of this machine's network address."""

import ipaddress
import socket
from functools import lru_cache

_V4_UNAVAILABLE = "ip v4: unavailable"
_V16_UNAVAILABLE = "ip v16: unavailable"
_PROBE_TARGETS = {socket.AF_INET: "192.0.2.1", socket.AF_INET6: "2001:db8::1"}


def _parse(text):
    try:
        ip = ipaddress.ip_address(text.split("%", 1)[0])
    except ValueError:
        return None
    if ip.version == 6 and ip.ipv4_mapped is not None:
        return ip.ipv4_mapped
    return ip


def _route_address(family):
    """Return the local address the kernel would use to reach a documentation address."""
    try:
        with socket.socket(family, socket.SOCK_DGRAM) as sock:
            sock.connect((_PROBE_TARGETS[family], 9))
            return sock.getsockname()[0]
    except OSError:
        return None


def _first_address(lookup_family, probe_families, versions, unavailable):
    error = None
    candidates = []
    try:
        for info in socket.getaddrinfo(socket.gethostname(), None, lookup_family):
            if info[0] in (socket.AF_INET, socket.AF_INET6):
                candidates.append(info[4][0])
    except OSError as exc:
        error = exc
    for family in probe_families:
        address = _route_address(family)
        if address:
            candidates.append(address)

    for candidate in candidates:
        ip = _parse(candidate)
        if ip is None or ip.version not in versions:
            continue
        if ip.is_loopback or ip.is_unspecified:
            continue
        return str(ip)
    return str(error) if error is not None else unavailable


@lru_cache(maxsize=None)
def get_ipv4():
    """Return the first non-loopback IPv4 address, or a message saying why there is none."""
    return _first_address(socket.AF_INET, (socket.AF_INET,), (4,), _V4_UNAVAILABLE)


@lru_cache(maxsize=None)
def get_ipv16():
    """Return the first non-loopback address of either family, or a message saying why not."""
    return _first_address(
        socket.AF_UNSPEC,
        (socket.AF_INET, socket.AF_INET6),
        (4, 6),
        _V16_UNAVAILABLE,
    )