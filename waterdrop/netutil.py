"""Discovery of this host's IPv4 addresses."""

from __future__ import annotations

import ipaddress
import socket
from typing import Iterable, Iterator

import psutil

_LINK_LOCAL_MULTICAST = ipaddress.ip_network("224.0.0.0/24")
_PRIVATE_NETWORKS = tuple(
    ipaddress.ip_network(net) for net in ("10.0.0.0/8", "172.16.0.0/12", "192.168.0.0/16")
)


def is_public_ipv4(address: str) -> bool:
    """Whether address is an IPv4 address outside loopback, link-local and private ranges."""
    ip = ipaddress.ip_address(address)
    if ip.version != 4:
        return False
    if ip.is_loopback or ip.is_link_local or ip in _LINK_LOCAL_MULTICAST:
        return False
    return not any(ip in net for net in _PRIVATE_NETWORKS)


def _ipv4_addresses(addrs: Iterable) -> Iterator[str]:
    for addr in addrs:
        if addr.family == socket.AF_INET:
            yield addr.address


def external_ip() -> list[str]:
    """Return the public IPv4 addresses of all non-loopback interfaces."""
    try:
        interfaces = psutil.net_if_addrs()
    except OSError:
        return []
    return [
        address
        for name, addrs in interfaces.items()
        if not name.startswith("lo")
        for address in _ipv4_addresses(addrs)
        if is_public_ipv4(address)
    ]


def internal_ip() -> str:
    """Return the first non-loopback IPv4 address of an interface that is up, or ""."""
    try:
        interfaces = psutil.net_if_addrs()
        stats = psutil.net_if_stats()
    except OSError:
        return ""
    for name, addrs in interfaces.items():
        stat = stats.get(name)
        if stat is None or not stat.isup or name.startswith("lo"):
            continue
        for address in _ipv4_addresses(addrs):
            if not ipaddress.ip_address(address).is_loopback:
                return address
    return ""