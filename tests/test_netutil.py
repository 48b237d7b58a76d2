import ipaddress
import socket
from types import SimpleNamespace
from unittest import mock

import pytest

from waterdrop.netutil import external_ip, internal_ip, is_public_ipv4


def _v4(address):
    return SimpleNamespace(family=socket.AF_INET, address=address)


def _v6(address):
    return SimpleNamespace(family=socket.AF_INET6, address=address)


FAKE_ADDRS = {
    "lo": [_v4("127.0.0.1"), _v4("198.51.100.9")],
    "eth0": [_v4("10.0.0.2"), _v4("203.0.113.7"), _v4("169.254.1.1"), _v6("2001:db8::1")],
    "eth1": [_v4("192.168.1.5"), _v4("172.20.0.3"), _v4("224.0.0.5")],
}

FAKE_STATS = {
    "lo": SimpleNamespace(isup=True),
    "eth0": SimpleNamespace(isup=False),
    "eth1": SimpleNamespace(isup=True),
}


@pytest.mark.parametrize(
    "address, expected",
    [
        ("203.0.113.7", True),
        ("8.8.8.8", True),
        ("10.1.2.3", False),
        ("172.16.0.1", False),
        ("172.31.255.255", False),
        ("172.32.0.1", True),
        ("192.168.0.1", False),
        ("127.0.0.1", False),
        ("169.254.10.10", False),
        ("224.0.0.1", False),
        ("2001:db8::1", False),
    ],
)
def test_is_public_ipv4(address, expected):
    assert is_public_ipv4(address) is expected


def test_is_public_ipv4_rejects_garbage():
    with pytest.raises(ValueError):
        is_public_ipv4("not an address")


@mock.patch("psutil.net_if_addrs", return_value=FAKE_ADDRS)
def test_external_ip(_addrs):
    assert external_ip() == ["203.0.113.7"]


@mock.patch("psutil.net_if_stats", return_value=FAKE_STATS)
@mock.patch("psutil.net_if_addrs", return_value=FAKE_ADDRS)
def test_internal_ip_skips_down_and_loopback(_addrs, _stats):
    assert internal_ip() == "192.168.1.5"


@mock.patch("psutil.net_if_stats", return_value={"lo": SimpleNamespace(isup=True)})
@mock.patch("psutil.net_if_addrs", return_value={"lo": [_v4("127.0.0.1")]})
def test_internal_ip_none_found(_addrs, _stats):
    assert internal_ip() == ""


@mock.patch("psutil.net_if_addrs", side_effect=OSError("no interfaces"))
def test_errors_give_empty_results(_addrs):
    assert external_ip() == []
    assert internal_ip() == ""


def test_internal_ip_on_this_host():
    ip = internal_ip()
    assert ip == "" or (
        ipaddress.ip_address(ip).version == 4 and not ipaddress.ip_address(ip).is_loopback
    )


def test_external_ip_on_this_host():
    assert all(is_public_ipv4(ip) for ip in external_ip())