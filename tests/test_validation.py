"""Tests for address and state validation."""

import pytest

from netcfg_lib.netplan import (
    AddressFamilyState,
    Family,
    Mode,
    ValidationError,
    validate_ipv4_cidr,
    validate_ipv6_cidr,
    validate_state,
)


def test_ipv4_cidr():
    assert validate_ipv4_cidr("192.168.1.100/24")
    assert validate_ipv4_cidr("10.0.0.5/32")


def test_ipv4_cidr_requires_prefix():
    assert not validate_ipv4_cidr("192.168.1.1")


def test_ipv4_cidr_rejects_bad_octet_and_prefix():
    assert not validate_ipv4_cidr("999.1.1.1/24")
    assert not validate_ipv4_cidr("10.0.0.5/33")
    assert not validate_ipv4_cidr("2001:db8::1/64")


def test_ipv6_cidr():
    assert validate_ipv6_cidr("2001:db8::1/64")
    assert not validate_ipv6_cidr("2001:db8::1")
    assert not validate_ipv6_cidr("2001:db8::1/129")
    assert not validate_ipv6_cidr("10.0.0.5/24")


@pytest.mark.parametrize("address", ["999.1.1.1/24", "192.168.1.1"])
def test_static_ipv4_rejects_malformed_address(address):
    with pytest.raises(ValidationError):
        validate_state(Family.IPV4, AddressFamilyState(mode=Mode.STATIC, address=address))


def test_static_requires_address():
    with pytest.raises(ValidationError, match="requires an address"):
        validate_state(Family.IPV4, AddressFamilyState(mode=Mode.STATIC))


def test_static_gateway_must_match_family():
    state = AddressFamilyState(mode=Mode.STATIC, address="10.0.0.5/24", gateway="2001:db8::1")
    with pytest.raises(ValidationError, match="gateway"):
        validate_state(Family.IPV4, state)


def test_static_dns_must_be_valid():
    state = AddressFamilyState(mode=Mode.STATIC, address="10.0.0.5/24", dns_servers=("1.1.1.1", "8.8.8"))
    with pytest.raises(ValidationError, match="8.8.8"):
        validate_state(Family.IPV4, state)


def test_dns_not_accepted_for_ipv6():
    state = AddressFamilyState(mode=Mode.STATIC, address="2001:db8::1/64", dns_servers=("1.1.1.1",))
    with pytest.raises(ValidationError):
        validate_state(Family.IPV6, state)


def test_auto_is_ipv6_only():
    validate_state(Family.IPV6, AddressFamilyState(mode=Mode.AUTO))
    with pytest.raises(ValidationError, match="not available"):
        validate_state(Family.IPV4, AddressFamilyState(mode=Mode.AUTO))


def test_parameters_only_in_static_mode():
    with pytest.raises(ValidationError):
        validate_state(Family.IPV4, AddressFamilyState(mode=Mode.DHCP, address="10.0.0.5/24"))


def test_valid_static_states():
    validate_state(Family.IPV4, AddressFamilyState(
        mode=Mode.STATIC, address="10.0.0.5/24", gateway="10.0.0.1", dns_servers=("1.1.1.1",)))
    validate_state(Family.IPV6, AddressFamilyState(
        mode=Mode.STATIC, address="2001:db8::5/64", gateway="2001:db8::1"))
