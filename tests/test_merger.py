"""Tests for merging a requested family state with the current one."""

import pytest

from netcfg_lib.netplan import (
    UNSET,
    AddressFamilyState,
    Family,
    MergeDefaults,
    Mode,
    StatePair,
    ValidationError,
    merge_both,
    merge_states,
)

STATIC4 = AddressFamilyState(mode=Mode.STATIC, address="192.168.50.10/24", gateway="192.168.50.1",
                             dns_servers=("8.8.8.8",))
STATIC6 = AddressFamilyState(mode=Mode.STATIC, address="2001:db8::10/64", gateway="2001:db8::1")


def test_untouched_family_is_preserved():
    current = StatePair(ipv4=STATIC4, ipv6=STATIC6)
    merged = merge_states(current, Family.IPV6, AddressFamilyState(mode=Mode.DISABLED))
    assert merged.ipv4 is STATIC4
    assert merged.ipv6 == AddressFamilyState(mode=Mode.DISABLED)

    merged = merge_states(current, Family.IPV4, AddressFamilyState(mode=Mode.DHCP))
    assert merged.ipv6 is STATIC6
    assert merged.ipv4.mode == Mode.DHCP


def test_unset_family_gets_default():
    merged = merge_states(StatePair(), Family.IPV4, STATIC4)
    assert merged.ipv4 == STATIC4
    assert merged.ipv6 == AddressFamilyState(mode=Mode.AUTO)

    merged = merge_states(StatePair(), Family.IPV6, AddressFamilyState(mode=Mode.DISABLED))
    assert merged.ipv4 == AddressFamilyState(mode=Mode.DHCP)


def test_unset_request_resolves_to_default():
    merged = merge_states(StatePair(ipv4=STATIC4), Family.IPV6, UNSET)
    assert merged.ipv6.mode == Mode.AUTO
    assert merged.ipv4 is STATIC4


def test_custom_defaults():
    defaults = MergeDefaults(ipv4_mode=Mode.DISABLED, ipv6_mode=Mode.DISABLED)
    merged = merge_states(StatePair(), Family.IPV4, AddressFamilyState(mode=Mode.DHCP), defaults)
    assert merged.ipv6.mode == Mode.DISABLED


def test_invalid_request_is_rejected():
    with pytest.raises(ValidationError):
        merge_states(StatePair(ipv6=STATIC6), Family.IPV4,
                     AddressFamilyState(mode=Mode.STATIC, address="192.168.1.1"))


def test_merge_both():
    merged = merge_both(STATIC4, UNSET)
    assert merged == StatePair(ipv4=STATIC4, ipv6=AddressFamilyState(mode=Mode.AUTO))
    with pytest.raises(ValidationError):
        merge_both(AddressFamilyState(mode=Mode.AUTO), UNSET)
