"""
Validation functions for netcfg configuration.

IP address and CIDR validation utilities, and the checks a requested
AddressFamilyState must pass before anything is written.
"""

import ipaddress
from typing import List

from .dataclasses import AddressFamilyState, Family, FAMILY_MODES, Mode


class ValidationError(Exception):
    """Raised when a requested configuration fails validation."""
    pass


def validate_ipv4(ip: str) -> bool:
    """Validate an IPv4 address."""
    try:
        ipaddress.IPv4Address(ip)
        return True
    except ipaddress.AddressValueError:
        return False


def validate_ipv4_cidr(cidr: str) -> bool:
    """Validate an IPv4 interface address in CIDR notation (prefix required)."""
    if "/" not in cidr:
        return False
    try:
        ipaddress.IPv4Interface(cidr)
        return True
    except (ipaddress.AddressValueError, ipaddress.NetmaskValueError, ValueError):
        return False


def validate_ipv6(ip: str) -> bool:
    """Validate an IPv6 address."""
    try:
        ipaddress.IPv6Address(ip)
        return True
    except ipaddress.AddressValueError:
        return False


def validate_ipv6_cidr(cidr: str) -> bool:
    """Validate an IPv6 interface address in CIDR notation (prefix required)."""
    if "/" not in cidr:
        return False
    try:
        ipaddress.IPv6Interface(cidr)
        return True
    except (ipaddress.AddressValueError, ipaddress.NetmaskValueError, ValueError):
        return False


def validate_address(family: Family, ip: str) -> bool:
    """Validate a bare address of the given family."""
    return validate_ipv4(ip) if family == Family.IPV4 else validate_ipv6(ip)


def validate_cidr(family: Family, cidr: str) -> bool:
    """Validate a CIDR address of the given family."""
    return validate_ipv4_cidr(cidr) if family == Family.IPV4 else validate_ipv6_cidr(cidr)


def address_family(value: str) -> Family:
    """Guess the family of an address string (bare or CIDR) by its syntax."""
    return Family.IPV6 if ":" in value else Family.IPV4


def check_state(family: Family, state: AddressFamilyState) -> List[str]:
    """
    Check a requested state for one family.
    Returns list of error messages (empty if valid).
    """
    errors = []

    if state.mode != Mode.UNSET and state.mode not in FAMILY_MODES[family]:
        errors.append(f"Mode '{state.mode.value}' is not available for {family.value}")
        return errors

    if state.mode != Mode.STATIC:
        if state.address or state.gateway or state.dns_servers:
            errors.append(f"Address, gateway and DNS are only allowed in static mode (got {state.mode.value})")
        return errors

    if not state.address:
        errors.append("Static mode requires an address")
    elif not validate_cidr(family, state.address):
        errors.append(f"Invalid {family.value} address '{state.address}': expected CIDR notation "
                      f"(e.g., {'192.168.1.100/24' if family == Family.IPV4 else '2001:db8::1/64'})")

    if state.gateway and not validate_address(family, state.gateway):
        errors.append(f"Invalid {family.value} gateway '{state.gateway}'")

    if state.dns_servers and family == Family.IPV6:
        errors.append("DNS servers are only configured with static IPv4")
    for server in state.dns_servers:
        if not validate_ipv4(server):
            errors.append(f"Invalid DNS server '{server}'")

    return errors


def validate_state(family: Family, state: AddressFamilyState) -> None:
    """
    Validate a requested state for one family.

    Raises:
        ValidationError: listing every problem found
    """
    errors = check_state(family, state)
    if errors:
        raise ValidationError(f"{family.value} configuration rejected:\n  " + "\n  ".join(errors))
