"""
Netplan document parser for netcfg.

Loads netplan YAML documents and interprets one interface's declaration
into an IPv4 and an IPv6 AddressFamilyState. A family whose fragment
cannot be interpreted degrades to unset with a warning; it never aborts.
"""

from pathlib import Path
from typing import Optional

import yaml

from netcfg_lib.common import warn

from .constants import NETPLAN_RENDERER, NETPLAN_VERSION
from .dataclasses import (
    UNSET,
    AddressFamilyState,
    Family,
    Mode,
    NetplanDocument,
    ParsedInterface,
    StatePair,
)
from .validation import address_family, validate_address, validate_cidr


class ParseDegraded(Exception):
    """Raised when one family's declaration cannot be interpreted."""
    pass


# Interface keys netcfg owns; everything else is carried through untouched
MANAGED_KEYS = frozenset({
    'dhcp4', 'dhcp6', 'addresses', 'routes', 'nameservers',
    'accept-ra', 'link-local', 'ipv6-privacy', 'gateway4', 'gateway6',
})

DEFAULT_DESTINATIONS = {
    Family.IPV4: ('default', '0.0.0.0/0'),
    Family.IPV6: ('default', '::/0'),
}


def load_document(path: Path, quiet: bool = False) -> NetplanDocument:
    """
    Load a netplan document.

    A missing, unreadable or structurally broken document yields an empty
    document (no interfaces declared), never an exception.
    """
    document = NetplanDocument(path=path, exists=path.exists())
    if not document.exists:
        return document

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        if not quiet:
            warn(f"Cannot read {path}: {e}")
        return document

    if data is None:
        return document

    network = data.get('network') if isinstance(data, dict) else None
    if not isinstance(network, dict):
        if not quiet:
            warn(f"{path}: no 'network' mapping found, ignoring contents")
        return document

    document.version = network.get('version', NETPLAN_VERSION)
    document.renderer = network.get('renderer', NETPLAN_RENDERER)

    ethernets = network.get('ethernets') or {}
    if isinstance(ethernets, dict):
        document.ethernets = {str(name): body for name, body in ethernets.items()}
    elif not quiet:
        warn(f"{path}: 'ethernets' is not a mapping, ignoring it")

    document.sections = {
        k: v for k, v in network.items()
        if k not in ('version', 'renderer', 'ethernets')
    }
    return document


def _flag(body: dict, key: str) -> Optional[bool]:
    value = body.get(key)
    if value is None or isinstance(value, bool):
        return value
    raise ParseDegraded(f"'{key}' is not a boolean: {value!r}")


def _address_entries(body: dict) -> list[str]:
    """Flatten the addresses list; entries may be plain or single-key mappings with options."""
    entries = body.get('addresses')
    if entries is None:
        return []
    if not isinstance(entries, list):
        raise ParseDegraded("'addresses' is not a list")

    result = []
    for entry in entries:
        if isinstance(entry, dict) and len(entry) == 1:
            entry = next(iter(entry))
        if not isinstance(entry, str):
            raise ParseDegraded(f"unrecognized address entry {entry!r}")
        result.append(entry)
    return result


def _addresses(body: dict, family: Family, notes: list[str]) -> list[str]:
    addresses = [a for a in _address_entries(body) if address_family(a) == family]
    for address in addresses:
        if not validate_cidr(family, address):
            raise ParseDegraded(f"invalid address '{address}'")
    if len(addresses) > 1:
        notes.append(f"only the first {family.value} address ({addresses[0]}) is managed, "
                     f"dropping {', '.join(addresses[1:])}")
    return addresses


def _gateway(body: dict, family: Family, notes: list[str]) -> Optional[str]:
    """Find the default route next-hop for a family."""
    routes = body.get('routes') or []
    if not isinstance(routes, list):
        raise ParseDegraded("'routes' is not a list")

    gateway = None
    for route in routes:
        if not isinstance(route, dict):
            raise ParseDegraded(f"unrecognized route {route!r}")
        to = str(route.get('to', ''))
        via = route.get('via')
        if to not in DEFAULT_DESTINATIONS[family]:
            continue
        if not isinstance(via, str):
            if to == 'default':
                continue
            raise ParseDegraded(f"default route has no usable 'via': {via!r}")
        if address_family(via) != family:
            continue
        if not validate_address(family, via):
            raise ParseDegraded(f"invalid gateway '{via}'")
        if gateway is None:
            gateway = via

    legacy = body.get('gateway4' if family == Family.IPV4 else 'gateway6')
    if gateway is None and legacy is not None:
        if not isinstance(legacy, str) or not validate_address(family, legacy):
            raise ParseDegraded(f"invalid gateway '{legacy}'")
        gateway = legacy

    return gateway


def _dns_servers(body: dict) -> tuple[str, ...]:
    nameservers = body.get('nameservers')
    if nameservers is None:
        return ()
    if not isinstance(nameservers, dict):
        raise ParseDegraded("'nameservers' is not a mapping")

    servers = nameservers.get('addresses') or []
    if not isinstance(servers, list):
        raise ParseDegraded("'nameservers.addresses' is not a list")

    result = []
    for server in servers:
        if not isinstance(server, str):
            raise ParseDegraded(f"unrecognized nameserver {server!r}")
        if address_family(server) != Family.IPV4:
            continue
        if not validate_address(Family.IPV4, server):
            raise ParseDegraded(f"invalid nameserver '{server}'")
        result.append(server)
    return tuple(result)


def parse_ipv4(body: dict, notes: list[str]) -> AddressFamilyState:
    """DHCP flag, then static addresses, then explicit disable, else unset."""
    dhcp4 = _flag(body, 'dhcp4')
    if dhcp4:
        return AddressFamilyState(mode=Mode.DHCP)

    addresses = _addresses(body, Family.IPV4, notes)
    if addresses:
        return AddressFamilyState(
            mode=Mode.STATIC,
            address=addresses[0],
            gateway=_gateway(body, Family.IPV4, notes),
            dns_servers=_dns_servers(body),
        )

    if dhcp4 is False:
        return AddressFamilyState(mode=Mode.DISABLED)

    return UNSET


def parse_ipv6(body: dict, notes: list[str]) -> AddressFamilyState:
    """Link-local suppression, then auto, then DHCPv6 only, then static, else unset."""
    link_local = body.get('link-local')
    if link_local is not None:
        if not isinstance(link_local, list):
            raise ParseDegraded("'link-local' is not a list")
        if 'ipv6' not in link_local:
            return AddressFamilyState(mode=Mode.DISABLED)

    if _flag(body, 'dhcp6'):
        if _flag(body, 'ipv6-privacy') or _flag(body, 'accept-ra'):
            return AddressFamilyState(mode=Mode.AUTO)
        return AddressFamilyState(mode=Mode.DHCP)

    addresses = _addresses(body, Family.IPV6, notes)
    if addresses:
        return AddressFamilyState(
            mode=Mode.STATIC,
            address=addresses[0],
            gateway=_gateway(body, Family.IPV6, notes),
        )

    return UNSET


def _unmanaged_routes(body: dict) -> list[str]:
    """Destinations of routes other than a default route; these are not rewritten."""
    routes = body.get('routes')
    if not isinstance(routes, list):
        return []
    defaults = DEFAULT_DESTINATIONS[Family.IPV4] + DEFAULT_DESTINATIONS[Family.IPV6]
    return [
        str(route.get('to')) for route in routes
        if isinstance(route, dict) and str(route.get('to', '')) not in defaults
    ]


def _dropped_fragments(body: dict, ipv4: AddressFamilyState) -> list[str]:
    """Parts of a declaration with no place in the managed state; a rewrite loses them."""
    dropped = [f"route to {destination}" for destination in _unmanaged_routes(body)]

    entries = body.get('addresses')
    if isinstance(entries, list):
        for entry in entries:
            if isinstance(entry, dict) and len(entry) == 1:
                address, options = next(iter(entry.items()))
                if options:
                    dropped.append(f"options of address {address}")

    nameservers = body.get('nameservers')
    if not isinstance(nameservers, dict):
        return dropped

    search = nameservers.get('search')
    if search:
        domains = search if isinstance(search, list) else [search]
        dropped.append(f"search domains {', '.join(str(d) for d in domains)}")

    servers = nameservers.get('addresses')
    if isinstance(servers, list):
        # Nameservers are only rendered with static IPv4, and only IPv4 ones
        for server in servers:
            if ipv4.mode != Mode.STATIC or not isinstance(server, str) or address_family(server) != Family.IPV4:
                dropped.append(f"nameserver {server}")
    return dropped


def parse_interface(document: NetplanDocument, iface: str, quiet: bool = False) -> ParsedInterface:
    """Interpret the declaration of one interface in a loaded document."""
    if iface not in document.ethernets:
        return ParsedInterface()

    body = document.ethernets[iface]
    if body is None:
        body = {}
    if not isinstance(body, dict):
        parsed = ParsedInterface(warnings=[f"{iface}: declaration is not a mapping; treating both families as unset"])
        if not quiet:
            warn(parsed.warnings[0])
        return parsed

    parsed = ParsedInterface(extra={k: v for k, v in body.items() if k not in MANAGED_KEYS})
    states = StatePair()

    for family, parse in ((Family.IPV4, parse_ipv4), (Family.IPV6, parse_ipv6)):
        notes: list[str] = []
        try:
            state = parse(body, notes)
        except ParseDegraded as e:
            notes.append(f"{e}; treating {family.value} as unset")
            state = UNSET
        states = states.replace(family, state)
        parsed.warnings.extend(f"{iface} {family.value}: {note}" for note in notes)

    for fragment in _dropped_fragments(body, states.ipv4):
        parsed.warnings.append(f"{iface}: {fragment} is not managed and will be dropped on rewrite")

    parsed.states = states
    if not quiet:
        for message in parsed.warnings:
            warn(message)
    return parsed


def parse_config(path: Path, iface: str) -> StatePair:
    """Read the IPv4 and IPv6 state currently declared for an interface."""
    return parse_interface(load_document(path), iface).states

