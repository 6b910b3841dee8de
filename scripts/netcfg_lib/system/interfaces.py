"""
Interface discovery for netcfg.

Queries iproute2 (JSON output) for the live interface list, addresses
and default routes, and reads resolver configuration.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from netcfg_lib.common import run_command, warn
from netcfg_lib.netplan.constants import RESOLV_CONF

IP_TIMEOUT = 10


@dataclass
class LinkInfo:
    """Live state of one network interface."""
    name: str
    state: str
    mac: Optional[str] = None
    ipv4: list[str] = field(default_factory=list)   # CIDR addresses
    ipv6: list[str] = field(default_factory=list)   # Global CIDR addresses (no link-local)
    gateway4: Optional[str] = None


def _ip_json(*args: str) -> list:
    success, output = run_command(["ip", "-j", *args], timeout=IP_TIMEOUT)
    if not success:
        warn(f"ip {' '.join(args)} failed: {output.strip()}")
        return []
    if not output:
        return []
    try:
        return json.loads(output)
    except json.JSONDecodeError as e:
        warn(f"Unexpected output from ip {' '.join(args)}: {e}")
        return []


def parse_ip_addr(entries: list) -> list[LinkInfo]:
    """Build LinkInfo records from `ip -j addr show` output, skipping loopback."""
    links = []
    for entry in entries:
        name = entry.get('ifname')
        if not name or name == 'lo':
            continue

        link = LinkInfo(
            name=name,
            state=entry.get('operstate', 'UNKNOWN'),
            mac=entry.get('address') if entry.get('link_type') == 'ether' else None,
        )
        for addr in entry.get('addr_info', []):
            cidr = f"{addr.get('local')}/{addr.get('prefixlen')}"
            if addr.get('family') == 'inet':
                link.ipv4.append(cidr)
            elif addr.get('family') == 'inet6' and addr.get('scope') != 'link':
                link.ipv6.append(cidr)
        links.append(link)

    return sorted(links, key=lambda x: x.name)


def default_gateways() -> dict[str, str]:
    """Map interface name to its IPv4 default gateway."""
    gateways = {}
    for route in _ip_json("-4", "route", "show", "default"):
        dev, gateway = route.get('dev'), route.get('gateway')
        if dev and gateway and dev not in gateways:
            gateways[dev] = gateway
    return gateways


def primary_interface() -> Optional[str]:
    """Interface carrying the first default route."""
    for route in _ip_json("route", "show", "default"):
        if route.get('dev'):
            return route['dev']
    return None


def list_interfaces() -> list[LinkInfo]:
    """Detect network interfaces with their live addresses and gateways."""
    links = parse_ip_addr(_ip_json("addr", "show"))
    gateways = default_gateways()
    for link in links:
        link.gateway4 = gateways.get(link.name)
    return links


def interface_names() -> list[str]:
    """Names of all non-loopback interfaces."""
    return [link['ifname'] for link in _ip_json("link", "show")
            if link.get('ifname') and link['ifname'] != 'lo']


def read_dns_servers(resolv_conf: Path = RESOLV_CONF) -> list[str]:
    """Nameservers listed in resolv.conf."""
    try:
        lines = resolv_conf.read_text(encoding="utf-8", errors="replace").splitlines()
    except OSError:
        return []

    servers = []
    for line in lines:
        parts = line.split()
        if len(parts) >= 2 and parts[0] == 'nameserver':
            servers.append(parts[1])
    return servers
