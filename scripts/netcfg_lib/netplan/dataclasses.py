"""
Configuration dataclasses for netcfg.

These describe the per-family intent for one interface, and the netplan
document that carries it on disk.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from .constants import NETPLAN_RENDERER, NETPLAN_VERSION


class Family(str, Enum):
    """IP address family."""
    IPV4 = "ipv4"
    IPV6 = "ipv6"


class Mode(str, Enum):
    """Configuration mode of one address family."""
    DHCP = "dhcp"
    STATIC = "static"
    DISABLED = "disabled"
    AUTO = "auto"      # IPv6 only: SLAAC + DHCPv6 with privacy extensions
    UNSET = "unset"    # Nothing declared; the family default applies


# Modes an operator may request, per family
FAMILY_MODES = {
    Family.IPV4: (Mode.DHCP, Mode.STATIC, Mode.DISABLED),
    Family.IPV6: (Mode.AUTO, Mode.DHCP, Mode.STATIC, Mode.DISABLED),
}


@dataclass(frozen=True)
class AddressFamilyState:
    """Desired configuration of one address family on one interface."""
    mode: Mode = Mode.UNSET
    address: Optional[str] = None       # CIDR, static only (e.g., "192.168.1.100/24")
    gateway: Optional[str] = None       # Default route next-hop, static only
    dns_servers: tuple[str, ...] = ()   # Nameservers, static IPv4 only

    def describe(self) -> str:
        """One-line human readable summary."""
        if self.mode != Mode.STATIC:
            return self.mode.value
        parts = [f"static {self.address}"]
        if self.gateway:
            parts.append(f"via {self.gateway}")
        if self.dns_servers:
            parts.append(f"dns {', '.join(self.dns_servers)}")
        return " ".join(parts)


UNSET = AddressFamilyState()


@dataclass(frozen=True)
class StatePair:
    """The IPv4 and IPv6 states of one interface."""
    ipv4: AddressFamilyState = UNSET
    ipv6: AddressFamilyState = UNSET

    def get(self, family: Family) -> AddressFamilyState:
        return self.ipv4 if family == Family.IPV4 else self.ipv6

    def replace(self, family: Family, state: AddressFamilyState) -> "StatePair":
        """Return a copy with one family swapped out."""
        if family == Family.IPV4:
            return replace(self, ipv4=state)
        return replace(self, ipv6=state)


@dataclass(frozen=True)
class MergeDefaults:
    """Family defaults used when a family has no explicit configuration."""
    ipv4_mode: Mode = Mode.DHCP
    ipv6_mode: Mode = Mode.AUTO
    dns_servers: tuple[str, ...] = ("8.8.8.8", "8.8.4.4")  # Offered when prompting for static IPv4

    def mode_for(self, family: Family) -> Mode:
        return self.ipv4_mode if family == Family.IPV4 else self.ipv6_mode


DEFAULTS = MergeDefaults()


@dataclass
class NetplanDocument:
    """A netplan YAML document as loaded from disk."""
    path: Path
    exists: bool = False
    version: int = NETPLAN_VERSION
    renderer: str = NETPLAN_RENDERER
    ethernets: dict[str, Any] = field(default_factory=dict)  # Raw per-interface mappings, document order
    sections: dict[str, Any] = field(default_factory=dict)   # Other network.* keys (bridges, wifis, ...)

    def declares(self, iface: str) -> bool:
        return iface in self.ethernets


@dataclass
class ParsedInterface:
    """Result of interpreting one interface's declaration."""
    states: StatePair = field(default_factory=StatePair)
    warnings: list[str] = field(default_factory=list)
    extra: dict[str, Any] = field(default_factory=dict)  # Keys netcfg does not manage (match, mtu, ...)


@dataclass
class SetResult:
    """Outcome of a configuration change."""
    path: Path
    backup: Optional[Path]
    states: StatePair
    content: str
    applied: bool = False
    apply_output: str = ""
