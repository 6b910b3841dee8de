"""
netcfg_lib.system - Live system state for netcfg.

This package contains:
- interfaces: interface discovery and status from iproute2
- sysctl: system-wide IPv6 enable/disable
"""

from .interfaces import (
    LinkInfo,
    parse_ip_addr,
    list_interfaces,
    interface_names,
    default_gateways,
    primary_interface,
    read_dns_servers,
)
from .sysctl import (
    ipv6_system_disabled,
    disable_ipv6_system,
    enable_ipv6_system,
)

__all__ = [
    'LinkInfo',
    'parse_ip_addr',
    'list_interfaces',
    'interface_names',
    'default_gateways',
    'primary_interface',
    'read_dns_servers',
    'ipv6_system_disabled',
    'disable_ipv6_system',
    'enable_ipv6_system',
]
