"""
netcfg_lib.repl.commands - Command handlers for the netcfg REPL

This package contains command handler functions organized by feature area:
- network: per-interface IPv4/IPv6/DNS configuration, quick setup, backups
- system: status, netplan documents, apply/restart, system-wide IPv6
"""

from .network import (
    prompt_family_state,
    cmd_interface_show,
    cmd_ipv4,
    cmd_ipv6,
    cmd_dns,
    cmd_quick,
    cmd_backups,
    cmd_restore,
)

from .system import (
    cmd_status,
    cmd_interfaces_list,
    cmd_show_config,
    cmd_apply,
    cmd_restart,
    cmd_disable_ipv6,
    cmd_enable_ipv6,
)

__all__ = [
    # Network
    'prompt_family_state',
    'cmd_interface_show', 'cmd_ipv4', 'cmd_ipv6', 'cmd_dns', 'cmd_quick',
    'cmd_backups', 'cmd_restore',
    # System
    'cmd_status', 'cmd_interfaces_list', 'cmd_show_config',
    'cmd_apply', 'cmd_restart',
    'cmd_disable_ipv6', 'cmd_enable_ipv6',
]
