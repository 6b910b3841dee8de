"""
netcfg_lib.repl.display - Display functions for the netcfg REPL

This package contains:
- status: live interface status, interface state and netplan documents
"""

from .status import (
    console,
    show_status,
    show_interface_list,
    show_interface_state,
    show_netplan_files,
    show_backups,
)

__all__ = [
    'console',
    'show_status',
    'show_interface_list',
    'show_interface_state',
    'show_netplan_files',
    'show_backups',
]
