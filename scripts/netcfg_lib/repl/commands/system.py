"""
System-level commands for the netcfg REPL.

Status and configuration display, apply/restart, and the system-wide
IPv6 toggle.
"""

from netcfg_lib.common import error, info, is_root
from netcfg_lib.common.prompts import prompt_yes_no
from netcfg_lib.netplan import ApplyFailure, apply_config, restart_networking
from netcfg_lib.repl.context import MenuContext
from netcfg_lib.repl.display import show_interface_list, show_netplan_files, show_status
from netcfg_lib.system import (
    disable_ipv6_system,
    enable_ipv6_system,
    ipv6_system_disabled,
    list_interfaces,
    primary_interface,
    read_dns_servers,
)


def cmd_status(ctx: MenuContext, args: list[str]) -> None:
    """Show live interface status and DNS servers."""
    show_status(list_interfaces(), read_dns_servers(), primary_interface(), ipv6_system_disabled())


def cmd_interfaces_list(ctx: MenuContext, args: list[str]) -> None:
    """List interfaces."""
    show_interface_list(list_interfaces(), primary_interface())


def cmd_show_config(ctx: MenuContext, args: list[str]) -> None:
    """Show every netplan document."""
    show_netplan_files(ctx.netplan_dir)


def cmd_apply(ctx: MenuContext, args: list[str]) -> None:
    """Apply the netplan configuration."""
    if not is_root():
        error("This operation requires root privileges. Please run with sudo.")
        return
    if not prompt_yes_no("Apply network configuration now? This may disconnect your session"):
        print("Cancelled")
        return
    try:
        apply_config()
    except ApplyFailure as e:
        error(f"Failed to apply configuration: {e}")
        if e.output:
            print(e.output)


def cmd_restart(ctx: MenuContext, args: list[str]) -> None:
    """Apply the configuration and restart systemd-networkd."""
    if not is_root():
        error("This operation requires root privileges. Please run with sudo.")
        return
    if not prompt_yes_no("Restart networking services? This may disconnect your session"):
        print("Cancelled")
        return
    try:
        restart_networking()
    except ApplyFailure as e:
        error(f"Failed to restart networking: {e}")
        if e.output:
            print(e.output)


def cmd_disable_ipv6(ctx: MenuContext, args: list[str]) -> None:
    """Disable IPv6 system-wide through sysctl."""
    if not is_root():
        error("This operation requires root privileges. Please run with sudo.")
        return
    if ipv6_system_disabled():
        info("IPv6 is already disabled system-wide")
        return
    if not prompt_yes_no("Disable IPv6 system-wide? This adds kernel parameters under /etc/sysctl.d"):
        print("Cancelled")
        return
    try:
        disable_ipv6_system()
    except OSError as e:
        error(f"Failed to disable IPv6: {e}")


def cmd_enable_ipv6(ctx: MenuContext, args: list[str]) -> None:
    """Re-enable IPv6 system-wide."""
    if not is_root():
        error("This operation requires root privileges. Please run with sudo.")
        return
    try:
        enable_ipv6_system()
    except OSError as e:
        error(f"Failed to enable IPv6: {e}")
