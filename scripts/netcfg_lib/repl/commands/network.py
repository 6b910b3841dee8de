"""
Interface configuration commands for the netcfg REPL.

This module provides the per-interface commands: show, ipv4, ipv6, dns,
quick, backups, restore. Each prompts for values, then hands the request
to netcfg_lib.netplan.service which validates, writes and optionally
applies it.
"""

from typing import Optional

from netcfg_lib.common import error, info, is_root, log, warn
from netcfg_lib.common.prompts import prompt_list, prompt_select, prompt_value, prompt_yes_no
from netcfg_lib.netplan import (
    FAMILY_MODES,
    AddressFamilyState,
    ApplyFailure,
    Family,
    Mode,
    SetResult,
    ValidationError,
    WriteFailure,
    configure_interface,
    find_config,
    get_current_state,
    interface_backups,
    restore_backup,
    set_dns_servers,
    set_family_state,
    validate_ipv4,
    validate_ipv4_cidr,
    validate_ipv6,
    validate_ipv6_cidr,
)
from netcfg_lib.repl.context import MenuContext
from netcfg_lib.repl.display import show_backups, show_interface_state
from netcfg_lib.repl.navigation import current_interface


MODE_DESCRIPTIONS = {
    Family.IPV4: {
        Mode.DHCP: "DHCP (automatic)",
        Mode.STATIC: "Static IP address",
        Mode.DISABLED: "Disable IPv4",
    },
    Family.IPV6: {
        Mode.AUTO: "Automatic (SLAAC/DHCPv6)",
        Mode.DHCP: "DHCPv6 only",
        Mode.STATIC: "Static IP address",
        Mode.DISABLED: "Disable IPv6",
    },
}


def _resolve_interface(ctx: MenuContext, args: list[str]) -> Optional[str]:
    """Interface from the menu path, or from the first argument."""
    iface = current_interface(ctx)
    if iface:
        return iface
    if not args:
        error("Usage: <command> <interface>")
        return None
    if ctx.interfaces and args[0] not in ctx.interfaces:
        warn(f"Interface {args[0]} is not present on this system")
    return args[0]


def _require_root() -> bool:
    if not is_root():
        error("This operation requires root privileges. Please run with sudo.")
        return False
    return True


def _confirm_apply() -> Optional[bool]:
    return prompt_yes_no("Apply network configuration now? This may disconnect your session", default=False)


def _report(result: SetResult) -> None:
    if result.applied:
        log("Network configuration applied successfully")
        if result.apply_output:
            print(result.apply_output)
    else:
        info("Configuration saved but not applied.")
        print("  Use 'apply' (or 'sudo netplan apply') to apply changes.")


def _run_change(change) -> None:
    """Run a service call and surface its failure modes to the operator."""
    try:
        _report(change())
    except ValidationError as e:
        error(str(e))
        print("  Nothing was written.")
    except WriteFailure as e:
        error(str(e))
        print("  The previous configuration is unchanged.")
    except ApplyFailure as e:
        error(f"Failed to apply configuration: {e}")
        if e.output:
            print(e.output)
        print("  The new configuration is saved; fix the problem and run 'apply' to retry.")


def prompt_family_state(ctx: MenuContext, family: Family, modes: tuple = None) -> Optional[AddressFamilyState]:
    """Ask for the mode of a family, and the static parameters if needed."""
    modes = modes or FAMILY_MODES[family]
    label = "IPv4" if family == Family.IPV4 else "IPv6"
    idx = prompt_select(f"{label} mode:", [m.value for m in modes],
                        [MODE_DESCRIPTIONS[family][m] for m in modes])
    if idx is None:
        return None

    mode = modes[idx]
    if mode != Mode.STATIC:
        return AddressFamilyState(mode=mode)

    if family == Family.IPV4:
        address = prompt_value("  IPv4 address [CIDR, e.g., 192.168.1.100/24]",
                               validator=validate_ipv4_cidr, error_msg="Invalid IPv4 CIDR format")
        if address is None:
            return None
        gateway = prompt_value("  Gateway (e.g., 192.168.1.1)", validator=validate_ipv4,
                               error_msg="Invalid IPv4 address", required=False)
        if gateway is None:
            return None
        dns = prompt_list("  DNS servers (comma-separated)", default=",".join(ctx.defaults.dns_servers),
                          validator=validate_ipv4)
        if dns is None:
            return None
        return AddressFamilyState(mode=mode, address=address, gateway=gateway or None, dns_servers=tuple(dns))

    address = prompt_value("  IPv6 address [CIDR, e.g., 2001:db8::1/64]",
                           validator=validate_ipv6_cidr, error_msg="Invalid IPv6 CIDR format")
    if address is None:
        return None
    gateway = prompt_value("  IPv6 gateway [optional]", validator=validate_ipv6,
                           error_msg="Invalid IPv6 address", required=False)
    if gateway is None:
        return None
    return AddressFamilyState(mode=mode, address=address, gateway=gateway or None)


def cmd_interface_show(ctx: MenuContext, args: list[str]) -> None:
    """Show the declared configuration of an interface."""
    iface = _resolve_interface(ctx, args)
    if not iface:
        return
    show_interface_state(iface, find_config(iface, ctx.netplan_dir), get_current_state(iface, ctx.netplan_dir))


def _cmd_family(ctx: MenuContext, args: list[str], family: Family) -> None:
    iface = _resolve_interface(ctx, args)
    if not iface or not _require_root():
        return

    state = prompt_family_state(ctx, family)
    if state is None:
        print("Cancelled")
        return

    apply_now = _confirm_apply()
    if apply_now is None:
        print("Cancelled")
        return

    _run_change(lambda: set_family_state(
        iface, family, state, confirm_apply=apply_now,
        netplan_dir=ctx.netplan_dir, defaults=ctx.defaults,
    ))


def cmd_ipv4(ctx: MenuContext, args: list[str]) -> None:
    """Configure IPv4 on an interface, keeping its IPv6 settings."""
    _cmd_family(ctx, args, Family.IPV4)


def cmd_ipv6(ctx: MenuContext, args: list[str]) -> None:
    """Configure IPv6 on an interface, keeping its IPv4 settings."""
    _cmd_family(ctx, args, Family.IPV6)


def cmd_dns(ctx: MenuContext, args: list[str]) -> None:
    """Replace the DNS servers of an interface with static IPv4."""
    iface = _resolve_interface(ctx, args)
    if not iface or not _require_root():
        return

    current = get_current_state(iface, ctx.netplan_dir).ipv4
    if current.mode != Mode.STATIC:
        info("DNS servers are set together with a static IPv4 address.")
        print("  Use 'ipv4' and choose static to configure DNS.")
        return

    default = ",".join(current.dns_servers or ctx.defaults.dns_servers)
    servers = prompt_list("DNS servers (comma-separated)", default=default, validator=validate_ipv4)
    if servers is None:
        print("Cancelled")
        return

    apply_now = _confirm_apply()
    if apply_now is None:
        print("Cancelled")
        return

    _run_change(lambda: set_dns_servers(
        iface, servers, confirm_apply=apply_now,
        netplan_dir=ctx.netplan_dir, defaults=ctx.defaults,
    ))


def cmd_quick(ctx: MenuContext, args: list[str]) -> None:
    """Quick setup: IPv4 (DHCP or static) and IPv6 (auto or disabled) in one step."""
    iface = _resolve_interface(ctx, args)
    if not iface or not _require_root():
        return

    print(f"\nConfigure {iface} with common settings.")
    ipv4 = prompt_family_state(ctx, Family.IPV4, (Mode.DHCP, Mode.STATIC))
    if ipv4 is None:
        print("Cancelled")
        return
    ipv6 = prompt_family_state(ctx, Family.IPV6, (Mode.AUTO, Mode.DISABLED))
    if ipv6 is None:
        print("Cancelled")
        return

    print()
    print(f"  Interface: {iface}")
    print(f"  IPv4:      {ipv4.describe()}")
    print(f"  IPv6:      {ipv6.describe()}")
    apply_now = _confirm_apply()
    if apply_now is None:
        print("Cancelled")
        return

    _run_change(lambda: configure_interface(
        iface, ipv4, ipv6, confirm_apply=apply_now,
        netplan_dir=ctx.netplan_dir, defaults=ctx.defaults,
    ))


def cmd_backups(ctx: MenuContext, args: list[str]) -> None:
    """List backups of the document governing an interface."""
    iface = _resolve_interface(ctx, args)
    if not iface:
        return
    path, backups = interface_backups(iface, ctx.netplan_dir)
    show_backups(path, backups)


def cmd_restore(ctx: MenuContext, args: list[str]) -> None:
    """Restore the interface's document from a backup."""
    iface = _resolve_interface(ctx, args)
    if not iface or not _require_root():
        return

    path, backups = interface_backups(iface, ctx.netplan_dir)
    if not backups:
        info(f"No backups of {path}")
        return

    idx = prompt_select(f"Restore {path} from:", [b.name for b in backups])
    if idx is None:
        print("Cancelled")
        return

    if not prompt_yes_no(f"Replace {path} with {backups[idx].name}?"):
        print("Cancelled")
        return

    try:
        restore_backup(path, backups[idx])
    except (ValidationError, WriteFailure, OSError, UnicodeDecodeError) as e:
        error(f"Failed to restore: {e}")
        return
    log(f"Restored {path} from {backups[idx].name}")
    info("Use 'apply' to activate the restored configuration.")
