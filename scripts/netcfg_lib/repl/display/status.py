"""
Status display functions for the netcfg REPL.

Live interface state comes from iproute2, declared state from the
netplan documents.
"""

from pathlib import Path

from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

from netcfg_lib.common import Colors, info
from netcfg_lib.netplan import Mode, StatePair, list_configs
from netcfg_lib.system import LinkInfo

console = Console()


def show_interface_list(links: list[LinkInfo], primary: str = None) -> None:
    """Table of live interfaces."""
    table = Table(show_header=True, header_style="bold")
    table.add_column("#")
    table.add_column("Interface")
    table.add_column("State")
    table.add_column("MAC")
    table.add_column("IPv4")
    table.add_column("IPv6")
    table.add_column("Gateway")

    for i, link in enumerate(links, 1):
        name = f"{link.name} *" if link.name == primary else link.name
        state_style = "green" if link.state == "UP" else "yellow"
        table.add_row(
            str(i),
            name,
            f"[{state_style}]{link.state}[/{state_style}]",
            link.mac or "",
            "\n".join(link.ipv4) or "Not configured",
            "\n".join(link.ipv6) or "Not configured",
            link.gateway4 or "",
        )

    console.print(table)
    if primary:
        print("  * primary interface (default route)")


def show_status(links: list[LinkInfo], dns_servers: list[str], primary: str = None,
                ipv6_disabled: bool = False) -> None:
    """Show network status: interfaces, then DNS servers."""
    print()
    print(f"{Colors.BOLD}Network Status{Colors.NC}")
    print("=" * 50)
    show_interface_list(links, primary)
    print()
    print(f"{Colors.BOLD}DNS Servers{Colors.NC}")
    print("=" * 50)
    if dns_servers:
        for server in dns_servers:
            print(f"  {server}")
    else:
        print("  No DNS servers configured")
    if ipv6_disabled:
        print()
        print(f"  {Colors.YELLOW}IPv6 is disabled system-wide{Colors.NC}")
    print()


def show_interface_state(iface: str, path: Path, states: StatePair) -> None:
    """Show the declared IPv4/IPv6 configuration of an interface."""
    print()
    print(f"{Colors.BOLD}Interface: {iface}{Colors.NC}")
    print("=" * 50)
    print(f"  Document:  {path}{'' if path.exists() else ' (not created yet)'}")
    for label, state in (("IPv4", states.ipv4), ("IPv6", states.ipv6)):
        summary = state.describe()
        if state.mode == Mode.UNSET:
            summary = f"{Colors.DIM}not configured (default applies){Colors.NC}"
        print(f"  {label}:      {summary}")
    print()


def show_netplan_files(netplan_dir: Path) -> None:
    """Display every netplan document."""
    configs = list_configs(netplan_dir)
    if not configs:
        info(f"No netplan configuration files found in {netplan_dir}")
        return

    for path in configs:
        print()
        print(f"{Colors.BOLD}=== {path} ==={Colors.NC}")
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            print(f"  (unreadable: {e})")
            continue
        console.print(Syntax(content, "yaml", line_numbers=False))
    print()


def show_backups(path: Path, backups: list[Path]) -> None:
    """List backups of a document, newest first."""
    print()
    print(f"{Colors.BOLD}Backups of {path}{Colors.NC}")
    print("=" * 50)
    if not backups:
        print("  (none)")
    for i, backup in enumerate(backups, 1):
        print(f"  {i}) {backup.name}")
    print()
