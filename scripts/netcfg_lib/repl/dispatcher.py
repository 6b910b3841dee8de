"""
Command dispatcher and main loop for the netcfg REPL.
"""

from pathlib import Path

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory
from prompt_toolkit.styles import Style

from netcfg_lib.common import Colors, error, info
from netcfg_lib.system import interface_names

from .commands import (
    cmd_apply,
    cmd_backups,
    cmd_disable_ipv6,
    cmd_dns,
    cmd_enable_ipv6,
    cmd_interface_show,
    cmd_interfaces_list,
    cmd_ipv4,
    cmd_ipv6,
    cmd_quick,
    cmd_restart,
    cmd_restore,
    cmd_show_config,
    cmd_status,
)
from .completer import MenuCompleter
from .context import MenuContext, get_prompt_text
from .menu import INTERFACE_COMMANDS, build_menu_tree
from .navigation import current_interface, navigate


NETCFG_STYLE = Style.from_dict({
    'prompt': '#00aa00 bold',
})

# Commands available from any level
ROOT_COMMANDS = {
    "status": cmd_status,
    "show": cmd_show_config,
    "apply": cmd_apply,
    "restart": cmd_restart,
}

INTERFACE_HANDLERS = {
    "show": cmd_interface_show,
    "ipv4": cmd_ipv4,
    "ipv6": cmd_ipv6,
    "dns": cmd_dns,
    "quick": cmd_quick,
    "backups": cmd_backups,
    "restore": cmd_restore,
}

SYSTEM_HANDLERS = {
    "disable-ipv6": cmd_disable_ipv6,
    "enable-ipv6": cmd_enable_ipv6,
}


def cmd_help(ctx: MenuContext, args: list[str], menus: dict) -> None:
    """Show available commands at the current level."""
    print()
    print(f"{Colors.BOLD}Navigation{Colors.NC}")
    print("  <menu>          Enter a submenu")
    print("  back, ..        Go up one level")
    print("  home, /         Return to top level")
    print("  exit, quit      Leave netcfg")
    print()

    if current_interface(ctx):
        print(f"{Colors.BOLD}Interface {current_interface(ctx)}{Colors.NC}")
        print("  show            Show declared IPv4/IPv6 configuration")
        print("  ipv4            Configure IPv4 (IPv6 settings are kept)")
        print("  ipv6            Configure IPv6 (IPv4 settings are kept)")
        print("  dns             Set DNS servers (static IPv4 only)")
        print("  quick           Configure IPv4 and IPv6 together")
        print("  backups         List backups of the netplan document")
        print("  restore         Restore the netplan document from a backup")
        print()
    elif ctx.path == ["interfaces"]:
        print(f"{Colors.BOLD}Interfaces{Colors.NC}")
        print("  list            List interfaces")
        print("  <interface>     Select an interface: " + (", ".join(ctx.interfaces) or "(none found)"))
        print()
    elif ctx.path == ["system"]:
        print(f"{Colors.BOLD}System{Colors.NC}")
        print("  disable-ipv6    Disable IPv6 system-wide")
        print("  enable-ipv6     Enable IPv6 system-wide")
        print()
    else:
        print(f"{Colors.BOLD}Menus{Colors.NC}")
        for name in menus["root"]["children"]:
            print(f"  {name}")
        print()

    print(f"{Colors.BOLD}Global{Colors.NC}")
    print("  status          Show network status")
    print("  show            Show netplan configuration files")
    print("  apply           Apply netplan configuration")
    print("  restart         Apply configuration and restart networking")
    print()


def handle_command(cmd: str, ctx: MenuContext, menus: dict) -> bool:
    """
    Handle a command. Returns False if should exit REPL.
    """
    parts = cmd.strip().split()
    if not parts:
        return True

    command = parts[0].lower()
    args = parts[1:]

    if command in ("exit", "quit"):
        return False

    if command in ("help", "?"):
        cmd_help(ctx, args, menus)
        return True

    if command in ("back", ".."):
        if ctx.path:
            ctx.path.pop()
        return True

    if command in ("home", "/"):
        ctx.path = []
        return True

    # Interface-level commands take precedence over global ones ("show")
    if current_interface(ctx) and command in INTERFACE_HANDLERS:
        INTERFACE_HANDLERS[command](ctx, args)
        return True

    if command in ROOT_COMMANDS:
        ROOT_COMMANDS[command](ctx, args)
        return True

    if ctx.path == ["interfaces"] and command == "list":
        cmd_interfaces_list(ctx, args)
        return True

    if ctx.path == ["system"] and command in SYSTEM_HANDLERS:
        SYSTEM_HANDLERS[command](ctx, args)
        return True

    # Multi-word form from any level: "interfaces eth0 ipv4"
    if command == "interfaces" and len(args) >= 2 and args[1] in INTERFACE_COMMANDS:
        saved = ctx.path
        ctx.path = ["interfaces", args[0]]
        try:
            INTERFACE_HANDLERS[args[1]](ctx, args[2:])
        finally:
            ctx.path = saved
        return True

    # Navigation, possibly several levels at once ("interfaces eth0")
    saved = list(ctx.path)
    for target in parts:
        if not navigate(ctx, target, menus):
            ctx.path = saved
            error(f"Unknown command: {' '.join(parts)}")
            print("  Type 'help' for available commands")
            return True
    return True


def run_repl(netplan_dir: Path) -> int:
    """Main REPL entry point."""
    print()
    print(f"{Colors.BOLD}netcfg Network Manager{Colors.NC}")
    print("Type 'help' for commands, 'exit' to quit")
    print()

    ctx = MenuContext(netplan_dir=netplan_dir, interfaces=interface_names())
    if not ctx.interfaces:
        info("No network interfaces detected; use 'interfaces <name> <command>' to address one directly")

    menus = build_menu_tree()

    history_file = Path.home() / ".netcfg_history"
    session = PromptSession(
        history=FileHistory(str(history_file)),
        completer=MenuCompleter(ctx, menus),
        style=NETCFG_STYLE,
    )

    while True:
        try:
            cmd = session.prompt(get_prompt_text(ctx))
            if not handle_command(cmd, ctx, menus):
                break
        except KeyboardInterrupt:
            print()
            continue
        except EOFError:
            print()
            break

    print("Goodbye!")
    return 0
