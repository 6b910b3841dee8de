"""
netcfg command line entry point.

Usage:
    netcfg                      # Interactive network manager
    netcfg --show eth0          # Print the declared configuration of eth0
    netcfg --apply-only         # Apply the current netplan configuration
"""

import argparse
import sys
from pathlib import Path

from netcfg_lib.common import error, info, is_root
from netcfg_lib.netplan import (
    NETPLAN_DIR,
    ApplyFailure,
    apply_config,
    find_config,
    get_current_state,
)
from netcfg_lib.repl.dispatcher import run_repl
from netcfg_lib.repl.display import show_interface_state


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Manage netplan interface configuration")
    parser.add_argument("--netplan-dir", type=Path, default=NETPLAN_DIR,
                        help=f"Netplan configuration directory (default: {NETPLAN_DIR})")
    parser.add_argument("--apply-only", action="store_true",
                        help="Apply the existing netplan configuration without prompts")
    parser.add_argument("--show", metavar="IFACE",
                        help="Show the declared configuration of an interface and exit")
    args = parser.parse_args()

    if args.show:
        show_interface_state(args.show, find_config(args.show, args.netplan_dir),
                             get_current_state(args.show, args.netplan_dir))
        return

    if args.apply_only:
        if not is_root():
            error("This script must be run as root")
            sys.exit(1)
        try:
            apply_config()
        except ApplyFailure as e:
            error(f"Failed to apply configuration: {e}")
            if e.output:
                print(e.output)
            sys.exit(1)
        return

    if not args.netplan_dir.is_dir():
        info(f"Netplan directory {args.netplan_dir} does not exist yet; it is created on first write")

    sys.exit(run_repl(args.netplan_dir))


if __name__ == "__main__":
    main()
