"""
Menu tree definition for the netcfg REPL.
"""

# Commands available inside "interfaces <name>"
INTERFACE_COMMANDS = ["show", "ipv4", "ipv6", "dns", "quick", "backups", "restore"]


def build_menu_tree() -> dict:
    """Build the hierarchical menu structure."""
    return {
        "root": {
            "children": {
                "interfaces": {
                    "commands": ["list"],
                    "dynamic": True,  # Interface names come from the live system
                },
                "system": {
                    "commands": ["disable-ipv6", "enable-ipv6"],
                },
            },
            "commands": ["status", "show", "apply", "restart"],
        }
    }
