"""
Configuration constants for netcfg.

Paths and default values used across the netplan configuration system.
"""

from pathlib import Path


# Netplan document locations
NETPLAN_DIR = Path("/etc/netplan")
DEFAULT_CONFIG_NAME = "01-netcfg.yaml"
TEMPLATE_DIR = Path(__file__).parent / "templates"

# Document defaults for newly created files
NETPLAN_VERSION = 2
NETPLAN_RENDERER = "networkd"

# Apply mechanism
APPLY_COMMAND = ("netplan", "apply")
NETWORKD_SERVICE = "systemd-networkd"

# Backups are written beside the document as <name>.bak.<timestamp>
BACKUP_INFIX = ".bak."
BACKUP_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"

# Written documents are readable by root only
CONFIG_FILE_MODE = 0o600

# System-wide IPv6 toggle and resolver
SYSCTL_IPV6_FILE = Path("/etc/sysctl.d/99-disable-ipv6.conf")
RESOLV_CONF = Path("/etc/resolv.conf")
