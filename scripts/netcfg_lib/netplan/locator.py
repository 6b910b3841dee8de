"""
Netplan document lookup for netcfg.

Finds the document that governs an interface so that edits always land
in the same file instead of creating duplicate declarations.
"""

from pathlib import Path

from .constants import DEFAULT_CONFIG_NAME, NETPLAN_DIR
from .parser import load_document


def list_configs(netplan_dir: Path = NETPLAN_DIR) -> list[Path]:
    """List netplan documents in the order netplan reads them."""
    if not netplan_dir.is_dir():
        return []
    return sorted(p for p in netplan_dir.glob("*.yaml") if p.is_file())


def find_config(iface: str, netplan_dir: Path = NETPLAN_DIR) -> Path:
    """
    Return the document declaring an interface.

    Args:
        iface: Interface name (e.g., "eth0")
        netplan_dir: Directory holding netplan YAML documents

    Returns:
        Path of the first document (in netplan order) declaring the
        interface under network.ethernets, otherwise the default
        document path for new interface configuration.
    """
    for path in list_configs(netplan_dir):
        if load_document(path, quiet=True).declares(iface):
            return path
    return netplan_dir / DEFAULT_CONFIG_NAME
