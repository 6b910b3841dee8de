"""
Interface configuration operations for netcfg.

These are the entry points used by the REPL and CLI: read the current
state of an interface, change one family (or both), adjust DNS, and
restore a previous document. Every change follows the same pipeline:
locate, parse, merge, render, write, and optionally apply.
"""

from dataclasses import replace
from pathlib import Path
from typing import Optional, Sequence

from .applier import apply_config
from .constants import APPLY_COMMAND, NETPLAN_DIR
from .dataclasses import (
    DEFAULTS,
    AddressFamilyState,
    Family,
    MergeDefaults,
    Mode,
    NetplanDocument,
    ParsedInterface,
    SetResult,
    StatePair,
)
from .locator import find_config
from .merger import merge_both, merge_states
from .parser import load_document, parse_interface
from .renderer import render_document
from .validation import ValidationError, validate_ipv4
from .writer import list_backups, write_config


def read_interface(iface: str, netplan_dir: Path = NETPLAN_DIR) -> tuple[NetplanDocument, ParsedInterface]:
    """Locate, load and interpret an interface's declaration."""
    document = load_document(find_config(iface, netplan_dir))
    return document, parse_interface(document, iface)


def get_current_state(iface: str, netplan_dir: Path = NETPLAN_DIR) -> StatePair:
    """Current IPv4 and IPv6 state of an interface (unset where nothing is declared)."""
    _, parsed = read_interface(iface, netplan_dir)
    return parsed.states


def _commit(
    document: NetplanDocument,
    iface: str,
    states: StatePair,
    extra: dict,
    confirm_apply: bool,
    apply_command: Sequence[str],
) -> SetResult:
    content = render_document(document, iface, states, extra)
    backup = write_config(document.path, content)
    result = SetResult(path=document.path, backup=backup, states=states, content=content)

    if confirm_apply:
        result.apply_output = apply_config(apply_command)
        result.applied = True

    return result


def set_family_state(
    iface: str,
    family: Family,
    state: AddressFamilyState,
    confirm_apply: bool = False,
    netplan_dir: Path = NETPLAN_DIR,
    defaults: MergeDefaults = DEFAULTS,
    apply_command: Sequence[str] = APPLY_COMMAND,
) -> SetResult:
    """
    Change one family of an interface, preserving the other family.

    Args:
        iface: Interface name
        family: Family being changed
        state: Requested state for that family
        confirm_apply: Run the apply mechanism after writing; the caller
            must have obtained the operator's confirmation
        netplan_dir: Directory holding netplan documents
        defaults: Family defaults for never-configured families
        apply_command: Apply mechanism argument vector

    Raises:
        ValidationError: Nothing was written
        WriteFailure: The original document is untouched
        ApplyFailure: The new document stays on disk for a later retry
    """
    document, parsed = read_interface(iface, netplan_dir)
    states = merge_states(parsed.states, family, state, defaults)
    return _commit(document, iface, states, parsed.extra, confirm_apply, apply_command)


def configure_interface(
    iface: str,
    ipv4: AddressFamilyState,
    ipv6: AddressFamilyState,
    confirm_apply: bool = False,
    netplan_dir: Path = NETPLAN_DIR,
    defaults: MergeDefaults = DEFAULTS,
    apply_command: Sequence[str] = APPLY_COMMAND,
) -> SetResult:
    """Set both families of an interface in a single write."""
    document, parsed = read_interface(iface, netplan_dir)
    states = merge_both(ipv4, ipv6, defaults)
    return _commit(document, iface, states, parsed.extra, confirm_apply, apply_command)


def set_dns_servers(
    iface: str,
    servers: Sequence[str],
    confirm_apply: bool = False,
    netplan_dir: Path = NETPLAN_DIR,
    defaults: MergeDefaults = DEFAULTS,
    apply_command: Sequence[str] = APPLY_COMMAND,
) -> SetResult:
    """
    Replace the DNS servers of an interface with static IPv4.

    Raises:
        ValidationError: If IPv4 is not static or a server is invalid
    """
    current = get_current_state(iface, netplan_dir).ipv4
    if current.mode != Mode.STATIC:
        raise ValidationError(
            f"DNS servers are set with static IPv4; {iface} IPv4 is {current.mode.value}"
        )
    if not servers:
        raise ValidationError("At least one DNS server is required")

    bad = [s for s in servers if not validate_ipv4(s)]
    if bad:
        raise ValidationError(f"Invalid DNS server(s): {', '.join(bad)}")

    return set_family_state(
        iface, Family.IPV4, replace(current, dns_servers=tuple(servers)),
        confirm_apply=confirm_apply, netplan_dir=netplan_dir,
        defaults=defaults, apply_command=apply_command,
    )


def interface_backups(iface: str, netplan_dir: Path = NETPLAN_DIR) -> tuple[Path, list[Path]]:
    """The document governing an interface and its backups, newest first."""
    path = find_config(iface, netplan_dir)
    return path, list_backups(path)


def restore_backup(path: Path, backup: Path) -> Optional[Path]:
    """
    Restore a document from one of its backups.

    The current document is itself backed up first.

    Returns:
        The backup taken of the current document, if any
    """
    if backup not in list_backups(path):
        raise ValidationError(f"{backup} is not a backup of {path}")
    return write_config(path, backup.read_text(encoding="utf-8"))
