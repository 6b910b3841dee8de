"""
netcfg_lib.netplan - Netplan interface configuration synthesizer.

This package contains:
- dataclasses: AddressFamilyState, StatePair, NetplanDocument, ...
- constants: Path constants and defaults (NETPLAN_DIR, APPLY_COMMAND, ...)
- validation: IP address and CIDR validation functions
- locator: Find the document governing an interface
- parser: Read a document into per-family states
- merger: Combine a requested family state with the other family's state
- renderer: Jinja2 rendering of states back into a document
- writer: Timestamped backups and atomic writes
- applier: Run the apply mechanism
- service: The operations exposed to the REPL and CLI
"""

from .constants import (
    NETPLAN_DIR,
    DEFAULT_CONFIG_NAME,
    APPLY_COMMAND,
)

from .dataclasses import (
    Family,
    Mode,
    FAMILY_MODES,
    AddressFamilyState,
    UNSET,
    StatePair,
    MergeDefaults,
    DEFAULTS,
    NetplanDocument,
    ParsedInterface,
    SetResult,
)

from .validation import (
    ValidationError,
    validate_ipv4,
    validate_ipv4_cidr,
    validate_ipv6,
    validate_ipv6_cidr,
    validate_state,
)

from .locator import list_configs, find_config
from .parser import ParseDegraded, load_document, parse_interface, parse_config
from .merger import merge_states, merge_both, resolve_pair
from .renderer import render_interface, render_document
from .writer import WriteFailure, backup_config, list_backups, write_config
from .applier import ApplyFailure, apply_config, restart_networking

from .service import (
    get_current_state,
    set_family_state,
    configure_interface,
    set_dns_servers,
    interface_backups,
    restore_backup,
)

__all__ = [
    # Constants
    'NETPLAN_DIR',
    'DEFAULT_CONFIG_NAME',
    'APPLY_COMMAND',
    # Dataclasses
    'Family',
    'Mode',
    'FAMILY_MODES',
    'AddressFamilyState',
    'UNSET',
    'StatePair',
    'MergeDefaults',
    'DEFAULTS',
    'NetplanDocument',
    'ParsedInterface',
    'SetResult',
    # Validation
    'ValidationError',
    'validate_ipv4',
    'validate_ipv4_cidr',
    'validate_ipv6',
    'validate_ipv6_cidr',
    'validate_state',
    # Pipeline
    'list_configs',
    'find_config',
    'ParseDegraded',
    'load_document',
    'parse_interface',
    'parse_config',
    'merge_states',
    'merge_both',
    'resolve_pair',
    'render_interface',
    'render_document',
    'WriteFailure',
    'backup_config',
    'list_backups',
    'write_config',
    'ApplyFailure',
    'apply_config',
    'restart_networking',
    # Operations
    'get_current_state',
    'set_family_state',
    'configure_interface',
    'set_dns_servers',
    'interface_backups',
    'restore_backup',
]
