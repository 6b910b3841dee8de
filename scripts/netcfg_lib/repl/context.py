"""
Menu context and prompt utilities for the netcfg REPL.

This module contains:
- MenuContext: Tracks current position in menu hierarchy and session settings
- get_prompt_text: Generates the prompt string based on current menu path
"""

from dataclasses import dataclass, field
from pathlib import Path

from netcfg_lib.netplan import DEFAULTS, NETPLAN_DIR, MergeDefaults


@dataclass
class MenuContext:
    """Tracks current position in menu hierarchy and session settings."""
    path: list[str] = field(default_factory=list)
    netplan_dir: Path = NETPLAN_DIR
    defaults: MergeDefaults = DEFAULTS
    interfaces: list[str] = field(default_factory=list)  # Live interface names


def get_prompt_text(ctx: MenuContext) -> str:
    """Generate the prompt string based on current menu path."""
    if ctx.path:
        return f"netcfg.{'.'.join(ctx.path)}> "
    return "netcfg> "
