"""
netcfg_lib.common - Shared utilities for netcfg tools

This module provides:
- colors: ANSI color codes and logging functions
- system: external command execution utilities
- prompts: Interactive prompt utilities
"""

from .colors import Colors, log, warn, error, info
from .system import is_root, run_command

__all__ = [
    'Colors', 'log', 'warn', 'error', 'info',
    'is_root', 'run_command',
]
