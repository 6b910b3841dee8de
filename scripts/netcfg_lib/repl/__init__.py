"""
netcfg_lib.repl - REPL components for netcfg

This package contains the modular components for the interactive REPL:
- context: Menu context and state tracking
- menu: Menu tree structure
- completer: Tab completion
- navigation: Menu navigation
- display/: Status and configuration display functions
- commands/: Command handlers
- dispatcher: Main command dispatcher and REPL loop
"""

from .context import MenuContext, get_prompt_text
from .menu import build_menu_tree, INTERFACE_COMMANDS
from .navigation import navigate, current_interface
from .completer import MenuCompleter

__all__ = [
    'MenuContext',
    'get_prompt_text',
    'build_menu_tree',
    'INTERFACE_COMMANDS',
    'navigate',
    'current_interface',
    'MenuCompleter',
]
