"""
Tab completion for the netcfg REPL.

This module provides context-aware command completion using prompt_toolkit.
"""

from prompt_toolkit.completion import Completer, Completion

from .context import MenuContext
from .menu import INTERFACE_COMMANDS
from .navigation import current_interface

GLOBAL_COMMANDS = ["help", "back", "home", "exit"]


class MenuCompleter(Completer):
    """Dynamic completer that provides context-aware completions."""

    def __init__(self, ctx: MenuContext, menus: dict):
        self.ctx = ctx
        self.menus = menus

    def get_completions(self, document, complete_event):
        text = document.text_before_cursor
        words = text.split()

        if not words:
            completions = self._get_menu_completions([])
            word = ""
        elif text.endswith(' '):
            completions = self._get_menu_completions(words)
            word = ""
        else:
            completions = self._get_menu_completions(words[:-1])
            word = words[-1].lower()

        for item in completions:
            if item.lower().startswith(word):
                yield Completion(item, start_position=-len(word))

    def _get_menu_at_path(self, path: list[str]):
        """Navigate to a menu based on path segments."""
        menu = self.menus.get("root")
        for segment in path:
            if menu and "children" in menu:
                menu = menu["children"].get(segment)
            else:
                return None
        return menu

    def _get_menu_completions(self, cmd_prefix: list[str]) -> list[str]:
        """Completions for the current path extended by already typed words."""
        path = self.ctx.path + cmd_prefix

        if len(path) == 2 and path[0] == "interfaces":
            if path[1] not in self.ctx.interfaces:
                return []
            return INTERFACE_COMMANDS + ([] if cmd_prefix else GLOBAL_COMMANDS)
        if current_interface(self.ctx) and cmd_prefix:
            return []

        menu = self._get_menu_at_path(path)
        if menu is None:
            return []

        items = list(menu.get("children", {}).keys()) + menu.get("commands", [])
        if menu.get("dynamic"):
            items.extend(self.ctx.interfaces)
        if not cmd_prefix:
            items.extend(GLOBAL_COMMANDS)
        return items
