"""
Navigation utilities for the netcfg REPL.
"""

from typing import Optional

from .context import MenuContext


def navigate(ctx: MenuContext, target: str, menus: dict) -> bool:
    """
    Navigate to a menu. Returns True if navigation succeeded.

    Args:
        ctx: Current menu context
        target: Target menu name to navigate to
        menus: Menu tree dictionary
    """
    menu = menus.get("root")
    for segment in ctx.path:
        if menu and "children" in menu:
            menu = menu["children"].get(segment, {})

    if menu and "children" in menu and target in menu["children"]:
        ctx.path.append(target)
        return True

    # Dynamic interface navigation: interfaces <name>
    if ctx.path == ["interfaces"] and target in ctx.interfaces:
        ctx.path.append(target)
        return True

    return False


def current_interface(ctx: MenuContext) -> Optional[str]:
    """Interface selected by the menu path, if any."""
    if len(ctx.path) == 2 and ctx.path[0] == "interfaces":
        return ctx.path[1]
    return None
