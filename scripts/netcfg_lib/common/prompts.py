"""
Interactive prompt utilities for the REPL.

Provides wrapper functions around prompt_toolkit for collecting
user input with validation.
"""

from typing import Optional, Callable

from prompt_toolkit import prompt

from .colors import Colors, warn


def prompt_value(
    label: str,
    default: str = "",
    validator: Optional[Callable[[str], bool]] = None,
    error_msg: str = "Invalid input",
    required: bool = True,
) -> Optional[str]:
    """
    Prompt for a value with optional validation.

    Args:
        label: Prompt text to display
        default: Default value (shown in prompt, returned if empty input)
        validator: Optional function that returns True if input is valid
        error_msg: Message to show if validation fails
        required: Re-prompt on empty input when there is no default

    Returns:
        User input string, or None if cancelled (Ctrl+C/Ctrl+D)
    """
    while True:
        try:
            suffix = f" [{default}]" if default else ""
            result = prompt(f"{label}{suffix}: ").strip()
        except (KeyboardInterrupt, EOFError):
            return None

        if not result:
            if default:
                return default
            if required:
                warn("Value cannot be empty")
                continue
            return ""

        if validator and not validator(result):
            warn(error_msg)
            continue

        return result


def prompt_yes_no(question: str, default: bool = False) -> Optional[bool]:
    """
    Prompt for yes/no confirmation.

    Returns:
        True for yes, False for no, None if cancelled
    """
    suffix = " [Y/n]" if default else " [y/N]"
    while True:
        try:
            answer = prompt(f"{question}{suffix}: ").strip().lower()
        except (KeyboardInterrupt, EOFError):
            return None

        if not answer:
            return default
        if answer in ("y", "yes"):
            return True
        if answer in ("n", "no"):
            return False
        warn("Please answer yes or no")


def prompt_select(question: str, options: list[str], descriptions: list[str] = None) -> Optional[int]:
    """Prompt user to select from a list of options. Returns index, or None if cancelled."""
    print(f"\n{Colors.BOLD}{question}{Colors.NC}")

    for i, opt in enumerate(options, 1):
        if descriptions:
            print(f"  {i}) {opt} - {descriptions[i-1]}")
        else:
            print(f"  {i}) {opt}")

    while True:
        try:
            choice = prompt(f"Choice [1-{len(options)}]: ").strip()
        except (KeyboardInterrupt, EOFError):
            return None
        try:
            idx = int(choice) - 1
            if 0 <= idx < len(options):
                return idx
        except ValueError:
            pass
        warn(f"Invalid selection. Please enter 1-{len(options)}")


def prompt_list(label: str, default: str = "", validator: Optional[Callable[[str], bool]] = None) -> Optional[list[str]]:
    """Prompt for a comma-separated list. Empty input yields an empty list."""
    while True:
        value = prompt_value(label, default=default, required=False)
        if value is None:
            return None

        items = [x.strip() for x in value.split(",") if x.strip()]
        if validator:
            bad = [item for item in items if not validator(item)]
            if bad:
                for item in bad:
                    warn(f"Invalid: {item}")
                continue

        return items
