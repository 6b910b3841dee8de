"""
Console logging for netcfg.

Every message netcfg emits goes through one of four prefixed printers:
log for completed writes and applies, warn for parse advisories and
content a rewrite will drop, error for rejected or failed operations,
and info for hints about what to do next.
"""


class Colors:
    """ANSI escape codes used by the printers and the REPL displays."""
    RED = "\033[0;31m"
    GREEN = "\033[0;32m"
    YELLOW = "\033[1;33m"
    CYAN = "\033[0;36m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    NC = "\033[0m"  # Reset


def log(msg: str) -> None:
    """A change took effect (document saved, configuration applied)."""
    print(f"{Colors.GREEN}[+]{Colors.NC} {msg}")


def warn(msg: str) -> None:
    """Advisory; the operation continues."""
    print(f"{Colors.YELLOW}[!]{Colors.NC} {msg}")


def error(msg: str) -> None:
    """The operation was refused or failed."""
    print(f"{Colors.RED}[ERROR]{Colors.NC} {msg}")


def info(msg: str) -> None:
    print(f"{Colors.CYAN}[i]{Colors.NC} {msg}")
