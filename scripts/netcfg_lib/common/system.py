"""
External command execution utilities.

Thin wrappers around subprocess for the OS tools netcfg drives
(ip, netplan, systemctl, sysctl).
"""

import os
import subprocess
from typing import Optional, Sequence, Tuple


def is_root() -> bool:
    """Check whether we are running with root privileges."""
    return os.geteuid() == 0


def run_command(command: Sequence[str], timeout: Optional[float] = None) -> Tuple[bool, str]:
    """
    Execute an external command and capture its output.

    Args:
        command: Argument vector (e.g., ["ip", "-j", "addr", "show"])
        timeout: Seconds to wait, or None to block until the command exits

    Returns:
        Tuple of (success: bool, output: str)
        On failure, output is the tool's stderr followed by its stdout,
        unmodified, so diagnostics reach the operator verbatim.
    """
    try:
        result = subprocess.run(
            list(command),
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except FileNotFoundError:
        return False, f"Command not found: {command[0]}"
    except OSError as e:
        return False, f"Cannot run {command[0]}: {e}"
    except subprocess.TimeoutExpired:
        return False, "Command timed out"

    if result.returncode != 0:
        return False, result.stderr + result.stdout
    return True, result.stdout.strip()
