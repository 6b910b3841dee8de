"""
Apply mechanism for netcfg.

Runs `netplan apply` and reports its outcome. A failed apply leaves the
written document in place so the operator can fix it or retry.
"""

from typing import Sequence

from netcfg_lib.common import log, run_command

from .constants import APPLY_COMMAND, NETWORKD_SERVICE


class ApplyFailure(Exception):
    """Raised when the apply mechanism exits non-zero."""

    def __init__(self, message: str, output: str = ""):
        super().__init__(message)
        self.output = output  # Diagnostic text from the tool, verbatim


def apply_config(command: Sequence[str] = APPLY_COMMAND) -> str:
    """
    Activate the written configuration.

    Blocks until the tool returns; there is no timeout.

    Returns:
        The tool's output

    Raises:
        ApplyFailure: If the tool fails or cannot be run
    """
    log("Applying network configuration...")
    success, output = run_command(command)
    if not success:
        raise ApplyFailure(f"'{' '.join(command)}' failed", output)
    log("Network configuration applied")
    return output


def restart_networking(
    command: Sequence[str] = APPLY_COMMAND,
    service: str = NETWORKD_SERVICE,
) -> str:
    """Apply the configuration, then restart the network daemon."""
    output = apply_config(command)
    success, restart_output = run_command(["systemctl", "restart", service])
    if not success:
        raise ApplyFailure(f"Failed to restart {service}", restart_output)
    log(f"{service} restarted")
    return output
