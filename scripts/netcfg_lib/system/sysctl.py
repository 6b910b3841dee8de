"""
System-wide IPv6 toggle for netcfg.

Disabling writes a sysctl drop-in and loads it; enabling removes the
drop-in and resets the keys at runtime.
"""

from pathlib import Path

from netcfg_lib.common import error, info, log, run_command
from netcfg_lib.netplan.constants import SYSCTL_IPV6_FILE

IPV6_SYSCTL_KEYS = (
    "net.ipv6.conf.all.disable_ipv6",
    "net.ipv6.conf.default.disable_ipv6",
    "net.ipv6.conf.lo.disable_ipv6",
)


def ipv6_system_disabled(sysctl_file: Path = SYSCTL_IPV6_FILE) -> bool:
    """Check whether the IPv6 disable drop-in is installed."""
    return sysctl_file.exists()


def sysctl_content() -> str:
    lines = ["# Disable IPv6 (managed by netcfg)"]
    lines.extend(f"{key} = 1" for key in IPV6_SYSCTL_KEYS)
    return "\n".join(lines) + "\n"


def disable_ipv6_system(sysctl_file: Path = SYSCTL_IPV6_FILE) -> bool:
    """Disable IPv6 on all interfaces, persistently. Returns True on success."""
    sysctl_file.parent.mkdir(parents=True, exist_ok=True)
    sysctl_file.write_text(sysctl_content())

    success, output = run_command(["sysctl", "-p", str(sysctl_file)])
    if not success:
        error(f"Failed to load {sysctl_file}: {output.strip()}")
        return False

    log("IPv6 disabled system-wide")
    return True


def enable_ipv6_system(sysctl_file: Path = SYSCTL_IPV6_FILE) -> bool:
    """Remove the IPv6 disable drop-in and re-enable IPv6 at runtime."""
    if not sysctl_file.exists():
        info("IPv6 is not disabled system-wide")
        return False

    sysctl_file.unlink()

    ok = True
    for key in IPV6_SYSCTL_KEYS:
        success, output = run_command(["sysctl", "-w", f"{key}=0"])
        if not success:
            error(f"Failed to set {key}: {output.strip()}")
            ok = False

    if ok:
        log("IPv6 enabled system-wide")
    return ok
