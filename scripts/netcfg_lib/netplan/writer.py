"""
Netplan document persistence for netcfg.

Every write first copies the previous document to a timestamped backup
beside it, then replaces the document atomically with a root-only file.
"""

import os
import shutil
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Optional

from netcfg_lib.common import log

from .constants import BACKUP_INFIX, BACKUP_TIMESTAMP_FORMAT, CONFIG_FILE_MODE


class WriteFailure(Exception):
    """Raised when a backup or document write fails."""
    pass


def backup_path_for(path: Path, now: Optional[datetime] = None) -> Path:
    """Backup location for a document: <name>.bak.<timestamp>, never an existing file."""
    stamp = (now or datetime.now()).strftime(BACKUP_TIMESTAMP_FORMAT)
    candidate = path.with_name(f"{path.name}{BACKUP_INFIX}{stamp}")
    n = 1
    while candidate.exists():
        candidate = path.with_name(f"{path.name}{BACKUP_INFIX}{stamp}_{n}")
        n += 1
    return candidate


def list_backups(path: Path) -> list[Path]:
    """List backups of a document, newest first."""
    if not path.parent.is_dir():
        return []
    return sorted(path.parent.glob(f"{path.name}{BACKUP_INFIX}*"), reverse=True)


def backup_config(path: Path) -> Optional[Path]:
    """
    Copy a document to its timestamped backup.

    Returns:
        The backup path, or None if the document does not exist

    Raises:
        WriteFailure: If the copy fails
    """
    if not path.exists():
        return None

    backup = backup_path_for(path)
    try:
        shutil.copy2(path, backup)
    except OSError as e:
        raise WriteFailure(f"Failed to back up {path} to {backup}: {e}") from e
    return backup


def write_config(path: Path, content: str, mode: int = CONFIG_FILE_MODE) -> Optional[Path]:
    """
    Back up and atomically replace a document.

    The content is written to a temporary file in the same directory,
    synced, restricted to ``mode`` and renamed over the document, so the
    document is either fully old or fully new.

    Returns:
        The backup path, or None if there was no previous document

    Raises:
        WriteFailure: If the backup or write fails; the document is untouched
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise WriteFailure(f"Cannot create {path.parent}: {e}") from e

    backup = backup_config(path)

    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    except OSError as e:
        raise WriteFailure(f"Cannot create temporary file in {path.parent}: {e}") from e

    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())
        os.chmod(tmp_path, mode)
        os.replace(tmp_path, path)
    except OSError as e:
        tmp_path.unlink(missing_ok=True)
        raise WriteFailure(f"Failed to write {path}: {e}") from e

    if backup:
        log(f"Previous configuration saved to {backup}")
    log(f"Network configuration saved: {path}")
    return backup
