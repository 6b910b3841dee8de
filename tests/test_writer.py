"""Tests for backups and atomic document writes."""

import os
import stat
from datetime import datetime

import pytest

from netcfg_lib.netplan import WriteFailure, list_backups, write_config
from netcfg_lib.netplan.writer import backup_path_for


def _mode(path):
    return stat.S_IMODE(path.stat().st_mode)


def test_backup_name(netplan_dir):
    path = netplan_dir / "01-netcfg.yaml"
    backup = backup_path_for(path, datetime(2024, 3, 5, 14, 7, 9))
    assert backup == netplan_dir / "01-netcfg.yaml.bak.20240305_140709"


def test_backup_name_never_overwrites(netplan_dir):
    path = netplan_dir / "01-netcfg.yaml"
    now = datetime(2024, 3, 5, 14, 7, 9)
    backup_path_for(path, now).write_text("old")
    assert backup_path_for(path, now) == netplan_dir / "01-netcfg.yaml.bak.20240305_140709_1"


def test_write_new_document(netplan_dir):
    path = netplan_dir / "01-netcfg.yaml"
    assert write_config(path, "network: {version: 2}\n") is None
    assert path.read_text() == "network: {version: 2}\n"
    assert _mode(path) == 0o600
    assert list_backups(path) == []


def test_write_creates_directory(tmp_path):
    path = tmp_path / "etc" / "netplan" / "01-netcfg.yaml"
    write_config(path, "network: {version: 2}\n")
    assert path.exists()


def test_write_backs_up_previous(netplan_dir):
    path = netplan_dir / "01-netcfg.yaml"
    path.write_text("old\n")
    os.chmod(path, 0o644)

    backup = write_config(path, "new\n")

    assert backup is not None
    assert backup.name.startswith("01-netcfg.yaml.bak.")
    assert backup.read_text() == "old\n"
    assert path.read_text() == "new\n"
    assert _mode(path) == 0o600
    assert list_backups(path) == [backup]


def test_list_backups_newest_first(netplan_dir):
    path = netplan_dir / "01-netcfg.yaml"
    older = netplan_dir / "01-netcfg.yaml.bak.20240101_000000"
    newer = netplan_dir / "01-netcfg.yaml.bak.20240601_000000"
    for p in (older, newer):
        p.write_text("x")
    (netplan_dir / "02-other.yaml.bak.20250101_000000").write_text("x")
    assert list_backups(path) == [newer, older]


def test_failed_write_leaves_document_untouched(netplan_dir, monkeypatch):
    path = netplan_dir / "01-netcfg.yaml"
    path.write_text("old\n")

    def boom(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr(os, "replace", boom)

    with pytest.raises(WriteFailure, match="disk full"):
        write_config(path, "new\n")

    assert path.read_text() == "old\n"
    assert not list(netplan_dir.glob(".01-netcfg.yaml.*.tmp"))
