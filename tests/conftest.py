import subprocess
import textwrap

import pytest

from netcfg_lib.netplan import parse_config


@pytest.fixture
def netplan_dir(tmp_path):
    path = tmp_path / "netplan"
    path.mkdir()
    return path


@pytest.fixture
def write_doc(netplan_dir):
    """Write a dedented netplan document into the netplan directory."""
    def _write(name, text):
        path = netplan_dir / name
        path.write_text(textwrap.dedent(text).lstrip())
        return path
    return _write


@pytest.fixture
def fake_run(monkeypatch):
    """Replace subprocess.run; records calls and returns a configurable result."""
    calls = []
    result = {"returncode": 0, "stdout": "", "stderr": ""}

    def run(args, **kwargs):
        calls.append(list(args))
        return subprocess.CompletedProcess(args, result["returncode"], result["stdout"], result["stderr"])

    monkeypatch.setattr(subprocess, "run", run)
    run.calls = calls
    run.result = result
    return run


@pytest.fixture
def read_back(tmp_path):
    """Parse rendered text exactly as a document on disk is parsed."""
    def _read(content, iface="eth0"):
        path = tmp_path / "rendered.yaml"
        path.write_text(content)
        return parse_config(path, iface)
    return _read
