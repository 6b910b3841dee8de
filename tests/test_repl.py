"""Tests for REPL navigation, completion and command dispatch."""

import pytest
from prompt_toolkit.document import Document

from netcfg_lib.netplan import Mode, get_current_state
from netcfg_lib.repl import MenuCompleter, MenuContext, build_menu_tree, current_interface, get_prompt_text, navigate
from netcfg_lib.repl.commands import network
from netcfg_lib.repl.dispatcher import handle_command


@pytest.fixture
def ctx(netplan_dir):
    return MenuContext(netplan_dir=netplan_dir, interfaces=["eth0", "eth1"])


@pytest.fixture
def menus():
    return build_menu_tree()


def _completions(ctx, menus, text):
    completer = MenuCompleter(ctx, menus)
    return [c.text for c in completer.get_completions(Document(text), None)]


def test_navigate(ctx, menus):
    assert navigate(ctx, "interfaces", menus)
    assert navigate(ctx, "eth0", menus)
    assert ctx.path == ["interfaces", "eth0"]
    assert current_interface(ctx) == "eth0"
    assert get_prompt_text(ctx) == "netcfg.interfaces.eth0> "


def test_navigate_unknown(ctx, menus):
    assert not navigate(ctx, "wlan0", menus)
    assert navigate(ctx, "interfaces", menus)
    assert not navigate(ctx, "wlan0", menus)
    assert ctx.path == ["interfaces"]
    assert current_interface(ctx) is None


def test_prompt_at_root(ctx):
    assert get_prompt_text(ctx) == "netcfg> "


def test_handle_navigation(ctx, menus):
    assert handle_command("interfaces eth1", ctx, menus)
    assert ctx.path == ["interfaces", "eth1"]
    assert handle_command("..", ctx, menus)
    assert ctx.path == ["interfaces"]
    assert handle_command("home", ctx, menus)
    assert ctx.path == []
    assert not handle_command("exit", ctx, menus)


def test_unknown_command_keeps_path(ctx, menus, capsys):
    handle_command("system", ctx, menus)
    assert handle_command("frobnicate", ctx, menus)
    assert ctx.path == ["system"]
    assert "Unknown command" in capsys.readouterr().out


def test_help(ctx, menus, capsys):
    handle_command("interfaces eth0", ctx, menus)
    handle_command("help", ctx, menus)
    out = capsys.readouterr().out
    assert "Interface eth0" in out
    assert "ipv6" in out


def test_interface_show(ctx, menus, capsys):
    handle_command("interfaces eth0", ctx, menus)
    handle_command("show", ctx, menus)
    out = capsys.readouterr().out
    assert "Interface: eth0" in out
    assert "not configured" in out


def test_multi_word_command_restores_path(ctx, menus, capsys):
    handle_command("system", ctx, menus)
    handle_command("interfaces eth1 show", ctx, menus)
    assert ctx.path == ["system"]
    assert "Interface: eth1" in capsys.readouterr().out


def test_completion_at_root(ctx, menus):
    items = _completions(ctx, menus, "")
    assert "interfaces" in items
    assert "system" in items
    assert "status" in items
    assert _completions(ctx, menus, "int") == ["interfaces"]


def test_completion_of_interfaces(ctx, menus):
    assert _completions(ctx, menus, "interfaces e") == ["eth0", "eth1"]
    assert "ipv4" in _completions(ctx, menus, "interfaces eth0 ")


def test_completion_inside_interface(ctx, menus):
    handle_command("interfaces eth0", ctx, menus)
    items = _completions(ctx, menus, "ip")
    assert items == ["ipv4", "ipv6"]


def test_ipv4_command_writes_document(ctx, menus, monkeypatch, capsys):
    monkeypatch.setattr(network, "is_root", lambda: True)
    monkeypatch.setattr(network, "prompt_select", lambda *args, **kwargs: 0)
    monkeypatch.setattr(network, "prompt_yes_no", lambda *args, **kwargs: False)

    handle_command("interfaces eth0 ipv4", ctx, menus)

    states = get_current_state("eth0", ctx.netplan_dir)
    assert states.ipv4.mode == Mode.DHCP
    assert states.ipv6.mode == Mode.AUTO
    assert "not applied" in capsys.readouterr().out


def test_ipv6_command_rejects_without_root(ctx, menus, monkeypatch, capsys):
    monkeypatch.setattr(network, "is_root", lambda: False)
    handle_command("interfaces eth0 ipv6", ctx, menus)
    assert "root privileges" in capsys.readouterr().out
    assert not (ctx.netplan_dir / "01-netcfg.yaml").exists()
