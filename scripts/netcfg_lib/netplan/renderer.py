"""
Netplan document rendering for netcfg.

Serializes a resolved StatePair into the netplan YAML for one interface
using Jinja2 templates, and re-emits the surrounding document (other
interfaces and other network sections) unchanged.
"""

from pathlib import Path
from typing import Any, Optional

import yaml
from jinja2 import Environment, FileSystemLoader, StrictUndefined

from .constants import TEMPLATE_DIR
from .dataclasses import Mode, NetplanDocument, StatePair


def yaml_scalar(value: Any) -> str:
    """Render a scalar as YAML, quoting only where YAML would misread it."""
    text = yaml.safe_dump(value, default_flow_style=True, width=10000)
    if text.endswith("\n...\n"):
        text = text[:-len("\n...\n")]
    return text.strip()


def to_yaml(value: Any) -> str:
    """Render a mapping or list as block YAML (no trailing newline)."""
    if not isinstance(value, (dict, list)):
        return yaml_scalar(value)
    return yaml.safe_dump(value, default_flow_style=False, sort_keys=False).rstrip("\n")


def _environment(template_dir: Path) -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(template_dir)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )
    env.filters['scalar'] = yaml_scalar
    env.filters['to_yaml'] = to_yaml
    return env


def addresses_for(states: StatePair) -> list[str]:
    """Addresses block entries: one per static family."""
    return [s.address for s in (states.ipv4, states.ipv6) if s.mode == Mode.STATIC and s.address]


def routes_for(states: StatePair) -> list[tuple[str, str]]:
    """Default routes: one per static family with a gateway."""
    routes = []
    if states.ipv4.mode == Mode.STATIC and states.ipv4.gateway:
        routes.append(("default", states.ipv4.gateway))
    if states.ipv6.mode == Mode.STATIC and states.ipv6.gateway:
        routes.append(("::/0", states.ipv6.gateway))
    return routes


def nameservers_for(states: StatePair) -> list[str]:
    """Nameservers are only written alongside static IPv4."""
    if states.ipv4.mode != Mode.STATIC:
        return []
    return list(states.ipv4.dns_servers)


def render_interface(
    states: StatePair,
    extra: Optional[dict] = None,
    template_dir: Path = TEMPLATE_DIR,
) -> str:
    """
    Render the body of one interface declaration.

    Args:
        states: Resolved IPv4/IPv6 states (no family may be unset)
        extra: Unmanaged interface keys to carry through (match, mtu, ...)
        template_dir: Directory containing the Jinja2 templates

    Returns:
        YAML text for the interface body, keys at column zero
    """
    for state in (states.ipv4, states.ipv6):
        if state.mode == Mode.UNSET:
            raise ValueError("Cannot render an unset family; resolve defaults first")

    template = _environment(template_dir).get_template("interface.yaml.j2")
    return template.render(
        ipv4_mode=states.ipv4.mode.value,
        ipv6_mode=states.ipv6.mode.value,
        addresses=addresses_for(states),
        routes=routes_for(states),
        nameservers=nameservers_for(states),
        extra=extra or {},
    )


def render_document(
    document: NetplanDocument,
    iface: str,
    states: StatePair,
    extra: Optional[dict] = None,
    template_dir: Path = TEMPLATE_DIR,
) -> str:
    """
    Render a complete netplan document with one interface re-rendered.

    Interfaces other than ``iface`` keep their raw declarations and their
    position in the document; a new interface is appended.
    """
    body = render_interface(states, extra, template_dir).rstrip("\n")

    ethernets = []
    for name, raw in document.ethernets.items():
        if name == iface:
            ethernets.append((name, body))
        else:
            ethernets.append((name, to_yaml(raw if raw is not None else {})))
    if iface not in document.ethernets:
        ethernets.append((iface, body))

    template = _environment(template_dir).get_template("netplan.yaml.j2")
    return template.render(
        version=document.version,
        renderer=document.renderer,
        ethernets=ethernets,
        sections=document.sections,
    )
