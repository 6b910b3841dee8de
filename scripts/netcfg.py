#!/usr/bin/env python3
"""
netcfg.py - Interactive netplan network manager

Configures IPv4 and IPv6 per interface through netplan, keeping the
other address family's settings intact and backing up every change.

Usage:
    netcfg.py              # Interactive configuration
    netcfg.py --show eth0  # Show the declared configuration of eth0
    netcfg.py --apply-only # Apply the existing netplan configuration
"""

from netcfg_lib.cli import main


if __name__ == "__main__":
    main()
