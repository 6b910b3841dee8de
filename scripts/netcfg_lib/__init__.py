"""
netcfg_lib - Shared library for the netcfg network manager

This package contains the netplan configuration synthesizer together with
the interactive REPL used to drive it.
"""

__version__ = "1.0.0"
