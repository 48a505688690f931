# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Command-line client for the werft job orchestration service.

This package translates job search expressions typed on the command line
(e.g. `phase==running`, `name:desc`) into structured requests, sends them to
the werft service, and renders the returned jobs. All werft CLI commands
ultimately delegate to the functionality implemented here.
"""

from .werft import __version__, build_cli, cli

__all__ = [
    "__version__",
    "build_cli",
    "cli",
    "client",
    "core",
    "job",
    "properties",
    "query",
]
