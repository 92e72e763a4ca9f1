"""CLI commands for afm-patterns.

Commands are registered by importing them in __main__.py.
"""

from __future__ import annotations

from afm_patterns.cli.commands.init_cmd import init
from afm_patterns.cli.commands.inspect_cmd import inspect
from afm_patterns.cli.commands.merge import merge
from afm_patterns.cli.commands.normalize import normalize

__all__ = [
    "init",
    "inspect",
    "merge",
    "normalize",
]
