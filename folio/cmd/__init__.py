"""Command implementations for the folio CLI."""

from folio.cmd.build import cmd_build
from folio.cmd.check import cmd_check
from folio.cmd.scroll import cmd_scroll

__all__ = [
    "cmd_build",
    "cmd_check",
    "cmd_scroll",
]
