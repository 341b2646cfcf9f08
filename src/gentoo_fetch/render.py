"""
Terminal rendering for Gentoo Fetch.

Prints the Gentoo logo and the collected fields using rich.
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from gentoo_fetch.core import HostInfoRecord

LOGO_STYLE = "#ffc0cb"
LABEL_STYLE = "#ffc0cb"
ERROR_STYLE = "red"
ERROR_PREFIX = "critical-invalid: "

LOGO = r'''
    .vir.                                d$b
  .d$$$$$$b.    .cd$$b.     .d$$b.   d$$$$$$$$$$$b  .d$$b.      .d$$b.
  $$$$( )$$$b d$$$()$$$.   d$$$$$$$b Q$$$$$$$P$$$P.$$$$$$$b.  .$$$$$$$b.
  Q$$$$$$$$$$B$$$$$$$$P"  d$$$PQ$$$$b.   $$$$.   .$$$P' `$$$ .$$$P' `$$$
    "$$$$$$$P Q$$$$$$$b  d$$$P   Q$$$$b  $$$$b   $$$$b..d$$$ $$$$b..d$$$
   d$$$$$$P"   "$$$$$$$$ Q$$$     Q$$$$  $$$$$   `Q$$$$$$$P  `Q$$$$$$$P
  $$$$$$$P       `"""""   ""        ""   Q$$$P     "Q$$$P"     "Q$$$P"
  `Q$$P"                                  """'''


class Renderer:
    """Writes the logo, host fields and fatal errors to the terminal."""

    def __init__(
        self,
        console: Console | None = None,
        error_console: Console | None = None,
        color: bool = True,
        show_gcc: bool = False,
    ):
        self.console = console or Console(highlight=False)
        self.error_console = error_console or Console(stderr=True, highlight=False)
        self.color = color
        self.show_gcc = show_gcc

    def _style(self, style: str) -> str:
        return style if self.color else ""

    def render_logo(self) -> None:
        """Print the logo followed by a blank line."""
        self.console.print(Text(LOGO, style=self._style(LOGO_STYLE)), soft_wrap=True)
        self.console.print()

    def render_fields(self, record: HostInfoRecord) -> None:
        """Print each field as a labelled line, then a blank line."""
        for label, value in record.items(include_gcc=self.show_gcc):
            line = Text.assemble(
                (f"  {label:<9}: ", self._style(LABEL_STYLE)),
                value or "N/A",
            )
            self.console.print(line, soft_wrap=True)
        self.console.print()

    def render_error(self, message: str) -> None:
        self.error_console.print(
            Text(f"{ERROR_PREFIX}{message}", style=self._style(ERROR_STYLE)),
            soft_wrap=True,
        )
