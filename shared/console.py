"""
tlsinfo Console Interface
==========================

Rich-powered console abstraction providing a single presentation layer
for the tlsinfo command-line front end.

The class wraps :class:`rich.console.Console` and adds convenience methods
for the banner, success messages, and tables, all with consistent
styling.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from typing import Any, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

# ---------------------------------------------------------------------------
# Theme -- consistent palette across all tlsinfo output
# ---------------------------------------------------------------------------
_TLSINFO_THEME = Theme(
    {
        "tlsinfo.banner": "bold bright_cyan",
        "tlsinfo.success": "bold green",
        "tlsinfo.dim": "dim white",
        "tlsinfo.insecure": "red",
        "tlsinfo.acceptable": "yellow",
        "tlsinfo.good": "green",
    }
)

_TAGLINE = "TLS session classifier"


class TLSInfoConsole:
    """Unified console interface for the tlsinfo CLI.

    Usage::

        con = TLSInfoConsole()
        con.banner()
        con.success("Report written")
    """

    def __init__(
        self,
        *,
        quiet: bool = False,
        record: bool = False,
        no_color: bool = False,
        width: int | None = None,
    ) -> None:
        """Initialise the console.

        Args:
            quiet:    Suppress all output (useful in library / test mode).
            record:   Enable Rich recording for text export.
            no_color: Strip colour styles from everything printed.
            width:    Fixed console width; ``None`` lets Rich detect it.
        """
        self._console = Console(
            theme=_TLSINFO_THEME,
            quiet=quiet,
            record=record,
            no_color=no_color,
            highlight=False,
            width=width,
        )

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    def banner(self, version: str = "1.0.0") -> None:
        """Display the tlsinfo banner panel."""
        body = Text()
        body.append("tlsinfo", style="tlsinfo.banner")
        body.append(f"  {_TAGLINE}\n", style="tlsinfo.dim")
        body.append(f"Version: {version}", style="tlsinfo.dim")
        self._console.print(Panel(body, border_style="bright_cyan", expand=False))

    # ------------------------------------------------------------------ #
    #  Message helpers
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        self._console.print(
            f"[tlsinfo.success][✔] SUCCESS:[/tlsinfo.success] {message}"
        )

    # ------------------------------------------------------------------ #
    #  Table display
    # ------------------------------------------------------------------ #

    def table(
        self,
        title: str,
        columns: Sequence[str],
        rows: Sequence[Sequence[Any]],
        *,
        caption: str | None = None,
        styles: Sequence[str] | None = None,
    ) -> None:
        """Render a styled Rich table.

        Cells that are already :class:`rich.text.Text` keep their styling;
        anything else is stringified.

        Args:
            title:    Table title.
            columns:  Column header labels.
            rows:     Iterable of row tuples.
            caption:  Optional footer caption.
            styles:   Optional per-column Rich style strings.
        """
        tbl = Table(
            title=title,
            caption=caption,
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            padding=(0, 1),
        )
        for idx, col_name in enumerate(columns):
            style = styles[idx] if styles and idx < len(styles) else ""
            tbl.add_column(col_name, style=style)

        for row in rows:
            tbl.add_row(*(cell if isinstance(cell, Text) else str(cell) for cell in row))

        self._console.print(tbl)

    # ------------------------------------------------------------------ #
    #  Utility
    # ------------------------------------------------------------------ #

    def export_text(self) -> str:
        """Export recorded console output as plain text (requires ``record=True``)."""
        return self._console.export_text()
