"""
tlsinfo Console Output
=======================

Rich-based console renderers for the tlsinfo CLI: a connection panel and
colour-coded listings of the version and cipher suite tables.

References:
    - Rich Library Documentation. https://rich.readthedocs.io/
"""

from __future__ import annotations

from typing import Mapping, Optional

from rich.panel import Panel
from rich.text import Text

from shared.console import TLSInfoConsole
from tlsinfo.core.encoder import quality_style
from tlsinfo.core.models import Description
from tlsinfo.core.registry import cipher_suites, tls_versions
from tlsinfo.core.resolver import describe_cipher, describe_version, explain_cipher


class TLSConsoleOutput:
    """Console output formatters for tlsinfo.

    Usage::

        output = TLSConsoleOutput(TLSInfoConsole())
        output.display_connection(0x0303, 0xC02F)
        output.display_ciphers()
    """

    def __init__(self, console: Optional[TLSInfoConsole] = None) -> None:
        self.console = console or TLSInfoConsole()
        self._rich = self.console.rich

    @staticmethod
    def _styled(text: str, description: Description) -> Text:
        style = quality_style(description.quality)
        return Text(text, style=style) if style is not None else Text(text)

    def display_connection(self, version: int, cipher_suite: int) -> None:
        """Show one negotiated session as a panel, names coloured by tier."""
        version_desc = describe_version(version)
        cipher_desc = describe_cipher(cipher_suite)

        body = Text()
        body.append("Version: ", style="bold")
        body.append_text(self._styled(version_desc.name, version_desc))
        body.append("\nCipher Suite: ", style="bold")
        body.append_text(self._styled(cipher_desc.name, cipher_desc))

        self._rich.print(Panel(body, title="TLS Connection", border_style="cyan", expand=False))

    def display_versions(self) -> None:
        """List the protocol version table."""
        self._display_table("Protocol Versions", tls_versions())

    def display_ciphers(self) -> None:
        """List the cipher suite table with derived names."""
        self._display_table(
            "Cipher Suites",
            {code: explain_cipher(d) for code, d in cipher_suites().items()},
        )

    def _display_table(self, title: str, registry: Mapping[int, Description]) -> None:
        rows = [
            (
                f"0x{code:04X}",
                d.name,
                d.slug,
                self._styled(d.quality.label, d),
            )
            for code, d in sorted(registry.items())
        ]
        self.console.table(
            f"{title} ({len(rows)})",
            ["Code", "Name", "Slug", "Quality"],
            rows,
            styles=["dim", "bold", "", ""],
        )
