"""
tlsinfo CLI
============

Click-based command-line interface over the tlsinfo classifier.

Usage::

    python -m tlsinfo describe 0x0303 0xc02f
    python -m tlsinfo -o json describe 771 49199
    python -m tlsinfo versions
    python -m tlsinfo --no-color ciphers

Identifiers are accepted as decimal or ``0x``-prefixed hexadecimal and
must fit in 16 bits.

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import click

from shared.config import TLSInfoConfig
from shared.console import TLSInfoConsole
from shared.logger import TLSInfoLogger

from tlsinfo import __version__
from tlsinfo.core.encoder import encode_to_object, encode_to_text
from tlsinfo.core.registry import cipher_suites, tls_versions
from tlsinfo.core.resolver import explain_cipher
from tlsinfo.output.console import TLSConsoleOutput
from tlsinfo.output.report import TLSReportGenerator, registry_records


# ===================================================================== #
#  Parameter Types
# ===================================================================== #


class CodeParamType(click.ParamType):
    """A 16-bit TLS code given in decimal or ``0x`` hexadecimal."""

    name = "code"

    def convert(self, value: Any, param: Optional[click.Parameter], ctx: Optional[click.Context]) -> int:
        if isinstance(value, int):
            code = value
        else:
            try:
                code = int(str(value).strip(), 0)
            except ValueError:
                self.fail(
                    f"{value!r} is not a decimal or 0x-prefixed hex code", param, ctx
                )
        if not 0 <= code <= 0xFFFF:
            self.fail(f"{value!r} is outside the 16-bit range 0..0xFFFF", param, ctx)
        return code


CODE = CodeParamType()


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to a tlsinfo configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json"]),
    default=None,
    help="Output format (defaults to the configured one).",
)
@click.option(
    "--output-file", "-f",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write JSON output to this file instead of stdout.",
)
@click.option(
    "--color/--no-color",
    default=None,
    help="Force or disable quality colouring.",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress banner and informational output.",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Enable debug logging.",
)
@click.version_option(__version__, prog_name="tlsinfo")
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: Optional[str],
    output_file: Optional[str],
    color: Optional[bool],
    quiet: bool,
    verbose: bool,
) -> None:
    """tlsinfo -- classify a negotiated TLS version and cipher suite."""
    ctx.ensure_object(dict)

    try:
        tls_config = TLSInfoConfig.load(config) if config else TLSInfoConfig()
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--config") from exc

    settings = tls_config.global_settings
    log = TLSInfoLogger(
        log_level="DEBUG" if verbose or settings.debug else settings.log_level,
        log_file=settings.log_file or None,
        json_logs=settings.log_json,
        console_output=True,
    )
    ctx.call_on_close(log.reset)

    output_format = output or tls_config.display.output_format
    if output_file is not None and output_format != "json":
        raise click.UsageError("--output-file requires JSON output (-o json).", ctx=ctx)

    use_color = tls_config.display.color if color is None else color
    console = TLSInfoConsole(no_color=not use_color)

    ctx.obj["config"] = tls_config
    ctx.obj["logger"] = log
    ctx.obj["output_format"] = output_format
    ctx.obj["output_file"] = output_file
    ctx.obj["color"] = use_color
    ctx.obj["force_color"] = color is True
    ctx.obj["quiet"] = quiet
    ctx.obj["console"] = console
    ctx.obj["display"] = TLSConsoleOutput(console)
    ctx.obj["reporter"] = TLSReportGenerator(version=__version__)

    if tls_config.display.banner and not quiet and output_format == "console":
        console.banner(version=__version__)


def _emit_json(payload: Any) -> None:
    click.echo(json.dumps(payload, indent=2, ensure_ascii=False))


# ===================================================================== #
#  Subcommands
# ===================================================================== #

@cli.command()
@click.argument("version", type=CODE)
@click.argument("cipher_suite", metavar="CIPHER", type=CODE)
@click.option(
    "--panel",
    is_flag=True,
    default=False,
    help="Render console output as a Rich panel instead of the plain block.",
)
@click.pass_context
def describe(ctx: click.Context, version: int, cipher_suite: int, panel: bool) -> None:
    """Describe a negotiated VERSION and CIPHER suite.

    Console output is the coloured text block; JSON output carries the
    version and cipher slugs.
    """
    log: TLSInfoLogger = ctx.obj["logger"]

    with log.operation("describe"):
        log.debug("Describing version 0x%04x, cipher 0x%04x", version, cipher_suite)

        if ctx.obj["output_format"] == "console":
            if panel:
                display: TLSConsoleOutput = ctx.obj["display"]
                display.display_connection(version, cipher_suite)
                return
            text = encode_to_text(version, cipher_suite, color=ctx.obj["color"])
            click.echo(text, color=True if ctx.obj["force_color"] else None)
            return

        description = encode_to_object(version, cipher_suite)
        output_file = ctx.obj["output_file"]
        if output_file is None:
            _emit_json(description.model_dump())
            return

        reporter: TLSReportGenerator = ctx.obj["reporter"]
        try:
            path = reporter.generate_json(description, Path(output_file))
        except OSError as exc:
            raise click.FileError(output_file, hint=str(exc)) from exc
        log.info("Report written to %s", path)
        if not ctx.obj["quiet"]:
            ctx.obj["console"].success(f"JSON report saved to: {path}")


@cli.command()
@click.pass_context
def versions(ctx: click.Context) -> None:
    """List the known protocol versions and their quality tiers."""
    if ctx.obj["output_format"] == "json":
        _emit_json(registry_records(tls_versions()))
        return
    display: TLSConsoleOutput = ctx.obj["display"]
    display.display_versions()


@cli.command()
@click.pass_context
def ciphers(ctx: click.Context) -> None:
    """List the known cipher suites and their quality tiers."""
    if ctx.obj["output_format"] == "json":
        explained = {code: explain_cipher(d) for code, d in cipher_suites().items()}
        _emit_json(registry_records(explained))
        return
    display: TLSConsoleOutput = ctx.obj["display"]
    display.display_ciphers()


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the tlsinfo CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
