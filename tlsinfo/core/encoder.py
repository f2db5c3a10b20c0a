"""
TLS Connection Encoders
========================

Two renderings of a negotiated (version, cipher suite) pair:

    encode_to_object : :class:`TLSDescription` carrying the two slugs,
                       for JSON and other structured output
    encode_to_text   : a fixed three-line block for console display,
                       each name coloured by its quality tier

Both are pure functions of their inputs and the static registry.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

from rich.color import ColorSystem
from rich.style import Style

from tlsinfo.core.models import ConnectionState, Description, Quality, TLSDescription
from tlsinfo.core.resolver import describe_cipher, describe_version


class TemplateRenderError(RuntimeError):
    """The built-in TLS layout could not be rendered.

    The layout is a module constant, so this signals a defect in tlsinfo
    itself and is not meant to be caught and recovered from.
    """


_TLS_LAYOUT = """\
** TLS Connection **
Version: {version}
Cipher Suite: {cipher}"""

_QUALITY_STYLES: Mapping[Quality, Style] = MappingProxyType({
    Quality.INSECURE: Style(color="red"),
    Quality.ACCEPTABLE: Style(color="yellow"),
    Quality.GOOD: Style(color="green"),
})


def quality_style(quality: Quality) -> Optional[Style]:
    """Display style for a quality tier, or ``None`` if it has none."""
    return _QUALITY_STYLES.get(quality)


def _colorize(description: Description) -> str:
    style = quality_style(description.quality)
    if style is None:
        return description.name
    return style.render(description.name, color_system=ColorSystem.STANDARD)


def _render_layout(version: str, cipher: str) -> str:
    try:
        return _TLS_LAYOUT.format(version=version, cipher=cipher)
    except (KeyError, IndexError, ValueError) as exc:
        raise TemplateRenderError(f"TLS layout failed to render: {exc}") from exc


def encode_to_object(version: int, cipher_suite: int) -> TLSDescription:
    """Return a JSON-serialisable description of a TLS connection.

    Args:
        version: Negotiated protocol version code.
        cipher_suite: Negotiated IANA cipher suite code.

    Returns:
        :class:`TLSDescription` holding the version and cipher slugs.
    """
    return TLSDescription(
        version=describe_version(version).slug,
        cipher=describe_cipher(cipher_suite).slug,
    )


def encode_to_text(version: int, cipher_suite: int, *, color: bool = True) -> str:
    """Return a human-readable block suitable for console output.

    Args:
        version: Negotiated protocol version code.
        cipher_suite: Negotiated IANA cipher suite code.
        color: Wrap each name in the ANSI colour of its quality tier.

    Raises:
        TemplateRenderError: If the built-in layout fails to render.
    """
    version_desc = describe_version(version)
    cipher_desc = describe_cipher(cipher_suite)
    if color:
        return _render_layout(_colorize(version_desc), _colorize(cipher_desc))
    return _render_layout(version_desc.name, cipher_desc.name)


def encode_state_to_object(state: ConnectionState) -> TLSDescription:
    """:func:`encode_to_object` for a :class:`ConnectionState`."""
    return encode_to_object(state.version, state.cipher_suite)


def encode_state_to_text(state: ConnectionState, *, color: bool = True) -> str:
    """:func:`encode_to_text` for a :class:`ConnectionState`."""
    return encode_to_text(state.version, state.cipher_suite, color=color)
