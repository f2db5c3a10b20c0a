"""
tlsinfo -- TLS Session Classifier
==================================

Labels a negotiated TLS protocol version and cipher suite with a
human-readable name, a stable slug, and a quality tier (insecure /
acceptable / good), and renders the pair either as a structured record or
as a colourised console block.

Modules:
    - tlsinfo.core.registry: Version and cipher suite tables
    - tlsinfo.core.resolver: Code lookup and cipher name derivation
    - tlsinfo.core.encoder: Structured and text encoders
    - tlsinfo.output: Console tables and JSON reports
    - tlsinfo.cli: Click-based command-line interface
"""

from tlsinfo.core import (
    ConnectionState,
    Description,
    Quality,
    TLSDescription,
    encode_to_object,
    encode_to_text,
)

__version__ = "1.0.0"
__tool_name__ = "tlsinfo"

__all__ = [
    "ConnectionState",
    "Description",
    "Quality",
    "TLSDescription",
    "encode_to_object",
    "encode_to_text",
]
