"""
tlsinfo Core Module
====================

Classification tables, identifier resolution, and the two connection
encoders.
"""

from tlsinfo.core.encoder import (
    TemplateRenderError,
    encode_state_to_object,
    encode_state_to_text,
    encode_to_object,
    encode_to_text,
    quality_style,
)
from tlsinfo.core.models import ConnectionState, Description, Quality, TLSDescription
from tlsinfo.core.registry import MalformedCipherSlugError, cipher_suites, tls_versions
from tlsinfo.core.resolver import describe_cipher, describe_version, explain_cipher, lookup

__all__ = [
    "ConnectionState",
    "Description",
    "MalformedCipherSlugError",
    "Quality",
    "TLSDescription",
    "TemplateRenderError",
    "cipher_suites",
    "describe_cipher",
    "describe_version",
    "encode_state_to_object",
    "encode_state_to_text",
    "encode_to_object",
    "encode_to_text",
    "explain_cipher",
    "lookup",
    "quality_style",
    "tls_versions",
]
