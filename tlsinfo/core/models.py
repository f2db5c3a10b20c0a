"""
tlsinfo Core Data Models
=========================

Pydantic models for the TLS session classifier: the quality tier, the
description record attached to every protocol version and cipher suite,
the negotiated identifier pair handed over by a handshake implementation,
and the structured encoder output.

All models are immutable and serialisable to JSON.

References:
    - Dierks, T., & Rescorla, E. (2008). RFC 5246 -- TLS 1.2.
    - IANA TLS Cipher Suites Registry.
      https://www.iana.org/assignments/tls-parameters/
"""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field


# ===================================================================== #
#  Enumerations
# ===================================================================== #


class Quality(enum.IntEnum):
    """Security-quality tier of a protocol version or cipher suite.

    Ordered: ``INSECURE < ACCEPTABLE < GOOD``.
    """

    INSECURE = 0
    ACCEPTABLE = 1
    GOOD = 2

    @property
    def label(self) -> str:
        """Lowercase display label (``"insecure"``, ``"acceptable"``, ``"good"``)."""
        return self.name.lower()


# ===================================================================== #
#  Description
# ===================================================================== #


class Description(BaseModel):
    """Human- and machine-readable description of a version or suite.

    Attributes:
        name: Human-friendly label. Empty for registered cipher suites
            until :func:`tlsinfo.core.resolver.explain_cipher` derives it.
        slug: Stable machine-friendly identifier; never empty.
        quality: Security tier.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = ""
    slug: str = Field(..., min_length=1)
    quality: Quality


# ===================================================================== #
#  Encoder input / output
# ===================================================================== #


class ConnectionState(BaseModel):
    """Negotiated identifiers of an established TLS session.

    Attributes:
        version: Protocol version code (e.g. ``0x0303`` for TLS 1.2).
        cipher_suite: IANA cipher suite code (e.g. ``0xC02F``).
    """

    model_config = ConfigDict(frozen=True)

    version: int = Field(..., ge=0, le=0xFFFF)
    cipher_suite: int = Field(..., ge=0, le=0xFFFF)


class TLSDescription(BaseModel):
    """Structured, serialisable description of a TLS connection.

    Carries only the slugs; names and colours are display concerns.
    """

    model_config = ConfigDict(frozen=True)

    version: str
    cipher: str
