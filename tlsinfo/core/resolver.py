"""
Identifier Resolver
====================

Turns raw protocol version and cipher suite codes into
:class:`Description` records.  Unknown codes never fail: they resolve to
an ``UNKNOWN_<hex>`` placeholder ranked at the lowest quality tier, so
callers can always render something and anything unrecognised is flagged
as insecure.
"""

from __future__ import annotations

from typing import Mapping

from shared.logger import TLSInfoLogger
from tlsinfo.core.models import Description, Quality
from tlsinfo.core.registry import cipher_suites, split_cipher_slug, tls_versions

UNKNOWN_PREFIX = "UNKNOWN_"
_MAX_CODE = 0xFFFF

_log = TLSInfoLogger("resolver")


def lookup(registry: Mapping[int, Description], identifier: int) -> Description:
    """Return the registered description for *identifier*.

    Codes missing from *registry* resolve to a placeholder whose name and
    slug are both ``UNKNOWN_<lowercase hex>`` and whose quality is
    :attr:`Quality.INSECURE`.

    Raises:
        ValueError: If *identifier* does not fit in 16 bits.
    """
    if not 0 <= identifier <= _MAX_CODE:
        raise ValueError(
            f"TLS identifier {identifier!r} is outside the 16-bit range 0..0xFFFF"
        )
    description = registry.get(identifier)
    if description is not None:
        return description

    unknown = f"{UNKNOWN_PREFIX}{identifier:x}"
    _log.debug("Unrecognised identifier 0x%04x, using %s", identifier, unknown)
    return Description(name=unknown, slug=unknown, quality=Quality.INSECURE)


def explain_cipher(description: Description) -> Description:
    """Fill in a human-readable cipher suite name derived from its slug.

    ``TLS_RSA_WITH_AES_128_GCM_SHA256`` becomes
    ``"RSA key exchange, AES_128_GCM_SHA256 cipher"``.  A new
    :class:`Description` is returned; the input is left untouched.
    Placeholders produced by :func:`lookup` come back unchanged.

    Raises:
        MalformedCipherSlugError: For any other slug not shaped
            ``TLS_<KEX>_WITH_<CIPHER>``.
    """
    if description.slug.startswith(UNKNOWN_PREFIX):
        return description
    kex, cipher = split_cipher_slug(description.slug)
    return description.model_copy(
        update={"name": f"{kex} key exchange, {cipher} cipher"}
    )


def describe_version(version: int) -> Description:
    """Resolve a protocol version code."""
    return lookup(tls_versions(), version)


def describe_cipher(cipher_suite: int) -> Description:
    """Resolve a cipher suite code and derive its display name."""
    return explain_cipher(lookup(cipher_suites(), cipher_suite))
