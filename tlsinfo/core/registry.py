"""
TLS Classification Registry
============================

Static lookup tables mapping the 16-bit protocol version and cipher suite
codes defined by the TLS standard to a :class:`Description` with a
security-quality tier.

Tiering:

    INSECURE   : SSL 3.0, TLS 1.0; any suite using RC4 or 3DES
    ACCEPTABLE : TLS 1.1; CBC-mode suites; GCM suites without forward secrecy
    GOOD       : TLS 1.2; ECDHE suites with AES-GCM or ChaCha20-Poly1305

The tables are built once at import and exposed only as read-only
mappings.  Every cipher slug is checked against the canonical
``TLS_<KEX>_WITH_<CIPHER>`` shape while the table is built.

References:
    - IANA TLS Cipher Suites Registry.
      https://www.iana.org/assignments/tls-parameters/
    - NIST SP 800-52 Rev. 2 (2019). Guidelines for the Selection,
      Configuration, and Use of TLS Implementations.
    - Popov, A. (2015). RFC 7465 -- Prohibiting RC4 Cipher Suites.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

from tlsinfo.core.models import Description, Quality


class MalformedCipherSlugError(ValueError):
    """A cipher slug does not follow ``TLS_<KEX>_WITH_<CIPHER>``."""

    def __init__(self, slug: str) -> None:
        super().__init__(
            f"Malformed cipher suite slug {slug!r}: "
            "expected TLS_<KEX>_WITH_<CIPHER>"
        )
        self.slug = slug


_SLUG_PREFIX = "TLS_"
_SLUG_SEPARATOR = "_WITH_"


def split_cipher_slug(slug: str) -> tuple[str, str]:
    """Split a canonical suite slug into its key-exchange and cipher parts.

    ``"TLS_ECDHE_RSA_WITH_AES_128_GCM_SHA256"`` gives
    ``("ECDHE_RSA", "AES_128_GCM_SHA256")``.

    Raises:
        MalformedCipherSlugError: If the slug lacks the ``TLS_`` prefix,
            does not contain exactly one ``_WITH_``, or either part is empty.
    """
    parts = slug.split(_SLUG_SEPARATOR)
    if len(parts) != 2 or not parts[0].startswith(_SLUG_PREFIX):
        raise MalformedCipherSlugError(slug)
    kex, cipher = parts[0][len(_SLUG_PREFIX):], parts[1]
    if not kex or not cipher:
        raise MalformedCipherSlugError(slug)
    return kex, cipher


# ===================================================================== #
#  Protocol Versions
# ===================================================================== #

VERSION_SSL30 = 0x0300
VERSION_TLS10 = 0x0301
VERSION_TLS11 = 0x0302
VERSION_TLS12 = 0x0303

_TLS_VERSIONS: Mapping[int, Description] = MappingProxyType({
    VERSION_SSL30: Description(name="SSL 3.0", slug="ssl_3_0", quality=Quality.INSECURE),
    VERSION_TLS10: Description(name="TLS 1.0", slug="tls_1_0", quality=Quality.INSECURE),
    VERSION_TLS11: Description(name="TLS 1.1", slug="tls_1_1", quality=Quality.ACCEPTABLE),
    VERSION_TLS12: Description(name="TLS 1.2", slug="tls_1_2", quality=Quality.GOOD),
})


# ===================================================================== #
#  Cipher Suites
# ===================================================================== #

# (IANA code, canonical slug, tier)
_CIPHER_SUITE_TABLE: tuple[tuple[int, str, Quality], ...] = (
    (0x0005, "TLS_RSA_WITH_RC4_128_SHA", Quality.INSECURE),
    (0x000A, "TLS_RSA_WITH_3DES_EDE_CBC_SHA", Quality.INSECURE),
    (0x002F, "TLS_RSA_WITH_AES_128_CBC_SHA", Quality.ACCEPTABLE),
    (0x0035, "TLS_RSA_WITH_AES_256_CBC_SHA", Quality.ACCEPTABLE),
    (0x003C, "TLS_RSA_WITH_AES_128_CBC_SHA256", Quality.ACCEPTABLE),
    (0x009C, "TLS_RSA_WITH_AES_128_GCM_SHA256", Quality.ACCEPTABLE),
    (0x009D, "TLS_RSA_WITH_AES_256_GCM_SHA384", Quality.ACCEPTABLE),
    (0xC007, "TLS_ECDHE_ECDSA_WITH_RC4_128_SHA", Quality.INSECURE),
    (0xC009, "TLS_ECDHE_ECDSA_WITH_AES_128_CBC_SHA", Quality.ACCEPTABLE),
    (0xC00A, "TLS_ECDHE_ECDSA_WITH_AES_256_CBC_SHA", Quality.ACCEPTABLE),
    (0xC011, "TLS_ECDHE_RSA_WITH_RC4_128_SHA", Quality.INSECURE),
    (0xC012, "TLS_ECDHE_RSA_WITH_3DES_EDE_CBC_SHA", Quality.INSECURE),
    (0xC013, "TLS_ECDHE_RSA_WITH_AES_128_CBC_SHA", Quality.ACCEPTABLE),
    (0xC014, "TLS_ECDHE_RSA_WITH_AES_256_CBC_SHA", Quality.ACCEPTABLE),
    (0xC023, "TLS_ECDHE_ECDSA_WITH_AES_128_CBC_SHA256", Quality.ACCEPTABLE),
    (0xC027, "TLS_ECDHE_RSA_WITH_AES_128_CBC_SHA256", Quality.ACCEPTABLE),
    (0xC02F, "TLS_ECDHE_RSA_WITH_AES_128_GCM_SHA256", Quality.GOOD),
    (0xC02B, "TLS_ECDHE_ECDSA_WITH_AES_128_GCM_SHA256", Quality.GOOD),
    (0xC030, "TLS_ECDHE_RSA_WITH_AES_256_GCM_SHA384", Quality.GOOD),
    (0xC02C, "TLS_ECDHE_ECDSA_WITH_AES_256_GCM_SHA384", Quality.GOOD),
    (0xCCA8, "TLS_ECDHE_RSA_WITH_CHACHA20_POLY1305", Quality.GOOD),
    (0xCCA9, "TLS_ECDHE_ECDSA_WITH_CHACHA20_POLY1305", Quality.GOOD),
)


def _build_cipher_registry(
    entries: Iterable[tuple[int, str, Quality]],
) -> Mapping[int, Description]:
    """Build the read-only cipher table, rejecting malformed or duplicate rows."""
    table: dict[int, Description] = {}
    for code, slug, quality in entries:
        split_cipher_slug(slug)
        if code in table:
            raise ValueError(f"Duplicate cipher suite code 0x{code:04x} ({slug})")
        table[code] = Description(slug=slug, quality=quality)
    return MappingProxyType(table)


_CIPHER_SUITES: Mapping[int, Description] = _build_cipher_registry(_CIPHER_SUITE_TABLE)


# ===================================================================== #
#  Accessors
# ===================================================================== #


def tls_versions() -> Mapping[int, Description]:
    """Read-only protocol version table keyed by version code."""
    return _TLS_VERSIONS


def cipher_suites() -> Mapping[int, Description]:
    """Read-only cipher suite table keyed by IANA code."""
    return _CIPHER_SUITES
