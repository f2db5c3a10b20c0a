import pytest

from tlsinfo.core.models import Quality
from tlsinfo.core.registry import (
    MalformedCipherSlugError,
    VERSION_TLS12,
    cipher_suites,
    split_cipher_slug,
    tls_versions,
)


def test_version_table_tiers():
    table = tls_versions()
    assert {code: d.quality for code, d in table.items()} == {
        0x0300: Quality.INSECURE,
        0x0301: Quality.INSECURE,
        0x0302: Quality.ACCEPTABLE,
        0x0303: Quality.GOOD,
    }
    assert table[VERSION_TLS12].name == "TLS 1.2"
    assert table[VERSION_TLS12].slug == "tls_1_2"


def test_tls13_is_not_registered():
    assert 0x0304 not in tls_versions()


def test_cipher_table_size_and_empty_names():
    table = cipher_suites()
    assert len(table) == 22
    assert all(d.name == "" for d in table.values())


def test_every_entry_has_a_tier():
    for table in (tls_versions(), cipher_suites()):
        for d in table.values():
            assert d.quality in set(Quality)


def test_rc4_and_3des_are_insecure():
    weak = [d for d in cipher_suites().values() if "RC4" in d.slug or "3DES" in d.slug]
    assert len(weak) == 5
    assert all(d.quality is Quality.INSECURE for d in weak)


def test_cbc_suites_are_acceptable():
    cbc = [d for d in cipher_suites().values() if "_CBC_" in d.slug and "3DES" not in d.slug]
    assert cbc
    assert all(d.quality is Quality.ACCEPTABLE for d in cbc)


@pytest.mark.parametrize("code,slug", [
    (0xC02F, "TLS_ECDHE_RSA_WITH_AES_128_GCM_SHA256"),
    (0xC02C, "TLS_ECDHE_ECDSA_WITH_AES_256_GCM_SHA384"),
    (0xCCA8, "TLS_ECDHE_RSA_WITH_CHACHA20_POLY1305"),
    (0xCCA9, "TLS_ECDHE_ECDSA_WITH_CHACHA20_POLY1305"),
])
def test_ecdhe_aead_suites_are_good(code, slug):
    d = cipher_suites()[code]
    assert d.slug == slug
    assert d.quality is Quality.GOOD


def test_static_rsa_gcm_stays_acceptable():
    assert cipher_suites()[0x009C].quality is Quality.ACCEPTABLE


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        tls_versions()[0x0304] = tls_versions()[0x0303]  # type: ignore[index]
    with pytest.raises(TypeError):
        del cipher_suites()[0xC02F]  # type: ignore[attr-defined]


def test_all_cipher_slugs_split():
    for d in cipher_suites().values():
        kex, cipher = split_cipher_slug(d.slug)
        assert kex and cipher


def test_split_cipher_slug():
    assert split_cipher_slug("TLS_ECDHE_RSA_WITH_AES_128_GCM_SHA256") == (
        "ECDHE_RSA",
        "AES_128_GCM_SHA256",
    )


@pytest.mark.parametrize("slug", [
    "TLS_AES_128_GCM_SHA256",
    "SSL_RSA_WITH_RC4_128_MD5",
    "TLS_RSA_WITH_AES_WITH_GCM",
    "TLS__WITH_AES",
    "TLS_RSA_WITH_",
])
def test_split_cipher_slug_rejects_malformed(slug):
    with pytest.raises(MalformedCipherSlugError) as excinfo:
        split_cipher_slug(slug)
    assert excinfo.value.slug == slug
    assert isinstance(excinfo.value, ValueError)
