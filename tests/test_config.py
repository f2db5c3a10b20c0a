import pytest

from shared import config as config_module
from shared.config import TLSInfoConfig


def test_defaults():
    cfg = TLSInfoConfig()
    assert cfg.global_settings.log_level == "WARNING"
    assert cfg.global_settings.log_file == ""
    assert cfg.display.color is True
    assert cfg.display.output_format == "console"


def test_load_from_toml_ignores_unknown_keys(tmp_path):
    path = tmp_path / "tlsinfo.toml"
    path.write_text(
        "[global]\n"
        'log_level = "DEBUG"\n'
        "log_json = true\n"
        "surprise = 1\n"
        "[display]\n"
        "color = false\n"
        "[unrelated]\n"
        "x = 2\n",
        encoding="utf-8",
    )
    cfg = TLSInfoConfig.load(path)
    assert cfg.global_settings.log_level == "DEBUG"
    assert cfg.global_settings.log_json is True
    assert cfg.display.color is False
    assert cfg.display.output_format == "console"


def test_missing_explicit_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        TLSInfoConfig.load(tmp_path / "nope.toml")


def test_missing_default_file_gives_defaults(tmp_path, monkeypatch):
    monkeypatch.setattr(config_module, "_DEFAULT_CONFIG_PATH", tmp_path / "config.toml")
    assert TLSInfoConfig.load() == TLSInfoConfig()


def test_unknown_output_format_rejected(tmp_path):
    path = tmp_path / "tlsinfo.toml"
    path.write_text('[display]\noutput_format = "yaml"\n', encoding="utf-8")
    with pytest.raises(ValueError, match="yaml"):
        TLSInfoConfig.load(path)


def test_version_key_is_not_a_setting(tmp_path):
    path = tmp_path / "tlsinfo.toml"
    path.write_text('[global]\nversion = "9.9.9"\n', encoding="utf-8")
    cfg = TLSInfoConfig.load(path)
    assert cfg == TLSInfoConfig()
    assert not hasattr(cfg.global_settings, "version")
