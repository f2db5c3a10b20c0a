import json
import logging

from tlsinfo.cli import cli

CIPHER_NAME = "ECDHE_RSA key exchange, AES_128_GCM_SHA256 cipher"

# Wide, uncoloured stderr so Rich log lines stay on one line.
PLAIN_LOG_ENV = {"COLUMNS": "200", "FORCE_COLOR": None}


def test_describe_console(runner):
    result = runner.invoke(cli, ["describe", "0x0303", "0xc02f"], obj={})
    assert result.exit_code == 0, result.output
    assert result.stdout.splitlines() == [
        "** TLS Connection **",
        "Version: TLS 1.2",
        f"Cipher Suite: {CIPHER_NAME}",
    ]


def test_describe_accepts_decimal_codes(runner):
    result = runner.invoke(cli, ["-o", "json", "describe", "771", "49199"], obj={})
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {
        "version": "tls_1_2",
        "cipher": "TLS_ECDHE_RSA_WITH_AES_128_GCM_SHA256",
    }


def test_describe_forced_color_keeps_ansi(runner):
    result = runner.invoke(cli, ["--color", "describe", "0x0301", "0x0005"], obj={})
    assert result.exit_code == 0, result.output
    assert "\x1b[31mTLS 1.0\x1b[0m" in result.stdout


def test_describe_no_color(runner):
    result = runner.invoke(cli, ["--no-color", "describe", "0x0303", "0xc02f"], obj={})
    assert result.exit_code == 0, result.output
    assert "\x1b[" not in result.stdout


def test_describe_unknown_codes(runner):
    result = runner.invoke(cli, ["-o", "json", "describe", "0x0304", "0x1301"], obj={})
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {"version": "UNKNOWN_304", "cipher": "UNKNOWN_1301"}


def test_describe_panel(runner):
    result = runner.invoke(cli, ["describe", "--panel", "0x0303", "0xc02f"], obj={})
    assert result.exit_code == 0, result.output
    assert "TLS Connection" in result.stdout
    assert "Version: TLS 1.2" in result.stdout


def test_describe_writes_report_file(runner, tmp_path):
    target = tmp_path / "out" / "report.json"
    result = runner.invoke(
        cli,
        ["-q", "-o", "json", "-f", str(target), "describe", "0x0302", "0x002f"],
        obj={},
    )
    assert result.exit_code == 0, result.output
    report = json.loads(target.read_text(encoding="utf-8"))
    assert report["connection"] == {
        "version": "tls_1_1",
        "cipher": "TLS_RSA_WITH_AES_128_CBC_SHA",
    }
    assert report["report_metadata"]["tool"] == "tlsinfo"


def test_describe_rejects_bad_codes(runner):
    for bad in ("0x10000", "65536", "tls12"):
        result = runner.invoke(cli, ["describe", bad, "0xc02f"], obj={})
        assert result.exit_code == 2
        assert "VERSION" in result.output


def test_versions_json(runner):
    result = runner.invoke(cli, ["-o", "json", "versions"], obj={})
    assert result.exit_code == 0, result.output
    records = json.loads(result.stdout)
    assert [r["slug"] for r in records] == ["ssl_3_0", "tls_1_0", "tls_1_1", "tls_1_2"]
    assert records[-1] == {"id": "0x0303", "name": "TLS 1.2", "slug": "tls_1_2", "quality": "good"}


def test_ciphers_json_has_derived_names(runner):
    result = runner.invoke(cli, ["-o", "json", "ciphers"], obj={})
    assert result.exit_code == 0, result.output
    records = {r["id"]: r for r in json.loads(result.stdout)}
    assert len(records) == 22
    assert records["0xc02f"]["name"] == CIPHER_NAME
    assert records["0x0005"]["quality"] == "insecure"


def test_versions_console_table(runner):
    result = runner.invoke(cli, ["--no-color", "versions"], obj={})
    assert result.exit_code == 0, result.output
    assert "Protocol Versions (4)" in result.stdout
    assert "tls_1_2" in result.stdout


def test_config_file_sets_output_format(runner, tmp_path):
    config = tmp_path / "config.toml"
    config.write_text('[display]\noutput_format = "json"\n', encoding="utf-8")
    result = runner.invoke(cli, ["-c", str(config), "describe", "0x0303", "0xc02f"], obj={})
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)["version"] == "tls_1_2"


def test_config_file_with_bad_format_is_usage_error(runner, tmp_path):
    config = tmp_path / "config.toml"
    config.write_text('[display]\noutput_format = "xml"\n', encoding="utf-8")
    result = runner.invoke(cli, ["-c", str(config), "versions"], obj={})
    assert result.exit_code == 2


def test_verbose_logs_unknown_identifiers_to_stderr(runner):
    result = runner.invoke(
        cli,
        ["-v", "-o", "json", "describe", "0x0304", "0x1301"],
        obj={},
        env=PLAIN_LOG_ENV,
    )
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {"version": "UNKNOWN_304", "cipher": "UNKNOWN_1301"}
    assert "Unrecognised identifier 0x0304, using UNKNOWN_304" in result.stderr
    assert "Unrecognised identifier 0x1301, using UNKNOWN_1301" in result.stderr


def test_unknown_identifiers_not_logged_without_verbose(runner):
    result = runner.invoke(
        cli,
        ["-o", "json", "describe", "0x0304", "0x1301"],
        obj={},
        env=PLAIN_LOG_ENV,
    )
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)["version"] == "UNKNOWN_304"
    assert "Unrecognised identifier" not in result.stderr


def test_output_file_requires_json_output(runner, tmp_path):
    target = tmp_path / "report.json"
    result = runner.invoke(cli, ["-f", str(target), "describe", "0x0303", "0xc02f"], obj={})
    assert result.exit_code == 2
    assert "--output-file requires JSON output" in result.stderr
    assert not target.exists()


def test_cli_restores_package_logger(runner):
    result = runner.invoke(cli, ["-v", "-o", "json", "versions"], obj={})
    assert result.exit_code == 0, result.output
    root = logging.getLogger("tlsinfo")
    assert root.handlers == []
    assert root.level == logging.NOTSET
    assert root.propagate is True
