from __future__ import annotations

import io
import json

from url_dissector import cli


def test_cli_prints_json_for_positional_urls(capsys):
    exit_code = cli.main(["https://www.example.com/a?x=1", "--format", "json"])

    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload[0]["subdomain"] == "www"
    assert payload[0]["queryParams"] == {"x": "1"}


def test_cli_reads_urls_from_file(tmp_path, capsys):
    url_list = tmp_path / "urls.txt"
    url_list.write_text("http://a.example.org\n\n  http://10.0.0.1:81/  \n", encoding="utf-8")

    exit_code = cli.main(["--input", str(url_list), "--format", "json-min", "--include-url"])

    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert [entry["url"] for entry in payload] == ["http://a.example.org", "http://10.0.0.1:81/"]
    assert payload[1]["domain"] == "10.0.0.1"
    assert payload[1]["port"] == 81


def test_cli_reads_urls_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("https://example.com\n"))

    exit_code = cli.main(["--input", "-", "--format", "json"])

    assert exit_code == 0
    assert json.loads(capsys.readouterr().out)[0]["host"] == "example.com"


def test_cli_table_output(capsys):
    exit_code = cli.main(["https://[2001:db8::1]:8443/health"])

    assert exit_code == 0
    out = capsys.readouterr().out
    assert "host" in out
    assert "2001:db8::1" in out
    assert "8443" in out


def test_cli_writes_export_file(tmp_path, capsys):
    target = tmp_path / "out.csv"

    exit_code = cli.main(["http://example.com", "--format", "csv", "--output", str(target)])

    assert exit_code == 0
    assert target.read_text(encoding="utf-8").splitlines()[0].startswith("scheme,host,port")
    assert str(target) in capsys.readouterr().out


def test_cli_rejects_table_output_file(tmp_path, capsys):
    exit_code = cli.main(["http://example.com", "--output", str(tmp_path / "out.txt")])

    assert exit_code == 1
    assert "ERROR" in capsys.readouterr().err


def test_cli_reports_missing_input_file(tmp_path, capsys):
    exit_code = cli.main(["--input", str(tmp_path / "missing.txt")])

    assert exit_code == 1
    assert "could not read" in capsys.readouterr().err


def test_cli_requires_urls(capsys):
    exit_code = cli.main([])

    assert exit_code == 1
    assert "no URLs" in capsys.readouterr().err
