import json

import pytest

from giftery import cli


@pytest.fixture
def credentials(monkeypatch):
    monkeypatch.setenv("GIFTERY_CLIENT_ID", "42")
    monkeypatch.setenv("GIFTERY_SECRET", "cli-secret")
    monkeypatch.delenv("GIFTERY_MODE", raising=False)
    monkeypatch.delenv("GIFTERY_ENDPOINT", raising=False)
    monkeypatch.delenv("GIFTERY_HTTP_METHOD", raising=False)
    monkeypatch.delenv("GIFTERY_TIMEOUT", raising=False)


def run(capsys, *args):
    code = cli.main(list(args))
    out, err = capsys.readouterr()
    return code, out, err


def test_balance_against_mock(credentials, capsys):
    code, out, _ = run(capsys, "--mock", "balance")

    assert code == 0
    assert json.loads(out) == {"balance": "10000.00"}


def test_products_filtered_by_face(credentials, capsys):
    code, out, _ = run(capsys, "--mock", "products", "--face", "300")

    assert code == 0
    assert [p["id"] for p in json.loads(out)["products"]] == [103]


def test_order_over_post_with_mode_from_env(credentials, monkeypatch, capsys):
    monkeypatch.setenv("GIFTERY_MODE", "mock")

    code, out, _ = run(capsys, "--post", "order", "--product-id", "101", "--face", "500", "--from", "Ivan")

    assert code == 0
    assert json.loads(out) == {"order_id": 1}


def test_api_error_exits_non_zero(credentials, capsys):
    code, out, err = run(capsys, "--mock", "order", "--product-id", "999", "--face", "500")

    assert code == 1
    assert out == ""
    payload = json.loads(err.strip().splitlines()[-1])
    assert payload["kind"] == "api"
    assert payload["metadata"]["code"] == 12


def test_missing_credentials_is_config_error(monkeypatch, capsys):
    monkeypatch.delenv("GIFTERY_CLIENT_ID", raising=False)
    monkeypatch.delenv("GIFTERY_SECRET", raising=False)

    code, _, err = run(capsys, "--mock", "balance")

    assert code == 1
    assert json.loads(err.strip().splitlines()[-1])["kind"] == "config"


def test_no_command_prints_help(capsys):
    code, out, _ = run(capsys)

    assert code == 1
    assert "usage: giftery" in out


def test_malformed_config_file_is_config_error(credentials, tmp_path, capsys):
    config = tmp_path / "giftery.yml"
    config.write_text("- a\n- b\n", encoding="utf-8")

    code, _, err = run(capsys, "--config", str(config), "--mock", "balance")

    assert code == 1
    assert json.loads(err.strip().splitlines()[-1])["kind"] == "config"
