import pytest
from pydantic import ValidationError

from giftery.contracts import HttpMethod
from giftery.errors import ConfigError
from giftery.utils.config_loader import DEFAULT_ENDPOINT, ClientSettings, load_client_settings


def test_settings_from_environment_only():
    settings = load_client_settings(env={"GIFTERY_CLIENT_ID": "42", "GIFTERY_SECRET": "s"})

    assert settings.client_id == 42
    assert settings.secret == "s"
    assert settings.endpoint == DEFAULT_ENDPOINT
    assert settings.http_method is HttpMethod.GET
    assert settings.timeout is None


def test_yaml_section_is_overridden_by_environment(tmp_path):
    config = tmp_path / "giftery.yml"
    config.write_text(
        "giftery:\n"
        "  client_id: 1\n"
        "  secret: from-file\n"
        "  endpoint: https://sandbox.example.com/\n"
        "  http_method: post\n"
        "  timeout: 2.5\n",
        encoding="utf-8",
    )

    settings = load_client_settings(config, env={"GIFTERY_SECRET": "from-env"})

    assert settings.client_id == 1
    assert settings.secret == "from-env"
    assert settings.endpoint == "https://sandbox.example.com"
    assert settings.http_method is HttpMethod.POST
    assert settings.timeout == 2.5


def test_flat_yaml_file(tmp_path):
    config = tmp_path / "flat.yml"
    config.write_text("client_id: 9\nsecret: x\n", encoding="utf-8")

    assert load_client_settings(config, env={}).client_id == 9


def test_missing_config_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_client_settings(tmp_path / "absent.yml", env={})


@pytest.mark.parametrize(
    "env",
    [
        {},
        {"GIFTERY_CLIENT_ID": "abc", "GIFTERY_SECRET": "s"},
        {"GIFTERY_CLIENT_ID": "0", "GIFTERY_SECRET": "s"},
        {"GIFTERY_CLIENT_ID": "1", "GIFTERY_SECRET": "s", "GIFTERY_HTTP_METHOD": "PUT"},
    ],
)
def test_invalid_settings_raise(env):
    with pytest.raises(ValidationError):
        load_client_settings(env=env)


def test_settings_are_immutable_and_hide_secret():
    settings = ClientSettings(client_id=1, secret="very-secret")

    with pytest.raises(ValidationError):
        settings.client_id = 2
    assert "very-secret" not in repr(settings)


@pytest.mark.parametrize("content", ["- a\n- b\n", "just-a-string\n"])
def test_yaml_top_level_must_be_a_mapping(tmp_path, content):
    config = tmp_path / "bad.yml"
    config.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError):
        load_client_settings(config, env={"GIFTERY_CLIENT_ID": "1", "GIFTERY_SECRET": "s"})
