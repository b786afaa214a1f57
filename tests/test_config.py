import pytest

from deepseek_adapter.config import Configuration
from deepseek_adapter.http_client import (
    HttpConfig,
    create_http_client,
    create_http_config_from_dict,
)

YAML = """
llm:
  active: deepseek
  providers:
    deepseek:
      base_url: "https://custom.deepseek.test/"
      model: "deepseek-coder"
      betas: ["fim"]
http:
  timeout: 12.5
  max_connections: 7
logging:
  level: "DEBUG"
"""


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    monkeypatch.setattr("deepseek_adapter.config.load_dotenv", lambda: None)
    path = tmp_path / "config.yaml"
    path.write_text(YAML)
    return str(path)


def test_packaged_defaults(monkeypatch):
    monkeypatch.setattr("deepseek_adapter.config.load_dotenv", lambda: None)
    config = Configuration()

    assert config.active_provider == "deepseek"
    assert config.get_llm_config()["model"] == "deepseek-chat"
    assert config.get_http_config() == HttpConfig()


def test_settings_built_from_yaml_and_env(config_file, monkeypatch):
    monkeypatch.setenv("DEEPSEEK_API_KEY", "sk-yaml")
    config = Configuration(config_file)

    settings = config.deepseek_settings()

    assert settings.api_key == "sk-yaml"
    assert settings.base_url == "https://custom.deepseek.test"
    assert settings.betas == ("fim",)
    assert settings.http.timeout == 12.5
    assert settings.http.max_connections == 7
    assert settings.http.max_keepalive_connections == 20
    assert config.get_logging_config() == {"level": "DEBUG"}


def test_missing_api_key_raises(config_file, monkeypatch):
    monkeypatch.delenv("DEEPSEEK_API_KEY", raising=False)
    config = Configuration(config_file)

    with pytest.raises(ValueError, match="DEEPSEEK_API_KEY"):
        config.llm_api_key


def test_unknown_active_provider(tmp_path, monkeypatch):
    monkeypatch.setattr("deepseek_adapter.config.load_dotenv", lambda: None)
    path = tmp_path / "config.yaml"
    path.write_text("llm:\n  active: other\n  providers: {}\n")
    config = Configuration(str(path))

    with pytest.raises(ValueError, match="no API key mapping"):
        config.llm_api_key
    with pytest.raises(ValueError, match="not found in providers config"):
        config.get_llm_config()


def test_http_config_from_dict_defaults():
    assert create_http_config_from_dict({}) == HttpConfig()
    assert create_http_config_from_dict({"http": {"timeout": 5}}).timeout == 5.0


@pytest.mark.asyncio
async def test_http_client_uses_headers_and_base_url():
    http = create_http_client(
        "https://api.deepseek.com/",
        headers={"Authorization": "Bearer k"},
        config=HttpConfig(timeout=3.0),
    )
    try:
        assert http.base_url.host == "api.deepseek.com"
        request = http.build_request("POST", "/chat/completions")
        assert str(request.url) == "https://api.deepseek.com/chat/completions"
        assert http.headers["Authorization"] == "Bearer k"
        assert http.timeout.read == 3.0
    finally:
        await http.aclose()
