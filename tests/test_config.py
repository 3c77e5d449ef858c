"""Tests for AppConfig loading from the environment."""

import pytest

from ddbot.config import DEEPL_API_URL, DEEPL_TIMEOUT_SECONDS, AppConfig, DeepLConfig
from ddbot.domain.errors import ConfigError
from ddbot.domain.models import ChannelLanguageConfig

REQUIRED = {"DEEPL_API_KEY": "deepl-secret", "DISCORD_TOKEN": "discord-secret"}


class TestAppConfigFromEnv:
    def test_required_only(self):
        c = AppConfig.from_env(dict(REQUIRED))
        assert c.discord_token == "discord-secret"
        assert c.deepl.api_key == "deepl-secret"
        assert c.deepl.api_url == DEEPL_API_URL
        assert c.deepl.timeout_seconds == DEEPL_TIMEOUT_SECONDS
        assert c.languages == ChannelLanguageConfig("JA", "JA")

    def test_languages(self):
        c = AppConfig.from_env({**REQUIRED, "DEFAULT_LANGUAGE": "en", "TARGET_LANGUAGE": " ja "})
        assert c.languages.default_lang == "EN"
        assert c.languages.target_lang == "JA"

    def test_blank_language_falls_back(self):
        c = AppConfig.from_env({**REQUIRED, "DEFAULT_LANGUAGE": "  "})
        assert c.languages.default_lang == "JA"

    @pytest.mark.parametrize("missing", ["DEEPL_API_KEY", "DISCORD_TOKEN"])
    def test_missing_credential(self, missing):
        env = {k: v for k, v in REQUIRED.items() if k != missing}
        with pytest.raises(ConfigError) as exc_info:
            AppConfig.from_env(env)
        assert missing in str(exc_info.value)

    def test_blank_credential(self):
        with pytest.raises(ConfigError):
            AppConfig.from_env({**REQUIRED, "DEEPL_API_KEY": "   "})

    def test_custom_url_and_timeout(self):
        c = AppConfig.from_env({
            **REQUIRED,
            "DEEPL_API_URL": "https://api-free.deepl.com/v2/translate",
            "DEEPL_TIMEOUT_SECONDS": "7.5",
        })
        assert c.deepl.api_url == "https://api-free.deepl.com/v2/translate"
        assert c.deepl.timeout_seconds == 7.5

    @pytest.mark.parametrize("raw", ["abc", "0", "-3"])
    def test_invalid_timeout_falls_back(self, raw):
        c = AppConfig.from_env({**REQUIRED, "DEEPL_TIMEOUT_SECONDS": raw})
        assert c.deepl.timeout_seconds == DEEPL_TIMEOUT_SECONDS

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setattr("ddbot.config.load_dotenv", lambda: False)
        monkeypatch.setenv("DEEPL_API_KEY", "k")
        monkeypatch.setenv("DISCORD_TOKEN", "t")
        monkeypatch.setenv("TARGET_LANGUAGE", "de")
        c = AppConfig.from_env()
        assert c.languages.target_lang == "DE"


class TestAppConfig:
    def test_defaults(self):
        c = AppConfig()
        assert isinstance(c.deepl, DeepLConfig)
        assert c.languages == ChannelLanguageConfig("JA", "JA")

    def test_repr_hides_credentials(self):
        c = AppConfig.from_env(dict(REQUIRED))
        assert "deepl-secret" not in repr(c)
        assert "discord-secret" not in repr(c)

    def test_frozen(self):
        c = AppConfig()
        with pytest.raises(Exception):
            c.discord_token = "x"
