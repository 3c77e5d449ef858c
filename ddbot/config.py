"""Configuration and process-wide defaults."""

__version__ = "0.1.0"

import os
import sys
from dataclasses import dataclass, field
from typing import Mapping, Optional

from dotenv import load_dotenv

from ddbot.domain.errors import ConfigError
from ddbot.domain.models import ChannelLanguageConfig

_stderr_print = lambda *a, **kw: print(*a, **kw, file=sys.stderr)

FALLBACK_LANGUAGE = "JA"
DEEPL_API_URL = "https://api.deepl.com/v2/translate"
DEEPL_TIMEOUT_SECONDS = 30.0


def _language(env: Mapping[str, str], name: str) -> str:
    value = env.get(name, "").strip().upper()
    return value or FALLBACK_LANGUAGE


def _timeout(env: Mapping[str, str]) -> float:
    raw = env.get("DEEPL_TIMEOUT_SECONDS", "").strip()
    if not raw:
        return DEEPL_TIMEOUT_SECONDS
    try:
        value = float(raw)
    except ValueError:
        value = 0.0
    if value <= 0:
        _stderr_print(
            f"Invalid DEEPL_TIMEOUT_SECONDS={raw!r}, falling back to {DEEPL_TIMEOUT_SECONDS}"
        )
        return DEEPL_TIMEOUT_SECONDS
    return value


def _required(env: Mapping[str, str], name: str) -> str:
    value = env.get(name, "").strip()
    if not value:
        raise ConfigError(f"Expected {name} in the environment")
    return value


@dataclass(frozen=True)
class DeepLConfig:
    api_key: str = field(default="", repr=False)
    api_url: str = DEEPL_API_URL
    timeout_seconds: float = DEEPL_TIMEOUT_SECONDS


@dataclass(frozen=True)
class AppConfig:
    """Immutable process configuration, built once at startup."""

    discord_token: str = field(default="", repr=False)
    deepl: DeepLConfig = field(default_factory=DeepLConfig)
    languages: ChannelLanguageConfig = field(
        default_factory=lambda: ChannelLanguageConfig(FALLBACK_LANGUAGE, FALLBACK_LANGUAGE)
    )

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "AppConfig":
        """Create AppConfig from environment variables (and `.env`).

        Raises ConfigError when DEEPL_API_KEY or DISCORD_TOKEN is missing.
        """
        if env is None:
            load_dotenv()
            env = os.environ
        return cls(
            discord_token=_required(env, "DISCORD_TOKEN"),
            deepl=DeepLConfig(
                api_key=_required(env, "DEEPL_API_KEY"),
                api_url=env.get("DEEPL_API_URL", "").strip() or DEEPL_API_URL,
                timeout_seconds=_timeout(env),
            ),
            languages=ChannelLanguageConfig(
                default_lang=_language(env, "DEFAULT_LANGUAGE"),
                target_lang=_language(env, "TARGET_LANGUAGE"),
            ),
        )
