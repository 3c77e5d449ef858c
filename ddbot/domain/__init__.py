"""Domain layer — pure Python, no framework dependencies."""

from ddbot.domain.models import (
    ChannelLanguageConfig,
    Reply,
    ReplyDecision,
    Suppressed,
    TranslationResponse,
    TranslationResult,
)
from ddbot.domain.errors import (
    ConfigError,
    ConnectivityError,
    DecodeError,
    RemoteError,
    TranslationError,
)
from ddbot.domain.channel_config import resolve
from ddbot.domain.reply_composer import compose_reply
from ddbot.domain.dispatcher import MessageDispatcher, is_url

__all__ = [
    "ChannelLanguageConfig",
    "Reply",
    "ReplyDecision",
    "Suppressed",
    "TranslationResponse",
    "TranslationResult",
    "ConfigError",
    "ConnectivityError",
    "DecodeError",
    "RemoteError",
    "TranslationError",
    "resolve",
    "compose_reply",
    "MessageDispatcher",
    "is_url",
]
