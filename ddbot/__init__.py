"""DeepL translation bot for Discord."""

from ddbot.config import AppConfig, __version__
from ddbot.domain.models import ChannelLanguageConfig, Reply, Suppressed
from ddbot.domain.dispatcher import MessageDispatcher
from ddbot.adapters.deepl.client import DeepLClient

__all__ = [
    "__version__",
    "AppConfig",
    "ChannelLanguageConfig",
    "Reply",
    "Suppressed",
    "MessageDispatcher",
    "DeepLClient",
]
