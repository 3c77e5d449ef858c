"""MessageDispatcher — per-message translation flow, no discord import.

Filters incoming messages, resolves the channel's language pair, asks the
translator, composes the reply and hands it to the reply port.
"""

import sys
from typing import Optional
from urllib.parse import urlsplit

from ddbot.domain.channel_config import resolve
from ddbot.domain.errors import TranslationError
from ddbot.domain.models import ChannelLanguageConfig, Reply, ReplyDecision
from ddbot.domain.reply_composer import compose_reply
from ddbot.ports.inbound import IncomingMessage
from ddbot.ports.outbound import ChannelTopicPort, ReplyPort, TranslatorPort

TRANSLATION_FAILED_NOTICE = "Failed to translate using DeepL"


def _log(msg: str):
    print(msg, file=sys.stderr)


def is_url(content: str) -> bool:
    """True when the whole message is a single well-formed URL."""
    text = content.strip()
    if not text or any(ch.isspace() for ch in text):
        return False
    try:
        parts = urlsplit(text)
    except ValueError:
        return False
    if not parts.scheme or not parts.scheme[0].isalpha():
        return False
    if parts.netloc:
        return True
    # opaque URLs such as mailto:someone@example.com
    return bool(parts.path) and not text.startswith(parts.scheme + "://")


class MessageDispatcher:
    """Pure dispatch logic — testable with mock ports.

    Each call to ``handle`` owns all of its state; nothing is shared
    between messages except the read-only default languages.
    """

    def __init__(
        self,
        translator: TranslatorPort,
        topics: ChannelTopicPort,
        replies: ReplyPort,
        defaults: ChannelLanguageConfig,
    ):
        self._translator = translator
        self._topics = topics
        self._replies = replies
        self._defaults = defaults

    @property
    def defaults(self) -> ChannelLanguageConfig:
        return self._defaults

    def should_translate(self, msg: IncomingMessage) -> bool:
        if msg.is_bot:
            return False
        # empty content covers image-only posts
        if not msg.content:
            return False
        if is_url(msg.content):
            return False
        return True

    async def language_config(self, channel_id: int) -> ChannelLanguageConfig:
        """Resolve the language pair for a channel; never raises."""
        try:
            topic = await self._topics.get_topic(channel_id)
        except Exception as e:
            _log(f"[dispatcher] failed to get topic for ch={channel_id}: {e} - using defaults")
            topic = None
        return resolve(topic, self._defaults)

    async def decide(self, msg: IncomingMessage) -> Optional[ReplyDecision]:
        """Translate ``msg`` and decide on a reply.

        Returns None when the message is filtered out.
        """
        if not self.should_translate(msg):
            return None

        config = await self.language_config(msg.channel_id)
        try:
            response = await self._translator.translate(msg.content, config.target_lang)
        except TranslationError as e:
            _log(f"[dispatcher] error translating message in ch={msg.channel_id}: {e}")
            return Reply(TRANSLATION_FAILED_NOTICE)

        return await compose_reply(
            response, config, msg.content, self._translator.translate
        )

    async def handle(self, msg: IncomingMessage) -> None:
        """Process one inbound message end to end."""
        decision = await self.decide(msg)
        if not isinstance(decision, Reply):
            return
        try:
            await self._replies.reply(msg.channel_id, msg.message_id, decision.text)
        except Exception as e:
            _log(f"[dispatcher] failed to reply in ch={msg.channel_id}: {e}")
