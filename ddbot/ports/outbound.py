"""Outbound ports — interfaces for external system adapters."""

from typing import Optional, Protocol, runtime_checkable

from ddbot.domain.models import TranslationResponse


@runtime_checkable
class TranslatorPort(Protocol):
    """Interface for translation backends.

    Raises a ``TranslationError`` subclass on failure.
    """

    async def translate(self, text: str, target_lang: str) -> TranslationResponse: ...


@runtime_checkable
class ChannelTopicPort(Protocol):
    """Interface for reading a channel's topic text."""

    async def get_topic(self, channel_id: int) -> Optional[str]: ...


@runtime_checkable
class ReplyPort(Protocol):
    """Interface for replying to a message."""

    async def reply(self, channel_id: int, message_id: int, text: str) -> None: ...
