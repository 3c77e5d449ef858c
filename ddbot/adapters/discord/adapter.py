"""Discord adapter — bridges discord.Client to MessageDispatcher.

DiscordTranslatorBot converts each discord.Message into an
IncomingMessage and runs the dispatcher for it in its own task.
DiscordChannelAdapter implements the topic and reply ports.
"""

import asyncio
import sys
from typing import Optional, Set

import discord

from ddbot.domain.dispatcher import MessageDispatcher
from ddbot.domain.models import ChannelLanguageConfig
from ddbot.ports.inbound import IncomingMessage
from ddbot.ports.outbound import TranslatorPort

DISCORD_MESSAGE_LIMIT = 2000
SHUTDOWN_GRACE_SECONDS = 5.0


def _log(msg: str):
    print(msg, file=sys.stderr)


def split_message(text: str, limit: int = DISCORD_MESSAGE_LIMIT) -> list:
    """Split text into chunks Discord will accept, preferring line breaks."""
    chunks = []
    while len(text) > limit:
        cut = text.rfind("\n", 0, limit)
        if cut <= 0:
            cut = limit
        chunks.append(text[:cut])
        text = text[cut:].lstrip("\n")
    if text:
        chunks.append(text)
    return chunks


class DiscordChannelAdapter:
    """ChannelTopicPort and ReplyPort implementation using discord.Client."""

    def __init__(self, client: discord.Client):
        self._client = client

    async def _channel(self, channel_id: int):
        channel = self._client.get_channel(channel_id)
        if channel is None:
            channel = await self._client.fetch_channel(channel_id)
        return channel

    async def get_topic(self, channel_id: int) -> Optional[str]:
        channel = await self._channel(channel_id)
        # threads carry no topic of their own; use the parent's
        if isinstance(channel, discord.Thread):
            channel = channel.parent
        return getattr(channel, "topic", None)

    async def reply(self, channel_id: int, message_id: int, text: str) -> None:
        channel = await self._channel(channel_id)
        chunks = split_message(text)
        if not chunks:
            return
        await channel.get_partial_message(message_id).reply(chunks[0])
        for chunk in chunks[1:]:
            await channel.send(chunk)


class DiscordTranslatorBot(discord.Client):
    """Thin Discord client that delegates each message to MessageDispatcher."""

    def __init__(
        self,
        translator: TranslatorPort,
        defaults: ChannelLanguageConfig,
        dispatcher: Optional[MessageDispatcher] = None,
        **discord_kwargs,
    ):
        intents = discord.Intents.default()
        intents.guild_messages = True
        intents.dm_messages = True
        intents.message_content = True
        super().__init__(intents=intents, **discord_kwargs)
        self.channels = DiscordChannelAdapter(self)
        self.dispatcher = dispatcher or MessageDispatcher(
            translator, self.channels, self.channels, defaults
        )
        self._tasks: Set[asyncio.Task] = set()
        self._closing = False

    @staticmethod
    def to_incoming(message: discord.Message) -> IncomingMessage:
        """Convert a Discord message to platform-agnostic IncomingMessage."""
        return IncomingMessage(
            content=message.content,
            channel_id=message.channel.id,
            message_id=message.id,
            author_name=str(message.author),
            is_bot=message.author.bot,
        )

    async def on_ready(self):
        _log(f"[discord] Connected as {self.user}")

    async def on_resumed(self):
        _log("[discord] Resumed")

    async def on_message(self, message: discord.Message):
        if self._closing or self.is_closed():
            return
        incoming = self.to_incoming(message)
        if not self.dispatcher.should_translate(incoming):
            return
        task = asyncio.create_task(self._handle(incoming))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _handle(self, incoming: IncomingMessage):
        try:
            await self.dispatcher.handle(incoming)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            _log(f"[discord] unexpected error in ch={incoming.channel_id}: {e!r}")

    @property
    def pending_tasks(self) -> int:
        return len(self._tasks)

    async def drain(self, timeout: float = SHUTDOWN_GRACE_SECONDS) -> int:
        """Wait for in-flight messages, cancelling whatever is left.

        Returns the number of tasks that had to be cancelled.
        """
        if not self._tasks:
            return 0
        pending = list(self._tasks)
        _, still_running = await asyncio.wait(pending, timeout=timeout)
        for task in still_running:
            task.cancel()
        if still_running:
            await asyncio.gather(*still_running, return_exceptions=True)
        return len(still_running)

    async def close(self):
        self._closing = True
        cancelled = await self.drain()
        if cancelled:
            _log(f"[discord] cancelled {cancelled} in-flight translation(s)")
        await super().close()
