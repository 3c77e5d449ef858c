"""Discord adapter — client, ports and launcher."""

from ddbot.adapters.discord.adapter import (
    DiscordChannelAdapter,
    DiscordTranslatorBot,
    split_message,
)

__all__ = ["DiscordChannelAdapter", "DiscordTranslatorBot", "split_message"]
