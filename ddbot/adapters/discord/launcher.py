"""Launcher for the DeepL translation bot."""

import asyncio
import signal
import sys
from typing import Set

import aiohttp
import discord

from ddbot.adapters.deepl.client import DeepLClient
from ddbot.adapters.discord.adapter import DiscordTranslatorBot
from ddbot.config import AppConfig
from ddbot.domain.errors import ConfigError


def _log(msg: str):
    print(msg, file=sys.stderr)


def _install_signal_handlers(bot: DiscordTranslatorBot) -> Set[asyncio.Task]:
    """Close the bot on SIGINT/SIGTERM. Returns the set holding close tasks."""
    loop = asyncio.get_running_loop()
    close_tasks: Set[asyncio.Task] = set()

    def _request_close():
        task = asyncio.create_task(bot.close())
        close_tasks.add(task)
        task.add_done_callback(close_tasks.discard)

    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, _request_close)
        except NotImplementedError:
            # Windows: KeyboardInterrupt still reaches asyncio.run
            pass
    return close_tasks


async def run_bot(config: AppConfig):
    """Run the bot until the gateway connection is closed."""
    async with aiohttp.ClientSession() as session:
        translator = DeepLClient(
            api_key=config.deepl.api_key,
            api_url=config.deepl.api_url,
            timeout_seconds=config.deepl.timeout_seconds,
            session=session,
        )
        bot = DiscordTranslatorBot(translator, config.languages)
        close_tasks = _install_signal_handlers(bot)
        _log(
            f"Starting with default={config.languages.default_lang} "
            f"target={config.languages.target_lang}"
        )
        async with bot:
            await bot.start(config.discord_token)
        if close_tasks:
            await asyncio.gather(*close_tasks, return_exceptions=True)


def main() -> int:
    try:
        config = AppConfig.from_env()
    except ConfigError as e:
        _log(f"Configuration error: {e}")
        return 1
    try:
        asyncio.run(run_bot(config))
    except KeyboardInterrupt:
        _log("Interrupted, shutting down")
    except discord.LoginFailure as e:
        _log(f"Discord login failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
