"""Inbound port — platform-agnostic message representation."""

from dataclasses import dataclass


@dataclass(frozen=True)
class IncomingMessage:
    """Discord/Slack/CLI-agnostic message representation."""

    content: str
    channel_id: int
    message_id: int
    author_name: str
    is_bot: bool
