"""Port interfaces (Hexagonal Architecture)."""

from ddbot.ports.inbound import IncomingMessage
from ddbot.ports.outbound import ChannelTopicPort, ReplyPort, TranslatorPort

__all__ = [
    "IncomingMessage",
    "ChannelTopicPort",
    "ReplyPort",
    "TranslatorPort",
]
