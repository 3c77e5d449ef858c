"""DeepL HTTP adapter."""

from ddbot.adapters.deepl.client import DeepLClient, parse_response

__all__ = ["DeepLClient", "parse_response"]
