"""Per-channel language configuration, read from the channel topic.

A topic such as ``{"default_lang": "en", "target_lang": "ja"}`` overrides
the process defaults for that channel. Anything else — no topic, plain
text, JSON missing a field — leaves the defaults in place.
"""

import json
import sys
from typing import Any, Callable, Iterable, Optional

from ddbot.domain.models import ChannelLanguageConfig


def _log(msg: str):
    print(msg, file=sys.stderr)


Step = Callable[[Optional[str]], Optional[ChannelLanguageConfig]]


def _from_topic_json(topic: Optional[str]) -> Optional[ChannelLanguageConfig]:
    if topic is None or not topic.strip():
        return None
    try:
        data: Any = json.loads(topic)
    except (ValueError, RecursionError):
        _log("[config] channel topic is not JSON, using defaults")
        return None
    if not isinstance(data, dict):
        _log("[config] channel topic is not a JSON object, using defaults")
        return None
    default_lang = data.get("default_lang")
    target_lang = data.get("target_lang")
    if not isinstance(default_lang, str) or not isinstance(target_lang, str):
        _log("[config] channel topic lacks default_lang/target_lang, using defaults")
        return None
    if not default_lang.strip() or not target_lang.strip():
        _log("[config] channel topic has empty language codes, using defaults")
        return None
    return ChannelLanguageConfig(default_lang=default_lang, target_lang=target_lang)


RESOLUTION_STEPS = (_from_topic_json,)


def first_success(steps: Iterable[Step], topic: Optional[str]) -> Optional[ChannelLanguageConfig]:
    """Run each step in order and return the first config it produces."""
    for step in steps:
        config = step(topic)
        if config is not None:
            return config
    return None


def resolve(
    topic: Optional[str],
    defaults: ChannelLanguageConfig,
) -> ChannelLanguageConfig:
    """Resolve a channel's language pair, falling back to ``defaults``.

    Never raises; always returns a fully populated config.
    """
    return first_success(RESOLUTION_STEPS, topic) or defaults
