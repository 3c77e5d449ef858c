"""Decide what to reply with, given the primary translation of a message.

Three cases, keyed on the language the service detected:

- detected == target (e.g. ``JA => JA``): the message is already in the
  target language, so translate it back to the default language instead.
- detected is neither default nor target (e.g. ``NL``): show the target
  translation and add a default-language translation as well.
- detected == default (e.g. ``EN => JA``): reply with the translation.
"""

import sys
from typing import Awaitable, Callable, Optional

from ddbot.domain.errors import TranslationError
from ddbot.domain.models import (
    ChannelLanguageConfig,
    Reply,
    ReplyDecision,
    Suppressed,
    TranslationResponse,
)


def _log(msg: str):
    print(msg, file=sys.stderr)


Translate = Callable[[str, str], Awaitable[TranslationResponse]]


async def _reverse(translate: Translate, text: str, lang: str) -> Optional[str]:
    """Translate ``text`` to ``lang``; None when the call fails."""
    try:
        response = await translate(text, lang)
    except TranslationError as e:
        _log(f"[composer] reverse translation to {lang} failed: {e}")
        return None
    result = response.single()
    if result is None:
        _log(
            f"[composer] reverse translation to {lang} returned "
            f"{len(response.translations)} results"
        )
        return None
    return result.text


async def compose_reply(
    response: TranslationResponse,
    config: ChannelLanguageConfig,
    original_text: str,
    translate: Translate,
) -> ReplyDecision:
    """Build the reply for one message.

    ``translate`` is called at most once more, and only after the primary
    result is known.
    """
    primary = response.single()
    if primary is None:
        _log(
            f"[composer] expected one translation, got "
            f"{len(response.translations)}: {response!r} - ignoring"
        )
        return Suppressed(f"{len(response.translations)} translations")

    detected = primary.detected_source_lang.strip().upper()
    target = config.target_lang
    default = config.default_lang

    if detected == target:
        reverse = await _reverse(translate, original_text, default)
        if reverse is None:
            return Reply(f"Failed to translate `{original_text}` to `{default}`")
        return Reply(f"`{default}: ` {reverse}")

    if detected != default:
        reverse = await _reverse(translate, original_text, default)
        if reverse is None:
            default_line = f"Failed to translate to `{default}`"
        else:
            default_line = f"`{default}: ` {reverse}"
        return Reply(
            f"`{target}: ` {primary.text} \n"
            f"{default_line} \n"
            f"(translated from `{detected}`)"
        )

    return Reply(f"`{target}: {primary.text}`")
