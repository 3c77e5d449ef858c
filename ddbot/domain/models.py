"""Domain data models — pure Python dataclasses."""

from dataclasses import dataclass, field
from typing import List, Optional, Union


@dataclass(frozen=True)
class ChannelLanguageConfig:
    """Language pair for one channel. Codes are stored upper-case."""

    default_lang: str
    target_lang: str

    def __post_init__(self):
        default_lang = (self.default_lang or "").strip().upper()
        target_lang = (self.target_lang or "").strip().upper()
        if not default_lang or not target_lang:
            raise ValueError("default_lang and target_lang must be non-empty")
        object.__setattr__(self, "default_lang", default_lang)
        object.__setattr__(self, "target_lang", target_lang)


@dataclass(frozen=True)
class TranslationResult:
    text: str
    detected_source_lang: str


@dataclass(frozen=True)
class TranslationResponse:
    """Everything the translation service returned for one request."""

    translations: List[TranslationResult] = field(default_factory=list)

    def single(self) -> Optional[TranslationResult]:
        """The only translation, or None when there are zero or several."""
        if len(self.translations) != 1:
            return None
        return self.translations[0]


@dataclass(frozen=True)
class Reply:
    text: str


@dataclass(frozen=True)
class Suppressed:
    reason: str = ""


ReplyDecision = Union[Reply, Suppressed]
