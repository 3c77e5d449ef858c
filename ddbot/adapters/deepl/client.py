"""DeepL client — single-text translation over the v2 HTTP API."""

import asyncio
import sys
from typing import Any, Optional

import aiohttp

from ddbot.config import DEEPL_API_URL, DEEPL_TIMEOUT_SECONDS
from ddbot.domain.errors import ConnectivityError, DecodeError, RemoteError
from ddbot.domain.models import TranslationResponse, TranslationResult


def _log(msg: str):
    print(msg, file=sys.stderr)


def parse_response(data: Any) -> TranslationResponse:
    """Turn a decoded DeepL body into a TranslationResponse.

    Expected shape: ``{"translations": [{"text": ..., "detected_source_language": ...}]}``
    """
    if not isinstance(data, dict) or not isinstance(data.get("translations"), list):
        raise DecodeError("response has no 'translations' list")
    results = []
    for item in data["translations"]:
        if not isinstance(item, dict):
            raise DecodeError("translation entry is not an object")
        text = item.get("text")
        lang = item.get("detected_source_language")
        if not isinstance(text, str) or not isinstance(lang, str):
            raise DecodeError("translation entry lacks text/detected_source_language")
        results.append(TranslationResult(text=text, detected_source_lang=lang.upper()))
    return TranslationResponse(translations=results)


class DeepLClient:
    """Translate text with DeepL. No retries; each failure is final."""

    def __init__(
        self,
        api_key: str,
        api_url: str = DEEPL_API_URL,
        timeout_seconds: float = DEEPL_TIMEOUT_SECONDS,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        self._api_key = api_key
        self._api_url = api_url
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._session = session

    def __repr__(self) -> str:
        return f"DeepLClient(api_url={self._api_url!r})"

    def _headers(self) -> dict:
        return {
            "Authorization": f"DeepL-Auth-Key {self._api_key}",
            "Content-Type": "application/json",
        }

    async def _post(self, session: aiohttp.ClientSession, body: dict) -> Any:
        async with session.post(
            self._api_url, json=body, headers=self._headers(), timeout=self._timeout
        ) as resp:
            if resp.status < 200 or resp.status >= 300:
                raise RemoteError(resp.status)
            try:
                return await resp.json(content_type=None)
            except (ValueError, aiohttp.ContentTypeError) as e:
                raise DecodeError(f"invalid JSON body: {e}") from e

    async def translate(self, text: str, target_lang: str) -> TranslationResponse:
        """Translate one text item into ``target_lang``.

        Raises:
            RemoteError: non-2xx status.
            ConnectivityError: DNS/TLS/connection failure or timeout.
            DecodeError: body is not the expected JSON shape.
        """
        body = {"text": [text], "target_lang": target_lang.upper()}
        try:
            if self._session is not None:
                data = await self._post(self._session, body)
            else:
                async with aiohttp.ClientSession() as session:
                    data = await self._post(session, body)
        except asyncio.TimeoutError as e:
            raise ConnectivityError("Timed out connecting to DeepL API") from e
        except aiohttp.ClientError as e:
            _log(f"[deepl] connection error: {type(e).__name__}")
            raise ConnectivityError("Failed to connect to DeepL API") from e
        return parse_response(data)
