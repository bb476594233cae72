"""GoogleTranslationClient — Cloud Translation v2 REST backend."""
from typing import Optional

import httpx

from src.constants import TARGET_LANGUAGE
from src.translation.client import TranslationClient


class GoogleTranslationClient(TranslationClient):
    name = "Google Translate"

    def __init__(
        self,
        api_key: str,
        url: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._api_key = api_key
        self._url = url
        self._timeout = timeout
        self._transport = transport

    async def _translate(self, text: str, source_language: str) -> str:
        payload = {
            "q": text,
            "source": source_language,
            "target": TARGET_LANGUAGE,
            "format": "text",
        }
        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            response = await client.post(self._url, params={"key": self._api_key}, json=payload)
            response.raise_for_status()
            body = response.json()
        return body["data"]["translations"][0]["translatedText"]
