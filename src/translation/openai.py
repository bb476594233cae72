"""OpenAIChatTranslationClient — translation through a chat completion."""
from typing import Optional

from openai import AsyncOpenAI

from src.constants import OPENAI_CHAT_MODEL, TRANSLATION_SYSTEM_PROMPT
from src.translation.client import TranslationClient


class OpenAIChatTranslationClient(TranslationClient):
    name = "OpenAI chat"

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        model: str = OPENAI_CHAT_MODEL,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url
        self._model = model

    async def _translate(self, text: str, source_language: str) -> str:
        client = AsyncOpenAI(api_key=self._api_key, base_url=self._base_url)
        response = await client.chat.completions.create(
            model=self._model,
            messages=[
                {"role": "system", "content": TRANSLATION_SYSTEM_PROMPT % source_language},
                {"role": "user", "content": text},
            ],
        )
        content = response.choices[0].message.content
        return content.strip() if content else text
