"""ClaudeChatTranslationClient — translation through Anthropic Claude messages."""
from anthropic import AsyncAnthropic

from src.constants import CLAUDE_CHAT_MODEL, CLAUDE_MAX_TOKENS, TRANSLATION_SYSTEM_PROMPT
from src.translation.client import TranslationClient


class ClaudeChatTranslationClient(TranslationClient):
    name = "Claude"

    def __init__(self, api_key: str, model: str = CLAUDE_CHAT_MODEL) -> None:
        self._api_key = api_key
        self._model = model

    async def _translate(self, text: str, source_language: str) -> str:
        client = AsyncAnthropic(api_key=self._api_key)
        message = await client.messages.create(
            model=self._model,
            max_tokens=CLAUDE_MAX_TOKENS,
            system=TRANSLATION_SYSTEM_PROMPT % source_language,
            messages=[{"role": "user", "content": text}],
        )
        return message.content[0].text.strip()
