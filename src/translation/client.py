"""TranslationClient — abstract base for text translation backends."""
import logging
from abc import ABC, abstractmethod

from src.constants import MSG_TRANSLATING, MSG_TRANSLATION_FAILED

logger = logging.getLogger(__name__)


class TranslationClient(ABC):
    name: str = "translation"

    async def translate(self, text: str, source_language: str) -> str:
        """Translate text into English. Any failure returns the original text unchanged."""
        match text.strip():
            case "":
                return text
            case _:
                pass
        logger.info(MSG_TRANSLATING, source_language)
        try:
            return await self._translate(text, source_language)
        except Exception as exc:
            logger.warning(MSG_TRANSLATION_FAILED, self.name, exc)
            return text

    @abstractmethod
    async def _translate(self, text: str, source_language: str) -> str:
        """Vendor call. Raises on failure."""
        ...
