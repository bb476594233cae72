"""Attach an English translation to a Deepgram-shaped channel transcript."""
import logging
from typing import Any

from src.constants import MSG_NO_TRANSCRIPT, TARGET_LANGUAGE, TRANSLATED_FIELD
from src.translation.client import TranslationClient

logger = logging.getLogger(__name__)


def _primary_subtag(language: str) -> str:
    return language.split("-", 1)[0].strip().lower()


def needs_translation(language: Any, target: str = TARGET_LANGUAGE) -> bool:
    match language:
        case str() as lang if lang.strip():
            return _primary_subtag(lang) != _primary_subtag(target)
        case _:
            return False


async def attach_translation(
    data: Any,
    translator: TranslationClient,
    target: str = TARGET_LANGUAGE,
) -> Any:
    """Add `translated_transcript` to results.channels[0].alternatives[0] for non-English audio.

    The data is mutated in place and returned. Anything not shaped like a
    Deepgram response is returned untouched.
    """
    try:
        channel = data["results"]["channels"][0]
        alternative = channel["alternatives"][0]
        transcript = alternative["transcript"]
        if not isinstance(transcript, str):
            raise TypeError(f"transcript is {type(transcript).__name__}, not str")
    except (KeyError, IndexError, TypeError) as exc:
        logger.debug(MSG_NO_TRANSCRIPT, exc)
        return data

    language = channel.get("detected_language")
    match needs_translation(language, target):
        case True:
            alternative[TRANSLATED_FIELD] = await translator.translate(transcript, language)
        case False:
            pass
    return data
