import copy

import pytest
from unittest.mock import AsyncMock

from src.enrichment import attach_translation, needs_translation


def deepgram_response(language: str | None, transcript: str = "hola mundo") -> dict:
    channel = {"alternatives": [{"transcript": transcript, "confidence": 0.98}]}
    if language is not None:
        channel["detected_language"] = language
    return {"metadata": {"request_id": "abc"}, "results": {"channels": [channel]}}


def make_translator(reply: str = "hello world"):
    translator = AsyncMock()
    translator.translate = AsyncMock(return_value=reply)
    return translator


@pytest.mark.parametrize("language,expected", [("es", True), ("en", False), ("EN", False), ("en-US", False), ("", False), (None, False)])
def test_needs_translation(language, expected):
    assert needs_translation(language) is expected


async def test_non_english_gets_translated_transcript():
    translator = make_translator()
    data = deepgram_response("es")

    result = await attach_translation(data, translator)

    alternative = result["results"]["channels"][0]["alternatives"][0]
    assert alternative["translated_transcript"] == "hello world"
    assert alternative["transcript"] == "hola mundo"
    translator.translate.assert_awaited_once_with("hola mundo", "es")


async def test_english_is_left_untouched():
    translator = make_translator()
    data = deepgram_response("en")
    before = copy.deepcopy(data)

    result = await attach_translation(data, translator)

    assert result == before
    assert "translated_transcript" not in result["results"]["channels"][0]["alternatives"][0]
    translator.translate.assert_not_called()


async def test_missing_detected_language_is_left_untouched():
    translator = make_translator()

    result = await attach_translation(deepgram_response(None), translator)

    assert "translated_transcript" not in result["results"]["channels"][0]["alternatives"][0]
    translator.translate.assert_not_called()


@pytest.mark.parametrize(
    "data",
    [
        {},
        {"results": {"channels": []}},
        {"results": {"channels": [{"alternatives": []}]}},
        {"text": "whisper shaped"},
        ["not", "a", "dict"],
        None,
    ],
)
async def test_unexpected_shape_is_returned_unchanged(data):
    translator = make_translator()
    before = copy.deepcopy(data)

    assert await attach_translation(data, translator) == before
    translator.translate.assert_not_called()


async def test_translation_failure_keeps_original_text():
    from src.translation.client import TranslationClient

    class Down(TranslationClient):
        async def _translate(self, text, source_language):
            raise ConnectionError("unreachable")

    result = await attach_translation(deepgram_response("de", "guten Morgen"), Down())

    assert result["results"]["channels"][0]["alternatives"][0]["translated_transcript"] == "guten Morgen"


@pytest.mark.parametrize("transcript", [None, 42, ["hola"]])
async def test_non_string_transcript_is_returned_unchanged(transcript):
    translator = make_translator()
    data = {"results": {"channels": [{"detected_language": "es", "alternatives": [{"transcript": transcript}]}]}}
    before = copy.deepcopy(data)

    assert await attach_translation(data, translator) == before
    translator.translate.assert_not_called()
