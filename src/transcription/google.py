"""GoogleSpeechTranscriptionClient — base64 audio in a JSON payload, API key as query param."""
import base64
import logging
from typing import Any, Optional

import httpx

from src.audio import TranscriptionRequest
from src.constants import (
    GOOGLE_DEFAULT_LANGUAGE,
    GOOGLE_ENCODINGS,
    GOOGLE_MAX_SPEAKERS,
    GOOGLE_MIN_SPEAKERS,
    MSG_SENDING,
)
from src.results import TranscriptionResult
from src.transcription.client import TranscriptionClient, post_for_json

logger = logging.getLogger(__name__)


def build_payload(request: TranscriptionRequest) -> dict[str, Any]:
    options = request.options
    config: dict[str, Any] = {
        "languageCode": options.language or GOOGLE_DEFAULT_LANGUAGE,
        "enableAutomaticPunctuation": options.punctuate,
    }
    if encoding := GOOGLE_ENCODINGS.get(request.content_type):
        config["encoding"] = encoding
    if options.model:
        config["model"] = options.model
    if options.diarize:
        config["diarizationConfig"] = {
            "enableSpeakerDiarization": True,
            "minSpeakerCount": GOOGLE_MIN_SPEAKERS,
            "maxSpeakerCount": GOOGLE_MAX_SPEAKERS,
        }
    return {
        "config": config,
        "audio": {"content": base64.standard_b64encode(request.audio).decode()},
    }


class GoogleSpeechTranscriptionClient(TranscriptionClient):
    name = "Google Speech"

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

    async def transcribe(self, request: TranscriptionRequest) -> TranscriptionResult:
        logger.info(MSG_SENDING, self.name)
        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            return await post_for_json(
                self.name,
                client,
                self._url,
                params={"key": self._api_key},
                json=build_payload(request),
            )
