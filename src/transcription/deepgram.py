"""DeepgramTranscriptionClient — raw audio body, `Token` auth scheme."""
import logging
from typing import Optional

import httpx

from src.audio import TranscriptionOptions, TranscriptionRequest
from src.constants import DEEPGRAM_AUTH_SCHEME, MSG_SENDING
from src.results import TranscriptionResult
from src.transcription.client import TranscriptionClient, post_for_json

logger = logging.getLogger(__name__)


def _flag(value: bool) -> str:
    return "true" if value else "false"


def build_query(options: TranscriptionOptions) -> dict[str, str]:
    params = {
        "model": options.model,
        "language": options.language,
        "detect_language": _flag(options.detect_language),
        "diarize": _flag(options.diarize),
        "punctuate": _flag(options.punctuate),
    }
    return {k: v for k, v in params.items() if v is not None}


class DeepgramTranscriptionClient(TranscriptionClient):
    name = "Deepgram"

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
        headers = {
            "Authorization": f"{DEEPGRAM_AUTH_SCHEME} {self._api_key}",
            "Content-Type": request.content_type,
        }
        logger.info(MSG_SENDING, self.name)
        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            return await post_for_json(
                self.name,
                client,
                self._url,
                params=build_query(request.options),
                headers=headers,
                content=request.audio,
            )
