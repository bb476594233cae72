"""WhisperTranscriptionClient — OpenAI-compatible speech-to-text backend."""
import io
import logging
from typing import Optional

from openai import APIConnectionError, APIStatusError, AsyncOpenAI

from src.audio import TranscriptionRequest
from src.constants import MSG_SENDING, WHISPER_MODEL, WHISPER_RESPONSE_FORMAT
from src.results import TranscriptionResult
from src.transcription.client import (
    TranscriptionClient,
    shape_failure,
    status_failure,
    transport_failure,
)

logger = logging.getLogger(__name__)


class WhisperTranscriptionClient(TranscriptionClient):
    """Transcribes in the spoken language, or translates to English when `translate` is set."""

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        model: str = WHISPER_MODEL,
        translate: bool = False,
        timeout: Optional[float] = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url
        self._model = model
        self._translate = translate
        self._timeout = timeout
        self.name = "Whisper translation" if translate else "Whisper"

    async def transcribe(self, request: TranscriptionRequest) -> TranscriptionResult:
        limits = {"timeout": self._timeout} if self._timeout is not None else {}
        client = AsyncOpenAI(api_key=self._api_key, base_url=self._base_url, **limits)
        audio_file = io.BytesIO(request.audio)
        audio_file.name = request.filename
        logger.info(MSG_SENDING, self.name)
        try:
            match self._translate:
                case True:
                    response = await client.audio.translations.create(
                        model=self._model,
                        file=audio_file,
                        response_format=WHISPER_RESPONSE_FORMAT,
                    )
                case False:
                    extra = {"language": request.options.language} if request.options.language else {}
                    response = await client.audio.transcriptions.create(
                        model=self._model,
                        file=audio_file,
                        response_format=WHISPER_RESPONSE_FORMAT,
                        **extra,
                    )
            return TranscriptionResult.success(response.model_dump())
        except APIStatusError as exc:
            return status_failure(self.name, exc.status_code, exc.response.text)
        except APIConnectionError as exc:
            return transport_failure(self.name, exc)
        except (AttributeError, TypeError) as exc:
            return shape_failure(self.name, exc)
