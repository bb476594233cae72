"""TranscriptionClient — abstract base for speech-to-text backends."""
import logging
from abc import ABC, abstractmethod

import httpx

from src.audio import TranscriptionRequest
from src.constants import MSG_BAD_RESPONSE, MSG_HTTP_ERROR, MSG_TRANSPORT_ERROR
from src.results import TranscriptionResult

logger = logging.getLogger(__name__)


class TranscriptionClient(ABC):
    name: str = "transcription"

    @abstractmethod
    async def transcribe(self, request: TranscriptionRequest) -> TranscriptionResult:
        """Send the request to the vendor. Failures come back as a failed result, never raised."""
        ...


# ── shared failure helpers ────────────────────────────────────────────────────


def status_failure(name: str, status_code: int, body: str) -> TranscriptionResult:
    logger.error(MSG_HTTP_ERROR, name, status_code, body)
    return TranscriptionResult.failure(f"HTTP {status_code}: {body}", status_code=status_code)


def transport_failure(name: str, exc: Exception) -> TranscriptionResult:
    logger.error(MSG_TRANSPORT_ERROR, name, exc)
    return TranscriptionResult.failure(str(exc) or type(exc).__name__)


def shape_failure(name: str, exc: Exception) -> TranscriptionResult:
    logger.error(MSG_BAD_RESPONSE, name, exc)
    return TranscriptionResult.failure(f"unexpected response: {exc}")


async def post_for_json(name: str, client: httpx.AsyncClient, url: str, **kwargs) -> TranscriptionResult:
    """POST and decode a JSON body, folding every httpx failure into a result."""
    try:
        response = await client.post(url, **kwargs)
        response.raise_for_status()
        return TranscriptionResult.success(response.json())
    except httpx.HTTPStatusError as exc:
        return status_failure(name, exc.response.status_code, exc.response.text)
    except httpx.HTTPError as exc:
        return transport_failure(name, exc)
    except ValueError as exc:
        return shape_failure(name, exc)
