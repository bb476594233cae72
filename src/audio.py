"""Audio input: MIME lookup and the immutable request handed to provider adapters."""
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from src.constants import DEFAULT_CONTENT_TYPE, MIME_TYPES, MSG_READING_AUDIO

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TranscriptionOptions:
    language: Optional[str] = None
    detect_language: bool = True
    diarize: bool = False
    punctuate: bool = True
    model: Optional[str] = None


@dataclass(frozen=True)
class TranscriptionRequest:
    audio: bytes
    content_type: str
    filename: str
    options: TranscriptionOptions = field(default_factory=TranscriptionOptions)

    @property
    def source_name(self) -> str:
        """Input base name without extension, used to name the output file."""
        return Path(self.filename).stem


def content_type_for(path: str | Path) -> str:
    """Map the file extension to a MIME type, falling back to audio/wav."""
    extension = Path(path).suffix.lstrip(".").lower()
    return MIME_TYPES.get(extension, DEFAULT_CONTENT_TYPE)


def load_request(path: str | Path, options: TranscriptionOptions | None = None) -> TranscriptionRequest:
    """Read the audio file into a request. OSError propagates to the caller."""
    audio_path = Path(path)
    content_type = content_type_for(audio_path)
    logger.info(MSG_READING_AUDIO, audio_path, content_type)
    return TranscriptionRequest(
        audio=audio_path.read_bytes(),
        content_type=content_type,
        filename=audio_path.name,
        options=options or TranscriptionOptions(),
    )
