"""Dispatcher — provider name → adapter → optional translation → result file."""
import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from src.audio import TranscriptionOptions, load_request
from src.config import Config
from src.constants import (
    ERR_UNKNOWN_PROVIDER,
    MSG_AUDIO_READ_FAILED,
    MSG_RUN_FAILED,
    MSG_RUN_OK,
    MSG_UNKNOWN_PROVIDER,
)
from src.enrichment import attach_translation
from src.results import DispatchOutcome
from src.transcription.client import TranscriptionClient
from src.translation.client import TranslationClient
from src.writer import ResultWriter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProviderProfile:
    client: TranscriptionClient
    suffix: str = ""
    timestamped: bool = False
    translate: bool = False
    model: Optional[str] = None


def options_from_config(config: Config, model: Optional[str] = None) -> TranscriptionOptions:
    return TranscriptionOptions(
        language=config.language_hint,
        detect_language=config.detect_language,
        diarize=config.diarize,
        model=model,
    )


class Dispatcher:
    """Runs one audio file through one named provider and writes the vendor response."""

    def __init__(
        self,
        config: Config,
        profiles: Mapping[str, ProviderProfile],
        writer: ResultWriter,
        translator: Optional[TranslationClient] = None,
    ) -> None:
        self._config = config
        self._profiles = dict(profiles)
        self._writer = writer
        self._translator = translator

    @property
    def providers(self) -> tuple[str, ...]:
        return tuple(sorted(self._profiles))

    async def run(self, provider_name: str, audio_path: str | Path | None = None) -> DispatchOutcome:
        name = provider_name.strip().lower()
        profile = self._profiles.get(name)
        match profile:
            case None:
                logger.warning(MSG_UNKNOWN_PROVIDER, provider_name, ", ".join(self.providers))
                return DispatchOutcome(provider=provider_name, error=ERR_UNKNOWN_PROVIDER)
            case _:
                pass

        path = Path(audio_path or self._config.audio_file_path)
        started = time.monotonic()
        try:
            request = load_request(path, options_from_config(self._config, profile.model))
        except OSError as exc:
            logger.error(MSG_AUDIO_READ_FAILED, path, exc)
            return DispatchOutcome(provider=name, error=str(exc))

        result = await profile.client.transcribe(request)
        match result.ok:
            case False:
                logger.error(MSG_RUN_FAILED, name, path, result.error)
                return DispatchOutcome(provider=name, error=result.error)
            case True:
                pass

        data = result.data
        if profile.translate and self._translator is not None:
            data = await attach_translation(data, self._translator)

        try:
            output_path = self._writer.write(
                data,
                request.source_name,
                suffix=profile.suffix,
                timestamped=profile.timestamped,
            )
        except (OSError, TypeError, ValueError) as exc:
            logger.error(MSG_RUN_FAILED, name, path, exc)
            return DispatchOutcome(provider=name, error=str(exc))

        logger.info(MSG_RUN_OK, name, time.monotonic() - started)
        return DispatchOutcome(provider=name, output_path=output_path)
