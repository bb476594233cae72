from dataclasses import dataclass
from typing import Optional
import os
from dotenv import load_dotenv

from src.constants import (
    DEEPGRAM_MODEL,
    DEEPGRAM_URL,
    DEFAULT_AUDIO_FILE_PATH,
    DEFAULT_OUTPUT_DIR,
    GOOGLE_SPEECH_URL,
    GOOGLE_TRANSLATE_URL,
    PROVIDER_DEEPGRAM,
    WHISPER_MODEL,
)

_TRUTHY = ("1", "true", "yes", "on")


def _as_bool(raw: str) -> bool:
    return raw.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Config:
    provider: str
    audio_file_path: str
    output_dir: str
    log_level: str
    dg_api_key: Optional[str]
    dg_url: str
    dg_model: str
    openai_api_key: Optional[str]
    openai_base_url: Optional[str]
    whisper_model: str
    google_api_key: Optional[str]
    google_speech_url: str
    translation_provider: Optional[str]
    translate_api_key: Optional[str]
    translate_url: str
    anthropic_api_key: Optional[str]
    chat_model: Optional[str]
    language_hint: Optional[str]
    detect_language: bool
    diarize: bool
    http_timeout: Optional[float]

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        provider = os.getenv("PROVIDER", PROVIDER_DEEPGRAM)
        google_api_key = os.getenv("GOOGLE_API_KEY") or None
        raw_timeout = os.getenv("HTTP_TIMEOUT") or None

        return cls._validate(
            provider=provider,
            audio_file_path=os.getenv("AUDIO_FILE_PATH") or DEFAULT_AUDIO_FILE_PATH,
            output_dir=os.getenv("OUTPUT_DIR") or DEFAULT_OUTPUT_DIR,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            dg_api_key=os.getenv("DG_API_KEY") or None,
            dg_url=os.getenv("DG_URL") or DEEPGRAM_URL,
            dg_model=os.getenv("DG_MODEL") or DEEPGRAM_MODEL,
            openai_api_key=os.getenv("OPENAI_API_KEY") or None,
            openai_base_url=os.getenv("OPENAI_BASE_URL") or None,
            whisper_model=os.getenv("WHISPER_MODEL") or WHISPER_MODEL,
            google_api_key=google_api_key,
            google_speech_url=os.getenv("GOOGLE_SPEECH_URL") or GOOGLE_SPEECH_URL,
            translation_provider=(os.getenv("TRANSLATION_PROVIDER") or "").strip().lower() or None,
            translate_api_key=os.getenv("TRANSLATE_API_KEY") or google_api_key,
            translate_url=os.getenv("TRANSLATE_URL") or GOOGLE_TRANSLATE_URL,
            anthropic_api_key=os.getenv("ANTHROPIC_API_KEY") or None,
            chat_model=os.getenv("CHAT_MODEL") or None,
            language_hint=os.getenv("LANGUAGE_HINT") or None,
            detect_language=_as_bool(os.getenv("DETECT_LANGUAGE", "true")),
            diarize=_as_bool(os.getenv("DIARIZE", "false")),
            raw_timeout=raw_timeout,
        )

    @staticmethod
    def _validate(
        provider: Optional[str],
        audio_file_path: str,
        output_dir: str,
        log_level: str,
        dg_api_key: Optional[str],
        dg_url: str,
        dg_model: str,
        openai_api_key: Optional[str],
        openai_base_url: Optional[str],
        whisper_model: str,
        google_api_key: Optional[str],
        google_speech_url: str,
        translation_provider: Optional[str],
        translate_api_key: Optional[str],
        translate_url: str,
        anthropic_api_key: Optional[str],
        chat_model: Optional[str],
        language_hint: Optional[str],
        detect_language: bool,
        diarize: bool,
        raw_timeout: Optional[str],
    ) -> "Config":
        match (provider or "").strip():
            case "":
                raise ValueError("PROVIDER must be set in .env")
            case name:
                provider = name.lower()

        match raw_timeout:
            case None:
                http_timeout = None
            case str() as raw:
                try:
                    http_timeout = float(raw)
                except ValueError:
                    raise ValueError(f"HTTP_TIMEOUT must be a number, got {raw!r}") from None

        return Config(
            provider=provider,
            audio_file_path=audio_file_path,
            output_dir=output_dir,
            log_level=log_level,
            dg_api_key=dg_api_key,
            dg_url=dg_url,
            dg_model=dg_model,
            openai_api_key=openai_api_key,
            openai_base_url=openai_base_url,
            whisper_model=whisper_model,
            google_api_key=google_api_key,
            google_speech_url=google_speech_url,
            translation_provider=translation_provider,
            translate_api_key=translate_api_key,
            translate_url=translate_url,
            anthropic_api_key=anthropic_api_key,
            chat_model=chat_model,
            language_hint=language_hint,
            detect_language=detect_language,
            diarize=diarize,
            http_timeout=http_timeout,
        )
