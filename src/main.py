"""Entry point — wires Config → provider clients → Dispatcher."""
import argparse
import asyncio
import logging
import sys
from typing import Optional, Sequence

from rich.logging import RichHandler

from src.config import Config
from src.constants import (
    ERR_UNKNOWN_PROVIDER,
    PROVIDER_DEEPGRAM,
    PROVIDER_GOOGLE,
    PROVIDER_WHISPER,
    PROVIDER_WHISPER_TRANSLATE,
    SUFFIX_GOOGLE,
    SUFFIX_WHISPER,
    SUFFIX_WHISPER_TRANSLATED,
    TRANSLATOR_CLAUDE,
    TRANSLATOR_GOOGLE,
    TRANSLATOR_OPENAI,
)
from src.dispatcher import Dispatcher, ProviderProfile
from src.transcription.deepgram import DeepgramTranscriptionClient
from src.transcription.google import GoogleSpeechTranscriptionClient
from src.transcription.whisper import WhisperTranscriptionClient
from src.translation.claude import ClaudeChatTranslationClient
from src.translation.client import TranslationClient
from src.translation.google import GoogleTranslationClient
from src.translation.openai import OpenAIChatTranslationClient
from src.writer import ResultWriter

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_UNKNOWN_PROVIDER = 2


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(rich_tracebacks=True))


def build_profiles(config: Config) -> dict[str, ProviderProfile]:
    """Register a profile for every provider whose credentials are configured."""
    profiles: dict[str, ProviderProfile] = {}
    if config.dg_api_key:
        profiles[PROVIDER_DEEPGRAM] = ProviderProfile(
            client=DeepgramTranscriptionClient(config.dg_api_key, config.dg_url, config.http_timeout),
            translate=True,
            model=config.dg_model,
        )
    if config.openai_api_key:
        profiles[PROVIDER_WHISPER] = ProviderProfile(
            client=WhisperTranscriptionClient(
                config.openai_api_key,
                base_url=config.openai_base_url,
                model=config.whisper_model,
                timeout=config.http_timeout,
            ),
            suffix=SUFFIX_WHISPER,
            timestamped=True,
        )
        profiles[PROVIDER_WHISPER_TRANSLATE] = ProviderProfile(
            client=WhisperTranscriptionClient(
                config.openai_api_key,
                base_url=config.openai_base_url,
                model=config.whisper_model,
                translate=True,
                timeout=config.http_timeout,
            ),
            suffix=SUFFIX_WHISPER_TRANSLATED,
            timestamped=True,
        )
    if config.google_api_key:
        profiles[PROVIDER_GOOGLE] = ProviderProfile(
            client=GoogleSpeechTranscriptionClient(
                config.google_api_key, config.google_speech_url, config.http_timeout
            ),
            suffix=SUFFIX_GOOGLE,
            timestamped=True,
        )
    return profiles


def build_translator(config: Config) -> Optional[TranslationClient]:
    match (config.translation_provider, config.translate_api_key, config.openai_api_key, config.anthropic_api_key):
        case (p, str() as key, _, _) if p == TRANSLATOR_GOOGLE and key:
            return GoogleTranslationClient(key, config.translate_url, config.http_timeout)
        case (p, _, str() as key, _) if p == TRANSLATOR_OPENAI and key:
            extra = {"model": config.chat_model} if config.chat_model else {}
            return OpenAIChatTranslationClient(key, base_url=config.openai_base_url, **extra)
        case (p, _, _, str() as key) if p == TRANSLATOR_CLAUDE and key:
            extra = {"model": config.chat_model} if config.chat_model else {}
            return ClaudeChatTranslationClient(key, **extra)
        case _:
            return None


def build_dispatcher(config: Config) -> Dispatcher:
    return Dispatcher(
        config,
        build_profiles(config),
        ResultWriter(config.output_dir),
        translator=build_translator(config),
    )


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Send audio files to a transcription provider.")
    parser.add_argument("audio", nargs="*", help="audio files (default: AUDIO_FILE_PATH)")
    parser.add_argument("-p", "--provider", help="provider name (default: PROVIDER)")
    return parser.parse_args(argv)


async def run(dispatcher: Dispatcher, provider: str, paths: Sequence[str]) -> int:
    outcomes = []
    for path in paths:
        outcome = await dispatcher.run(provider, path)
        if outcome.error == ERR_UNKNOWN_PROVIDER:
            return EXIT_UNKNOWN_PROVIDER
        outcomes.append(outcome)
    return EXIT_OK if all(o.ok for o in outcomes) else EXIT_FAILED


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    config = Config.from_env()
    _setup_logging(config.log_level)

    provider = args.provider or config.provider
    paths = args.audio or [config.audio_file_path]
    return asyncio.run(run(build_dispatcher(config), provider, paths))


if __name__ == "__main__":
    sys.exit(main())
