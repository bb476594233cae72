import dataclasses

import pytest

from src.config import Config

_BASE = Config(
    provider="dg",
    audio_file_path="audio/output7-ch.mp3",
    output_dir="output",
    log_level="INFO",
    dg_api_key="dg-key",
    dg_url="https://dg.test/v1/listen",
    dg_model="nova-2",
    openai_api_key=None,
    openai_base_url=None,
    whisper_model="whisper-1",
    google_api_key=None,
    google_speech_url="https://speech.test/v1/speech:recognize",
    translation_provider=None,
    translate_api_key=None,
    translate_url="https://translate.test/v2",
    anthropic_api_key=None,
    chat_model=None,
    language_hint=None,
    detect_language=True,
    diarize=False,
    http_timeout=None,
)


@pytest.fixture
def make_config():
    def _make(**overrides) -> Config:
        return dataclasses.replace(_BASE, **overrides)

    return _make


@pytest.fixture
def clean_env(monkeypatch):
    """No .env file and none of our variables leaking in from the shell."""
    monkeypatch.setattr("src.config.load_dotenv", lambda **_: None)
    for name in (
        "PROVIDER", "AUDIO_FILE_PATH", "OUTPUT_DIR", "LOG_LEVEL", "DG_API_KEY", "DG_URL",
        "DG_MODEL", "OPENAI_API_KEY", "OPENAI_BASE_URL", "WHISPER_MODEL", "GOOGLE_API_KEY",
        "GOOGLE_SPEECH_URL", "TRANSLATION_PROVIDER", "TRANSLATE_API_KEY", "TRANSLATE_URL",
        "ANTHROPIC_API_KEY", "CHAT_MODEL", "LANGUAGE_HINT", "DETECT_LANGUAGE", "DIARIZE",
        "HTTP_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
