import pytest
from src.config import Config


def test_config_from_env_success(clean_env):
    """Happy-path: provider and keys present."""
    clean_env.setenv("PROVIDER", "whisper")
    clean_env.setenv("OPENAI_API_KEY", "sk-test123")
    clean_env.setenv("AUDIO_FILE_PATH", "audio/talk.wav")

    config = Config.from_env()

    assert config.provider == "whisper"
    assert config.openai_api_key == "sk-test123"
    assert config.audio_file_path == "audio/talk.wav"


def test_config_defaults(clean_env):
    """Optional fields have sensible defaults."""
    config = Config.from_env()

    assert config.provider == "dg"
    assert config.audio_file_path == "audio/output7-ch.mp3"
    assert config.output_dir == "output"
    assert config.dg_url == "https://api.deepgram.com/v1/listen"
    assert config.whisper_model == "whisper-1"
    assert config.detect_language is True
    assert config.diarize is False
    assert config.http_timeout is None
    assert config.translation_provider is None


def test_config_blank_provider_fails(clean_env):
    """Blank PROVIDER must raise."""
    clean_env.setenv("PROVIDER", "  ")

    with pytest.raises(ValueError, match="PROVIDER"):
        Config.from_env()


def test_config_provider_is_lowercased(clean_env):
    clean_env.setenv("PROVIDER", " Google ")

    assert Config.from_env().provider == "google"


def test_config_bad_timeout_fails(clean_env):
    clean_env.setenv("HTTP_TIMEOUT", "soon")

    with pytest.raises(ValueError, match="HTTP_TIMEOUT"):
        Config.from_env()


def test_config_timeout_parses_float(clean_env):
    clean_env.setenv("HTTP_TIMEOUT", "12.5")

    assert Config.from_env().http_timeout == 12.5


@pytest.mark.parametrize("raw,expected", [("1", True), ("YES", True), ("on", True), ("false", False), ("0", False)])
def test_config_boolean_flags(clean_env, raw, expected):
    clean_env.setenv("DIARIZE", raw)

    assert Config.from_env().diarize is expected


def test_config_translate_key_falls_back_to_google_key(clean_env):
    """TRANSLATE_API_KEY unset → reuse GOOGLE_API_KEY."""
    clean_env.setenv("GOOGLE_API_KEY", "g-key")

    config = Config.from_env()

    assert config.translate_api_key == "g-key"


def test_config_translation_provider_normalized(clean_env):
    clean_env.setenv("TRANSLATION_PROVIDER", " OpenAI ")

    assert Config.from_env().translation_provider == "openai"


def test_config_blank_keys_become_none(clean_env):
    clean_env.setenv("DG_API_KEY", "")
    clean_env.setenv("OPENAI_API_KEY", "")

    config = Config.from_env()

    assert config.dg_api_key is None
    assert config.openai_api_key is None


def test_config_immutable(make_config):
    """Frozen dataclass: attribute assignment must fail."""
    config = make_config()

    with pytest.raises(Exception):
        config.provider = "other"


def test_config_validate_rejects_unknown_field():
    """_validate spells out every field, so a stray keyword is a TypeError."""
    with pytest.raises(TypeError):
        Config._validate(provider="dg", raw_timeout=None, bogus="x")
