"""All magic values live here — no inline literals anywhere else."""

# Provider names
PROVIDER_DEEPGRAM = "dg"
PROVIDER_WHISPER = "whisper"
PROVIDER_WHISPER_TRANSLATE = "whisper-translate"
PROVIDER_GOOGLE = "google"

# Translation backends
TRANSLATOR_GOOGLE = "google"
TRANSLATOR_OPENAI = "openai"
TRANSLATOR_CLAUDE = "claude"

# Input / output
DEFAULT_AUDIO_FILE_PATH = "audio/output7-ch.mp3"
DEFAULT_OUTPUT_DIR = "output"
OUTPUT_EXTENSION = ".json"
OUTPUT_TIMESTAMP_FORMAT = "%Y-%m-%dT%H-%M-%S-%fZ"

# Extension → MIME type. Anything else is sent as DEFAULT_CONTENT_TYPE.
MIME_TYPES = {
    "wav": "audio/wav",
    "mp3": "audio/mpeg",
    "mp4": "audio/mp4",
    "flac": "audio/flac",
    "ogg": "audio/ogg",
}
DEFAULT_CONTENT_TYPE = "audio/wav"

# Output filename suffixes per provider
SUFFIX_WHISPER = "whisper"
SUFFIX_WHISPER_TRANSLATED = "whisper-translated"
SUFFIX_GOOGLE = "google"

# Deepgram
DEEPGRAM_URL = "https://api.deepgram.com/v1/listen"
DEEPGRAM_MODEL = "nova-2"
DEEPGRAM_AUTH_SCHEME = "Token"

# Whisper / OpenAI-compatible
WHISPER_MODEL = "whisper-1"
WHISPER_RESPONSE_FORMAT = "verbose_json"

# Google Cloud Speech
GOOGLE_SPEECH_URL = "https://speech.googleapis.com/v1/speech:recognize"
GOOGLE_DEFAULT_LANGUAGE = "en-US"
GOOGLE_ENCODINGS = {
    "audio/mpeg": "MP3",
    "audio/flac": "FLAC",
    "audio/ogg": "OGG_OPUS",
    "audio/wav": "LINEAR16",
}
GOOGLE_MIN_SPEAKERS = 1
GOOGLE_MAX_SPEAKERS = 6

# Translation
TARGET_LANGUAGE = "en"
TRANSLATED_FIELD = "translated_transcript"
GOOGLE_TRANSLATE_URL = "https://translation.googleapis.com/language/translate/v2"
OPENAI_CHAT_MODEL = "gpt-4o-mini"
CLAUDE_CHAT_MODEL = "claude-haiku-4-5-20251001"
CLAUDE_MAX_TOKENS = 4096
TRANSLATION_SYSTEM_PROMPT = (
    "You are a translator. Translate the user's text from the language with "
    "code '%s' into English. Reply with the translation only, no notes."
)

# Log messages
MSG_READING_AUDIO = "Reading %s (%s)"
MSG_SENDING = "→ %s"
MSG_RESPONSE_WRITTEN = "Response written to %s"
MSG_UNKNOWN_PROVIDER = "Unknown provider %r — known providers: %s"
MSG_AUDIO_READ_FAILED = "Could not read audio file %s: %s"
MSG_HTTP_ERROR = "%s request failed with status %s: %s"
MSG_TRANSPORT_ERROR = "%s request failed: %s"
MSG_BAD_RESPONSE = "%s returned an unexpected response: %s"
MSG_TRANSLATING = "Translating transcript from %s"
MSG_TRANSLATION_FAILED = "Translation via %s failed, keeping original text: %s"
MSG_NO_TRANSCRIPT = "No channel transcript to translate: %s"
MSG_RUN_FAILED = "✗ %s failed for %s: %s"
MSG_RUN_OK = "✓ %s finished (%.1fs)"

# Outcome errors
ERR_UNKNOWN_PROVIDER = "unknown provider"
