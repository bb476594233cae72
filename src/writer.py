"""ResultWriter — serializes vendor responses to the output directory."""
import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable

from src.constants import MSG_RESPONSE_WRITTEN, OUTPUT_EXTENSION, OUTPUT_TIMESTAMP_FORMAT

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def output_filename(hint: str, suffix: str = "", timestamp: str | None = None) -> str:
    parts = [hint] + [p for p in (suffix, timestamp) if p]
    return "-".join(parts) + OUTPUT_EXTENSION


class ResultWriter:

    def __init__(self, output_dir: str | Path, clock: Callable[[], datetime] = _utc_now) -> None:
        self._output_dir = Path(output_dir)
        self._clock = clock

    def write(self, data: Any, filename_hint: str, suffix: str = "", timestamped: bool = False) -> Path:
        self._output_dir.mkdir(parents=True, exist_ok=True)
        timestamp = self._clock().strftime(OUTPUT_TIMESTAMP_FORMAT) if timestamped else None
        path = self._output_dir / output_filename(filename_hint, suffix, timestamp)
        path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
        logger.info(MSG_RESPONSE_WRITTEN, path)
        return path
