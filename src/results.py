"""Explicit success/failure values passed between adapters, dispatcher and CLI."""
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional


@dataclass(frozen=True)
class TranscriptionResult:
    data: Any = None
    error: Optional[str] = None
    status_code: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, data: Any) -> "TranscriptionResult":
        return cls(data=data)

    @classmethod
    def failure(cls, error: str, status_code: Optional[int] = None) -> "TranscriptionResult":
        return cls(error=error, status_code=status_code)


@dataclass(frozen=True)
class DispatchOutcome:
    provider: str
    output_path: Optional[Path] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None
