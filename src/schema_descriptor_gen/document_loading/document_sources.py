"""Schema document source entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

GITHUB_ENTERPRISE_CLOUD_DESCRIPTION_URL = (
    "https://github.com/github/rest-api-description/raw/refs/heads/main/"
    "descriptions/ghec/ghec.yaml"
)
DEFAULT_TIMEOUT_SECONDS = 60


class SourceKind(str, Enum):
    """Where the schema document is loaded from."""

    URL = "url"
    FILE = "file"


@dataclass(frozen=True)
class DocumentSource:
    """Exactly one of a remote URL or a local file path."""

    url: str | None = None
    path: Path | None = None

    def __post_init__(self) -> None:
        if (self.url is None) == (self.path is None):
            raise ValueError("Document source requires exactly one of url or path.")

    @property
    def kind(self) -> SourceKind:
        return SourceKind.URL if self.url is not None else SourceKind.FILE

    def describe(self) -> str:
        return self.url if self.url is not None else str(self.path)
