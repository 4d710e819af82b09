"""Generation run entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class GenerationRequest:
    """Input contract for one generation run."""

    config_path: str
    output_path: str | None = None


@dataclass(frozen=True)
class GenerationOutcome:
    """Output contract for one completed generation run."""

    output_path: Path
    schema_count: int
    changed: bool
