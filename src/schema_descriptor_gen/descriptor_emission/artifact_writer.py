"""Generated artifact writing service."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

LOGGER = logging.getLogger(__name__)


class EmissionError(Exception):
    """Raised when the generated artifact cannot be written."""


@dataclass(frozen=True)
class WrittenArtifact:
    """Result of writing one generated artifact."""

    path: Path
    changed: bool


def write_artifact(text: str, output_path: Path | str) -> WrittenArtifact:
    """Write ``text`` to ``output_path`` unless the file already holds it.

    Leaving an identical file untouched keeps its mtime stable for the
    downstream build step.

    Raises:
      EmissionError: If the destination cannot be read or written.
    """
    destination = Path(output_path)
    try:
        if destination.exists() and destination.read_text(encoding="utf-8") == text:
            LOGGER.info("Generated artifact unchanged: %s", destination)
            return WrittenArtifact(path=destination.resolve(), changed=False)
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(text, encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise EmissionError(f"Failed to write generated artifact {destination}: {exc}") from exc
    LOGGER.info("Wrote generated artifact: %s", destination)
    return WrittenArtifact(path=destination.resolve(), changed=True)
