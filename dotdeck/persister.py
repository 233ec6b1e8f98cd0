"""Save and load deck files."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def with_diagrams_output_file(output_file: str) -> str:
    """File name for the interim copy of a deck with diagrams expanded."""
    return output_file.replace(".md", ".withDiagrams.md")


class FilePersister:
    """Reads and writes UTF-8 deck files relative to a directory."""

    def save_file(self, directory: Path | str, file_name: str, content: str) -> Path:
        path = Path(directory) / file_name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        logger.info("Saved %s (%d chars)", path, len(content))
        return path

    def load_file(self, directory: Path | str, file_name: str) -> str | None:
        """Return the file content, or None if the file does not exist."""
        path = Path(directory) / file_name
        if not path.is_file():
            logger.debug("No file at %s", path)
            return None
        return path.read_text(encoding="utf-8")
