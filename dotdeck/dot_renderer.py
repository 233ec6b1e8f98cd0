"""Render dot diagrams to image files using the GraphViz ``dot`` CLI."""

from __future__ import annotations

import logging
import shutil
import subprocess
import sys
from pathlib import Path

from .expander import RenderFailure

logger = logging.getLogger(__name__)

# Longest stderr excerpt carried into a RenderFailure message.
_MAX_DETAIL = 240


def check_dot_cli() -> None:
    """Exit with helpful instructions if GraphViz ``dot`` is not available."""
    if shutil.which("dot") is None:
        print(
            "Error: `dot` not found on PATH.\n"
            "Install GraphViz:\n"
            "  macOS:   brew install graphviz\n"
            "  Ubuntu:  sudo apt install graphviz\n"
            "  Windows: https://graphviz.org/download/\n",
            file=sys.stderr,
        )
        sys.exit(1)


class DotCliRenderer:
    """Renders each diagram to ``<directory>/<name>.<fmt>``."""

    def __init__(self, directory: Path | str, fmt: str = "svg", timeout: float = 60.0):
        self.directory = Path(directory)
        self.fmt = fmt
        self.timeout = timeout

    def render(self, name: str, body: str) -> str:
        output_file = f"{name}.{self.fmt}"
        self.directory.mkdir(parents=True, exist_ok=True)

        cmd = ["dot", f"-T{self.fmt}", "-o", output_file]
        logger.info("Expanding diagram to %s", self.directory / output_file)
        logger.debug("dot command: %s\n%s", " ".join(cmd), body)
        try:
            result = subprocess.run(
                cmd,
                input=body,
                capture_output=True,
                text=True,
                cwd=self.directory,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as exc:
            raise RenderFailure(name, f"dot timed out after {self.timeout:g}s") from exc
        except OSError as exc:
            raise RenderFailure(name, f"failed to execute dot: {exc}") from exc

        logger.debug("dot stderr: %s", result.stderr)
        if result.returncode != 0:
            detail = (result.stderr or "").strip()
            if len(detail) > _MAX_DETAIL:
                detail = detail[:_MAX_DETAIL] + "..."
            raise RenderFailure(
                name,
                f"dot exited with code {result.returncode}: {detail or 'unknown error'}",
            )
        return output_file
