"""Convert a Marp markdown deck to HTML slides using marp-cli."""

from __future__ import annotations

import logging
import shutil
import subprocess
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def check_marp_cli() -> None:
    """Exit with helpful instructions if marp-cli is not available."""
    if shutil.which("npx") is None and shutil.which("marp") is None:
        print(
            "Error: Neither `npx` nor `marp` found on PATH.\n"
            "Install marp-cli with one of:\n"
            "  npm install -g @marp-team/marp-cli\n"
            "  # or use npx (requires Node.js / npm)\n",
            file=sys.stderr,
        )
        sys.exit(1)


def create_html_slides(directory: Path | str, markdown_file: str) -> str:
    """Render *markdown_file* in *directory* to HTML.

    Returns the HTML file name, which marp-cli writes next to the markdown.
    """
    check_marp_cli()

    cmd: list[str]
    if shutil.which("marp"):
        cmd = ["marp"]
    else:
        # --yes auto-accepts the "Need to install @marp-team/marp-cli" prompt
        cmd = ["npx", "--yes", "@marp-team/marp-cli"]
    cmd += [markdown_file, "--no-stdin"]

    logger.debug("marp-cli command: %s", " ".join(cmd))
    print(f"  Running: {' '.join(cmd)}")
    result = subprocess.run(cmd, cwd=Path(directory), capture_output=True, text=True)
    logger.debug("marp-cli stdout: %s", result.stdout)
    logger.debug("marp-cli stderr: %s", result.stderr)
    if result.returncode != 0:
        print("marp-cli stderr:", result.stderr, file=sys.stderr)
        raise RuntimeError(f"marp-cli exited with code {result.returncode}")

    return markdown_file.replace(".md", ".html")
