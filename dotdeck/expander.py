"""Expand dot diagram blocks in a deck into rendered image references."""

from __future__ import annotations

import logging
from functools import reduce
from typing import Protocol

from .deck import Deck
from .diagrams import find_blocks

logger = logging.getLogger(__name__)


class RenderFailure(RuntimeError):
    """A diagram could not be rendered."""

    def __init__(self, name: str, message: str):
        super().__init__(f"Failed to render diagram {name}: {message}")
        self.name = name


class DiagramRenderer(Protocol):
    def render(self, name: str, body: str) -> str:
        """Render graph *body* and return the image file name (no directory)."""
        ...


def image_reference(filename: str) -> str:
    """Markdown image line pointing at a rendered diagram beside the deck."""
    return f"\n![Diagram](./{filename})\n"


def expand_diagrams(deck: Deck, renderer: DiagramRenderer) -> Deck:
    """Return a new deck with every dot block replaced by an image reference.

    Blocks are rendered one at a time in order of occurrence; a renderer
    error propagates and no partial result is produced.  Each replacement
    substitutes *all* occurrences of the block's exact text, so identical
    blocks share the first one's image.
    """
    content = deck.content
    blocks = find_blocks(content)
    if not blocks:
        return deck

    replacements: list[tuple[str, str]] = []
    for block in blocks:
        filename = renderer.render(block.name, block.body)
        logger.debug("Rendered diagram %s to %s", block.name, filename)
        replacements.append((block.matched_text, image_reference(filename)))

    result = reduce(lambda text, r: text.replace(r[0], r[1]), replacements, content)
    logger.info("Replaced %d dot diagram(s)", len(replacements))
    return Deck(result)
