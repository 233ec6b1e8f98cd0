"""Slide deck value type: header, numbered slides and pure rewrites."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .models import Slide
from .segmenter import segment

if TYPE_CHECKING:
    from .expander import DiagramRenderer

logger = logging.getLogger(__name__)

SEPARATOR = "\n---\n"


def _assemble(header: str, slide_contents: list[str]) -> str:
    """Rebuild deck text in normalized form: header block, then slides.

    An empty header gets no header block, so the first slide is not read
    back as the header.
    """
    if not header:
        return SEPARATOR.join(slide_contents).rstrip()
    if not slide_contents:
        return f"---\n{header}\n".rstrip()
    return f"---\n{header}{SEPARATOR}{SEPARATOR.join(slide_contents)}\n".rstrip()


@dataclass(frozen=True)
class Deck:
    """Markdown slide deck in the ``---`` delimited (Marp) dialect.

    The header and slides are derived from ``raw`` on every access, so
    slide numbers are always ``1..N`` for the current text.  Every
    rewrite returns a new ``Deck``.
    """

    raw: str

    @property
    def content(self) -> str:
        return self.raw

    def header(self) -> str:
        return segment(self.raw).header

    def slides(self) -> list[Slide]:
        contents = segment(self.raw).slide_contents
        return [Slide(number=i, content=c) for i, c in enumerate(contents, start=1)]

    def slide_count(self) -> int:
        return len(self.slides())

    def with_header(self, header: str) -> Deck:
        """Return a deck with *header* and this deck's slides, normalized."""
        contents = [s.content for s in self.slides()]
        return Deck(_assemble(header.strip(), contents))

    def replace_slide(self, slide: Slide, new_content: str) -> Deck:
        """Return a deck with the slide numbered like *slide* replaced.

        Matching is by number only.  An out-of-range number returns this
        deck unchanged.
        """
        slides = self.slides()
        if not slides or slide.number < 1 or slide.number > len(slides):
            logger.debug(
                "Slide %d not in deck of %d slide(s); leaving deck unchanged",
                slide.number, len(slides),
            )
            return self

        contents = [
            new_content if s.number == slide.number else s.content
            for s in slides
        ]
        return Deck(_assemble(self.header(), contents))

    def expand_diagrams(self, renderer: DiagramRenderer) -> Deck:
        """Replace embedded dot diagrams with image references."""
        from .expander import expand_diagrams

        return expand_diagrams(self, renderer)
