"""Split deck text into a header and ordered slide contents."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .models import DELIMITER_RE

logger = logging.getLogger(__name__)

# Characters trimmed from each segment.
_SEGMENT_STRIP = " \t\r\n"


@dataclass(frozen=True)
class Segments:
    header: str = ""
    slide_contents: list[str] = field(default_factory=list)


def is_delimiter_line(line: str) -> bool:
    """Return True if *line* is three or more ``-`` with optional surrounding whitespace."""
    return DELIMITER_RE.match(line.strip()) is not None


def _split_pieces(raw: str) -> tuple[list[str], bool]:
    """Split *raw* on delimiter lines.

    Returns the non-blank trimmed pieces and whether the first non-blank
    line of the text was a delimiter.
    """
    pieces: list[str] = []
    current: list[str] = []
    starts_with_delimiter: bool | None = None

    # Split on "\n" only; a trailing "\r" is removed by strip() below.
    for line in raw.split("\n"):
        delimiter = is_delimiter_line(line)
        if starts_with_delimiter is None and line.strip():
            starts_with_delimiter = delimiter
        if delimiter:
            pieces.append("\n".join(current))
            current = []
        else:
            current.append(line)
    pieces.append("\n".join(current))

    trimmed = [p.strip(_SEGMENT_STRIP) for p in pieces]
    return [p for p in trimmed if p.strip()], bool(starts_with_delimiter)


def segment(raw: str) -> Segments:
    """Segment deck text into a header and slide contents.

    When the text opens with a delimiter line the first non-blank piece is
    the header and the rest are slides.  Otherwise there is no header and
    every non-blank piece is a slide.  Blank pieces never become slides.
    """
    if not raw.strip():
        return Segments()

    pieces, has_header = _split_pieces(raw)
    if not pieces:
        return Segments()

    if has_header:
        segments = Segments(header=pieces[0], slide_contents=pieces[1:])
    else:
        segments = Segments(header="", slide_contents=pieces)
    logger.debug(
        "Segmented deck: header=%d chars, %d slide(s)",
        len(segments.header), len(segments.slide_contents),
    )
    return segments
