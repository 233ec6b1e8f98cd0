"""Shared data models and parsing constants."""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class Slide:
    """Projection of one slide within a deck snapshot.

    ``number`` counts from 1 and is only meaningful relative to the deck the
    slide was read from.
    """

    number: int
    content: str


@dataclass(frozen=True)
class DiagramBlock:
    name: str
    body: str
    matched_text: str


# A delimiter line: three or more dashes and nothing else once trimmed.
DELIMITER_RE = re.compile(r"^-{3,}$")

# Start of a diagram block, up to and including the opening brace:
# optional ``` fence, "dot", whitespace, "digraph", whitespace, name, whitespace.
DIAGRAM_HEAD_RE = re.compile(r"(```)?dot\s+digraph\s+(\w+)\s+\{")

# Whatever may follow the closing brace: trailing whitespace and an optional fence.
DIAGRAM_TAIL_RE = re.compile(r"\s*(```)?")
