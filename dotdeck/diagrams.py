"""Locate embedded GraphViz dot diagram blocks in deck text."""

from __future__ import annotations

import logging

from .models import DIAGRAM_HEAD_RE, DIAGRAM_TAIL_RE, DiagramBlock

logger = logging.getLogger(__name__)


def _find_closing_brace(text: str, open_index: int) -> int | None:
    """Return the index of the ``}`` closing the brace at *open_index*.

    Nested braces are counted and braces inside double-quoted strings are
    ignored.  If the braces never balance, the first ``}`` after the opening
    one is used instead.  Returns None when there is no ``}`` at all.
    """
    depth = 0
    in_string = False
    i = open_index
    while i < len(text):
        ch = text[i]
        if in_string:
            if ch == "\\":
                i += 1
            elif ch == '"':
                in_string = False
        elif ch == '"':
            in_string = True
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return i
        i += 1

    first = text.find("}", open_index + 1)
    return first if first != -1 else None


def find_blocks(text: str) -> list[DiagramBlock]:
    """Find every dot diagram block in *text*, in order of occurrence.

    A block looks like ``dot digraph Name { ... }``, optionally wrapped in
    ``` fences (either, both or neither).  ``matched_text`` is the exact
    source substring, fences and trailing whitespace included, and ``body``
    is the brace expression with ``digraph`` put back in front of it.
    """
    blocks: list[DiagramBlock] = []
    pos = 0
    while True:
        head = DIAGRAM_HEAD_RE.search(text, pos)
        if head is None:
            break

        open_index = head.end() - 1
        close_index = _find_closing_brace(text, open_index)
        if close_index is None:
            logger.debug("Unterminated diagram %r at offset %d", head.group(2), head.start())
            pos = head.start() + 1
            continue

        tail = DIAGRAM_TAIL_RE.match(text, close_index + 1)
        end = tail.end()
        block = DiagramBlock(
            name=head.group(2),
            body=f"digraph {text[open_index:close_index + 1]}",
            matched_text=text[head.start():end],
        )
        logger.debug("Found diagram %s at offset %d", block.name, head.start())
        blocks.append(block)
        pos = end

    logger.info("Found %d diagram block(s)", len(blocks))
    return blocks
