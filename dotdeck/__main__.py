"""dotdeck — Inspect and rewrite Marp markdown decks, expanding dot diagrams to images."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from .deck import Deck
from .diagrams import find_blocks
from .dot_renderer import DotCliRenderer, check_dot_cli
from .expander import RenderFailure
from .formatter import create_html_slides
from .models import Slide
from .persister import FilePersister, with_diagrams_output_file

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def _configure_logging(log_file: str | None, verbose: bool) -> None:
    root = logging.getLogger("dotdeck")
    root.setLevel(logging.DEBUG)
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        root.addHandler(file_handler)
    if verbose:
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setLevel(logging.DEBUG)
        stream_handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        root.addHandler(stream_handler)


def _load_deck(input_path: Path) -> Deck:
    if not input_path.is_file():
        print(f"Error: {input_path} not found.", file=sys.stderr)
        sys.exit(1)
    return Deck(input_path.read_text(encoding="utf-8"))


def _save_deck(deck: Deck, output_path: Path) -> None:
    FilePersister().save_file(output_path.parent, output_path.name, deck.content)
    print(f"Output: {output_path}")


def _summary(content: str, width: int = 60) -> str:
    first_line = content.splitlines()[0] if content else ""
    return first_line if len(first_line) <= width else first_line[: width - 1] + "…"


def _cmd_info(args: argparse.Namespace) -> None:
    deck = _load_deck(Path(args.input))
    header = deck.header()
    print("Header:")
    print(header if header else "  (none)")
    slides = deck.slides()
    print(f"Slides: {len(slides)}")
    for slide in slides:
        print(f"  {slide.number:3d}. {_summary(slide.content)}")
    blocks = find_blocks(deck.content)
    if blocks:
        print(f"Diagrams: {', '.join(b.name for b in blocks)}")


def _cmd_set_header(args: argparse.Namespace) -> None:
    input_path = Path(args.input)
    deck = _load_deck(input_path)
    if args.header_file:
        header_path = Path(args.header_file)
        if not header_path.is_file():
            print(f"Error: header file {header_path} not found.", file=sys.stderr)
            sys.exit(1)
        header = header_path.read_text(encoding="utf-8")
    else:
        header = args.header
    updated = deck.with_header(header)
    logger.info("Replaced header of %s (%d slides)", input_path, updated.slide_count())
    _save_deck(updated, Path(args.output) if args.output else input_path)


def _cmd_replace_slide(args: argparse.Namespace) -> None:
    input_path = Path(args.input)
    deck = _load_deck(input_path)
    content_path = Path(args.content_file)
    if not content_path.is_file():
        print(f"Error: content file {content_path} not found.", file=sys.stderr)
        sys.exit(1)
    new_content = content_path.read_text(encoding="utf-8").strip()

    count = deck.slide_count()
    if args.number < 1 or args.number > count:
        print(
            f"Warning: slide {args.number} requested but deck has {count} slide(s); "
            "nothing replaced.",
            file=sys.stderr,
        )
    updated = deck.replace_slide(Slide(number=args.number, content=""), new_content)
    _save_deck(updated, Path(args.output) if args.output else input_path)


def _cmd_expand(args: argparse.Namespace) -> None:
    input_path = Path(args.input)
    deck = _load_deck(input_path)

    if args.output:
        output_path = Path(args.output)
    else:
        output_path = input_path.parent / with_diagrams_output_file(input_path.name)
    diagram_dir = Path(args.diagram_dir) if args.diagram_dir else output_path.parent

    if find_blocks(deck.content) and not args.fallback:
        check_dot_cli()

    renderer = DotCliRenderer(diagram_dir, fmt=args.format, timeout=args.timeout)
    t0 = time.monotonic()
    try:
        expanded = deck.expand_diagrams(renderer)
    except RenderFailure as exc:
        previous = None
        if args.fallback:
            previous = FilePersister().load_file(output_path.parent, output_path.name)
        if previous is None:
            print(f"Error: {exc}", file=sys.stderr)
            sys.exit(1)
        logger.warning("Rendering failed (%s); keeping previous %s", exc, output_path)
        print(f"Warning: {exc}\n  Keeping previously expanded deck: {output_path}", file=sys.stderr)
        return
    logger.info("Expansion completed in %.2fs", time.monotonic() - t0)

    _save_deck(expanded, output_path)
    print(f"  {expanded.slide_count()} slides, diagrams in {diagram_dir}")


def _cmd_html(args: argparse.Namespace) -> None:
    input_path = Path(args.input)
    if not input_path.is_file():
        print(f"Error: {input_path} not found.", file=sys.stderr)
        sys.exit(1)
    html_file = create_html_slides(input_path.parent, input_path.name)
    print(f"Output: {input_path.parent / html_file}")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dotdeck",
        description="Inspect and rewrite Marp markdown decks, expanding dot diagrams to images.",
    )
    parser.add_argument("--log-file", help="Write a debug log to this file")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Log debug output to stderr")
    sub = parser.add_subparsers(dest="command", required=True)

    info = sub.add_parser("info", help="Show the header and slides of a deck")
    info.add_argument("input", help="Path to the .md deck")
    info.set_defaults(func=_cmd_info)

    set_header = sub.add_parser("set-header", help="Replace the deck header")
    set_header.add_argument("input", help="Path to the .md deck")
    header_source = set_header.add_mutually_exclusive_group(required=True)
    header_source.add_argument("--header", help="New header text")
    header_source.add_argument("--header-file", help="Read the new header from a file")
    set_header.add_argument("--output", help="Output path (default: overwrite input)")
    set_header.set_defaults(func=_cmd_set_header)

    replace = sub.add_parser("replace-slide", help="Replace the content of one slide")
    replace.add_argument("input", help="Path to the .md deck")
    replace.add_argument("number", type=int, help="Slide number (1-based)")
    replace.add_argument("--content-file", required=True,
                         help="File holding the new slide content")
    replace.add_argument("--output", help="Output path (default: overwrite input)")
    replace.set_defaults(func=_cmd_replace_slide)

    expand = sub.add_parser("expand", help="Render dot diagrams and reference the images")
    expand.add_argument("input", help="Path to the .md deck")
    expand.add_argument("--output", help="Output path (default: <input>.withDiagrams.md)")
    expand.add_argument("--diagram-dir",
                        help="Where to write diagram images (default: beside the output). "
                             "Images are referenced as ./<file>, so they must be moved "
                             "beside the output if this differs")
    expand.add_argument("--format", default="svg",
                        help="Image format passed to dot -T (default: svg)")
    expand.add_argument("--timeout", type=float, default=60.0,
                        help="Seconds to wait for each dot run (default: 60)")
    expand.add_argument("--fallback", action="store_true",
                        help="Keep a previously expanded output if rendering fails")
    expand.set_defaults(func=_cmd_expand)

    html = sub.add_parser("html", help="Convert the deck to HTML slides with marp-cli")
    html.add_argument("input", help="Path to the .md deck")
    html.set_defaults(func=_cmd_html)

    return parser


def main(argv: list[str] | None = None) -> None:
    args = _build_parser().parse_args(argv)
    _configure_logging(args.log_file, args.verbose)
    logger.info("CLI arguments: %s", vars(args))

    try:
        args.func(args)
    except Exception:
        logger.exception("Command %s failed", args.command)
        raise


if __name__ == "__main__":
    main()
