"""Shared fixtures for dotdeck tests."""

from __future__ import annotations

import textwrap
from unittest.mock import MagicMock

import pytest


# ---------------------------------------------------------------------------
# Decks (strings) used across multiple test modules
# ---------------------------------------------------------------------------

PARIS = textwrap.dedent("""\
    ---
    marp: true
    theme: default
    paginate: false
    class: invert
    size: 16:9
    style: |
      img {background-color: transparent!important;}
      a:hover, a:active, a:focus {text-decoration: none;}
      header a {color: #ffffff !important; font-size: 30px;}
      footer {color: #148ec8;}
    footer: "(c) Example 2025"
    ---

    # Paris 9th Arrondissement

    ## A 3-Day Itinerary

    ---

    # Introduction

    Welcome to the heart of Paris' 9th arrondissement.
    A blend of culture, cuisine, shopping, and history awaits.

    ---

    # Why the 9th Arrondissement?

    - Vibrant cultural scene
    - Historic landmarks
    - Authentic Parisian experiences""")

FENCED_DIAGRAM = textwrap.dedent("""\
    ```dot
    digraph PresentationMaker {
      PresentationRequest -> identifyResearchTopics -> researchTopics -> createDeck
      createDeck -> Deck
      saveDeck -> FileSystem
      FilePersister -> saveDeck
    }
    ```
    """)

BARE_DIAGRAM = textwrap.dedent("""\
    dot digraph PresentationMaker {
      identifyResearchTopics -> researchTopics -> createDeck -> convertToSlides;
    }
    """)


@pytest.fixture
def paris():
    return PARIS


@pytest.fixture
def paris_with_diagram():
    """PARIS plus a fourth slide holding a fenced diagram."""
    return PARIS + "\n\n---\n" + FENCED_DIAGRAM + "\n"


@pytest.fixture
def paris_with_bare_diagram():
    """PARIS plus a fourth slide holding an unfenced diagram."""
    return PARIS + "\n\n---\n" + BARE_DIAGRAM


@pytest.fixture
def stub_renderer():
    """Renderer double returning ``<name>.svg`` for every diagram."""
    renderer = MagicMock()
    renderer.render.side_effect = lambda name, body: f"{name}.svg"
    return renderer


@pytest.fixture
def tmp_deck(tmp_path):
    """Write PARIS to a temp file and return its path."""
    p = tmp_path / "deck.md"
    p.write_text(PARIS, encoding="utf-8")
    return p
