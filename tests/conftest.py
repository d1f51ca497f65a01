"""Shared test fixtures."""
from __future__ import annotations

import pytest

from spanish_deck.config import Settings
from spanish_deck.models import Card


@pytest.fixture
def words_txt_content():
    """A small word list covering every annotation style."""
    return """\
27. car - coche - masculine / auto - masculine
29. friend - amigo - masculine / amiga - feminine
35. baby - bebé - masculine/feminine
362. congratulations - felicitaciones - plural, feminine
377. cat - gato/gata - masculine/feminine

this line is garbage
27. car - coche - masculine
"""


@pytest.fixture
def expected_cards():
    """Deck built from words_txt_content with smart pairing on."""
    return [
        Card("car", "el coche"),
        Card("car", "el auto"),
        Card("friend", "el amigo"),
        Card("friend", "la amiga"),
        Card("baby", "el bebé"),
        Card("baby", "la bebé"),
        Card("congratulations", "las felicitaciones"),
        Card("cat", "el gato"),
        Card("cat", "la gata"),
    ]


@pytest.fixture
def words_file(tmp_path, words_txt_content):
    f = tmp_path / "words.txt"
    f.write_text(words_txt_content, encoding="utf-8")
    return f


@pytest.fixture
def tmp_settings(tmp_path, words_file):
    """Settings pointing at temporary files."""
    return Settings(
        words_file=str(words_file),
        deck_file=str(tmp_path / "deck.js"),
    )
