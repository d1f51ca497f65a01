"""Build a deduplicated deck from word-list text and write it for the viewer."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Iterable

from spanish_deck.cards import make_cards
from spanish_deck.config import DECK_FORMATS
from spanish_deck.models import Card, DeckBuild
from spanish_deck.parsers.word_list_parser import entry_options, parse_word_list

if TYPE_CHECKING:
    from spanish_deck.config import Settings

_log = logging.getLogger("spanish_deck.deck")


def dedupe_cards(cards: Iterable[Card]) -> list[Card]:
    """Drop exact (en, es) repeats, keeping the first occurrence."""
    seen: set[tuple[str, str]] = set()
    unique: list[Card] = []
    for card in cards:
        if card.key in seen:
            continue
        seen.add(card.key)
        unique.append(card)
    return unique


def build_deck(text: str, smart_pairing: bool = True, drop_empty: bool = True) -> DeckBuild:
    parsed = parse_word_list(text)

    generated: list[Card] = []
    for entry in parsed.entries:
        for option in entry_options(entry):
            generated.extend(
                make_cards(entry.english, option.spanish, option.gender, smart_pairing)
            )

    empty_dropped = 0
    if drop_empty:
        kept = [c for c in generated if c.en and c.es]
        empty_dropped = len(generated) - len(kept)
        generated = kept

    cards = dedupe_cards(generated)
    build = DeckBuild(
        cards=cards,
        skipped=parsed.skipped,
        generated=len(generated),
        duplicates=len(generated) - len(cards),
        empty_dropped=empty_dropped,
    )
    _log.info(
        "Built %d cards from %d entries (%d duplicates, %d skipped lines)",
        len(cards), len(parsed.entries), build.duplicates, len(parsed.skipped),
    )
    return build


def build_deck_from_file(path: Path, settings: Settings) -> DeckBuild:
    text = path.read_text(encoding="utf-8-sig")
    return build_deck(
        text,
        smart_pairing=settings.smart_gendered_slash_pairing,
        drop_empty=settings.drop_empty_cards,
    )


def render_deck(cards: list[Card], fmt: str = "js", source: str = "") -> str:
    if fmt not in DECK_FORMATS:
        raise ValueError(f"Unknown deck format: {fmt}")
    body = json.dumps([c.to_dict() for c in cards], indent=2, ensure_ascii=False)
    if fmt == "json":
        return body + "\n"
    return f"// Generated from {source}\nwindow.DECK = {body};\n"


def write_deck(build: DeckBuild, path: Path, fmt: str = "js", source: str = "") -> Path:
    path.write_text(render_deck(build.cards, fmt, source), encoding="utf-8")
    _log.info("Wrote %d cards to %s", len(build.cards), path)
    return path
