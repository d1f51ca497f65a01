"""Turn one (English, Spanish, gender note) triple into flashcards."""
from __future__ import annotations

import re
from typing import Callable

from spanish_deck.gender import GenderNote, parse_gender_note
from spanish_deck.models import Card

ARTICLES_RE = re.compile(r"^(el|la|los|las|un|una|unos|unas)\s+", re.IGNORECASE)


def has_article(es: str) -> bool:
    return bool(ARTICLES_RE.match(es))


def add_article(es: str, article: str) -> str:
    s = es.strip()
    if not article or not s or has_article(s):
        return s
    return f"{article} {s}"


def expand_slash_forms(es: str) -> list[str]:
    """Split a single-token slash form ("gato/gata") into its parts.

    Text with a space is a phrase and is never split.
    """
    s = es.strip()
    if "/" not in s or " " in s:
        return [s]
    parts = [p.strip() for p in s.split("/") if p.strip()]
    return parts or [s]


def is_gendered_slash_pair(es: str) -> bool:
    return " " not in es.strip() and len(expand_slash_forms(es)) == 2


# ── Mixed-gender pairing strategies ──────────────────────────────────────
#
# A strategy receives the Spanish text and the note, and returns the articled
# Spanish forms in output order.

PairingStrategy = Callable[[str, GenderNote], list[str]]


def cross_product_pairing(es: str, note: GenderNote) -> list[str]:
    """Every expanded form with the masculine, then the feminine article."""
    out: list[str] = []
    for form in expand_slash_forms(es):
        out.append(add_article(form, note.masculine_article))
        out.append(add_article(form, note.feminine_article))
    return out


def positional_pairing(es: str, note: GenderNote) -> list[str]:
    """Treat "gato/gata" as masculine first, feminine second.

    This matches the usual noun/noun+a convention of the word lists but is
    not a grammatical check: "actriz/actor" would be mis-assigned. Anything
    other than a one-token, two-part slash form uses the cross product.
    """
    if not is_gendered_slash_pair(es):
        return cross_product_pairing(es, note)
    masc, fem = expand_slash_forms(es)
    return [
        add_article(masc, note.masculine_article),
        add_article(fem, note.feminine_article),
    ]


def pairing_strategy(smart_pairing: bool) -> PairingStrategy:
    return positional_pairing if smart_pairing else cross_product_pairing


def make_cards(
    english: str,
    spanish: str,
    gender_note: str = "",
    smart_pairing: bool = True,
) -> list[Card]:
    en = english.strip()
    note = parse_gender_note(gender_note)

    if note.is_mixed:
        forms = pairing_strategy(smart_pairing)(spanish, note)
    else:
        forms = [add_article(f, note.article) for f in expand_slash_forms(spanish)]

    return [Card(en=en, es=es) for es in forms]
