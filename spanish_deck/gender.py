"""Classify free-text gender notes and pick Spanish definite articles.

Notes are matched by case-insensitive substring, so "masculine/feminine",
"feminine/masculine" and "plural, masculine and feminine" all classify as
mixed. Nothing here understands Spanish; only the keywords matter.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache


class Gender(Enum):
    MASCULINE = "masculine"
    FEMININE = "feminine"
    MIXED = "mixed"
    AMBIGUOUS = "ambiguous"


# (gender, plural) -> article. Mixed and ambiguous both map to "" here;
# mixed notes are expanded by the card expander using the per-gender articles.
ARTICLES = {
    (Gender.MASCULINE, False): "el",
    (Gender.FEMININE, False): "la",
    (Gender.MASCULINE, True): "los",
    (Gender.FEMININE, True): "las",
    (Gender.MIXED, False): "",
    (Gender.MIXED, True): "",
    (Gender.AMBIGUOUS, False): "",
    (Gender.AMBIGUOUS, True): "",
}


@dataclass(frozen=True)
class GenderNote:
    plural: bool
    has_masculine: bool
    has_feminine: bool
    raw: str = ""

    @property
    def gender(self) -> Gender:
        if self.has_masculine and self.has_feminine:
            return Gender.MIXED
        if self.has_masculine:
            return Gender.MASCULINE
        if self.has_feminine:
            return Gender.FEMININE
        return Gender.AMBIGUOUS

    @property
    def is_mixed(self) -> bool:
        return self.gender is Gender.MIXED

    @property
    def article(self) -> str:
        """Single definite article, or "" when mixed or undetermined."""
        return ARTICLES[(self.gender, self.plural)]

    @property
    def masculine_article(self) -> str:
        return ARTICLES[(Gender.MASCULINE, self.plural)]

    @property
    def feminine_article(self) -> str:
        return ARTICLES[(Gender.FEMININE, self.plural)]


@lru_cache(maxsize=256)
def parse_gender_note(note: str | None) -> GenderNote:
    g = (note or "").strip().lower()
    return GenderNote(
        plural="plural" in g,
        has_masculine="masculine" in g,
        has_feminine="feminine" in g,
        raw=note or "",
    )
