from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Entry:
    english: str
    spanish_field: str
    gender_field: str
    line_number: int = 0


@dataclass
class Option:
    spanish: str
    gender: str  # effective note: own annotation, or inherited from the entry


@dataclass(frozen=True)
class Card:
    en: str
    es: str

    @property
    def key(self) -> tuple[str, str]:
        return (self.en, self.es)

    def to_dict(self) -> dict:
        # Viewer expects es before en
        return {"es": self.es, "en": self.en}


@dataclass
class SkippedLine:
    line_number: int
    text: str
    reason: str

    def to_dict(self) -> dict:
        return {
            "line_number": self.line_number,
            "text": self.text,
            "reason": self.reason,
        }


@dataclass
class ParseResult:
    entries: list[Entry] = field(default_factory=list)
    skipped: list[SkippedLine] = field(default_factory=list)


@dataclass
class DeckBuild:
    cards: list[Card]
    skipped: list[SkippedLine]
    generated: int  # cards before dedup
    duplicates: int
    empty_dropped: int = 0

    def stats(self) -> dict:
        return {
            "cards": len(self.cards),
            "generated": self.generated,
            "duplicates": self.duplicates,
            "empty_dropped": self.empty_dropped,
            "skipped_lines": len(self.skipped),
        }
