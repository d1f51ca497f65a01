from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.json"

DECK_FORMATS = ("js", "json")

DEFAULTS = {
    "smart_gendered_slash_pairing": True,
    "words_file": "words.txt",
    "deck_file": "deck.js",
    "deck_format": "js",
    "drop_empty_cards": True,
}


@dataclass
class Settings:
    smart_gendered_slash_pairing: bool = DEFAULTS["smart_gendered_slash_pairing"]
    words_file: str = DEFAULTS["words_file"]
    deck_file: str = DEFAULTS["deck_file"]
    deck_format: str = DEFAULTS["deck_format"]
    drop_empty_cards: bool = DEFAULTS["drop_empty_cards"]

    @property
    def project_root(self) -> Path:
        return Path(__file__).resolve().parent.parent

    def _resolve(self, name: str) -> Path:
        p = Path(name)
        return p if p.is_absolute() else self.project_root / p

    @property
    def words_full_path(self) -> Path:
        return self._resolve(self.words_file)

    @property
    def deck_full_path(self) -> Path:
        return self._resolve(self.deck_file)

    def to_dict(self) -> dict:
        return {
            "smart_gendered_slash_pairing": self.smart_gendered_slash_pairing,
            "words_file": self.words_file,
            "deck_file": self.deck_file,
            "deck_format": self.deck_format,
            "drop_empty_cards": self.drop_empty_cards,
        }


def load_settings() -> Settings:
    if CONFIG_PATH.exists():
        raw = json.loads(CONFIG_PATH.read_text())
        known = {f.name for f in Settings.__dataclass_fields__.values()}
        filtered = {k: v for k, v in raw.items() if k in known}
        return Settings(**filtered)
    return Settings()


def save_settings(settings: Settings) -> None:
    CONFIG_PATH.write_text(json.dumps(settings.to_dict(), indent=4) + "\n")
