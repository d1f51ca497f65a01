"""Parse a numbered word list into Entry and Option objects.

Line format:
  27. car - coche - masculine
  29. friend - amigo - masculine / amiga - feminine
  362. congratulations - felicitaciones - plural, feminine
  377. cat - gato/gata - masculine/feminine

The leading number is optional. Lines that do not split into at least an
English and a Spanish part are skipped and reported, never raised.
"""
from __future__ import annotations

import logging
import re
from pathlib import Path

from spanish_deck.models import Entry, Option, ParseResult, SkippedLine

_log = logging.getLogger("spanish_deck.parser")

FIELD_SEP = " - "
OPTION_SEP = " / "

_LABEL_RE = re.compile(r"^\d+\.\s*")
_LINE_BREAK_RE = re.compile(r"\r?\n")
_GENDER_KEYWORD_RE = re.compile(
    r"^(masculine|feminine|masculine/feminine|feminine/masculine|plural.*)$",
    re.IGNORECASE,
)


def normalize_lines(text: str) -> list[tuple[int, str]]:
    """Return (line_number, cleaned_line) for every non-blank line."""
    lines: list[tuple[int, str]] = []
    for number, raw in enumerate(_LINE_BREAK_RE.split(text), start=1):
        line = _LABEL_RE.sub("", raw.strip()).strip()
        if line:
            lines.append((number, line))
    return lines


def split_entry(line: str, line_number: int = 0) -> Entry | SkippedLine:
    parts = [p.strip() for p in line.split(FIELD_SEP)]
    if len(parts) < 2:
        return SkippedLine(line_number, line, "missing ' - ' separator")
    english, spanish_field = parts[0], parts[1]
    if not english:
        return SkippedLine(line_number, line, "empty English term")
    if not spanish_field:
        return SkippedLine(line_number, line, "empty Spanish field")
    return Entry(
        english=english,
        spanish_field=spanish_field,
        gender_field=FIELD_SEP.join(parts[2:]),
        line_number=line_number,
    )


def split_options(spanish_field: str) -> list[str]:
    return [c.strip() for c in spanish_field.split(OPTION_SEP) if c.strip()]


def split_option_gender(chunk: str) -> tuple[str, str]:
    """Split "auto - masculine" into ("auto", "masculine").

    Only a trailing gender keyword counts, so "bien - adverb" is left whole.
    Anything starting with "plural" is accepted as a keyword.
    """
    idx = chunk.rfind(FIELD_SEP)
    while idx != -1:
        tail = chunk[idx + len(FIELD_SEP):].strip()
        if _GENDER_KEYWORD_RE.match(tail):
            return chunk[:idx].strip(), tail
        idx = chunk.rfind(FIELD_SEP, 0, idx)
    return chunk.strip(), ""


def _is_gender_keyword(text: str) -> bool:
    return bool(_GENDER_KEYWORD_RE.match(text.strip()))


def _is_annotated_option_list(gender_field: str) -> bool:
    """True for "masculine / amiga - feminine", false for "masculine / feminine".

    The first chunk must be the first option's own gender keyword, and every
    later chunk must carry Spanish text rather than being a bare keyword.
    """
    chunks = split_options(gender_field)
    if len(chunks) < 2 or not _is_gender_keyword(chunks[0]):
        return False
    for chunk in chunks[1:]:
        spanish, _ = split_option_gender(chunk)
        if not spanish or _is_gender_keyword(spanish):
            return False
    return True


def entry_options(entry: Entry) -> list[Option]:
    """Expand an entry into options, each with its effective gender note."""
    if _is_annotated_option_list(entry.gender_field):
        # "amigo - masculine / amiga - feminine": the entry split cut through
        # a list of individually annotated options.
        field = FIELD_SEP.join([entry.spanish_field, entry.gender_field])
        fallback = ""
    else:
        field = entry.spanish_field
        fallback = entry.gender_field

    options: list[Option] = []
    for chunk in split_options(field):
        spanish, gender = split_option_gender(chunk)
        options.append(Option(spanish=spanish, gender=gender or fallback))
    return options


def parse_word_list(text: str) -> ParseResult:
    result = ParseResult()
    for number, line in normalize_lines(text):
        parsed = split_entry(line, number)
        if isinstance(parsed, SkippedLine):
            _log.debug("Skipping line %d (%s): %s", number, parsed.reason, line)
            result.skipped.append(parsed)
            continue
        result.entries.append(parsed)
    return result


def parse_word_list_file(path: Path) -> ParseResult:
    text = path.read_text(encoding="utf-8-sig")
    return parse_word_list(text)
