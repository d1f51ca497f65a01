"""CLI entry point for spanish-deck.

Usage:
  uv run python -m spanish_deck build [WORDS] [DECK] [--format js|json] [--no-smart-pairing]
  uv run python -m spanish_deck check [WORDS]
  uv run python -m spanish_deck serve [--port PORT] [--host HOST]
"""
from __future__ import annotations

import sys
from pathlib import Path


def main():
    args = sys.argv[1:]
    command = args[0] if args else "build"

    if command == "build":
        _build(args[1:])
    elif command == "check":
        _check(args[1:])
    elif command == "serve":
        _serve(args[1:])
    else:
        print(f"Unknown command: {command}")
        print("Commands: build, check, serve")
        sys.exit(1)


def _parse_flag(args: list[str], name: str, default: str) -> str:
    for i, a in enumerate(args):
        if a == name and i + 1 < len(args):
            return args[i + 1]
    return default


def _positionals(args: list[str], valued_flags: tuple[str, ...] = ()) -> list[str]:
    """Arguments that are neither flags nor flag values."""
    out: list[str] = []
    skip = False
    for a in args:
        if skip:
            skip = False
            continue
        if a in valued_flags:
            skip = True
            continue
        if a.startswith("--"):
            continue
        out.append(a)
    return out


def _build(args: list[str]):
    from spanish_deck.config import DECK_FORMATS, load_settings
    from spanish_deck.deck import build_deck_from_file, write_deck

    settings = load_settings()
    paths = _positionals(args, ("--format",))
    words_path = Path(paths[0]) if paths else settings.words_full_path
    deck_path = Path(paths[1]) if len(paths) > 1 else settings.deck_full_path
    fmt = _parse_flag(args, "--format", settings.deck_format)
    if "--no-smart-pairing" in args:
        settings.smart_gendered_slash_pairing = False

    if fmt not in DECK_FORMATS:
        print(f"Unknown format: {fmt} (expected one of: {', '.join(DECK_FORMATS)})")
        sys.exit(1)
    if not words_path.exists():
        print(f"Word list not found: {words_path}")
        sys.exit(1)

    build = build_deck_from_file(words_path, settings)
    write_deck(build, deck_path, fmt, str(words_path))

    print(f"Wrote {len(build.cards)} cards to {deck_path}")
    if build.duplicates:
        print(f"  {build.duplicates} duplicates removed")
    if build.empty_dropped:
        print(f"  {build.empty_dropped} empty cards dropped")
    if build.skipped:
        print(f"  {len(build.skipped)} lines skipped (run 'check' for details)")


def _check(args: list[str]):
    from spanish_deck.config import load_settings
    from spanish_deck.parsers.word_list_parser import parse_word_list_file

    settings = load_settings()
    paths = _positionals(args)
    words_path = Path(paths[0]) if paths else settings.words_full_path
    if not words_path.exists():
        print(f"Word list not found: {words_path}")
        sys.exit(1)

    result = parse_word_list_file(words_path)
    print(f"{words_path.name}: {len(result.entries)} entries, {len(result.skipped)} skipped")
    for s in result.skipped:
        print(f"  line {s.line_number:4d}: {s.reason} — {s.text}")


def _serve(args: list[str]):
    import uvicorn

    port = int(_parse_flag(args, "--port", "8765"))
    host = _parse_flag(args, "--host", "127.0.0.1")

    print(f"Starting Spanish Deck on http://{host}:{port}")
    print("Press Ctrl+C to stop\n")
    uvicorn.run(
        "spanish_deck.app:app",
        host=host,
        port=port,
        reload=False,
        timeout_graceful_shutdown=5,
    )


if __name__ == "__main__":
    main()
