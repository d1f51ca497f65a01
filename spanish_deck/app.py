"""FastAPI application: convert word lists and serve the deck to the viewer."""
from __future__ import annotations

import logging

logging.basicConfig(level=logging.INFO, format="%(name)s | %(message)s")

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse, Response

from spanish_deck.config import DECK_FORMATS, Settings, load_settings, save_settings
from spanish_deck.deck import build_deck, build_deck_from_file, render_deck
from spanish_deck.models import DeckBuild

app = FastAPI(title="Spanish Deck")

_settings: Settings | None = None
_log = logging.getLogger("spanish_deck.api")


def get_settings() -> Settings:
    assert _settings is not None
    return _settings


@app.on_event("startup")
async def startup():
    global _settings
    if _settings is not None:
        return  # Already initialized (e.g. by tests)
    _settings = load_settings()
    _log.info("Serving deck from %s", _settings.words_full_path)


def _build_payload(build: DeckBuild) -> dict:
    return {
        "cards": [c.to_dict() for c in build.cards],
        "skipped": [s.to_dict() for s in build.skipped],
        "stats": build.stats(),
    }


def _build_configured_deck() -> DeckBuild:
    s = get_settings()
    path = s.words_full_path
    if not path.exists():
        raise HTTPException(404, f"Word list not found: {s.words_file}")
    return build_deck_from_file(path, s)


# ── Deck ──────────────────────────────────────────────────────────────────

@app.get("/deck.js")
async def deck_script():
    s = get_settings()
    build = _build_configured_deck()
    body = render_deck(build.cards, "js", s.words_file)
    return Response(body, media_type="application/javascript")


@app.get("/api/deck")
async def api_deck():
    return _build_payload(_build_configured_deck())


@app.post("/api/convert")
async def api_convert(request: Request):
    body = await request.json() if await request.body() else {}
    text = body.get("text")
    if not isinstance(text, str):
        raise HTTPException(400, "Field 'text' must be a string")

    s = get_settings()
    smart = body.get("smart_gendered_slash_pairing", s.smart_gendered_slash_pairing)
    build = build_deck(text, smart_pairing=bool(smart), drop_empty=s.drop_empty_cards)
    return _build_payload(build)


# ── Settings ──────────────────────────────────────────────────────────────

@app.get("/api/settings")
async def api_get_settings():
    return get_settings().to_dict()


@app.put("/api/settings")
async def api_update_settings(request: Request):
    body = await request.json()
    fmt = body.get("deck_format")
    if fmt is not None and fmt not in DECK_FORMATS:
        return JSONResponse({"error": f"Unknown deck format: {fmt}"}, status_code=400)

    s = get_settings()
    known = {f.name for f in Settings.__dataclass_fields__.values()}
    for k, v in body.items():
        if k in known:
            setattr(s, k, v)
    save_settings(s)
    return s.to_dict()
