"""Tests for the FastAPI application routes."""
from __future__ import annotations

import json
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from spanish_deck import app as app_module
from spanish_deck.app import app
from spanish_deck.config import Settings


@pytest.fixture
def test_app(tmp_settings):
    """Set up test app with temporary settings."""
    # Set globals BEFORE creating TestClient so startup() is a no-op
    app_module._settings = tmp_settings

    with patch("spanish_deck.app.save_settings") as save:
        client = TestClient(app, raise_server_exceptions=False)
        yield client, tmp_settings, save
        client.close()

    app_module._settings = None


class TestDeckAPI:
    def test_api_deck(self, test_app, expected_cards):
        client, _, _ = test_app
        resp = client.get("/api/deck")
        assert resp.status_code == 200
        data = resp.json()
        assert data["cards"] == [c.to_dict() for c in expected_cards]
        assert data["stats"]["duplicates"] == 1
        assert data["skipped"][0]["line_number"] == 7

    def test_deck_js(self, test_app):
        client, _, _ = test_app
        resp = client.get("/deck.js")
        assert resp.status_code == 200
        assert "javascript" in resp.headers["content-type"]
        assert "window.DECK = " in resp.text
        payload = resp.text.split("window.DECK = ", 1)[1].rstrip(";\n")
        assert {"es": "la gata", "en": "cat"} in json.loads(payload)

    def test_missing_words_file(self, test_app, tmp_path):
        client, settings, _ = test_app
        settings.words_file = str(tmp_path / "missing.txt")
        assert client.get("/api/deck").status_code == 404
        assert client.get("/deck.js").status_code == 404


class TestConvertAPI:
    def test_convert(self, test_app):
        client, _, _ = test_app
        resp = client.post("/api/convert", json={"text": "27. car - coche - masculine"})
        assert resp.status_code == 200
        assert resp.json()["cards"] == [{"es": "el coche", "en": "car"}]

    def test_convert_pairing_override(self, test_app):
        client, _, _ = test_app
        resp = client.post("/api/convert", json={
            "text": "377. cat - gato/gata - masculine/feminine",
            "smart_gendered_slash_pairing": False,
        })
        assert [c["es"] for c in resp.json()["cards"]] == [
            "el gato", "la gato", "el gata", "la gata",
        ]

    def test_convert_uses_settings_default(self, test_app):
        client, settings, _ = test_app
        settings.smart_gendered_slash_pairing = False
        resp = client.post("/api/convert", json={"text": "cat - gato/gata - masculine/feminine"})
        assert len(resp.json()["cards"]) == 4

    def test_convert_reports_skipped(self, test_app):
        client, _, _ = test_app
        resp = client.post("/api/convert", json={"text": "garbage\ncar - coche"})
        data = resp.json()
        assert data["cards"] == [{"es": "coche", "en": "car"}]
        assert data["skipped"][0]["text"] == "garbage"
        assert data["stats"]["skipped_lines"] == 1

    def test_convert_missing_text(self, test_app):
        client, _, _ = test_app
        assert client.post("/api/convert", json={}).status_code == 400


class TestSettingsAPI:
    def test_get_settings(self, test_app):
        client, _, _ = test_app
        data = client.get("/api/settings").json()
        assert data["smart_gendered_slash_pairing"] is True
        assert "words_file" in data

    def test_update_settings(self, test_app):
        client, settings, save = test_app
        resp = client.put("/api/settings", json={
            "smart_gendered_slash_pairing": False,
            "unknown": 1,
        })
        assert resp.status_code == 200
        assert resp.json()["smart_gendered_slash_pairing"] is False
        assert "unknown" not in resp.json()
        assert settings.smart_gendered_slash_pairing is False
        save.assert_called_once()

    def test_update_rejects_unknown_format(self, test_app):
        client, settings, save = test_app
        resp = client.put("/api/settings", json={"deck_format": "csv"})
        assert resp.status_code == 400
        assert settings.deck_format == "js"
        save.assert_not_called()


def test_startup_loads_settings(tmp_path):
    app_module._settings = None
    with patch("spanish_deck.app.load_settings", return_value=Settings(words_file="x.txt")):
        with TestClient(app) as client:
            assert client.get("/api/settings").json()["words_file"] == "x.txt"
    app_module._settings = None
