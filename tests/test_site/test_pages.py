"""
tests/test_site/test_pages.py - Tests for the server-rendered catalog page.
"""

from __future__ import annotations

from fastapi.testclient import TestClient

from helpshelf_shared.config import settings
from helpshelf_site.app import create_app
from helpshelf_site.routers.pages import build_page_context, page_state
from helpshelf_site.services.catalog_service import Catalog
from helpshelf_site.services.filters import CatalogFilters


class TestPageState:
    def test_states(self, catalog):
        assert page_state(None, 0) == "onboarding"
        assert page_state(Catalog.from_resources([]), 0) == "empty"
        assert page_state(catalog, 0) == "no_matches"
        assert page_state(catalog, 3) == "results"

    def test_context_for_feeling(self, catalog):
        ctx = build_page_context(catalog, CatalogFilters().select_feeling("timeblind"))
        assert ctx["state"] == "results"
        assert ctx["matched_count"] == 1
        assert ctx["catalog_size"] == 5
        section, cards = ctx["sections"][0]
        assert section.key == "time"
        assert [c.id for c in cards] == ["time-timer"]


class TestIndexPage:
    def test_onboarding_when_no_file(self, no_data_client):
        resp = no_data_client.get("/")
        assert resp.status_code == 200
        assert f"Welcome to {settings.site_title}" in resp.text
        assert "No resources yet" in resp.text
        assert "helpshelf-pipeline build-data" in resp.text

    def test_empty_catalog(self):
        client = TestClient(create_app(catalog=Catalog.from_resources([])))
        resp = client.get("/")
        assert resp.status_code == 200
        assert "No approved resources found" in resp.text

    def test_results(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        assert "A gentle library of things that help" in resp.text
        assert "5 of 5 resources" in resp.text
        for key in ("featured", "time", "getting_started", "community", "other"):
            assert f'id="section-{key}"' in resp.text
        assert "Clear all filters" not in resp.text

    def test_cards_render(self, client):
        text = client.get("/").text
        assert 'id="focus-timer"' in text
        assert "Show details" in text
        assert "Good for:" in text
        assert "+1 more" in text  # time-timer has three needs
        assert "s2/favicons?domain=example.com" in text

    def test_no_matches(self, client):
        resp = client.get("/", params={"q": "zzzz"})
        assert resp.status_code == 200
        assert "No matches found" in resp.text
        assert "Clear filters and start over" in resp.text
        assert 'id="section-' not in resp.text

    def test_feeling_preset_active(self, client):
        resp = client.get(
            "/",
            params=[("feeling", "timeblind"), ("need", "time_blindness"), ("need", "transitioning")],
        )
        assert "1 of 5 resources" in resp.text
        assert 'id="section-time"' in resp.text
        assert "Filtering by:" in resp.text
        assert "Clear all filters" in resp.text
        assert 'href="/" class="muted"' in resp.text

    def test_feeling_without_its_needs_is_ignored(self, client):
        resp = client.get("/", params={"feeling": "timeblind"})
        assert "5 of 5 resources" in resp.text
        assert "Clear all filters" not in resp.text

    def test_search_value_kept_in_form(self, client):
        resp = client.get("/", params={"q": "timer"})
        assert 'value="timer"' in resp.text
        assert "2 of 5 resources" in resp.text

    def test_unknown_query_values_ignored(self, client):
        resp = client.get("/", params={"category": "gadget", "price": "cheap"})
        assert "5 of 5 resources" in resp.text
