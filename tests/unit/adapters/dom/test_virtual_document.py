"""
Tests unitaires pour le document en memoire.

Verifie:
- recherche par id et par selecteur, None si absent
- distribution synchrone des ecouteurs et lancement des coroutines en taches
- wait_idle attend toutes les taches en vol
- la page de demonstration contient tous les formulaires et zones
"""

import asyncio

import pytest

from src.adapters.dom.demo_page import build_demo_document
from src.adapters.dom.virtual_document import VirtualDocument, VirtualElement, VirtualForm
from src.core.ports.document import IDocument, IFormElement
from src.services.form_handlers import FORM_ROUTES


class TestLookup:
    """Tests pour get_element_by_id et query_selector."""

    def test_implements_document_port(self) -> None:
        assert isinstance(VirtualDocument(), IDocument)

    def test_get_element_by_id(self) -> None:
        document = VirtualDocument()
        region = document.add(VirtualElement("res-watch"))
        assert document.get_element_by_id("res-watch") is region
        assert document.get_element_by_id("res-rate") is None

    def test_query_selector_by_id(self) -> None:
        document = VirtualDocument()
        form = document.add(VirtualForm("form-rate"))
        assert document.query_selector("#form-rate") is form
        assert document.query_selector("#form-missing") is None

    def test_query_selector_by_tag_returns_first(self) -> None:
        document = VirtualDocument()
        first = document.add(VirtualForm("form-a"))
        document.add(VirtualForm("form-b"))
        assert document.query_selector("form") is first
        assert document.query_selector("form#form-b").element_id == "form-b"
        assert document.query_selector("button") is None

    def test_empty_selector_matches_nothing(self) -> None:
        document = VirtualDocument()
        document.add(VirtualElement("x"))
        assert document.query_selector("") is None


class TestVirtualForm:
    """Tests pour VirtualForm."""

    def test_implements_form_port(self) -> None:
        assert isinstance(VirtualForm("f"), IFormElement)

    def test_absent_field_is_distinct_from_empty(self) -> None:
        form = VirtualForm("f", fields={"title": ""})
        data = form.form_data()
        assert data.get("title") == ""
        assert data.get("genre") is None

    def test_form_data_is_a_snapshot(self) -> None:
        form = VirtualForm("f", fields={"id": "1"})
        data = form.form_data()
        form.set_field("id", "2")
        form.remove_field("missing")
        assert data["id"] == "1"
        assert form.form_data()["id"] == "2"


class TestDispatch:
    """Tests pour dispatch_event et wait_idle."""

    def test_sync_listener_runs_immediately(self) -> None:
        document = VirtualDocument()
        button = document.add(VirtualElement("btn", tag="button"))
        seen = []
        button.add_event_listener("click", lambda event: seen.append(event.type))

        event = document.dispatch_event(button, "click")

        assert seen == ["click"]
        assert event.spawned == []
        assert event.default_prevented is False

    def test_other_event_types_are_ignored(self) -> None:
        document = VirtualDocument()
        form = document.add(VirtualForm("f"))
        seen = []
        form.add_event_listener("submit", lambda event: seen.append(event))

        document.dispatch_event(form, "reset")

        assert seen == []

    @pytest.mark.asyncio
    async def test_coroutine_listener_is_spawned_as_task(self) -> None:
        document = VirtualDocument()
        form = document.add(VirtualForm("f"))
        region = document.add(VirtualElement("res"))
        release = asyncio.Event()

        async def finish() -> None:
            await release.wait()
            region.text_content = "done"

        def listener(event):
            event.prevent_default()
            return finish()

        form.add_event_listener("submit", listener)
        event = document.dispatch_event(form, "submit")

        assert event.default_prevented is True
        assert len(event.spawned) == 1
        assert document.in_flight == 1
        assert region.text_content == ""

        release.set()
        await document.wait_idle()

        assert region.text_content == "done"
        assert document.in_flight == 0

    @pytest.mark.asyncio
    async def test_wait_idle_without_tasks_returns(self) -> None:
        await VirtualDocument().wait_idle()


class TestDemoPage:
    """Tests pour build_demo_document."""

    def test_every_route_has_element_and_region(self) -> None:
        document = build_demo_document()
        for route in FORM_ROUTES:
            assert document.query_selector(route.selector) is not None, route.name
            assert document.get_element_by_id(route.region) is not None, route.name

    def test_forms_have_empty_fields(self) -> None:
        document = build_demo_document()
        form = document.get_element_by_id("form-movie")
        assert isinstance(form, VirtualForm)
        assert form.form_data()["durationMinutes"] == ""

    def test_buttons_are_not_forms(self) -> None:
        document = build_demo_document()
        button = document.get_element_by_id("btn-demo-singleton")
        assert not isinstance(button, VirtualForm)
        assert button.tag == "button"

    def test_subset_of_routes(self) -> None:
        document = build_demo_document(routes=FORM_ROUTES[:1])
        assert document.get_element_by_id("form-register") is not None
        assert document.get_element_by_id("form-movie") is None
