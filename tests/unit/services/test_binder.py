"""
Tests unitaires pour l'attachement garde des handlers.
"""

from src.adapters.dom.virtual_document import VirtualDocument, VirtualElement, VirtualForm
from src.services.binder import bind


class TestBind:
    """Tests pour bind."""

    def test_attaches_handler_when_element_exists(self) -> None:
        document = VirtualDocument()
        form = document.add(VirtualForm("form-rate"))
        calls = []

        element = bind(document, "#form-rate", "submit", calls.append)
        document.dispatch_event(form, "submit")

        assert element is form
        assert len(calls) == 1

    def test_missing_element_returns_none_without_error(self) -> None:
        document = VirtualDocument()
        assert bind(document, "#form-absent", "submit", lambda event: None) is None

    def test_missing_element_does_not_affect_other_bindings(self) -> None:
        document = VirtualDocument()
        button = document.add(VirtualElement("btn-demo-singleton", tag="button"))
        clicks = []

        bind(document, "#form-absent", "submit", lambda event: None)
        bind(document, "#btn-demo-singleton", "click", clicks.append)
        document.dispatch_event(button, "click")

        assert len(clicks) == 1

    def test_binds_first_matching_element_only(self) -> None:
        document = VirtualDocument()
        first = document.add(VirtualForm("a"))
        second = document.add(VirtualForm("b"))
        calls = []

        bind(document, "form", "submit", calls.append)
        document.dispatch_event(second, "submit")
        document.dispatch_event(first, "submit")

        assert [event.target for event in calls] == [first]
