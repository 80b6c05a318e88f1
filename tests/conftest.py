"""
Fixtures pytest partagees pour les tests Streamflix.

Ce module contient les fixtures communes utilisees dans les tests:
- Page de demonstration avec tous les formulaires
- Client HTTP pointe vers un backend fictif (intercepte par respx)
- Settings de test avec fichier de log temporaire
"""

from pathlib import Path

import httpx
import pytest

from src.adapters.dom.demo_page import build_demo_document
from src.adapters.dom.virtual_document import VirtualDocument
from src.config import Settings
from tests.fixtures.api_responses import API_BASE_URL


@pytest.fixture
def document() -> VirtualDocument:
    """Page de demonstration complete, champs vides."""
    return build_demo_document()


@pytest.fixture
def api_client() -> httpx.AsyncClient:
    """
    Client HTTP vers le backend fictif.

    Les appels sont interceptes par respx dans les tests decores @respx.mock.
    """
    return httpx.AsyncClient(base_url=API_BASE_URL)


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings de test avec un fichier de log dans tmp_path."""
    return Settings(
        api_base_url=API_BASE_URL,
        log_level="DEBUG",
        log_file=tmp_path / "test.log",
    )
