"""
Document en memoire pour executer les handlers hors navigateur.

- VirtualDocument : document, recherche par id/selecteur, distribution d'evenements
- VirtualElement / VirtualForm : elements et formulaires
- build_demo_document : page complete avec tous les formulaires
"""

from src.adapters.dom.virtual_document import (
    DomEvent,
    VirtualDocument,
    VirtualElement,
    VirtualForm,
)

__all__ = [
    "DomEvent",
    "VirtualDocument",
    "VirtualElement",
    "VirtualForm",
]
