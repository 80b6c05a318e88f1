"""
Construction de la page de demonstration.

Cree un VirtualDocument contenant, pour chaque route, l'element ecoute
(formulaire ou bouton) et sa zone d'affichage. Les champs des formulaires
sont crees vides ; l'appelant les remplit avant de soumettre.
"""

from typing import Optional

from src.adapters.dom.virtual_document import VirtualDocument, VirtualElement, VirtualForm
from src.services.form_handlers import FORM_ROUTES, FormRoute


def build_demo_document(
    routes: Optional[tuple[FormRoute, ...]] = None,
) -> VirtualDocument:
    """
    Construit le document avec les formulaires et zones d'affichage.

    Args:
        routes: Routes a inclure (defaut: toutes)

    Returns:
        VirtualDocument pret a recevoir les handlers
    """
    document = VirtualDocument()
    for route in routes if routes is not None else FORM_ROUTES:
        if route.event == "submit":
            document.add(VirtualForm(route.element_id, fields={name: "" for name in route.fields}))
        else:
            document.add(VirtualElement(route.element_id, tag="button"))
        document.add(VirtualElement(route.region, tag="pre"))
    return document
