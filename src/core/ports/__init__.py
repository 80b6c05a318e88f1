"""
Ports (interfaces abstraites) definissant les contrats pour les adaptateurs.

Ports document : ce dont les handlers ont besoin de la page
- IDocument : Recherche d'elements par id et par selecteur
- IElement : Contenu texte et ecouteurs d'evenements
- IFormElement : Element exposant les valeurs de ses champs
"""

from src.core.ports.document import EventListener, IDocument, IElement, IFormElement

__all__ = [
    "EventListener",
    "IDocument",
    "IElement",
    "IFormElement",
]
