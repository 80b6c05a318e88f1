"""
Attachement garde des ecouteurs d'evenements.

Une meme configuration de handlers peut etre appliquee a des pages qui
n'affichent qu'une partie des formulaires : l'absence d'un element n'est
pas une erreur et n'empeche pas les autres attachements.
"""

from typing import Optional

from loguru import logger

from src.core.ports.document import EventListener, IDocument, IElement


def bind(
    document: IDocument,
    selector: str,
    event_name: str,
    handler: EventListener,
) -> Optional[IElement]:
    """
    Attache un handler au premier element correspondant au selecteur.

    Args:
        document: Document a interroger
        selector: Selecteur de l'element cible
        event_name: Type d'evenement ("submit", "click")
        handler: Ecouteur a attacher

    Returns:
        L'element sur lequel le handler a ete attache, ou None si absent
    """
    element = document.query_selector(selector)
    if element is None:
        logger.debug("Element absent, handler non attache", selector=selector)
        return None

    element.add_event_listener(event_name, handler)
    return element
