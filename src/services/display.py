"""
Ecriture des resultats dans les zones d'affichage du document.
"""

import json
from typing import Any

from src.core.ports.document import IDocument


def _as_js_numbers(value: Any) -> Any:
    """Ecrit les floats entiers sans partie decimale (1.0 -> 1), recursivement."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, dict):
        return {key: _as_js_numbers(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_as_js_numbers(item) for item in value]
    return value


def render(data: Any) -> str:
    """Texte affiche pour une valeur : verbatim pour une chaine, JSON indente sinon."""
    if isinstance(data, str):
        return data
    return json.dumps(_as_js_numbers(data), indent=2, ensure_ascii=False)


def show(document: IDocument, target_id: str, data: Any) -> None:
    """
    Remplace le contenu texte d'une zone d'affichage.

    Ne fait rien si la zone n'existe pas dans le document.

    Args:
        document: Document contenant la zone
        target_id: Identifiant de la zone d'affichage
        data: Chaine ou donnees structurees a afficher
    """
    element = document.get_element_by_id(target_id)
    if element is None:
        return
    element.text_content = render(data)
