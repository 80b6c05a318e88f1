"""
Utilitaires partages pour les commandes CLI de Streamflix.

Ce module fournit :
- console : instance Rich Console partagee
- with_container : decorateur injectant un container en premier argument
- parse_field_assignments : lecture des options --field nom=valeur
- run_route : remplissage, soumission et attente d'un formulaire de la page
"""

from functools import wraps
from typing import Optional

import typer
from rich.console import Console

from src.adapters.dom.virtual_document import VirtualDocument, VirtualForm
from src.container import Container
from src.services.form_handlers import FormRoute, register_handlers

console = Console()


def with_container():
    """
    Decorateur qui injecte un container neuf en premier argument.

    Usage:
        @with_container()
        async def my_command(container, ...):
            config = container.config()
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            container = Container()
            return await func(container, *args, **kwargs)
        return wrapper
    return decorator


def parse_field_assignments(assignments: list[str], route: FormRoute) -> dict[str, str]:
    """
    Convertit des options "nom=valeur" en dictionnaire de champs.

    Args:
        assignments: Valeurs brutes des options --field
        route: Route dont les champs sont acceptes

    Returns:
        Dictionnaire nom -> valeur (valeur vide autorisee)

    Raises:
        typer.BadParameter: Si une option est mal formee ou vise un champ inconnu
    """
    values: dict[str, str] = {}
    for assignment in assignments:
        name, sep, value = assignment.partition("=")
        if not sep or not name:
            raise typer.BadParameter(
                f"Format attendu nom=valeur, recu '{assignment}'", param_hint="--field"
            )
        if name not in route.fields:
            known = ", ".join(route.fields) or "aucun"
            raise typer.BadParameter(
                f"Champ '{name}' inconnu pour '{route.name}' (champs: {known})",
                param_hint="--field",
            )
        values[name] = value
    return values


async def run_route(
    container: Container,
    route: FormRoute,
    values: Optional[dict[str, str]] = None,
) -> str:
    """
    Soumet un formulaire (ou clique un bouton) de la page de demonstration.

    Attend la fin de l'appel au backend et retourne le contenu de la zone
    d'affichage de la route.
    """
    document: VirtualDocument = container.document()
    target = document.get_element_by_id(route.element_id)
    if isinstance(target, VirtualForm):
        for name, value in (values or {}).items():
            target.set_field(name, value)

    async with container.http_client() as client:
        register_handlers(document, client)
        document.dispatch_event(target, route.event)
        await document.wait_idle()

    return document.get_element_by_id(route.region).text_content
