"""
Container d'injection de dependances via dependency-injector.

Fournit la configuration, le client HTTP vers le backend et la page de
demonstration aux commandes CLI.
"""

from dependency_injector import containers, providers

from .adapters.api.client import create_http_client
from .adapters.dom.demo_page import build_demo_document
from .config import Settings


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        document = container.document()
        async with container.http_client() as client:
            register_handlers(document, client)
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Client HTTP - nouvelle instance a chaque appel, fermee par l'appelant
    http_client = providers.Factory(
        create_http_client,
        base_url=config.provided.api_base_url,
    )

    # Page de demonstration - document neuf a chaque appel
    document = providers.Factory(build_demo_document)
