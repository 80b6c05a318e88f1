"""
Interfaces ports pour le document affiche.

Le document est l'environnement dans lequel vivent les formulaires et les
zones d'affichage. Les services (affichage, binder, handlers de formulaires)
ne dependent que de ces contrats, ce qui permet de les tester avec un
document en memoire au lieu d'un vrai moteur de rendu.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Mapping, Optional

# Un ecouteur recoit l'evenement et peut retourner une coroutine a lancer.
EventListener = Callable[[Any], Any]


class IElement(ABC):
    """
    Element du document.

    Un element expose son identifiant, un contenu texte modifiable et
    l'enregistrement d'ecouteurs d'evenements.
    """

    @property
    @abstractmethod
    def element_id(self) -> Optional[str]:
        """Identifiant de l'element (attribut id), ou None."""
        ...

    @property
    @abstractmethod
    def text_content(self) -> str:
        """Contenu texte de l'element."""
        ...

    @text_content.setter
    @abstractmethod
    def text_content(self, value: str) -> None:
        ...

    @abstractmethod
    def add_event_listener(self, event_name: str, listener: EventListener) -> None:
        """
        Attache un ecouteur pour un type d'evenement.

        Args :
            event_name : Type d'evenement ("submit", "click", ...)
            listener : Callable recevant l'evenement
        """
        ...


class IDocument(ABC):
    """
    Interface de base pour un document.

    Fournit les deux recherches dont la couche d'orchestration a besoin :
    par identifiant et par selecteur. Les deux retournent None en l'absence
    de correspondance, jamais une exception.
    """

    @abstractmethod
    def get_element_by_id(self, element_id: str) -> Optional[IElement]:
        """
        Recherche un element par son identifiant.

        Retourne :
            L'element, ou None s'il n'existe pas
        """
        ...

    @abstractmethod
    def query_selector(self, selector: str) -> Optional[IElement]:
        """
        Recherche le premier element correspondant au selecteur.

        Args :
            selector : Selecteur simple ("#id", "tag" ou "tag#id")

        Retourne :
            Le premier element correspondant, ou None
        """
        ...


class IFormElement(IElement):
    """Element formulaire exposant les valeurs de ses champs."""

    @abstractmethod
    def form_data(self) -> Mapping[str, str]:
        """
        Retourne les valeurs brutes des champs (nom -> texte).

        Un champ absent n'apparait pas dans le mapping.
        """
        ...
