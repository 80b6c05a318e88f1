"""
Document en memoire implementant IDocument.

Reproduit le modele d'execution d'une page :
- dispatch_event appelle chaque ecouteur de facon synchrone
- si un ecouteur retourne une coroutine, elle est lancee comme tache
  asyncio independante (fire-and-forget, sans annulation)
- wait_idle() attend la fin de toutes les taches en vol

Usage:
    document = VirtualDocument()
    form = document.add(VirtualForm("form-get-user", fields={"id": "1"}))
    document.add(VirtualElement("res-get-user"))
    document.dispatch_event(form, "submit")
    await document.wait_idle()
"""

import asyncio
import inspect
from dataclasses import dataclass, field
from typing import Optional

from src.core.ports.document import EventListener, IDocument, IElement, IFormElement


@dataclass
class DomEvent:
    """
    Evenement distribue a un element.

    Attributes:
        type: Type d'evenement ("submit", "click")
        target: Element cible
        default_prevented: True si un ecouteur a appele prevent_default()
        spawned: Taches lancees par les ecouteurs pour cet evenement
    """

    type: str
    target: "VirtualElement"
    default_prevented: bool = False
    spawned: list[asyncio.Task] = field(default_factory=list)

    def prevent_default(self) -> None:
        """Supprime l'action par defaut (navigation/soumission)."""
        self.default_prevented = True


class VirtualElement(IElement):
    """Element generique : zone d'affichage, bouton, etc."""

    def __init__(self, element_id: Optional[str] = None, tag: str = "div") -> None:
        self._element_id = element_id
        self.tag = tag
        self._text_content = ""
        self._listeners: dict[str, list[EventListener]] = {}

    @property
    def element_id(self) -> Optional[str]:
        return self._element_id

    @property
    def text_content(self) -> str:
        return self._text_content

    @text_content.setter
    def text_content(self, value: str) -> None:
        self._text_content = value

    def add_event_listener(self, event_name: str, listener: EventListener) -> None:
        self._listeners.setdefault(event_name, []).append(listener)

    def listeners(self, event_name: str) -> list[EventListener]:
        """Retourne une copie des ecouteurs attaches pour ce type d'evenement."""
        return list(self._listeners.get(event_name, []))

    def matches(self, selector: str) -> bool:
        """
        Verifie si l'element correspond a un selecteur simple.

        Formes supportees : "#id", "tag", "tag#id".
        """
        tag, _, element_id = selector.partition("#")
        if tag and tag != self.tag:
            return False
        if element_id and element_id != self._element_id:
            return False
        return bool(tag or element_id)

    def __repr__(self) -> str:
        return f"<{self.tag} id={self._element_id!r}>"


class VirtualForm(VirtualElement, IFormElement):
    """
    Formulaire avec ses champs (nom -> texte brut).

    Un champ absent est distinct d'un champ vide : form_data().get()
    retourne None pour le premier et "" pour le second.
    """

    def __init__(
        self,
        element_id: Optional[str] = None,
        fields: Optional[dict[str, str]] = None,
    ) -> None:
        super().__init__(element_id, tag="form")
        self._fields: dict[str, str] = dict(fields or {})

    def set_field(self, name: str, value: str) -> None:
        self._fields[name] = value

    def remove_field(self, name: str) -> None:
        self._fields.pop(name, None)

    def form_data(self) -> dict[str, str]:
        """Instantane des valeurs des champs au moment de l'appel."""
        return dict(self._fields)


class VirtualDocument(IDocument):
    """
    Document en memoire.

    Les elements sont conserves dans l'ordre d'ajout, ce qui determine
    le resultat de query_selector quand plusieurs elements correspondent.
    """

    def __init__(self) -> None:
        self._elements: list[VirtualElement] = []
        self._pending: set[asyncio.Task] = set()

    def add(self, element: VirtualElement) -> VirtualElement:
        """Ajoute un element au document et le retourne."""
        self._elements.append(element)
        return element

    def get_element_by_id(self, element_id: str) -> Optional[VirtualElement]:
        for element in self._elements:
            if element.element_id == element_id:
                return element
        return None

    def query_selector(self, selector: str) -> Optional[VirtualElement]:
        for element in self._elements:
            if element.matches(selector):
                return element
        return None

    def dispatch_event(self, target: VirtualElement, event_type: str) -> DomEvent:
        """
        Distribue un evenement aux ecouteurs de la cible.

        Doit etre appele depuis une boucle asyncio active des qu'un
        ecouteur retourne une coroutine.

        Args:
            target: Element recevant l'evenement
            event_type: Type d'evenement

        Returns:
            L'evenement, avec les taches lancees dans event.spawned
        """
        event = DomEvent(type=event_type, target=target)
        for listener in target.listeners(event_type):
            result = listener(event)
            if inspect.isawaitable(result):
                task = asyncio.ensure_future(result)
                self._pending.add(task)
                task.add_done_callback(self._pending.discard)
                event.spawned.append(task)
        return event

    @property
    def in_flight(self) -> int:
        """Nombre de taches encore en cours."""
        return len(self._pending)

    async def wait_idle(self) -> None:
        """Attend la fin de toutes les taches en vol, y compris celles lancees entre-temps."""
        while self._pending:
            await asyncio.gather(*list(self._pending))
