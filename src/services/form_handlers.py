"""
Handlers de formulaires : de la soumission a l'affichage du resultat.

Chaque fonctionnalite interactive est decrite par une FormRoute :
- selecteur de l'element et type d'evenement ecoute
- zone d'affichage cible
- champs lus et construction de la requete (methode, chemin, corps)

Tous les handlers suivent le meme cycle Idle -> En vol -> Idle :
1. prevent_default() sur l'evenement
2. lecture des champs du formulaire
3. construction du payload avec coercion des valeurs
4. appel de get_json/post_json dans une tache lancee par le document
5. affichage du resultat, ou de "Error: <description>" en cas d'echec

La partie synchrone (etapes 1 a 3) s'execute pendant dispatch_event,
comme un handler de navigateur jusqu'a son premier await.
"""

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

import httpx

from src.adapters.api.client import get_json, post_json
from src.adapters.api.errors import ApiError
from src.core.entities.payloads import (
    RatingEvent,
    RecommendationQuery,
    TvSeriesCreate,
    UserRegistration,
    WatchEvent,
    movie_create,
)
from src.core.ports.document import EventListener, IDocument, IFormElement
from src.core.value_objects.coercion import format_number, to_completed, to_number
from src.services.binder import bind
from src.services.display import show

FormFields = Mapping[str, str]


@dataclass(frozen=True)
class ApiRequest:
    """Requete a envoyer au backend."""

    method: str
    path: str
    body: Any = None


RequestBuilder = Callable[[FormFields], ApiRequest]


# Constructeurs de requetes


def build_register_request(fields: FormFields) -> ApiRequest:
    registration = UserRegistration(
        username=fields.get("username"),
        email=fields.get("email"),
        password=fields.get("password"),
        tier=fields.get("tier"),
    )
    return ApiRequest("POST", "/api/users/register", registration.to_payload())


def build_get_user_request(fields: FormFields) -> ApiRequest:
    user_id = to_number(fields.get("id"))
    return ApiRequest("GET", f"/api/users/{format_number(user_id)}")


def build_movie_request(fields: FormFields) -> ApiRequest:
    """Film : la duree vient du champ durationMinutes, le realisateur vide devient "Unknown"."""
    movie = movie_create(
        title=fields.get("title"),
        description=fields.get("description"),
        genre=fields.get("genre"),
        release_year=to_number(fields.get("releaseYear")),
        duration=to_number(fields.get("durationMinutes")),
        director=fields.get("director"),
    )
    return ApiRequest("POST", "/api/content", movie.to_payload())


def build_tv_series_request(fields: FormFields) -> ApiRequest:
    """Serie : le nombre d'episodes par saison vient du champ totalEpisodes."""
    series = TvSeriesCreate(
        title=fields.get("title"),
        description=fields.get("description"),
        genre=fields.get("genre"),
        release_year=to_number(fields.get("releaseYear")),
        seasons=to_number(fields.get("seasons")),
        episodes_per_season=to_number(fields.get("totalEpisodes")),
    )
    return ApiRequest("POST", "/api/content", series.to_payload())


def build_get_content_request(fields: FormFields) -> ApiRequest:
    content_id = to_number(fields.get("id"))
    return ApiRequest("GET", f"/api/content/{format_number(content_id)}")


def build_watch_request(fields: FormFields) -> ApiRequest:
    event = WatchEvent(
        user_id=to_number(fields.get("userId")),
        content_id=to_number(fields.get("contentId")),
        progress=to_number(fields.get("progressSeconds")),
        completed=to_completed(fields.get("completed")),
    )
    return ApiRequest("POST", "/api/videos/watch", event.to_payload())


def build_rate_request(fields: FormFields) -> ApiRequest:
    rating = RatingEvent(
        user_id=to_number(fields.get("userId")),
        content_id=to_number(fields.get("contentId")),
        score=to_number(fields.get("rating")),
    )
    return ApiRequest("POST", "/api/videos/rate", rating.to_payload())


def build_recommendations_request(fields: FormFields) -> ApiRequest:
    query = RecommendationQuery(
        user_id=to_number(fields.get("userId")),
        limit=to_number(fields.get("limit")),
    )
    return ApiRequest("GET", query.to_path())


def _fixed_get(path: str) -> RequestBuilder:
    """Constructeur pour un GET sans parametre (sondes de diagnostic)."""

    def build(fields: FormFields) -> ApiRequest:
        return ApiRequest("GET", path)

    return build


@dataclass(frozen=True)
class FormRoute:
    """
    Description statique d'un handler.

    Attributes:
        name: Nom court de la route (utilise par la CLI)
        selector: Selecteur de l'element ecoute
        region: Identifiant de la zone d'affichage
        build: Construction de la requete a partir des champs
        fields: Champs lus dans le formulaire
        event: Type d'evenement ecoute
        pending_message: Message provisoire affiche avant l'appel (sondes)
    """

    name: str
    selector: str
    region: str
    build: RequestBuilder
    fields: tuple[str, ...] = ()
    event: str = "submit"
    pending_message: Optional[str] = None

    @property
    def element_id(self) -> str:
        return self.selector.lstrip("#")


CONTENT_FIELDS = ("title", "description", "genre", "releaseYear")

FORM_ROUTES: tuple[FormRoute, ...] = (
    FormRoute(
        name="register",
        selector="#form-register",
        region="res-register",
        build=build_register_request,
        fields=("username", "email", "password", "tier"),
    ),
    FormRoute(
        name="get-user",
        selector="#form-get-user",
        region="res-get-user",
        build=build_get_user_request,
        fields=("id",),
    ),
    FormRoute(
        name="movie",
        selector="#form-movie",
        region="res-movie",
        build=build_movie_request,
        fields=CONTENT_FIELDS + ("durationMinutes", "director"),
    ),
    FormRoute(
        name="tv",
        selector="#form-tv",
        region="res-tv",
        build=build_tv_series_request,
        fields=CONTENT_FIELDS + ("seasons", "totalEpisodes"),
    ),
    FormRoute(
        name="get-content",
        selector="#form-get-content",
        region="res-get-content",
        build=build_get_content_request,
        fields=("id",),
    ),
    FormRoute(
        name="watch",
        selector="#form-watch",
        region="res-watch",
        build=build_watch_request,
        fields=("userId", "contentId", "progressSeconds", "completed"),
    ),
    FormRoute(
        name="rate",
        selector="#form-rate",
        region="res-rate",
        build=build_rate_request,
        fields=("userId", "contentId", "rating"),
    ),
    FormRoute(
        name="reco",
        selector="#form-reco",
        region="res-reco",
        build=build_recommendations_request,
        fields=("userId", "limit"),
    ),
    FormRoute(
        name="demo-singleton",
        selector="#btn-demo-singleton",
        region="res-demo-singleton",
        build=_fixed_get("/api/demo/singleton-test"),
        event="click",
        pending_message="Running singleton test...",
    ),
    FormRoute(
        name="demo-full",
        selector="#btn-demo-full",
        region="res-demo-full",
        build=_fixed_get("/api/demo/full"),
        event="click",
        pending_message="Running full demo...",
    ),
)


def find_route(name: str) -> Optional[FormRoute]:
    """Retourne la route portant ce nom, ou None."""
    for route in FORM_ROUTES:
        if route.name == name:
            return route
    return None


class FormHandlers:
    """
    Fabrique des ecouteurs relies a un document et a un client HTTP.

    Les handlers ne partagent aucun etat : chacun n'ecrit que dans sa
    propre zone d'affichage, les soumissions concurrentes sont donc sans
    verrou. Pour une meme zone, la derniere reponse arrivee l'emporte.

    Example:
        async with create_http_client(settings.api_base_url) as client:
            handlers = FormHandlers(document, client)
            handlers.register_all()
    """

    def __init__(self, document: IDocument, client: httpx.AsyncClient) -> None:
        self._document = document
        self._client = client

    def listener(self, route: FormRoute) -> EventListener:
        """
        Cree l'ecouteur d'une route.

        L'ecouteur execute la partie synchrone du handler et retourne la
        coroutine d'appel au backend, que le document lance comme tache.
        """

        def on_event(event):
            event.prevent_default()
            target = event.target
            fields = target.form_data() if isinstance(target, IFormElement) else {}
            request = route.build(fields)
            if route.pending_message is not None:
                show(self._document, route.region, route.pending_message)
            return self.perform(route, request)

        return on_event

    async def perform(self, route: FormRoute, request: ApiRequest) -> None:
        """Execute la requete et affiche le resultat ou l'erreur dans la zone de la route."""
        try:
            if request.method == "GET":
                data = await get_json(self._client, request.path)
            else:
                data = await post_json(self._client, request.path, request.body)
        except ApiError as error:
            show(self._document, route.region, f"Error: {error}")
            return
        show(self._document, route.region, data)

    def register_all(
        self, routes: tuple[FormRoute, ...] = FORM_ROUTES
    ) -> list[FormRoute]:
        """
        Attache les handlers de toutes les routes presentes dans le document.

        Returns:
            Les routes effectivement attachees
        """
        bound = []
        for route in routes:
            element = bind(self._document, route.selector, route.event, self.listener(route))
            if element is not None:
                bound.append(route)
        return bound


def register_handlers(
    document: IDocument,
    client: httpx.AsyncClient,
    routes: tuple[FormRoute, ...] = FORM_ROUTES,
) -> list[FormRoute]:
    """Point d'entree au chargement de la page : attache tous les handlers disponibles."""
    return FormHandlers(document, client).register_all(routes)
