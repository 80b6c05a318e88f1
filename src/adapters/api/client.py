"""
Helpers de requete JSON vers le backend REST.

Seul point de contact avec le backend : chaque handler de formulaire passe
par exactement une de ces deux fonctions.

Usage:
    async with create_http_client("http://localhost:8080") as client:
        user = await get_json(client, "/api/users/1")
        created = await post_json(client, "/api/content", payload)
"""

import json
import math
from typing import Any

import httpx
from loguru import logger

from src.adapters.api.errors import DecodingError, HttpStatusError, NetworkError

JSON_HEADERS = {"Content-Type": "application/json"}


def create_http_client(base_url: str) -> httpx.AsyncClient:
    """
    Cree le client HTTP partage par tous les handlers.

    Aucun timeout n'est applique : une requete bloquee laisse la zone
    d'affichage inchangee indefiniment.

    Args:
        base_url: URL racine du backend (ex: http://localhost:8080)

    Returns:
        httpx.AsyncClient configure pour le backend
    """
    return httpx.AsyncClient(
        base_url=base_url,
        headers={"Accept": "application/json"},
        timeout=None,
    )


def _replace_non_finite(value: Any) -> Any:
    """Remplace NaN et les infinis par None, recursivement."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: _replace_non_finite(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_replace_non_finite(item) for item in value]
    return value


def encode_json(body: Any) -> bytes:
    """
    Serialise un corps de requete en JSON.

    Les nombres non finis (NaN issus de la coercion) deviennent null,
    comme avec le serialiseur JSON d'un navigateur.
    """
    return json.dumps(_replace_non_finite(body), allow_nan=False).encode("utf-8")


async def _send(client: httpx.AsyncClient, method: str, url: str, **kwargs) -> Any:
    """
    Execute l'echange et decode la reponse JSON.

    Raises:
        NetworkError: Si l'echange n'a pas pu aboutir
        HttpStatusError: Si le statut n'est pas 2xx
        DecodingError: Si le corps n'est pas du JSON valide
    """
    logger.debug("Requete API", method=method, url=url)
    try:
        response = await client.request(method, url, **kwargs)
    except (httpx.HTTPError, httpx.InvalidURL, RuntimeError) as exc:
        # RuntimeError: client deja ferme
        raise NetworkError(str(exc) or exc.__class__.__name__) from exc

    logger.debug("Reponse API", method=method, url=url, status=response.status_code)
    if not response.is_success:
        raise HttpStatusError(response.status_code, response.reason_phrase)

    try:
        return response.json()
    except ValueError as exc:
        raise DecodingError(str(exc)) from exc


async def get_json(client: httpx.AsyncClient, url: str) -> Any:
    """
    Envoie un GET et retourne le corps JSON decode.

    Args:
        client: Client httpx async
        url: Chemin relatif a la base du client

    Returns:
        Donnees structurees decodees depuis le JSON
    """
    return await _send(client, "GET", url)


async def post_json(client: httpx.AsyncClient, url: str, body: Any) -> Any:
    """
    Envoie un POST avec un corps JSON et retourne la reponse decodee.

    Meme contrat de succes/echec que get_json.
    """
    return await _send(
        client, "POST", url, content=encode_json(body), headers=JSON_HEADERS
    )
