"""
Acces au backend REST.

Ce module fournit les deux helpers par lesquels passe chaque handler :
- get_json : GET et decodage JSON
- post_json : POST d'un corps JSON et decodage JSON

Erreurs (toutes derivees de ApiError) :
- HttpStatusError : statut hors 2xx, porte le code et le texte de raison
- DecodingError : corps de reponse non JSON
- NetworkError : echange impossible
"""

from src.adapters.api.client import create_http_client, encode_json, get_json, post_json
from src.adapters.api.errors import ApiError, DecodingError, HttpStatusError, NetworkError

__all__ = [
    "create_http_client",
    "encode_json",
    "get_json",
    "post_json",
    "ApiError",
    "DecodingError",
    "HttpStatusError",
    "NetworkError",
]
