"""
Erreurs des echanges avec le backend REST.

Trois familles d'echec, toutes derivees de ApiError :
- HttpStatusError : echange termine avec un statut hors 2xx
- DecodingError : reponse 2xx dont le corps n'est pas du JSON valide
- NetworkError : echange impossible (connexion, DNS, protocole)

str(error) donne la description affichee a l'utilisateur apres "Error: ".
"""


class ApiError(Exception):
    """Erreur de base pour tout echec d'un appel au backend."""


class HttpStatusError(ApiError):
    """
    Exception levee quand le backend repond avec un statut d'echec.

    Attributes:
        status_code: Code HTTP numerique (ex: 404)
        reason: Texte de raison associe (ex: "Not Found")
    """

    def __init__(self, status_code: int, reason: str) -> None:
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"{status_code} {reason}")


class DecodingError(ApiError):
    """Le corps d'une reponse reussie n'a pas pu etre decode en JSON."""


class NetworkError(ApiError):
    """L'echange n'a pas pu aboutir (connexion refusee, DNS, etc.)."""
