"""
Coercion des valeurs brutes de formulaire.

Les champs d'un formulaire arrivent toujours sous forme de texte (ou absents).
Ce module les convertit en nombres et booleens selon les regles du navigateur :
- un texte decimal devient un nombre ("42" -> 42, "7.5" -> 7.5)
- un champ present mais vide (ou blanc) vaut 0
- un champ absent ou non numerique devient NaN, transmis tel quel
- un booleen n'est vrai que pour le texte exact "true"
"""

import math
import re
from typing import Optional, Union

Number = Union[int, float]

_DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def to_number(raw: Optional[str]) -> Number:
    """
    Convertit un champ de formulaire en nombre.

    Aucune validation n'est faite au-dela de la conversion : une valeur
    invalide donne NaN, que l'appelant transmet au backend sans correction.

    Args:
        raw: Valeur brute du champ (None si le champ est absent)

    Returns:
        int si la valeur est entiere (0 pour un texte vide), float sinon,
        float("nan") si absent ou invalide
    """
    if raw is None:
        return math.nan

    text = raw.strip()
    if not text:
        return 0
    if not _DECIMAL_PATTERN.fullmatch(text):
        return math.nan

    value = float(text)
    if value.is_integer():
        return int(value)
    return value


def to_completed(raw: Optional[str]) -> bool:
    """Retourne True uniquement pour le texte exact "true"."""
    return raw == "true"


def format_number(value: Number) -> str:
    """
    Formate un nombre pour un segment d'URL ou un parametre de requete.

    NaN et les infinis sont ecrits comme le ferait un navigateur
    ("NaN", "Infinity", "-Infinity").
    """
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    return str(value)
