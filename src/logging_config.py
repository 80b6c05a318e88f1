"""
Configuration du logging de l'application via loguru.

Deux sorties :
- console (stderr) : colorée et lisible, au niveau choisi par l'utilisateur
- fichier : JSON sérialisé avec rotation, capture les traces DEBUG des requêtes API

La sortie standard reste réservée au contenu des zones d'affichage
imprimé par la CLI.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

_LEVELS_BY_VERBOSITY = ("WARNING", "INFO", "DEBUG")


def level_from_verbosity(verbose: int, quiet: bool, default: str = "WARNING") -> str:
    """Traduit les options -v/-q de la CLI en niveau loguru.

    Args :
        verbose : Nombre d'occurrences de -v (0 = niveau par défaut)
        quiet : Mode silencieux (erreurs uniquement)
        default : Niveau utilisé sans -v
    """
    if quiet:
        return "ERROR"
    if verbose <= 0:
        return default
    return _LEVELS_BY_VERBOSITY[min(verbose, len(_LEVELS_BY_VERBOSITY) - 1)]


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = Path("logs/streamflix.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure le logging de l'application.

    Args :
        log_level : Niveau de log minimum pour la console (DEBUG, INFO, WARNING, ERROR)
        log_file : Chemin du fichier de log, ou None pour ne logger que sur la console
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs à conserver
    """
    # Supprime le handler par défaut
    logger.remove()

    logger.add(
        sys.stderr,
        level=log_level,
        format=(
            "<green>{time:HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan> | "
            "<level>{message}</level> {extra}"
        ),
        colorize=True,
    )

    if log_file is None:
        return

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        enqueue=True,
    )

    logger.debug("Logging configuré", log_file=str(log_file), rotation=rotation_size)
