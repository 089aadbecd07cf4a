"""Configuration d'exécution du lanceur `main.py`.

Centralise la configuration Loguru et l'extraction des drapeaux de verbosité,
avant que le reste de la ligne de commande ne soit confié à argparse.
"""

from __future__ import annotations

import sys
from typing import Final

from loguru import logger

DEBUG_FLAGS: Final[frozenset[str]] = frozenset({"--debug", "-d"})
VERBOSE_FLAGS: Final[frozenset[str]] = frozenset({"--verbose", "-v"})

_LOG_FORMAT: Final[str] = "<green>{time:HH:mm:ss.SSS}</green> <level>{level: <8}</level> <level>{message}</level>"
_DEBUG_LOG_FORMAT: Final[str] = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> "
    "<level>{level: <8}</level> "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> "
    "<level>{message}</level>"
)


def configure_logging(*, debug: bool, verbose: bool = False) -> None:
    """Configure Loguru pour tout le processus.

    Politique:
    - Sans drapeau: aucun handler, les parseurs restent muets.
    - --verbose: INFO (entrées chargées, directives ignorées).
    - --debug: DEBUG (chaque ligne, chaque image résolue) + backtrace/diagnose.
    """
    logger.remove()

    if not debug and not verbose:
        return

    logger.add(
        sys.stderr,
        level="DEBUG" if debug else "INFO",
        backtrace=debug,
        diagnose=debug,
        enqueue=False,
        format=_DEBUG_LOG_FORMAT if debug else _LOG_FORMAT,
    )


def parse_verbosity_flags(argv: list[str]) -> tuple[bool, bool, list[str]]:
    """Extrait `--debug`/`-d` et `--verbose`/`-v` de argv.

    Returns:
        (debug_enabled, verbose_enabled, remaining_argv)
    """
    debug = False
    verbose = False
    remaining: list[str] = []
    for arg in argv:
        if arg in DEBUG_FLAGS:
            debug = True
        elif arg in VERBOSE_FLAGS:
            verbose = True
        else:
            remaining.append(arg)
    return debug, verbose, remaining
