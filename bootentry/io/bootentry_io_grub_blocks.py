"""Extraction des blocs menuentry de premier niveau depuis grub.cfg.

Suivi de profondeur d'accolades, pas un vrai tokenizer: une accolade dans une
chaîne ou un commentaire est comptée comme une accolade structurelle.
"""

from __future__ import annotations

from loguru import logger

from .bootentry_io_grub_parsing_utils import brace_delta, is_menuentry_start


def extract_menuentries(data: str) -> list[str]:
    """Retourne les blocs `menuentry '...' { ... }` dans l'ordre du fichier.

    Chaque bloc va de la ligne `menuentry` jusqu'à la ligne qui ramène la
    profondeur à 0, sauts de ligne d'origine conservés. L'accolade ouvrante
    peut se trouver sur une ligne ultérieure: tant qu'elle n'a pas été vue,
    la collecte continue. Un bloc non refermé en fin de fichier est abandonné.
    """
    entries: list[str] = []
    collecting = False
    opened = False
    depth = 0
    current: list[str] = []

    for line in data.split("\n"):
        if collecting:
            current.append(line)
        elif is_menuentry_start(line):
            collecting = True
            opened = False
            depth = 0
            current = [line]
        else:
            continue

        opened = opened or "{" in line
        depth += brace_delta(line)

        if opened and depth == 0:
            entries.append("\n".join(current))
            collecting = False
            current = []

    if collecting:
        logger.warning(f"[extract_menuentries] Bloc non refermé ignoré: {current[0].strip()!r}")
    logger.debug(f"[extract_menuentries] {len(entries)} bloc(s) menuentry extrait(s)")
    return entries
