"""Utilitaires de parsing pour grub.cfg.

Ce module centralise les expressions régulières compilées une seule fois et
réutilisées par l'extracteur de blocs et le parseur d'entrée.
"""

from __future__ import annotations

import re
from typing import Final

# Début d'un bloc: "menuentry 'Titre'" en tête de ligne (titre entre apostrophes).
MENUENTRY_START_RE: Final = re.compile(r"^\s*menuentry\s+'([^']+)'")

# Titre n'importe où dans un bloc déjà extrait.
_MENUENTRY_TITLE_RE: Final = re.compile(r"menuentry\s+'([^']+)'")

# Corps: du premier "{" au premier "}" suivant (pas d'imbrication).
_MENUENTRY_BODY_RE: Final = re.compile(r"\{([^}]*)\}")


def is_menuentry_start(line: str) -> bool:
    """Indique si `line` ouvre un bloc menuentry."""
    return MENUENTRY_START_RE.match(line) is not None


def brace_delta(line: str) -> int:
    """Variation de profondeur d'accolades apportée par `line`.

    Comptage naïf: les accolades dans les chaînes ou commentaires comptent aussi.
    """
    return line.count("{") - line.count("}")


def extract_menuentry_title(block: str) -> str | None:
    """Extrait le titre d'un bloc menuentry.

    Returns:
        Le titre, ou None si le motif est absent.
    """
    m = _MENUENTRY_TITLE_RE.search(block)
    if m:
        return m.group(1)
    return None


def extract_menuentry_body(block: str) -> str | None:
    """Extrait le texte entre la première "{" et la "}" qui la suit.

    Returns:
        Le corps (sans les accolades), ou None si aucune paire n'est trouvée.
    """
    m = _MENUENTRY_BODY_RE.search(block)
    if m:
        return m.group(1)
    return None
