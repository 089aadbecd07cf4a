"""Module d'exceptions personnalisées pour le chargement d'entrées de démarrage.

Fournit une hiérarchie d'exceptions spécifiques: chaque échec fatal d'un
parsing se traduit par une de ces exceptions, jamais par un résultat partiel.
"""

from __future__ import annotations


class BootEntryError(Exception):
    """Exception de base pour toutes les erreurs de chargement d'entrée.

    Permet de capturer toutes les erreurs métier avec `except BootEntryError`.

    Example:
        try:
            entry = load_uapi_entry(tree, "loader/entries/linux.conf")
        except BootEntryError as e:
            logger.error(f"Entrée inutilisable: {e}")
    """


class EntryReadError(BootEntryError):
    """Le fichier d'entrée (ou grub.cfg) lui-même est illisible.

    Levée avant tout parsing.

    Attributes:
        path: Chemin du fichier d'entrée demandé
    """

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class EntryResolutionError(BootEntryError):
    """Une image référencée (noyau ou initrd) n'a pas pu être chargée.

    Attributes:
        path: Chemin de l'image tel qu'écrit dans la directive
        line: Ligne (ou directive) en cours de traitement

    Example:
        raise EntryResolutionError("initrd introuvable", path="/initrd.img", line="initrd /initrd.img\\n")
    """

    def __init__(self, message: str, path: str | None = None, line: str | None = None):
        super().__init__(message)
        self.path = path
        self.line = line

    def __str__(self) -> str:
        """Représentation textuelle enrichie de l'erreur."""
        parts = [super().__str__()]
        if self.path:
            parts.append(f"Chemin: {self.path}")
        if self.line:
            parts.append(f"Ligne: {self.line.rstrip()}")
        return " | ".join(parts)


class GrubStructureError(BootEntryError):
    """Structure de grub.cfg inexploitable.

    Levée lorsqu'aucun bloc menuentry n'est trouvé, que le titre est absent
    ou que le corps entre accolades manque.
    """


class GrubScanError(BootEntryError):
    """Échec de la lecture ligne à ligne du corps d'un menuentry."""


class BootEntryFormatError(BootEntryError):
    """Format d'entrée inconnu ou impossible à deviner depuis le nom de fichier."""
