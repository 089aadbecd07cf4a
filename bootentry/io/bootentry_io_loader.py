"""Lecture des fichiers référencés par les entrées de démarrage.

Le cœur ne connaît qu'une arborescence abstraite en lecture seule (`FileTree`).
`FileLoader` accepte les chemins tels qu'écrits dans les formats sources
(séparateur `/`) et les traduit vers le séparateur natif de l'arborescence.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Protocol, runtime_checkable

from loguru import logger


@runtime_checkable
class FileTree(Protocol):
    """Arborescence en lecture seule.

    `read_bytes` lève FileNotFoundError (ou une autre OSError) si le chemin
    est absent ou illisible.
    """

    sep: str

    def read_bytes(self, path: str) -> bytes: ...


class DirectoryTree:
    """Arborescence adossée à un répertoire réel (ESP montée, /boot, image...)."""

    sep = os.sep

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root).resolve()

    def _resolve(self, path: str) -> Path:
        # Contrôle lexical ("..") uniquement: les liens symboliques de l'ESP sont suivis.
        target = Path(os.path.normpath(self.root / path.lstrip(self.sep)))
        if target != self.root and self.root not in target.parents:
            raise PermissionError(f"Chemin hors de l'arborescence {self.root}: {path}")
        return target

    def read_bytes(self, path: str) -> bytes:
        target = self._resolve(path)
        logger.debug(f"[DirectoryTree.read_bytes] Lecture {target}")
        return target.read_bytes()

    def __repr__(self) -> str:
        return f"DirectoryTree({str(self.root)!r})"


class MemoryTree:
    """Arborescence en mémoire (clé exacte -> contenu).

    `requested` garde la trace de chaque chemin demandé, dans l'ordre.
    """

    def __init__(self, files: Mapping[str, bytes | str] | None = None, *, sep: str = "/") -> None:
        self.sep = sep
        self._files: dict[str, bytes] = {}
        for name, content in (files or {}).items():
            self._files[name] = content.encode("utf-8") if isinstance(content, str) else bytes(content)
        self.requested: list[str] = []

    def read_bytes(self, path: str) -> bytes:
        self.requested.append(path)
        try:
            return self._files[path]
        except KeyError:
            raise FileNotFoundError(f"Fichier introuvable: {path}") from None

    def __repr__(self) -> str:
        return f"MemoryTree({len(self._files)} fichiers, sep={self.sep!r})"


class FileLoader:
    """Charge un fichier complet depuis un `FileTree`, sans cache."""

    def __init__(self, tree: FileTree) -> None:
        self.tree = tree

    def native_path(self, path: str) -> str:
        """Traduit un chemin à séparateurs `/` vers le séparateur de l'arborescence."""
        if self.tree.sep == "/":
            return path
        return path.replace("/", self.tree.sep)

    def load(self, path: str) -> bytes:
        """Retourne le contenu brut de `path`.

        Raises:
            OSError: si le chemin est absent ou illisible (propagée telle quelle)
        """
        native = self.native_path(path)
        data = self.tree.read_bytes(native)
        logger.debug(f"[FileLoader.load] {path} -> {native} ({len(data)} octets)")
        return data


def decode_text(data: bytes) -> str:
    """Décode le contenu d'un fichier texte d'entrée (UTF-8, octets invalides remplacés)."""
    return data.decode("utf-8", errors="replace")
