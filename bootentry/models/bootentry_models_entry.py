"""Modèle normalisé d'une entrée de démarrage.

`BootEntry` est le résultat commun aux deux formats (Type #1 et grub.cfg).
`EntryBuilder` le construit ligne à ligne pendant un seul appel de parsing;
en cas d'erreur fatale le builder est simplement abandonné.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..io.bootentry_io_loader import FileLoader


@dataclass(frozen=True)
class BootEntry:
    """Ce qu'il faut démarrer.

    title: libellé lisible ("" si jamais défini)
    linux: contenu brut de l'image noyau
    initrd: contenu des ramdisks, concaténés dans l'ordre du fichier
    options: ligne de commande du noyau
    recognized_text: lignes reconnues, reproduites telles quelles
    ignored_text: lignes dont la clé/directive est inconnue
    """

    title: str = ""
    linux: bytes = b""
    initrd: bytes = b""
    options: str = ""
    recognized_text: str = ""
    ignored_text: str = ""

    @property
    def ignored(self) -> str:
        return self.ignored_text

    @property
    def has_kernel(self) -> bool:
        return bool(self.linux)

    @property
    def has_initrd(self) -> bool:
        return bool(self.initrd)

    def __str__(self) -> str:
        return self.recognized_text


@dataclass
class EntryBuilder:
    """Accumulateur mutable, limité à un appel de parsing."""

    loader: FileLoader
    title: str = ""
    linux: bytes = b""
    initrd: bytearray = field(default_factory=bytearray)
    options: str = ""
    _recognized: list[str] = field(default_factory=list)
    _ignored: list[str] = field(default_factory=list)

    def load(self, path: str) -> bytes:
        """Charge une image via le FileLoader associé (erreurs propagées)."""
        return self.loader.load(path)

    def set_title(self, title: str) -> None:
        self.title = title

    def set_linux(self, data: bytes) -> None:
        self.linux = data

    def add_initrd(self, data: bytes) -> None:
        self.initrd.extend(data)

    def append_options(self, options: str) -> None:
        # Concaténation pure, sans séparateur.
        self.options += options

    def set_options(self, options: str) -> None:
        self.options = options

    def record_recognized(self, text: str) -> None:
        self._recognized.append(text)

    def record_ignored(self, text: str) -> None:
        self._ignored.append(text)

    def build(self) -> BootEntry:
        """Fige l'entrée; l'association au FileLoader n'est pas conservée."""
        return BootEntry(
            title=self.title,
            linux=self.linux,
            initrd=bytes(self.initrd),
            options=self.options,
            recognized_text="".join(self._recognized),
            ignored_text="".join(self._ignored),
        )
