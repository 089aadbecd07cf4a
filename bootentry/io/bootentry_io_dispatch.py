"""Choix du parseur selon le format de l'entrée."""

from __future__ import annotations

from enum import Enum
from pathlib import PurePosixPath

from loguru import logger

from ..bootentry_exceptions import BootEntryFormatError
from ..config.bootentry_config_paths import GRUB_CFG_SUFFIX, UAPI_ENTRY_SUFFIX
from ..models.bootentry_models_entry import BootEntry
from .bootentry_io_grub_entry import load_grub_entry
from .bootentry_io_loader import FileTree
from .bootentry_io_uapi import load_uapi_entry


class EntryFormat(Enum):
    """Formats d'entrée supportés."""

    UAPI = "uapi"
    GRUB = "grub"


def guess_entry_format(path: str) -> EntryFormat:
    """Devine le format depuis l'extension (`.conf` -> Type #1, `.cfg` -> GRUB)."""
    suffix = PurePosixPath(path.replace("\\", "/")).suffix.lower()
    if suffix == UAPI_ENTRY_SUFFIX:
        return EntryFormat.UAPI
    if suffix == GRUB_CFG_SUFFIX:
        return EntryFormat.GRUB
    raise BootEntryFormatError(f"Format d'entrée indéterminable pour {path}")


def load_boot_entry(tree: FileTree, path: str, entry_format: EntryFormat | str | None = None) -> BootEntry:
    """Charge `path` avec le parseur correspondant à `entry_format`.

    Sans format explicite, il est deviné depuis le nom du fichier.
    """
    if entry_format is None:
        entry_format = guess_entry_format(path)
    elif isinstance(entry_format, str):
        try:
            entry_format = EntryFormat(entry_format.lower())
        except ValueError:
            raise BootEntryFormatError(f"Format d'entrée inconnu: {entry_format}") from None

    logger.debug(f"[load_boot_entry] {path} ({entry_format.value})")
    if entry_format is EntryFormat.GRUB:
        return load_grub_entry(tree, path)
    return load_uapi_entry(tree, path)
