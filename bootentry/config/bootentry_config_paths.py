"""Emplacements conventionnels des entrées de démarrage.

Tous les chemins sont relatifs à la racine de l'arborescence lue (ESP, /boot,
image disque montée...).
"""

from __future__ import annotations

from typing import Final

# Entrées Type #1: $BOOT/loader/entries/*.conf
UAPI_ENTRIES_DIRS: Final[list[str]] = ["loader/entries", "boot/loader/entries", "efi/loader/entries"]
UAPI_ENTRY_SUFFIX: Final[str] = ".conf"

# Certains systèmes utilisent /boot/grub2/grub.cfg.
GRUB_CFG_PATHS: Final[list[str]] = ["boot/grub/grub.cfg", "boot/grub2/grub.cfg", "grub/grub.cfg"]
GRUB_CFG_SUFFIX: Final[str] = ".cfg"

# Taille du tampon de lecture (octets) d'une ligne du corps d'un menuentry, terminateur compris.
MAX_SCAN_LINE_LENGTH: Final[int] = 64 * 1024
