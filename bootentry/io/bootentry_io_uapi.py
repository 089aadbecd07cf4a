"""Chargement des entrées Boot Loader Specification Type #1.

Format clé/valeur plat, une directive par ligne (`clé<espace>valeur`).
Seules `title`, `linux`, `initrd` et `options` sont interprétées; les autres
clés sont conservées dans le texte ignoré, sans erreur.

Référence: https://uapi-group.org/specifications/specs/boot_loader_specification
"""

from __future__ import annotations

from collections.abc import Iterator

from loguru import logger

from ..bootentry_exceptions import EntryReadError, EntryResolutionError
from ..models.bootentry_models_entry import BootEntry, EntryBuilder
from .bootentry_io_loader import FileLoader, FileTree, decode_text


def iter_lines(text: str) -> Iterator[str]:
    """Itère paresseusement sur les lignes de `text`, terminateur `\\n` inclus."""
    start = 0
    while start < len(text):
        end = text.find("\n", start)
        if end == -1:
            yield text[start:]
            return
        yield text[start : end + 1]
        start = end + 1


def _parse_key(builder: EntryBuilder, line: str) -> None:
    key, sep, rest = line.partition(" ")
    if not sep:
        # Pas de valeur: ni reconnue, ni ignorée.
        return

    value = rest.strip("\n\r").strip()

    if key == "title":
        builder.set_title(value)
    elif key == "linux":
        builder.set_linux(_load_value(builder, value, line))
    elif key == "initrd":
        builder.add_initrd(_load_value(builder, value, line))
    elif key == "options":
        builder.append_options(value)
    else:
        logger.warning(f"[_parse_key] Clé ignorée: {key!r}")
        builder.record_ignored(line)
        return

    builder.record_recognized(line)


def _load_value(builder: EntryBuilder, value: str, line: str) -> bytes:
    try:
        return builder.load(value)
    except OSError as e:
        raise EntryResolutionError(f"Erreur de parsing de la ligne d'entrée: {e}", path=value, line=line) from e


def parse_uapi_entry(text: str, loader: FileLoader) -> BootEntry:
    """Parse le texte d'une entrée Type #1 et charge les images référencées.

    Args:
        text: Contenu complet du fichier d'entrée
        loader: FileLoader utilisé pour `linux` et `initrd`

    Returns:
        L'entrée complète (éventuellement vide si aucune clé reconnue)

    Raises:
        EntryResolutionError: si une image `linux`/`initrd` est introuvable
    """
    builder = EntryBuilder(loader)
    for line in iter_lines(text):
        _parse_key(builder, line)
    return builder.build()


def load_uapi_entry(tree: FileTree, path: str) -> BootEntry:
    """Lit et parse l'entrée Type #1 `path` depuis l'arborescence `tree`.

    Raises:
        EntryReadError: si le fichier d'entrée est illisible
        EntryResolutionError: si une image référencée est introuvable
    """
    logger.debug(f"[load_uapi_entry] Debut - path={path}")
    loader = FileLoader(tree)
    try:
        raw = loader.load(path)
    except OSError as e:
        raise EntryReadError(f"Erreur de lecture du fichier d'entrée: {e}", path=path) from e

    entry = parse_uapi_entry(decode_text(raw), loader)
    if entry.ignored_text:
        logger.info(f"[load_uapi_entry] {len(entry.ignored_text.splitlines())} ligne(s) ignorée(s) dans {path}")
    logger.success(f"[load_uapi_entry] Entrée chargée: {entry.title!r}")
    return entry
