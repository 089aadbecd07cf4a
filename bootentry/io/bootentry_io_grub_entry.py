"""Chargement d'une entrée de démarrage depuis grub.cfg (lecture seule).

Seul le premier bloc menuentry est exploité, et seules les directives
`linux` et `initrd` de son corps sont interprétées. Pas d'interprétation du
langage de script GRUB (variables, conditions, fonctions).
"""

from __future__ import annotations

from collections.abc import Iterator

from loguru import logger

from ..bootentry_exceptions import EntryReadError, EntryResolutionError, GrubScanError, GrubStructureError
from ..config.bootentry_config_paths import MAX_SCAN_LINE_LENGTH
from ..models.bootentry_models_entry import BootEntry, EntryBuilder
from .bootentry_io_grub_blocks import extract_menuentries
from .bootentry_io_grub_parsing_utils import extract_menuentry_body, extract_menuentry_title
from .bootentry_io_loader import FileLoader, FileTree, decode_text


def _scan_lines(body: str) -> Iterator[str]:
    """Découpe le corps en lignes (sans terminateur ni `\\r` final)."""
    for number, line in enumerate(body.split("\n"), start=1):
        size = len(line.encode("utf-8"))
        # Le tampon du lecteur doit contenir la ligne et son terminateur.
        if size >= MAX_SCAN_LINE_LENGTH:
            raise GrubScanError(f"Ligne {number} trop longue ({size} >= {MAX_SCAN_LINE_LENGTH} octets)")
        yield line.removesuffix("\r")


def _load_image(builder: EntryBuilder, path: str, what: str, line: str) -> bytes:
    try:
        return builder.load(path)
    except OSError as e:
        raise EntryResolutionError(f"Chargement {what} {path}: {e}", path=path, line=line) from e


def _parse_directive(builder: EntryBuilder, line: str) -> None:
    fields = line.split()
    if not fields:
        return

    directive, args = fields[0], fields[1:]

    if directive == "linux":
        if not args:
            return
        builder.set_linux(_load_image(builder, args[0], "image linux", line))
        if len(args) > 1:
            # Une seule ligne linux par entrée: on remplace.
            builder.set_options(" ".join(args[1:]))
    elif directive == "initrd":
        if not args:
            return
        for path in args:
            builder.add_initrd(_load_image(builder, path, "initrd", line))
    else:
        logger.warning(f"[_parse_directive] Directive ignorée: {directive!r}")
        builder.record_ignored(line + "\n")
        return

    builder.record_recognized(line + "\n")


def parse_grub_entry(text: str, loader: FileLoader) -> BootEntry:
    """Parse le premier menuentry de `text` et charge ses images.

    Raises:
        GrubStructureError: aucun menuentry, titre absent ou corps absent
        GrubScanError: ligne du corps illisible
        EntryResolutionError: image linux/initrd introuvable
    """
    blocks = extract_menuentries(text)
    if not blocks:
        raise GrubStructureError("Aucun bloc menuentry trouvé")
    if len(blocks) > 1:
        logger.info(f"[parse_grub_entry] {len(blocks) - 1} bloc(s) menuentry supplémentaire(s) ignoré(s)")
    block = blocks[0]

    builder = EntryBuilder(loader)

    title = extract_menuentry_title(block)
    if title is None:
        raise GrubStructureError("Titre du menuentry introuvable")
    builder.set_title(title)

    body = extract_menuentry_body(block)
    if body is None:
        raise GrubStructureError("Bloc menuentry sans accolades")

    for raw_line in _scan_lines(body):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        _parse_directive(builder, line)

    return builder.build()


def load_grub_entry(tree: FileTree, path: str) -> BootEntry:
    """Lit `path` (grub.cfg) depuis `tree` et retourne sa première entrée.

    Raises:
        EntryReadError: si grub.cfg est illisible
        GrubStructureError, GrubScanError, EntryResolutionError: voir `parse_grub_entry`
    """
    logger.debug(f"[load_grub_entry] Debut - path={path}")
    loader = FileLoader(tree)
    try:
        raw = loader.load(path)
    except OSError as e:
        raise EntryReadError(f"Erreur de lecture de {path}: {e}", path=path) from e

    entry = parse_grub_entry(decode_text(raw), loader)
    logger.success(f"[load_grub_entry] Entrée chargée: {entry.title!r}")
    return entry
