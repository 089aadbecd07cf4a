"""Point d'entrée en ligne de commande.

Lit une entrée de démarrage (Type #1 ou grub.cfg) depuis un répertoire racine
(ESP montée, /boot...) et affiche ce qui serait démarré.
"""

import argparse
import sys
from pathlib import Path

from loguru import logger

from bootentry.bootentry_exceptions import BootEntryError
from bootentry.config.bootentry_config_paths import GRUB_CFG_PATHS, UAPI_ENTRIES_DIRS, UAPI_ENTRY_SUFFIX
from bootentry.config.bootentry_config_runtime import configure_logging, parse_verbosity_flags
from bootentry.io.bootentry_io_dispatch import EntryFormat, load_boot_entry
from bootentry.io.bootentry_io_loader import DirectoryTree
from bootentry.models.bootentry_models_entry import BootEntry

# Loguru installe un handler par défaut (niveau DEBUG) dès l'import.
# On le retire ici, avant l'appel explicite à configure_logging().
try:
    logger.remove()
except (TypeError, ValueError):
    pass


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="boot-entry", description="Affiche le contenu d'une entrée de démarrage")
    p.add_argument("root", help="Répertoire racine de l'arborescence (ESP, /boot...)")
    p.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Chemin de l'entrée dans l'arborescence (ex: loader/entries/linux.conf); découvert si absent",
    )
    p.add_argument(
        "--format",
        dest="entry_format",
        choices=[f.value for f in EntryFormat],
        default=None,
        help="Format de l'entrée (deviné depuis l'extension par défaut)",
    )
    p.add_argument("--show-ignored", action="store_true", help="Affiche les lignes non reconnues")
    return p


def discover_entry_path(root: Path) -> str | None:
    """Retourne la première entrée trouvée sous `root`.

    Ordre: entrées Type #1 (triées par nom) puis grub.cfg standards.
    """
    for entries_dir in UAPI_ENTRIES_DIRS:
        directory = root / entries_dir
        if not directory.is_dir():
            continue
        confs = sorted(p.name for p in directory.iterdir() if p.name.endswith(UAPI_ENTRY_SUFFIX) and p.is_file())
        if confs:
            return f"{entries_dir}/{confs[0]}"
    for cfg in GRUB_CFG_PATHS:
        if (root / cfg).is_file():
            return cfg
    return None


def _size(data: bytes) -> str:
    return f"{len(data)} octets"


def format_entry(entry: BootEntry, *, show_ignored: bool = False) -> str:
    lines = [
        f"title:   {entry.title}",
        f"linux:   {_size(entry.linux) if entry.has_kernel else 'absent'}",
        f"initrd:  {_size(entry.initrd) if entry.has_initrd else 'absent'}",
        f"options: {entry.options}",
    ]
    if show_ignored and entry.ignored_text:
        lines.append("ignored:")
        lines.extend(f"  {line}" for line in entry.ignored_text.splitlines())
    return "\n".join(lines)


def _run_main(argv: list[str]) -> int:
    """Exécute la commande et retourne un code de sortie."""
    debug, verbose, remaining_argv = parse_verbosity_flags(argv)
    configure_logging(debug=debug, verbose=verbose)
    args = build_parser().parse_args(remaining_argv)
    path = args.path or discover_entry_path(Path(args.root))
    logger.debug(f"[main] root={args.root} path={path} format={args.entry_format}")
    if path is None:
        print(f"Erreur: aucune entrée trouvée sous {args.root}", file=sys.stderr)
        return 1

    try:
        entry = load_boot_entry(DirectoryTree(args.root), path, args.entry_format)
    except BootEntryError as exc:
        logger.error(f"[main] {exc}")
        print(f"Erreur: {exc}", file=sys.stderr)
        return 1

    print(format_entry(entry, show_ignored=args.show_ignored))
    return 0


def main() -> None:
    """Point d'entrée Python (console script)."""
    raise SystemExit(_run_main(sys.argv[1:]))


if __name__ == "__main__":
    main()
