"""Chargement d'entrées de démarrage (Boot Loader Specification Type #1 et grub.cfg)."""

from bootentry.bootentry_exceptions import (
    BootEntryError,
    BootEntryFormatError,
    EntryReadError,
    EntryResolutionError,
    GrubScanError,
    GrubStructureError,
)
from bootentry.io.bootentry_io_dispatch import EntryFormat, guess_entry_format, load_boot_entry
from bootentry.io.bootentry_io_grub_blocks import extract_menuentries
from bootentry.io.bootentry_io_grub_entry import load_grub_entry, parse_grub_entry
from bootentry.io.bootentry_io_loader import DirectoryTree, FileLoader, FileTree, MemoryTree
from bootentry.io.bootentry_io_uapi import load_uapi_entry, parse_uapi_entry
from bootentry.models.bootentry_models_entry import BootEntry, EntryBuilder

__version__ = "0.1.0"

__all__ = [
    "BootEntry",
    "BootEntryError",
    "BootEntryFormatError",
    "DirectoryTree",
    "EntryBuilder",
    "EntryFormat",
    "EntryReadError",
    "EntryResolutionError",
    "FileLoader",
    "FileTree",
    "GrubScanError",
    "GrubStructureError",
    "MemoryTree",
    "extract_menuentries",
    "guess_entry_format",
    "load_boot_entry",
    "load_grub_entry",
    "load_uapi_entry",
    "parse_grub_entry",
    "parse_uapi_entry",
]
