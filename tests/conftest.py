"""Configuration pytest: PYTHONPATH, Loguru stable et arborescences de test."""

import sys
from pathlib import Path

import pytest
from loguru import logger

# Ajouter le dossier racine du projet au PYTHONPATH
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from bootentry.io.bootentry_io_loader import MemoryTree  # noqa: E402


def pytest_configure(config):
    """Configuration globale de pytest."""
    del config
    # Pas d'enqueue (thread/queue) pendant les tests.
    try:
        logger.remove()
        logger.add(sys.stderr, level="DEBUG", enqueue=False)
    except ValueError:
        pass


def pytest_sessionfinish(session, exitstatus):
    """Arrête proprement les handlers Loguru en fin de session."""
    del session, exitstatus
    logger.remove()


@pytest.fixture
def images() -> dict[str, bytes]:
    """Images noyau/initrd factices, indexées par chemin."""
    return {
        "/vmlinuz": b"KERNEL",
        "/initrd-a.img": b"AAAA",
        "/initrd-b.img": b"BBBB",
    }


@pytest.fixture
def memory_tree(images):
    """Fabrique de MemoryTree: images factices + fichiers supplémentaires."""

    def _make(extra: dict[str, bytes | str] | None = None, *, sep: str = "/") -> MemoryTree:
        files: dict[str, bytes | str] = dict(images)
        files.update(extra or {})
        return MemoryTree(files, sep=sep)

    return _make
