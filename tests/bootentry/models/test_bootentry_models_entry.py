"""Tests pour bootentry/models/bootentry_models_entry.py."""

from __future__ import annotations

import dataclasses

import pytest

from bootentry.io.bootentry_io_loader import FileLoader, MemoryTree
from bootentry.models.bootentry_models_entry import BootEntry, EntryBuilder


class TestBootEntry:
    """Tests pour BootEntry."""

    def test_defaults_empty(self):
        entry = BootEntry()
        assert entry.title == ""
        assert entry.linux == b""
        assert entry.initrd == b""
        assert entry.options == ""
        assert not entry.has_kernel
        assert not entry.has_initrd

    def test_frozen(self):
        """Vérifie que BootEntry est immuable."""
        entry = BootEntry(title="X")
        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.title = "Y"

    def test_str_and_ignored(self):
        entry = BootEntry(recognized_text="title X\n", ignored_text="version 1\n")
        assert str(entry) == "title X\n"
        assert entry.ignored == "version 1\n"


class TestEntryBuilder:
    """Tests pour EntryBuilder."""

    @pytest.fixture
    def builder(self):
        return EntryBuilder(FileLoader(MemoryTree({"/k": b"K"})))

    def test_build(self, builder):
        """Vérifie l'accumulation puis le figeage."""
        builder.set_title("A")
        builder.set_title("B")
        builder.set_linux(builder.load("/k"))
        builder.add_initrd(b"1")
        builder.add_initrd(b"2")
        builder.append_options("foo")
        builder.append_options("bar")
        builder.record_recognized("title A\n")
        builder.record_ignored("x y\n")

        entry = builder.build()
        assert entry == BootEntry(
            title="B",
            linux=b"K",
            initrd=b"12",
            options="foobar",
            recognized_text="title A\n",
            ignored_text="x y\n",
        )
        assert entry.has_kernel
        assert entry.has_initrd

    def test_set_options_overwrites(self, builder):
        builder.append_options("a")
        builder.set_options("b c")
        assert builder.build().options == "b c"

    def test_built_entry_detached(self, builder):
        """Vérifie que l'entrée figée ne garde ni le loader ni le tampon initrd."""
        builder.add_initrd(b"1")
        entry = builder.build()
        builder.add_initrd(b"2")

        assert entry.initrd == b"1"
        assert isinstance(entry.initrd, bytes)
        assert not hasattr(entry, "loader")
