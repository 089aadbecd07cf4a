"""Tests pour main.py - Lanceur en ligne de commande."""

from __future__ import annotations

from unittest.mock import patch

import pytest

import main
from bootentry.models.bootentry_models_entry import BootEntry


@pytest.fixture
def esp(tmp_path):
    """ESP factice: une entrée Type #1, un grub.cfg et leurs images."""
    (tmp_path / "loader" / "entries").mkdir(parents=True)
    (tmp_path / "loader" / "entries" / "gentoo.conf").write_text(
        "title Gentoo\nlinux /vmlinuz\ninitrd /initrd.img\noptions quiet\nversion 6.1\n"
    )
    (tmp_path / "boot" / "grub").mkdir(parents=True)
    (tmp_path / "boot" / "grub" / "grub.cfg").write_text("menuentry 'Debian' {\n linux /vmlinuz ro\n}\n")
    (tmp_path / "vmlinuz").write_bytes(b"KERNEL")
    (tmp_path / "initrd.img").write_bytes(b"INITRD")
    return tmp_path


class TestFormatEntry:
    def test_summary(self):
        text = main.format_entry(BootEntry(title="X", linux=b"123", options="quiet"))
        assert "title:   X" in text
        assert "linux:   3 octets" in text
        assert "initrd:  absent" in text
        assert "ignored" not in text

    def test_absent_images(self):
        """Vérifie l'affichage d'une entrée sans noyau ni initrd."""
        text = main.format_entry(BootEntry(title="Vide"))
        assert "linux:   absent" in text
        assert "initrd:  absent" in text

    def test_show_ignored(self):
        text = main.format_entry(BootEntry(ignored_text="version 1\n"), show_ignored=True)
        assert "  version 1" in text


class TestRunMain:
    """Tests pour _run_main."""

    @patch("main.configure_logging")
    def test_uapi_entry(self, _mock_logging, esp, capsys):
        code = main._run_main([str(esp), "loader/entries/gentoo.conf", "--show-ignored"])
        out = capsys.readouterr().out
        assert code == 0
        assert "title:   Gentoo" in out
        assert "initrd:  6 octets" in out
        assert "version 6.1" in out

    @patch("main.configure_logging")
    def test_grub_entry(self, _mock_logging, esp, capsys):
        code = main._run_main([str(esp), "boot/grub/grub.cfg"])
        out = capsys.readouterr().out
        assert code == 0
        assert "title:   Debian" in out
        assert "options: ro" in out

    @patch("main.configure_logging")
    def test_error_exit_code(self, _mock_logging, esp, capsys):
        code = main._run_main([str(esp), "loader/entries/absent.conf"])
        assert code == 1
        assert "Erreur" in capsys.readouterr().err

    @patch("main.configure_logging")
    def test_flags_forwarded(self, mock_logging, esp):
        main._run_main(["--debug", str(esp), "loader/entries/gentoo.conf"])
        mock_logging.assert_called_once_with(debug=True, verbose=False)

    @patch("main.configure_logging")
    def test_usage_error(self, _mock_logging):
        with pytest.raises(SystemExit) as excinfo:
            main._run_main([])
        assert excinfo.value.code == 2

    @patch("main._run_main", return_value=0)
    def test_main_exits(self, _mock_run):
        with pytest.raises(SystemExit) as excinfo:
            main.main()
        assert excinfo.value.code == 0


class TestDiscoverEntryPath:
    """Tests pour discover_entry_path."""

    def test_uapi_first(self, esp):
        """Vérifie que les entrées Type #1 passent avant grub.cfg."""
        (esp / "loader" / "entries" / "arch.conf").write_text("title Arch\n")
        assert main.discover_entry_path(esp) == "loader/entries/arch.conf"

    def test_grub_fallback(self, tmp_path):
        (tmp_path / "boot" / "grub2").mkdir(parents=True)
        (tmp_path / "boot" / "grub2" / "grub.cfg").write_text("")
        assert main.discover_entry_path(tmp_path) == "boot/grub2/grub.cfg"

    def test_nothing(self, tmp_path):
        assert main.discover_entry_path(tmp_path) is None

    @patch("main.configure_logging")
    def test_run_without_path(self, _mock_logging, esp, capsys):
        assert main._run_main([str(esp)]) == 0
        assert "title:   Gentoo" in capsys.readouterr().out

    @patch("main.configure_logging")
    def test_run_without_path_nothing_found(self, _mock_logging, tmp_path, capsys):
        assert main._run_main([str(tmp_path)]) == 1
        assert "aucune entrée" in capsys.readouterr().err
