"""Tests for filesort.commands.scan and the CLI entry point."""
import os
from unittest.mock import patch

import pytest

from filesort import config as config_mod
from filesort.classify import Category
from filesort.commands.scan import (
    DirectoryOpenError,
    InvalidDirectoryError,
    resolve_directory,
    scan_directory,
)
from filesort.main import main


@pytest.fixture(autouse=True)
def _no_user_config(monkeypatch, tmp_path_factory):
    for var in ("FILESORT_ICON", "FILESORT_ORDER", "FILESORT_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    cfg_dir = tmp_path_factory.mktemp("cfg")
    monkeypatch.setenv("FILESORT_CONFIG_PATH", str(cfg_dir / ".filesort.config"))
    monkeypatch.setattr(config_mod, "_config", None)


def _populate(root, *names):
    for name in names:
        (root / name).write_text("x")


# ---------------------------------------------------------------------------
# resolve_directory / scan_directory
# ---------------------------------------------------------------------------

class TestResolveDirectory:
    def test_explicit_directory(self, tmp_path):
        assert resolve_directory(str(tmp_path)) == tmp_path

    def test_defaults_to_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert resolve_directory(None).resolve() == tmp_path.resolve()

    def test_missing_path(self, tmp_path):
        with pytest.raises(InvalidDirectoryError) as exc:
            resolve_directory(str(tmp_path / "nope"))
        assert "does not exist" in str(exc.value)

    def test_empty_string_is_not_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(InvalidDirectoryError) as exc:
            resolve_directory("")
        assert "empty path" in str(exc.value)

    def test_file_is_not_a_directory(self, tmp_path):
        _populate(tmp_path, "a.txt")
        with pytest.raises(InvalidDirectoryError) as exc:
            resolve_directory(str(tmp_path / "a.txt"))
        assert "not a directory" in str(exc.value)


class TestScanDirectory:
    def test_groups_regular_files(self, tmp_path):
        _populate(tmp_path, "a.txt", "b.TXT", "c.jpg", "readme")
        (tmp_path / "sub.txt").mkdir()
        grouping = scan_directory(tmp_path)
        assert sorted(e.name for e in grouping[Category.TEXT]) == ["a.txt", "b.TXT"]
        assert [e.name for e in grouping[Category.IMAGE]] == ["c.jpg"]
        assert [e.name for e in grouping[Category.OTHERS]] == ["readme"]

    def test_open_failure(self, tmp_path):
        with patch("filesort.commands.scan.os.scandir",
                   side_effect=PermissionError(13, "Permission denied")):
            with pytest.raises(DirectoryOpenError) as exc:
                scan_directory(tmp_path)
        assert "Permission denied" in str(exc.value)


# ---------------------------------------------------------------------------
# main()
# ---------------------------------------------------------------------------

class TestMain:
    def test_report(self, tmp_path, capsys):
        _populate(tmp_path, "a.txt", "c.jpg", "readme")
        main([str(tmp_path)])
        out = capsys.readouterr().out
        lines = out.splitlines()
        assert lines[0] == f"Scanning directory: {tmp_path}"
        assert "Found 3 files in 3 categories:" in lines
        assert "\U0001f4c1 Text Files (1 files)" in lines
        assert "  - a.txt" in lines
        assert "  - readme" in lines

    def test_only_subdirectories(self, tmp_path, capsys):
        (tmp_path / "one").mkdir()
        (tmp_path / "two").mkdir()
        main([str(tmp_path)])
        out = capsys.readouterr().out
        assert "Found 0 files in 0 categories:" in out
        assert "(" not in out.split("categories:", 1)[1]

    def test_missing_directory_exits_1(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            main([str(tmp_path / "missing")])
        assert exc.value.code == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "invalid directory" in captured.err
        assert "usage: filesort" in captured.err

    def test_file_path_exits_1(self, tmp_path, capsys):
        _populate(tmp_path, "a.txt")
        with pytest.raises(SystemExit) as exc:
            main([str(tmp_path / "a.txt")])
        assert exc.value.code == 1
        assert "not a directory" in capsys.readouterr().err

    def test_unreadable_directory_exits_1(self, tmp_path, capsys):
        with patch("filesort.commands.scan.os.scandir",
                   side_effect=PermissionError(13, "Permission denied")):
            with pytest.raises(SystemExit) as exc:
                main([str(tmp_path)])
        assert exc.value.code == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "cannot read directory" in captured.err

    def test_default_directory_is_cwd(self, tmp_path, monkeypatch, capsys):
        _populate(tmp_path, "song.mp3")
        monkeypatch.chdir(tmp_path)
        main([])
        out = capsys.readouterr().out
        assert "Audio Files (1 files)" in out

    def test_order_flag(self, tmp_path, capsys):
        _populate(tmp_path, "a.txt", "b.py", "c.py")
        main([str(tmp_path), "--order", "count"])
        out = capsys.readouterr().out
        assert out.index("Code Files") < out.index("Text Files")

    def test_icon_from_config(self, tmp_path, capsys, monkeypatch):
        _populate(tmp_path, "a.txt")
        monkeypatch.setenv("FILESORT_ICON", "")
        main([str(tmp_path)])
        assert "Text Files (1 files)" in capsys.readouterr().out.splitlines()

    def test_list_categories(self, capsys):
        main(["--list-categories"])
        out = capsys.readouterr().out
        assert out.startswith("Text Files")
        assert "Blockchain & Crypto" in out

    def test_version(self, capsys):
        main(["--version"])
        assert capsys.readouterr().out.startswith("filesort ")

    def test_bad_config_exits_1(self, tmp_path, monkeypatch, capsys):
        bad = tmp_path / "bad.config"
        bad.write_text("not toml [")
        monkeypatch.setenv("FILESORT_CONFIG_PATH", str(bad))
        with pytest.raises(SystemExit) as exc:
            main([str(tmp_path)])
        assert exc.value.code == 1
        assert "cannot read config" in capsys.readouterr().err

    def test_empty_argument_is_invalid(self, tmp_path, monkeypatch, capsys):
        _populate(tmp_path, "a.txt")
        monkeypatch.chdir(tmp_path)
        with pytest.raises(SystemExit) as exc:
            main([""])
        assert exc.value.code == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "invalid directory" in captured.err

    def test_undecodable_filename_is_listed(self, tmp_path, capsys):
        try:
            (tmp_path / os.fsdecode(b"bad\xff.txt")).write_text("x")
        except (OSError, UnicodeError):
            pytest.skip("filesystem rejects non-UTF-8 names")
        _populate(tmp_path, "ok.txt")
        main([str(tmp_path)])
        lines = capsys.readouterr().out.splitlines()
        assert "\U0001f4c1 Text Files (2 files)" in lines
        assert "  - bad�.txt" in lines
        assert "  - ok.txt" in lines
