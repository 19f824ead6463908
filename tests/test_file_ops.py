"""Tests for directory creation and removal helpers."""

from pathlib import Path

import pytest

from confdir.file_ops import ensure_directory, remove_path


def test_ensure_directory_creates_parents(tmp_path: Path):
    target = tmp_path / "a" / "b" / "c"

    assert ensure_directory(target) == target
    assert target.is_dir()


def test_ensure_directory_is_idempotent(tmp_path: Path):
    ensure_directory(tmp_path / "dir")
    (tmp_path / "dir" / "keep.txt").write_text("x")

    ensure_directory(tmp_path / "dir")

    assert (tmp_path / "dir" / "keep.txt").read_text() == "x"


def test_ensure_directory_fails_on_file(tmp_path: Path):
    blocker = tmp_path / "blocker"
    blocker.write_text("x")

    with pytest.raises(FileExistsError):
        ensure_directory(blocker)


def test_remove_file(tmp_path: Path):
    target = tmp_path / "f.txt"
    target.write_text("x")

    assert remove_path(target) is True
    assert not target.exists()


def test_remove_tree(tmp_path: Path):
    tree = tmp_path / "tree"
    (tree / "sub").mkdir(parents=True)
    (tree / "sub" / "f.txt").write_text("x")

    assert remove_path(tree) is True
    assert not tree.exists()


def test_remove_missing_is_a_no_op(tmp_path: Path):
    assert remove_path(tmp_path / "missing") is False
    assert remove_path(tmp_path / "missing" / "deeper") is False


def test_remove_symlink_does_not_follow(tmp_path: Path):
    real = tmp_path / "real"
    real.mkdir()
    (real / "f.txt").write_text("x")
    link = tmp_path / "link"
    try:
        link.symlink_to(real, target_is_directory=True)
    except OSError:
        pytest.skip("symlinks not supported")

    assert remove_path(link) is True
    assert not link.exists()
    assert (real / "f.txt").exists()
