# tests/resources/test_directory.py
from __future__ import annotations

import copy
import gc
import os
import re
import shutil

import pytest

from tempscope import Settings
from tempscope.directory import Directory
from tempscope.fs import LocalFilesystem


def test_starts_empty():
    d = Directory()
    assert d.good is False
    assert d.path is None
    assert d.prefix == "tmp"


def test_create_remove_roundtrip(temp_root):
    d = Directory()
    assert d.create() is True
    assert d.good is True
    assert d.path.is_dir()
    assert d.path.parent == temp_root
    assert re.fullmatch(r"tmp[a-z0-9_]{8}", d.path.name)

    path = d.path
    assert d.remove() is True
    assert d.good is False
    assert not path.exists()


def test_remove_is_idempotent():
    d = Directory()
    d.create()
    assert d.remove() is True
    assert d.remove() is False
    assert d.remove() is False


def test_remove_without_create_reports_failure():
    assert Directory().remove() is False


def test_create_on_bound_handle_fails_without_side_effects(temp_root):
    d = Directory()
    assert d.create()
    first = d.path

    assert d.create() is False
    assert d.path == first
    assert list(temp_root.iterdir()) == [first]
    d.remove()


def test_handle_is_single_use():
    d = Directory()
    d.create()
    d.remove()

    assert d.create() is False
    assert d.good is False


def test_populated_directory_is_fully_removed():
    d = Directory("populated_")
    d.create()
    (d.path / "a.txt").write_text("a")
    (d.path / "b.bin").write_bytes(b"\x00\x01")
    nested = d.path / "sub" / "deeper"
    nested.mkdir(parents=True)
    (nested / "c.txt").write_text("c")

    path = d.path
    assert d.remove() is True
    assert not path.exists()


def test_vanished_directory_reports_failure_and_goes_bad():
    d = Directory()
    d.create()
    shutil.rmtree(d.path)

    assert d.remove() is False
    assert d.good is False


def test_exhausted_roots_leave_handle_empty(failing_fs):
    d = Directory(fs=failing_fs, settings=Settings(attempts_per_root=3))

    assert d.create() is False
    assert d.good is False
    assert d.path is None
    # TEMP, /tmp, /var/tmp, /usr/tmp and possibly PWD, three tries each
    assert len(failing_fs.make_calls) >= 12
    assert len(failing_fs.make_calls) % 3 == 0


def test_collected_handle_removes_directory():
    d = Directory()
    d.create()
    path = d.path

    del d
    gc.collect()

    assert not path.exists()


def test_context_manager_removes_on_exit():
    with Directory("ctx_") as d:
        assert d.create()
        path = d.path
        assert path.is_dir()
    assert not path.exists()
    assert d.good is False


def test_custom_prefix_and_name_length(temp_root):
    d = Directory("build-", settings=Settings(name_length=4))
    d.create()
    assert re.fullmatch(r"build-[a-z0-9_]{4}", d.path.name)
    d.remove()


def test_default_prefix_comes_from_settings():
    d = Directory(settings=Settings(default_prefix="job_"))
    assert d.prefix == "job_"


def test_fspath_and_repr():
    d = Directory()
    with pytest.raises(ValueError):
        os.fspath(d)
    d.create()
    assert os.fspath(d) == str(d.path)
    assert "good=True" in repr(d)
    d.remove()


def test_handles_cannot_be_copied():
    d = Directory()
    with pytest.raises(TypeError):
        copy.copy(d)
    with pytest.raises(TypeError):
        copy.deepcopy(d)


class RefusingFilesystem(LocalFilesystem):
    """Creates normally, but every delete is rejected."""

    def remove_file(self, path) -> bool:
        return False

    def remove_tree(self, path) -> bool:
        return False


def test_rejected_tree_removal_reports_failure():
    d = Directory(fs=RefusingFilesystem())
    d.create()
    (d.path / "child.txt").write_text("x")

    assert d.remove() is False
    assert d.path.is_dir()
    assert d.good is False
    assert d.remove() is False
    shutil.rmtree(d.path)


def test_child_failures_alone_do_not_fail_removal():
    class StubbornChildren(LocalFilesystem):
        def remove_file(self, path) -> bool:
            return False

    d = Directory(fs=StubbornChildren())
    d.create()
    (d.path / "child.txt").write_text("x")
    path = d.path

    assert d.remove() is True
    assert not path.exists()


def test_directory_swapped_for_symlink_leaves_target_alone(tmp_path):
    victim = tmp_path / "victim"
    victim.mkdir()
    (victim / "keep.txt").write_text("keep")

    d = Directory()
    d.create()
    path = d.path
    path.rmdir()
    try:
        os.symlink(victim, path, target_is_directory=True)
    except (OSError, NotImplementedError):
        pytest.skip("symlinks not available")

    assert d.remove() is False
    assert (victim / "keep.txt").read_text() == "keep"
    path.unlink()
