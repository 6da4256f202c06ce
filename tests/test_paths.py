import os

import pytest

from fsdialogkit import paths


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "dir" / "sub").mkdir(parents=True)
    (tmp_path / "dir" / "file.txt").write_text("data")
    (tmp_path / "other").mkdir()
    return tmp_path


def test_filename_path_and_name_split():
    assert paths.filename_path("/a/b/c.txt") == "/a/b/"
    assert paths.filename_name("/a/b/c.txt") == "c.txt"


def test_filename_path_without_separator_returns_input():
    assert paths.filename_path("c.txt") == "c.txt"
    assert paths.filename_name("c.txt") == "c.txt"


def test_filename_ext():
    assert paths.filename_ext("/a/b/archive.tar.gz") == ".gz"
    assert paths.filename_ext("/a.b/noext") == ""


def test_path_plus_name_rebuilds_input():
    text = "/x/y/z.dat"
    assert paths.filename_path(text) + paths.filename_name(text) == text


def test_expand_strips_trailing_separator(tree):
    base = str(tree / "dir")
    assert paths.expand_without_trailing_slash(base + "/") == base
    assert paths.expand_without_trailing_slash(base + "//") == base


def test_expand_keeps_root():
    assert paths.expand_without_trailing_slash("/") == "/"


def test_expand_with_trailing_adds_one_separator(tree):
    base = str(tree / "dir")
    assert paths.expand_with_trailing_slash(base) == base + os.sep
    assert paths.expand_with_trailing_slash(base + os.sep) == base + os.sep


def test_expand_relative_uses_working_directory(tree, monkeypatch):
    monkeypatch.chdir(tree)
    assert paths.expand_without_trailing_slash("dir") == os.path.join(os.getcwd(), "dir")


def test_expand_substitutes_environment(tree, monkeypatch):
    monkeypatch.setenv("FSDIALOGKIT_BASE", str(tree))
    result = paths.expand_without_trailing_slash("${FSDIALOGKIT_BASE}/dir")
    assert result == str(tree / "dir")


def test_file_and_directory_exists(tree):
    assert paths.file_exists(str(tree / "dir" / "file.txt")) is True
    assert paths.directory_exists(str(tree / "dir" / "file.txt")) is False
    assert paths.directory_exists(str(tree / "dir")) is True
    assert paths.file_exists(str(tree / "dir")) is False
    assert paths.file_exists(str(tree / "nothing")) is False
    assert paths.directory_exists(str(tree / "nothing")) is False


def test_filename_absolute(tree, monkeypatch):
    monkeypatch.chdir(tree)
    assert paths.filename_absolute("dir") == os.path.join(os.getcwd(), "dir") + os.sep
    assert paths.filename_absolute("dir/file.txt") == os.path.join(os.getcwd(), "dir/file.txt")
    assert paths.filename_absolute("missing") == ""


def test_filename_canonical_resolves_dots_and_links(tree):
    link = tree / "link.txt"
    link.symlink_to(tree / "dir" / "file.txt")
    expected = os.path.realpath(str(tree / "dir" / "file.txt"))
    assert paths.filename_canonical(str(link)) == expected
    assert paths.filename_canonical(str(tree / "dir" / "sub" / ".." / "file.txt")) == expected


def test_filename_canonical_directory_has_separator(tree):
    result = paths.filename_canonical(str(tree / "dir" / "sub" / ".."))
    assert result == os.path.realpath(str(tree / "dir")) + os.sep


def test_filename_equivalent(tree):
    plain = str(tree / "dir" / "file.txt")
    roundabout = str(tree / "dir" / "sub" / ".." / "file.txt")
    assert paths.filename_equivalent(plain, roundabout) is True
    assert paths.filename_equivalent(plain, str(tree / "dir")) is False
    assert paths.filename_equivalent(plain, str(tree / "missing")) is False


def test_is_inside_directory(tree):
    outer = str(tree / "dir")
    assert paths.is_inside_directory(outer, str(tree / "dir" / "sub")) is True
    assert paths.is_inside_directory(outer, str(tree / "dir" / "sub" / "new")) is True
    assert paths.is_inside_directory(outer, outer) is True
    assert paths.is_inside_directory(outer, str(tree / "other")) is False


def test_is_inside_directory_needs_existing_outer(tree):
    assert paths.is_inside_directory(str(tree / "missing"), str(tree / "missing" / "x")) is False