import os

import pytest

from fsdialogkit.listing import DirectoryListing, SortOrder, list_directory


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "a.txt").write_text("a")
    (tmp_path / "b.log").write_text("bb")
    (tmp_path / "c.txt").write_text("ccc")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "d.txt").write_text("dddd")
    (sub / "e.md").write_text("e")
    return tmp_path


def _file(root, *parts):
    return str(root.joinpath(*parts))


def _dir(root, *parts):
    return str(root.joinpath(*parts)) + os.sep


def test_all_entries_sorted(tree):
    expected = sorted(
        [_file(tree, "a.txt"), _file(tree, "b.log"), _file(tree, "c.txt"), _dir(tree, "sub")]
    )
    assert list_directory(str(tree)) == expected


def test_pattern_keeps_directories(tree):
    result = list_directory(str(tree), "*.txt")
    assert result == sorted([_file(tree, "a.txt"), _file(tree, "c.txt"), _dir(tree, "sub")])


def test_pattern_without_directories(tree):
    result = list_directory(str(tree), "*.txt", includedirs=False)
    assert result == [_file(tree, "a.txt"), _file(tree, "c.txt")]


def test_multiple_patterns_with_spaces(tree):
    result = list_directory(str(tree), " *.txt ; *.log ", includedirs=False)
    assert result == [_file(tree, "a.txt"), _file(tree, "b.log"), _file(tree, "c.txt")]


def test_recursive_files_only(tree):
    result = list_directory(str(tree), "", includedirs=False, recursive=True)
    assert result == sorted(
        [
            _file(tree, "a.txt"),
            _file(tree, "b.log"),
            _file(tree, "c.txt"),
            _file(tree, "sub", "d.txt"),
            _file(tree, "sub", "e.md"),
        ]
    )


def test_recursive_with_pattern_and_dirs(tree):
    result = list_directory(str(tree), "*.txt", includedirs=True, recursive=True)
    assert _dir(tree, "sub") in result
    assert _file(tree, "sub", "d.txt") in result
    assert _file(tree, "sub", "e.md") not in result
    assert _file(tree, "b.log") not in result


def test_missing_directory_is_empty(tmp_path):
    listing = DirectoryListing()
    assert listing.first(str(tmp_path / "missing")) is None
    assert len(listing) == 0
    assert listing.complete is True


def test_first_and_next_walk_all_entries(tree):
    listing = DirectoryListing()
    seen = []
    item = listing.first(str(tree))
    while item is not None:
        seen.append(item)
        item = listing.next()
    assert seen == list_directory(str(tree))
    assert listing.next() is None


def test_reverse_order(tree):
    listing = DirectoryListing(order=SortOrder.ZTOA)
    listing.first(str(tree))
    assert list(listing) == list(reversed(list_directory(str(tree))))


def test_modified_orders(tree):
    times = {"a.txt": 3000, "b.log": 1000, "c.txt": 2000}
    for name, stamp in times.items():
        os.utime(tree / name, (stamp, stamp))
    oldest_first = [_file(tree, "b.log"), _file(tree, "c.txt"), _file(tree, "a.txt")]

    listing = DirectoryListing(order=SortOrder.MOTON)
    listing.first(str(tree), "*.txt;*.log", includedirs=False)
    assert list(listing) == oldest_first

    listing = DirectoryListing(order=SortOrder.MNTOO)
    listing.first(str(tree), "*.txt;*.log", includedirs=False)
    assert list(listing) == list(reversed(oldest_first))


def test_random_order_is_a_permutation(tree):
    listing = DirectoryListing(order=SortOrder.RAND)
    listing.first(str(tree))
    assert sorted(listing) == list_directory(str(tree))


def test_close_resets(tree):
    listing = DirectoryListing()
    listing.first(str(tree))
    assert len(listing) == 4
    listing.close()
    assert len(listing) == 0
    assert listing.complete is False
    assert listing.cntfiles == 1


def test_first_again_restarts_cursor(tree):
    listing = DirectoryListing()
    first = listing.first(str(tree))
    listing.next()
    assert listing.first(str(tree)) == first


def test_first_async(tree):
    listing = DirectoryListing()
    thread = listing.first_async(str(tree))
    thread.join(10)
    expected = list_directory(str(tree))
    assert listing.complete is True
    assert listing.next() == expected[0]
    assert listing.next() == expected[1]