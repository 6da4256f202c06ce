import os
from datetime import datetime

import pytest

from fsdialogkit.times import Timestamp, fd_datetime, file_datetime

STAMP = 1_000_000_000


@pytest.fixture
def stamped(tmp_path):
    f = tmp_path / "f.txt"
    f.write_text("x")
    os.utime(f, (STAMP, STAMP + 60))
    return f


def test_modified_time(stamped):
    assert file_datetime(str(stamped), Timestamp.MODIFIED) == datetime.fromtimestamp(STAMP + 60)


def test_accessed_time(stamped):
    assert file_datetime(str(stamped), Timestamp.ACCESSED) == datetime.fromtimestamp(STAMP)


def test_default_kind_is_modified(stamped):
    assert file_datetime(str(stamped)) == file_datetime(str(stamped), Timestamp.MODIFIED)


def test_integer_kind_accepted(stamped):
    assert file_datetime(str(stamped), 0) == datetime.fromtimestamp(STAMP)


def test_fractional_seconds_are_dropped(tmp_path):
    f = tmp_path / "frac.txt"
    f.write_text("x")
    os.utime(f, (STAMP + 0.75, STAMP + 0.75))
    result = file_datetime(str(f), Timestamp.MODIFIED)
    assert result == datetime.fromtimestamp(STAMP)
    assert result.microsecond == 0


def test_created_time_is_recent(tmp_path):
    before = datetime.fromtimestamp(int(datetime.now().timestamp()) - 5)
    f = tmp_path / "new.txt"
    f.write_text("x")
    created = file_datetime(str(f), Timestamp.CREATED)
    assert before <= created <= datetime.now()


def test_fd_datetime_matches_path(stamped):
    fd = os.open(stamped, os.O_RDONLY)
    try:
        for kind in Timestamp:
            assert fd_datetime(fd, kind) == file_datetime(str(stamped), kind)
    finally:
        os.close(fd)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        file_datetime(str(tmp_path / "none"))


def test_unknown_kind_raises(stamped):
    with pytest.raises(ValueError):
        file_datetime(str(stamped), 7)


def test_bad_fd_raises():
    r, w = os.pipe()
    os.close(r)
    os.close(w)
    with pytest.raises(OSError):
        fd_datetime(r)