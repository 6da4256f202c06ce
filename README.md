# fsdialogkit

Building blocks for file-open and file-save dialogs, in plain Python with no
third-party dependencies.

## Modules

- `fsdialogkit.environment` — `get_variable`, `variable_exists`,
  `set_variable`, `unset_variable`, and `expand_variables`, which replaces
  every `${NAME}` whose variable is set and leaves the others as written.
- `fsdialogkit.paths` — path helpers that expand `${NAME}` references, make
  paths absolute and control the trailing separator:
  `expand_without_trailing_slash`, `expand_with_trailing_slash`,
  `filename_path`, `filename_name`, `filename_ext`, `file_exists`,
  `directory_exists`, `filename_absolute`, `filename_canonical`,
  `filename_equivalent` and `is_inside_directory`.
- `fsdialogkit.labels` — dialog captions as the `Label` enum. `Label.OPEN.text()`
  or `label("open")` returns the value of the matching `IMGUI_*` environment
  variable (for example `IMGUI_OPEN`) when it is set and non-empty, and the
  built-in English text otherwise.
- `fsdialogkit.fileops` — `file_copy`, `file_rename`, `file_delete`,
  `file_size`, `directory_create`, `directory_copy`, `directory_rename`,
  `directory_destroy`, `directory_size`, `symlink_create`, `symlink_copy`,
  `symlink_exists`, `hardlink_create`, `link_count`, `fd_link_count` and
  `find_hardlinks`, which returns the paths under the given directories that
  are hard links to an open file. Missing sources raise `FileNotFoundError`;
  copying or moving a directory into itself raises `ValueError`.
- `fsdialogkit.times` — `file_datetime` and `fd_datetime` return the access,
  modification or change time (`Timestamp.ACCESSED`, `MODIFIED`, `CREATED`)
  as a local `datetime`, to the second.
- `fsdialogkit.listing` — `DirectoryListing` walks a directory's entries in a
  `SortOrder` (alphabetical, reversed, by access, modification or change time,
  or random), filtered by patterns such as `"*.txt;*.md"`; directories always
  pass the filter and end in a separator. `first` / `next` step through the
  entries, `first_async` scans in a background thread, and the listing is
  iterable. `list_directory` returns all entries at once.
- `fsdialogkit.locations` — `current_working_directory`,
  `set_current_working_directory`, `temporary_path`, `executable_pathname`,
  `executable_directory`, `executable_filename`, and `special_path` for the
  user's desktop, documents, downloads, music, pictures and videos folders
  (`SpecialFolder`). On Linux and the BSDs these come from
  `~/.config/user-dirs.dirs` and are created if missing; on Windows and macOS
  they are the usual folder names under the user's profile or home directory.
- `fsdialogkit.textio` — `FileHandle`, a context manager over a raw file
  descriptor opened in an `OpenMode` (`RDONLY`, `WRONLY`, `RDWR`, `APPEND`,
  `RDAP`), with byte, string, line and number reads and writes.
  `FileHandle.from_string` puts text in a temporary file that is removed on
  close.
- `fsdialogkit.rectpack` — `Packer`, a skyline rectangle packer with
  bottom-left and best-fit heuristics (`Heuristic`), placing `Rect` objects.

## Examples

```python
from fsdialogkit.listing import DirectoryListing, SortOrder, list_directory

for path in list_directory("${HOME}/Documents", "*.txt;*.md", True, False):
    print(path)

listing = DirectoryListing(SortOrder.ZTOA, 0)
entry = listing.first(".", "*.py", False, True)
while entry is not None:
    print(entry)
    entry = listing.next()
```

```python
from fsdialogkit.textio import FileHandle, OpenMode

with FileHandle.open("notes.txt", OpenMode.WRONLY) as handle:
    handle.write_string("3.25")
    handle.writeln()

with FileHandle.open("notes.txt", OpenMode.RDONLY) as handle:
    value = handle.read_real()  # 3.25
```

```python
from fsdialogkit.rectpack import Heuristic, Packer, Rect

packer = Packer(256, 256, 256)
packer.set_heuristic(Heuristic.SKYLINE_BF_SORT_HEIGHT)
rects = [Rect(id=0, w=64, h=32), Rect(id=1, w=100, h=100)]
all_packed = packer.pack(rects)
```

## What it does not do

The package provides no dialog window, widgets or rendering and no command to
run; it supplies the filesystem, caption and packing pieces a dialog is built
from.

## Running the tests

```
pip install -e .[test]
pytest
```