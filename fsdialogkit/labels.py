"""User-visible dialog texts, each overridable through an environment variable."""

from __future__ import annotations

from enum import Enum

from .environment import get_variable

__all__ = ["Label", "label"]


class Label(Enum):
    """A dialog text, with the variable that overrides it and its default."""

    QUICK_ACCESS = ("IMGUI_QUICK_ACCESS", "Quick Access")
    THIS_PC = ("IMGUI_THIS_PC", "This PC")
    ALL_FILES = ("IMGUI_ALL_FILES", "All Files (*.*)")
    NAME = ("IMGUI_NAME", "Name")
    DATE_MODIFIED = ("IMGUI_DATE_MODIFIED", "Date modified")
    SIZE = ("IMGUI_SIZE", "Size")
    NEW_FILE = ("IMGUI_NEW_FILE", "New file")
    NEW_DIRECTORY = ("IMGUI_NEW_DIRECTORY", "New directory")
    DELETE = ("IMGUI_DELETE", "Delete")
    ARE_YOU_SURE = ("IMGUI_ARE_YOU_SURE", "Are you sure?")
    OVERWRITE_FILE = ("IMGUI_OVERWRITE_FILE", "Overwrite file?")
    ENTER_FILE_NAME = ("IMGUI_ENTER_FILE_NAME", "Enter file name")
    ENTER_DIRECTORY_NAME = ("IMGUI_ENTER_DIRECTORY_NAME", "Enter directory name")
    ARE_YOU_SURE_YOU_WANT_TO_DELETE = (
        "IMGUI_ARE_YOU_SURE_YOU_WANT_TO_DELETE",
        "Are you sure you want to delete %s?",
    )
    ARE_YOU_SURE_YOU_WANT_TO_OVERWRITE = (
        "IMGUI_ARE_YOU_SURE_YOU_WANT_TO_OVERWRITE",
        "Are you sure you want to overwrite %s?",
    )
    YES = ("IMGUI_YES", "Yes")
    NO = ("IMGUI_NO", "No")
    OK = ("IMGUI_OK", "OK")
    CANCEL = ("IMGUI_CANCEL", "Cancel")
    SEARCH = ("IMGUI_SEARCH", "Search")
    FILE_NAME_WITH_COLON = ("IMGUI_FILE_NAME_WITH_COLON", "File name:")
    FILE_NAME_WITHOUT_COLON = ("IMGUI_FILE_NAME_WITHOUT_COLON", "File name")
    SAVE = ("IMGUI_SAVE", "Save")
    OPEN = ("IMGUI_OPEN", "Open")

    def __init__(self, env_var: str, default: str) -> None:
        self.env_var = env_var
        self.default = default

    def text(self) -> str:
        """Return the override from the environment, or the default if unset or empty."""
        return get_variable(self.env_var) or self.default


def label(key: Label | str) -> str:
    """Return the text for a Label or for a label's member name.

    Raises KeyError for an unknown name.
    """
    if isinstance(key, Label):
        return key.text()
    try:
        member = Label[key.upper()]
    except KeyError:
        raise KeyError(f"unknown label: {key!r}") from None
    return member.text()