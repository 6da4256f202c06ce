"""Filesystem helpers for file dialogs: environment variables, paths, captions,
file operations, timestamps, listings, locations, byte-level text I/O and
rectangle packing."""

__version__ = "0.1.0"

__all__ = [
    "environment",
    "paths",
    "labels",
    "fileops",
    "times",
    "listing",
    "locations",
    "textio",
    "rectpack",
]