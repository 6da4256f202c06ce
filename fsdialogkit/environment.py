"""Reading, changing and expanding process environment variables."""

from __future__ import annotations

import os

__all__ = [
    "get_variable",
    "variable_exists",
    "set_variable",
    "unset_variable",
    "expand_variables",
]


def _check_name(name: str) -> None:
    if not name or "=" in name or "\0" in name:
        raise ValueError(f"invalid environment variable name: {name!r}")


def get_variable(name: str) -> str:
    """Return the value of ``name``, or an empty string when it is not set."""
    return os.environ.get(name, "")


def variable_exists(name: str) -> bool:
    """Return whether ``name`` is set, even to an empty value."""
    return name in os.environ


def set_variable(name: str, value: str) -> None:
    """Set ``name`` to ``value``, replacing any earlier value.

    Raises ValueError for a name the environment cannot hold.
    """
    _check_name(name)
    os.environ[name] = value


def unset_variable(name: str) -> None:
    """Remove ``name`` from the environment; removing an unset name is fine.

    Raises ValueError for a name the environment cannot hold.
    """
    _check_name(name)
    os.environ.pop(name, None)


def expand_variables(text: str) -> str:
    """Replace every ``${NAME}`` whose variable is set with its value.

    References to unset variables are left as written. Substituted values
    are themselves expanded again, so a value may refer to other variables.
    """
    done = ""
    while True:
        start = text.find("${")
        if start < 0:
            return done + text
        close = text.find("}", start + 2)
        if close < 0:
            return done + text
        name = text[start + 2:close]
        if name not in os.environ:
            # Keep the unresolved reference and carry on past its opening.
            cut = close - start - 1
            done += text[:cut]
            text = text[cut:]
            continue
        text = text[:start] + os.environ[name] + text[close + 1:]