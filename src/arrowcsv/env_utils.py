"""Environment variable helpers for CSV write settings."""

from __future__ import annotations

import os

# Escapes accepted in delimiter and separator values, since shells make raw
# tabs and line breaks awkward to pass.
_ESCAPES: dict[str, str] = {
    "\\t": "\t",
    "\\n": "\n",
    "\\r": "\r",
    "\\\\": "\\",
}


def env_value(name: str) -> str | None:
    """Return stripped env var value, or None if empty/not set.

    Parameters
    ----------
    name
        Environment variable name.

    Returns
    -------
    str | None
        Stripped value or None.
    """
    raw = os.environ.get(name)
    if raw is None:
        return None
    stripped = raw.strip()
    return stripped if stripped else None


def env_raw(name: str) -> str | None:
    """Return an env var value without stripping, or None if empty/not set.

    Whitespace is preserved because a space or tab is a valid delimiter.

    Returns
    -------
    str | None
        Raw value or None.
    """
    raw = os.environ.get(name)
    return raw if raw else None


def decode_escapes(value: str) -> str:
    """Replace backslash escapes for tab, CR, LF, and backslash.

    Returns
    -------
    str
        Value with supported escapes decoded; other text is unchanged.
    """
    out: list[str] = []
    index = 0
    while index < len(value):
        pair = value[index : index + 2]
        if pair in _ESCAPES:
            out.append(_ESCAPES[pair])
            index += 2
        else:
            out.append(value[index])
            index += 1
    return "".join(out)


__all__ = ["decode_escapes", "env_raw", "env_value"]
