"""Helpers for splitting file paths and tokenizing strings."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TextIO


def strip_path(path: str) -> str:
    """Return the last component of ``path``.

    A backslash separator takes precedence over a forward slash.
    """
    ms_index = path.rfind("\\")
    if ms_index != -1:
        return path[ms_index + 1 :]
    unix_index = path.rfind("/")
    if unix_index != -1:
        return path[unix_index + 1 :]
    return path


def get_path(path: str) -> str:
    """Return the directory part of ``path``, or an empty string when there is none."""
    ms_index = path.rfind("\\")
    if ms_index != -1:
        return path[:ms_index]
    unix_index = path.rfind("/")
    if unix_index != -1:
        return path[:unix_index]
    return ""


def get_file_name(path: str) -> str:
    """Return the file name of ``path`` without directory and extension."""
    filename = strip_path(path)
    dot = filename.rfind(".")
    return filename if dot == -1 else filename[:dot]


def get_file_extension(path: str) -> str:
    """Return the text after the last dot of the file name.

    When the file name holds no dot the whole file name is returned.
    """
    filename = strip_path(path)
    return filename[filename.rfind(".") + 1 :]


def get_path_without_file_extension(path: str) -> str:
    """Return ``path`` with everything from its last dot removed."""
    dot = path.rfind(".")
    return path if dot == -1 else path[:dot]


def _iter_tokens(text: str, delimiter: str) -> Iterator[str]:
    token: list[str] = []
    for char in text:
        if char in delimiter:
            if token:
                yield "".join(token)
                token.clear()
        else:
            token.append(char)
    if token:
        yield "".join(token)


def tokenize(text: str, delimiter: str = " ") -> list[str]:
    """Split ``text`` on any character of ``delimiter``, dropping empty tokens."""
    return list(_iter_tokens(text, delimiter))


def go_to_line(stream: TextIO, num: int) -> None:
    """Advance ``stream`` past the next ``num`` lines."""
    for _ in range(num):
        if not stream.readline():
            break