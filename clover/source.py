"""Read-only access to the text of a source file."""

from __future__ import annotations

import os


class Source:
    """The whole text of a source file, loaded into memory."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        with open(path, encoding="utf-8", newline="") as fp:
            self._data = fp.read()

    def at(self, index: int) -> str:
        """Return the character at ``index``; raise IndexError past the end."""
        if index < 0 or index >= len(self._data):
            raise IndexError(f"index {index} out of range for source of length {len(self._data)}")
        return self._data[index]

    def substr(self, offset: int, length: int) -> str:
        """Return ``length`` characters from ``offset``.

        The slice must end strictly before the end of the text.
        """
        if offset < 0 or length < 0 or offset + length >= len(self._data):
            raise IndexError(
                f"range {offset}+{length} out of range for source of length {len(self._data)}"
            )
        return self._data[offset:offset + length]

    def text(self) -> str:
        """Return the whole text."""
        return self._data

    def __len__(self) -> int:
        return len(self._data)