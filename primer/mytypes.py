"""Small custom types built on integers, strings and string builders."""

from __future__ import annotations

import io
from dataclasses import dataclass, field

__all__ = ["MyInt", "MyString", "MyBuilder", "StringUppercaser", "double"]


class MyInt(int):
    """An integer with a few extra methods."""

    def twice(self) -> MyInt:
        """Return this value multiplied by 2."""
        return MyInt(self * 2)

    def doubled(self) -> MyInt:
        """Return this value multiplied by 2."""
        return MyInt(self * 2)


def double(value: int) -> int:
    """Return ``value`` multiplied by 2."""
    return value * 2


class MyString(str):
    """A string with a length method."""

    def length(self) -> int:
        """Return the length of the string in UTF-8 bytes."""
        return len(self.encode("utf-8"))


class MyBuilder:
    """Accumulates text piece by piece."""

    def __init__(self) -> None:
        self._parts: list[str] = []

    def write(self, text: str) -> int:
        """Append ``text`` and return the number of characters written."""
        self._parts.append(text)
        return len(text)

    def hello(self) -> str:
        """Return a fixed greeting."""
        return "Hello, Gophers!"

    def __str__(self) -> str:
        return "".join(self._parts)

    def __len__(self) -> int:
        """Return the length of the accumulated text in UTF-8 bytes."""
        return sum(len(part.encode("utf-8")) for part in self._parts)


@dataclass
class StringUppercaser:
    """Holds text and returns it upper-cased."""

    contents: io.StringIO = field(default_factory=io.StringIO)

    def to_upper(self) -> str:
        """Return the accumulated text in upper case."""
        return self.contents.getvalue().upper()