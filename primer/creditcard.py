"""A credit card that must have a number."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Card"]


@dataclass(frozen=True)
class Card:
    """A credit card; raises ValueError if ``number`` is empty."""

    number: str

    def __post_init__(self) -> None:
        if self.number == "":
            raise ValueError("number must not be empty")