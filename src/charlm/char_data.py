from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class CharData:
    """One successor character of a window, with its count and probabilities.

    Two records are the same record iff their characters match; counts and
    probabilities play no part in equality.
    """

    character: str
    count: int = 0
    p: float = 0.0
    cp: float = 0.0

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CharData):
            return self.character == other.character
        if isinstance(other, str):
            return self.character == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.character)

    def __str__(self) -> str:
        return f"({self.character} {self.count} {self.p} {self.cp})"
