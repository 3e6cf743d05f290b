from __future__ import annotations

from typing import Iterator

from .char_data import CharData

# Returned by sample() when rounding leaves the last cp just below the draw.
FALLBACK_CHAR = " "


class CharList:
    """Ordered list of CharData records for a single window.

    New characters go to the front, so the order is most-recently-introduced
    first. That order decides which character owns which slice of [0, 1) in
    sample(), so it is never sorted.

    finalize_probabilities() freezes the counts: update, add_first, remove
    and merge raise RuntimeError afterwards.
    """

    def __init__(self) -> None:
        self._records: list[CharData] = []
        self._finalized = False

    @property
    def size(self) -> int:
        return len(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[CharData]:
        return iter(self._records)

    def __str__(self) -> str:
        return "(" + " ".join(str(rec) for rec in self._records) + ")"

    def get_first(self) -> CharData:
        return self.get(0)

    def _check_mutable(self) -> None:
        if self._finalized:
            raise RuntimeError("row is finalized; its counts can no longer change")

    def add_first(self, character: str) -> None:
        self._check_mutable()
        self._records.insert(0, CharData(character))

    def index_of(self, character: str) -> int:
        """Position of the record for `character`, or -1."""

        for i, rec in enumerate(self._records):
            if rec == character:
                return i
        return -1

    def update(self, character: str) -> None:
        self._check_mutable()
        index = self.index_of(character)
        if index == -1:
            self.add_first(character)
            index = 0
        self._records[index].count += 1

    def remove(self, character: str) -> bool:
        self._check_mutable()
        index = self.index_of(character)
        if index == -1:
            return False
        del self._records[index]
        return True

    def get(self, index: int) -> CharData:
        if index < 0 or index >= len(self._records):
            raise IndexError(f"index {index} out of range for row of size {len(self._records)}")
        return self._records[index]

    def to_array(self) -> list[CharData]:
        return list(self._records)

    def iter_from(self, index: int = 0) -> Iterator[CharData]:
        if index < 0 or index > len(self._records):
            raise IndexError(f"index {index} out of range for row of size {len(self._records)}")
        return iter(self._records[index:])

    def merge(self, other: CharList) -> None:
        """Add another partial row's counts into this one.

        Characters this row already has get their counts summed. The rest are
        prepended keeping their relative order from `other`.
        """

        self._check_mutable()

        for rec in reversed(other.to_array()):
            index = self.index_of(rec.character)
            if index == -1:
                self._records.insert(0, CharData(rec.character, rec.count))
            else:
                self._records[index].count += rec.count

    def finalize_probabilities(self) -> None:
        """Set p and cp on every record from the current counts, in row order."""

        self._finalized = True
        letters = sum(rec.count for rec in self._records)
        if letters == 0:
            return

        running = 0
        for rec in self._records:
            running += rec.count
            rec.p = rec.count / letters
            rec.cp = running / letters

    def sample(self, draw: float) -> str:
        for rec in self._records:
            if rec.cp >= draw:
                return rec.character
        return FALLBACK_CHAR
