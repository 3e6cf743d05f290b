from __future__ import annotations

import logging
from typing import Iterable, Protocol

import numpy as np

from .char_list import CharList
from .config import ModelConfig

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    def random(self) -> float: ...


class LanguageModel:
    """Character-level sliding-window language model.

    Maps every window of `window_length` characters seen in the corpus to a
    CharList of the characters that followed it. Generation walks the table
    from the tail of a seed text, sampling one successor at a time.

    A model built with a seed (or an injected `rng`) produces the same texts
    on every run; without one it draws its seed from OS entropy.
    """

    def __init__(
        self,
        window_length: int,
        seed: int | None = None,
        *,
        rng: RandomSource | None = None,
    ) -> None:
        if window_length < 1:
            raise ValueError("window_length must be >= 1")
        if seed is not None and seed < 0:
            raise ValueError("seed must be a non-negative integer")

        self._window_length = window_length
        self._rng: RandomSource = rng if rng is not None else np.random.default_rng(seed)
        self._table: dict[str, CharList] = {}
        self._trained = False

    @classmethod
    def from_config(cls, config: ModelConfig | None = None) -> LanguageModel:
        cfg = config or ModelConfig()
        return cls(cfg.window_length, cfg.seed)

    @property
    def window_length(self) -> int:
        return self._window_length

    @property
    def trained(self) -> bool:
        return self._trained

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, window: object) -> bool:
        return window in self._table

    def get_row(self, window: str) -> CharList | None:
        return self._table.get(window)

    def windows(self) -> list[str]:
        return list(self._table)

    def train(self, source: Iterable[str]) -> None:
        """Build the table from a stream of characters in a single pass."""

        self._check_untrained()
        self._table = self._count(source)
        self._finalize()

    def train_shards(self, sources: Iterable[Iterable[str]]) -> None:
        """Train from several independent corpora.

        Each shard is counted into its own partial table. Partial tables are
        merged in shard order and probabilities are computed only once the
        merge is complete. Windows never span two shards.
        """

        self._check_untrained()
        table: dict[str, CharList] = {}
        n_shards = 0
        for source in sources:
            for window, row in self._count(source).items():
                existing = table.get(window)
                if existing is None:
                    table[window] = row
                else:
                    existing.merge(row)
            n_shards += 1

        logger.debug(f"Merged {n_shards} shards into {len(table)} windows")
        self._table = table
        self._finalize()

    def _check_untrained(self) -> None:
        if self._trained:
            raise RuntimeError("model is already trained; build a new LanguageModel to train again")

    def _count(self, source: Iterable[str]) -> dict[str, CharList]:
        table: dict[str, CharList] = {}
        chars = iter(source)

        window = ""
        for ch in chars:
            window += ch
            if len(window) == self._window_length:
                break

        if len(window) < self._window_length:
            logger.debug(
                f"Corpus has {len(window)} characters, fewer than window length "
                f"{self._window_length}; table stays empty"
            )
            return table

        for ch in chars:
            row = table.get(window)
            if row is None:
                row = CharList()
                table[window] = row
            row.update(ch)
            window = window[1:] + ch

        return table

    def _finalize(self) -> None:
        for row in self._table.values():
            row.finalize_probabilities()
        self._trained = True
        logger.info(f"Trained model with {len(self._table)} windows (window length {self._window_length})")

    def _random_char(self, row: CharList) -> str:
        return row.sample(float(self._rng.random()))

    def generate(self, initial_text: str, length: int) -> str:
        """Extend `initial_text` by up to `length` sampled characters.

        Returns `initial_text` unchanged when it is shorter than the window.
        Stops early, returning what it has so far, when it reaches a window
        the corpus never continued.
        """

        if length < 0:
            raise ValueError("length must be >= 0")
        if len(initial_text) < self._window_length:
            return initial_text

        window = initial_text[len(initial_text) - self._window_length:]
        out = [initial_text]

        for i in range(length):
            row = self._table.get(window)
            if row is None:
                logger.debug(f"No continuation for window {window!r} after {i} characters")
                break
            nxt = self._random_char(row)
            out.append(nxt)
            window = window[1:] + nxt

        return "".join(out)

    def dump(self) -> str:
        """Textual dump of the table, one `window : (records)` line per window."""

        return "".join(f"{window} : {row}\n" for window, row in self._table.items())

    def __str__(self) -> str:
        return self.dump()
