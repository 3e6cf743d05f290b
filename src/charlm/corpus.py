from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

from .config import CorpusConfig
from .text_cleaning import normalize_corpus

logger = logging.getLogger(__name__)


def iter_chars(path: str | Path, encoding: str = "utf-8", chunk_size: int = 65536) -> Iterator[str]:
    """Yield the characters of a text file one at a time, reading in chunks."""

    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Corpus not found: {path}")

    with open(path, "r", encoding=encoding) as f:
        while True:
            chunk = f.read(chunk_size)
            if not chunk:
                break
            yield from chunk


def read_corpus(path: str | Path, config: CorpusConfig | None = None) -> str:
    cfg = config or CorpusConfig()
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Corpus not found: {path}")

    text = path.read_text(encoding=cfg.encoding)
    logger.info(f"Read {len(text)} characters from {path}")

    if cfg.normalize:
        text = normalize_corpus(text, cfg)
        logger.debug(f"Normalized corpus to {len(text)} characters")
    return text
