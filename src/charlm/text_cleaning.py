from __future__ import annotations

import re
import unicodedata

import regex  # type: ignore

from .config import CorpusConfig

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_corpus(text: str, config: CorpusConfig | None = None) -> str:
    """Optional normalization applied to a corpus before training.

    Off by default: the model learns whatever characters it is given,
    newlines and punctuation included.
    """

    cfg = config or CorpusConfig()
    s = text

    if cfg.lowercase:
        s = s.lower()

    if cfg.strip_accents:
        s = regex.sub(r"\p{Mn}+", "", unicodedata.normalize("NFKD", s))

    # Control characters other than newline and tab.
    s = regex.sub(r"[^\P{Cc}\n\t]", " ", s)

    if cfg.collapse_whitespace:
        s = _WHITESPACE_RE.sub(" ", s).strip()

    return s
