from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path

# Seed used by the CLI's "fixed" mode.
DEFAULT_FIXED_SEED = 20


@dataclass(frozen=True)
class ModelConfig:
    window_length: int = 3
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.window_length < 1:
            raise ValueError("window_length must be >= 1")
        if self.seed is not None and self.seed < 0:
            raise ValueError("seed must be a non-negative integer")

    @classmethod
    def from_dict(cls, config_dict: dict) -> ModelConfig:
        """Create a ModelConfig from a dict, ignoring unknown keys."""
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in config_dict.items() if k in names})

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class CorpusConfig:
    encoding: str = "utf-8"
    normalize: bool = False
    lowercase: bool = False
    strip_accents: bool = False
    collapse_whitespace: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict) -> CorpusConfig:
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in config_dict.items() if k in names})

    def to_dict(self) -> dict:
        return asdict(self)


def load_config_file(path: str | Path) -> tuple[dict, dict]:
    """Read a JSON config file with optional "model" and "corpus" sections.

    Returns the two sections as plain dicts so callers can overlay
    command-line values before building the dataclasses.
    """

    with open(path, "r", encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, dict):
        raise ValueError(f"Config file must contain a JSON object: {path}")
    return dict(raw.get("model", {})), dict(raw.get("corpus", {}))
