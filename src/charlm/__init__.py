"""Character-level sliding-window language model.

Train a `LanguageModel` on a corpus, then `generate` text from a seed.
"""

from .char_data import CharData
from .char_list import FALLBACK_CHAR, CharList
from .config import CorpusConfig, ModelConfig
from .language_model import LanguageModel

__version__ = "1.0.0"

__all__ = [
    "CharData",
    "CharList",
    "CorpusConfig",
    "FALLBACK_CHAR",
    "LanguageModel",
    "ModelConfig",
]
