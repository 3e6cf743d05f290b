"""
Command-line entry point for the character window language model.

Usage:
    charlm 3 "The " 200 fixed corpus.txt          # reproducible (seed 20)
    charlm 3 "The " 200 random corpus.txt         # different text every run
    charlm 2 "ab" 0 fixed corpus.txt --dump       # print the trained table
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from .config import DEFAULT_FIXED_SEED, CorpusConfig, ModelConfig, load_config_file
from .corpus import read_corpus
from .language_model import LanguageModel

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="charlm",
        description="Train a character-window language model on a corpus and generate text",
    )

    parser.add_argument("window_length", type=int, help="Number of characters in each context window")
    parser.add_argument("initial_text", help="Text to start generating from")
    parser.add_argument("text_length", type=int, help="Number of characters to generate")
    parser.add_argument(
        "mode",
        choices=["fixed", "random"],
        help="'fixed' seeds the random generator for reproducible output; 'random' does not",
    )
    parser.add_argument("corpus", help="Path to the training text file")

    parser.add_argument(
        "--seed",
        type=int,
        default=DEFAULT_FIXED_SEED,
        help=f"Seed used in fixed mode (default: {DEFAULT_FIXED_SEED})",
    )
    parser.add_argument(
        "--config", "-c",
        type=str,
        help="Path to a JSON file with 'model' and 'corpus' sections",
    )
    parser.add_argument(
        "--normalize",
        action="store_true",
        help="Normalize the corpus (control characters, whitespace) before training",
    )
    parser.add_argument(
        "--dump",
        action="store_true",
        help="Print the trained table to stdout before the generated text",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    model_dict: dict = {}
    corpus_dict: dict = {}
    if args.config:
        try:
            model_dict, corpus_dict = load_config_file(args.config)
        except FileNotFoundError:
            logger.error(f"Config file not found: {args.config}")
            return 1

    model_dict["window_length"] = args.window_length
    model_dict["seed"] = args.seed if args.mode == "fixed" else None
    if args.normalize:
        corpus_dict["normalize"] = True

    try:
        model_cfg = ModelConfig.from_dict(model_dict)
    except ValueError as e:
        logger.error(str(e))
        return 2
    corpus_cfg = CorpusConfig.from_dict(corpus_dict)

    try:
        text = read_corpus(args.corpus, corpus_cfg)
    except FileNotFoundError as e:
        logger.error(str(e))
        return 1

    model = LanguageModel.from_config(model_cfg)
    model.train(text)

    if args.dump:
        sys.stdout.write(model.dump())

    try:
        print(model.generate(args.initial_text, args.text_length))
    except ValueError as e:
        logger.error(str(e))
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
