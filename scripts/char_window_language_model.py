from __future__ import annotations

from charlm import LanguageModel


def main() -> None:
    text = (
        "natural language processing (nlp) is fun. "
        "start small, iterate, and learn by coding. "
        "language models learn which letters follow which. "
    )

    model = LanguageModel(4, seed=20)
    model.train(text)
    print(model.generate("lang", 120))


if __name__ == "__main__":
    main()
