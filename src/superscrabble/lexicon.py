import logging
from typing import FrozenSet, Iterable, Iterator, Optional, Tuple, Union

logger = logging.getLogger(__name__)


class LexiconError(ValueError):
    pass


class LexiconUnset(LexiconError):
    """Generation or validation was called without a lexicon."""


class EmptyLexicon(LexiconError):
    """The supplied lexicon has no words."""


class Lexicon:
    """Read-only word list: keeps load order for iteration and a set for lookups."""

    __slots__ = ("_words", "_index")

    def __init__(self, words: Iterable[str]):
        seen = set()
        ordered = []
        for w in words:
            word = str(w).strip().upper()
            if not word or not word.isalpha() or not word.isascii() or word in seen:
                continue
            seen.add(word)
            ordered.append(word)
        self._words: Tuple[str, ...] = tuple(ordered)
        self._index: FrozenSet[str] = frozenset(seen)

    @staticmethod
    def from_words(words: Iterable[str]) -> "Lexicon":
        return words if isinstance(words, Lexicon) else Lexicon(words)

    def __contains__(self, word: object) -> bool:
        return word in self._index

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"Lexicon({len(self._words)} words)"


LexiconLike = Union[Lexicon, Iterable[str]]


def load_dictionary(path: str) -> Lexicon:
    with open(path, "r", encoding="utf-8") as f:
        lexicon = Lexicon(line for line in f if line.strip() and line[0].isalpha())
    logger.debug("Loaded %d words from %s", len(lexicon), path)
    return lexicon


def require_lexicon(lexicon: Optional[LexiconLike]) -> Lexicon:
    if lexicon is None:
        raise LexiconUnset("No lexicon supplied")
    lexicon = Lexicon.from_words(lexicon)
    if len(lexicon) == 0:
        raise EmptyLexicon("Lexicon contains no words")
    return lexicon
