import logging
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional

from .data_loader import read_words
from .errors import InsufficientCorpus, InvalidConfiguration, MissingContext

logger = logging.getLogger(__name__)

SEPARATOR = " "


class FrequencyTable:
    """
    Character frequencies observed after every fixed-length context of a corpus.

    Built once with build_table (or the from_* constructors) and read-only
    afterwards, so a single table can be shared by any number of samplers.
    """

    def __init__(self, counts: Mapping[str, Mapping[str, int]], context_length: int):
        if context_length < 1:
            raise InvalidConfiguration(f"context_length must be >= 1, got {context_length}")
        table: Dict[str, Mapping[str, int]] = {}
        for context, successors in counts.items():
            if len(context) != context_length:
                raise InvalidConfiguration(
                    f"Context {context!r} has length {len(context)}, expected {context_length}"
                )
            if not successors:
                raise InvalidConfiguration(f"Context {context!r} has no successors")
            if any(c < 1 for c in successors.values()):
                raise InvalidConfiguration(f"Context {context!r} has a non-positive count")
            table[context] = MappingProxyType(dict(successors))
        self._table = MappingProxyType(table)
        self._context_length = context_length

    @classmethod
    def from_words(cls, words: Iterable[str], context_length: int) -> "FrequencyTable":
        return build_table(words, context_length)

    @classmethod
    def from_reader(cls, reader: Iterable[str], context_length: int) -> "FrequencyTable":
        """Build from an iterable of text lines, e.g. an open word-list file."""
        return build_table(read_words(reader), context_length)

    @property
    def context_length(self) -> int:
        return self._context_length

    @property
    def start_context(self) -> str:
        return SEPARATOR * self._context_length

    def get(self, context: str) -> Optional[Mapping[str, int]]:
        return self._table.get(context)

    def __getitem__(self, context: str) -> Mapping[str, int]:
        successors = self._table.get(context)
        if successors is None:
            raise MissingContext(context)
        return successors

    def __contains__(self, context: object) -> bool:
        return context in self._table

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"FrequencyTable(context_length={self._context_length}, contexts={len(self)})"

    def total(self, context: str) -> int:
        """Number of times `context` was seen with a successor."""
        return sum(self[context].values())

    def probabilities(self, context: str) -> Dict[str, float]:
        successors = self[context]
        denom = sum(successors.values())
        return {ch: n / denom for ch, n in successors.items()}

    def generate_words(self, amount: int, rng=None, max_length: Optional[int] = None) -> List[str]:
        from .generator import sample_many

        return sample_many(self, amount, rng=rng, max_length=max_length)


def pad_corpus(words: Iterable[str], context_length: int) -> str:
    """
    Lowercase every word and prefix it with `context_length` separators.

    Words are joined back-to-back, so the tail of one word is followed by the
    leading pad of the next. One separator closes the stream so the last word's
    final context also has a successor.
    """
    pad = SEPARATOR * context_length
    stream = "".join(pad + word.lower() for word in words)
    if stream:
        stream += SEPARATOR
    return stream


def build_table(words: Iterable[str], context_length: int) -> FrequencyTable:
    if context_length < 1:
        raise InvalidConfiguration(f"context_length must be >= 1, got {context_length}")

    stream = pad_corpus(words, context_length)
    if len(stream) < context_length + 1 or not stream.strip(SEPARATOR):
        raise InsufficientCorpus(
            f"Corpus has no letters to learn from (padded stream is {len(stream)} chars)"
        )

    counts: Dict[str, Dict[str, int]] = {}
    for i in range(len(stream) - context_length):
        key = stream[i:i + context_length]
        next_char = stream[i + context_length]
        successors = counts.setdefault(key, {})
        successors[next_char] = successors.get(next_char, 0) + 1

    logger.debug(
        "Built table: context_length=%d, contexts=%d, stream=%d chars",
        context_length, len(counts), len(stream),
    )
    return FrequencyTable(counts, context_length)
