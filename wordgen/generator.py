import logging
from typing import Iterable, List, Optional

from .errors import InvalidConfiguration, SamplingLimitExceeded
from .model import SEPARATOR, FrequencyTable, build_table
from .utils import PythonRandomSource

logger = logging.getLogger(__name__)


def sample_one(table: FrequencyTable, rng=None, max_length: Optional[int] = None) -> str:
    """
    Random walk over `table` from the all-separator context until a separator
    is drawn. Raises MissingContext if the walk reaches an unknown context.
    """
    rng = rng or PythonRandomSource()
    k = table.context_length
    out = table.start_context
    while True:
        successors = table[out[-k:]]
        next_char = rng.choice(list(successors.keys()), list(successors.values()))
        out += next_char
        if next_char == SEPARATOR:
            break
        if max_length is not None and len(out) - k > max_length:
            raise SamplingLimitExceeded(f"Word grew past max_length={max_length}")
    return out.strip(SEPARATOR)


def sample_many(
    table: FrequencyTable,
    count: int,
    rng=None,
    max_length: Optional[int] = None,
) -> List[str]:
    """
    Draw `count` words and return them sorted by length.

    The sort is stable, so words of equal length keep their generation order.
    Any sampling error aborts the whole batch.
    """
    if count < 0:
        raise InvalidConfiguration(f"count must be >= 0, got {count}")
    rng = rng or PythonRandomSource()
    words = [sample_one(table, rng, max_length=max_length) for _ in range(count)]
    words.sort(key=len)
    logger.debug("Sampled %d words from %r", count, table)
    return words


def generate_words(
    words: Iterable[str],
    context_length: int,
    count: int,
    rng=None,
    max_length: Optional[int] = None,
) -> List[str]:
    """Build a table from `words` and sample `count` words from it."""
    if count < 0:
        raise InvalidConfiguration(f"count must be >= 0, got {count}")
    table = build_table(words, context_length)
    return sample_many(table, count, rng=rng, max_length=max_length)


def generate_from_config(words: Iterable[str], config) -> List[str]:
    return generate_words(
        words,
        config.context_length,
        config.word_count,
        rng=config.random_source(),
        max_length=config.max_length,
    )
