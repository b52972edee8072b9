import math
from typing import Iterable, Tuple

from .model import SEPARATOR, FrequencyTable


def evaluate_table(table: FrequencyTable, words: Iterable[str]) -> Tuple[float, float]:
    """
    Score `words` against the table and return (avg_nll, coverage_percent).

    Each word is padded the way the builder pads it and closed by a separator.
    avg_nll is the mean negative log-likelihood over transitions the table has
    seen; coverage is the share of all transitions it has seen.
    """
    k = table.context_length
    total_nll, observed, total = 0.0, 0, 0

    for word in words:
        padded = SEPARATOR * k + word.lower() + SEPARATOR
        for i in range(len(padded) - k):
            total += 1
            successors = table.get(padded[i:i + k])
            if not successors or padded[i + k] not in successors:
                continue
            p = successors[padded[i + k]] / sum(successors.values())
            total_nll -= math.log(p)
            observed += 1

    avg_nll = total_nll / max(1, observed)
    coverage = (100.0 * observed / total) if total > 0 else 0.0
    return avg_nll, coverage


def novelty_rate(generated: Iterable[str], corpus: Iterable[str]) -> float:
    """Percentage of generated words that do not appear verbatim in the corpus."""
    known = {w.lower() for w in corpus}
    generated = list(generated)
    if not generated:
        return 0.0
    novel = sum(1 for w in generated if w not in known)
    return 100.0 * novel / len(generated)
