from pathlib import Path
from typing import Iterable, List, Union


def read_words(lines: Iterable[str]) -> List[str]:
    """One word per line; line terminators are dropped, blank lines are kept."""
    return [line.rstrip("\r\n") for line in lines]


def load_words(path: Union[str, Path], encoding: str = "utf-8") -> List[str]:
    with open(path, "r", encoding=encoding) as f:
        return read_words(f)
