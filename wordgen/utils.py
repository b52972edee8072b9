import random
from typing import Optional, Sequence

import torch

from .errors import InvalidConfiguration


class PythonRandomSource:
    """Weighted choices from a private random.Random instance."""

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def choice(self, options: Sequence[str], weights: Sequence[int]) -> str:
        return self._rng.choices(options, weights=weights, k=1)[0]


class TorchRandomSource:
    """Weighted choices with torch.multinomial on a dedicated torch.Generator."""

    def __init__(self, seed: Optional[int] = None):
        self._generator = torch.Generator()
        if seed is None:
            self._generator.seed()
        else:
            self._generator.manual_seed(seed)

    def choice(self, options: Sequence[str], weights: Sequence[int]) -> str:
        probs = torch.tensor(weights, dtype=torch.float)
        index = torch.multinomial(probs, num_samples=1, generator=self._generator).item()
        return options[int(index)]


def get_random_source(name: str = "python", seed: Optional[int] = None):
    backend = name.strip().lower()
    if backend in ("python", "random", "stdlib"):
        return PythonRandomSource(seed)
    elif backend == "torch":
        return TorchRandomSource(seed)
    else:
        raise InvalidConfiguration(f"Unknown random source: {name}")
