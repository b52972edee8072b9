from .config import GeneratorConfig
from .data_loader import load_words, read_words
from .errors import (
    InsufficientCorpus,
    InvalidConfiguration,
    MissingContext,
    SamplingLimitExceeded,
    WordGenError,
)
from .evaluator import evaluate_table, novelty_rate
from .generator import generate_from_config, generate_words, sample_many, sample_one
from .model import SEPARATOR, FrequencyTable, build_table, pad_corpus
from .utils import PythonRandomSource, TorchRandomSource, get_random_source

__all__ = [
    "FrequencyTable", "build_table", "pad_corpus", "SEPARATOR",
    "sample_one", "sample_many", "generate_words", "generate_from_config",
    "PythonRandomSource", "TorchRandomSource", "get_random_source",
    "GeneratorConfig",
    "load_words", "read_words",
    "evaluate_table", "novelty_rate",
    "WordGenError", "InvalidConfiguration", "InsufficientCorpus",
    "MissingContext", "SamplingLimitExceeded",
]
