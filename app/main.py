import logging
import os
from functools import lru_cache
from typing import List, Literal, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from pydantic import BaseModel, Field

from wordgen import (
    FrequencyTable,
    GeneratorConfig,
    InsufficientCorpus,
    InvalidConfiguration,
    WordGenError,
    build_table,
    evaluate_table,
    load_words,
    novelty_rate,
    sample_many,
)

logger = logging.getLogger(__name__)

WORDLIST_ENV = "WORDGEN_WORDLIST"

app = FastAPI(title="word-generator", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

corpus = [
    "maison", "jardin", "fenetre", "chanson", "lumiere", "montagne", "riviere",
    "bonjour", "soleil", "nuage", "etoile", "chemin", "village", "fromage",
    "bouteille", "papillon", "orange", "citron", "cerise", "poisson",
    "chateau", "bateau", "oiseau", "cadeau", "gateau", "marteau", "couteau",
    "lapin", "sapin", "matin", "moulin", "raisin", "voisin", "cousin",
    "tortue", "avenue", "statue", "rue", "verdure", "nature", "voiture",
    "parole", "ecole", "etole", "console", "boussole", "casserole",
]

MAX_CONTEXT_LENGTH = 32


def default_corpus(path: Optional[str] = None) -> List[str]:
    if path:
        return load_words(path)
    return corpus


@lru_cache(maxsize=8)
def _cached_table(path: Optional[str], context_length: int) -> FrequencyTable:
    logger.info(
        "Building default table from %s with context_length=%d",
        path or "built-in corpus", context_length,
    )
    return build_table(default_corpus(path), context_length)


def default_table(context_length: int) -> FrequencyTable:
    return _cached_table(os.environ.get(WORDLIST_ENV), context_length)


class GenerateWordsRequest(GeneratorConfig):
    words: Optional[List[str]] = None
    context_length: int = Field(3, ge=1, le=MAX_CONTEXT_LENGTH)
    word_count: int = Field(15, ge=0, le=1000)


class GenerateWordsResponse(BaseModel):
    words: List[str]


class EvaluateRequest(BaseModel):
    words: Optional[List[str]] = None
    held_out: Optional[List[str]] = None
    context_length: int = Field(3, ge=1, le=MAX_CONTEXT_LENGTH)
    samples: int = Field(100, ge=1, le=5000)
    seed: Optional[int] = None
    backend: Literal["python", "torch"] = "python"


class EvaluateResponse(BaseModel):
    avg_nll: float
    coverage: float
    novelty: float


def _table_for(words: Optional[List[str]], context_length: int) -> FrequencyTable:
    try:
        if words is None:
            return default_table(context_length)
        return build_table(words, context_length)
    except (InvalidConfiguration, InsufficientCorpus) as e:
        raise HTTPException(status_code=422, detail=str(e))
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Cannot read word list from %s: %s", WORDLIST_ENV, e)
        raise HTTPException(status_code=500, detail=f"Cannot read word list: {e}")


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/", include_in_schema=False)
def root_redirect():
    return RedirectResponse("/docs")


@app.post("/generate_words", response_model=GenerateWordsResponse)
def generate_words(request: GenerateWordsRequest):
    logger.info(
        "generate_words: context_length=%d word_count=%d backend=%s",
        request.context_length, request.word_count, request.backend,
    )
    table = _table_for(request.words, request.context_length)
    try:
        words = sample_many(
            table,
            request.word_count,
            rng=request.random_source(),
            max_length=request.max_length,
        )
    except WordGenError as e:
        logger.error("Sampling failed: %s", e)
        raise HTTPException(status_code=500, detail=str(e))
    return {"words": words}


@app.post("/evaluate", response_model=EvaluateResponse)
def evaluate(request: EvaluateRequest):
    """
    avg_nll and coverage score `held_out` (or the training corpus when it is
    omitted) against the table; novelty is measured on freshly sampled words.
    """
    logger.info(
        "evaluate: context_length=%d samples=%d backend=%s",
        request.context_length, request.samples, request.backend,
    )
    table = _table_for(request.words, request.context_length)
    config = GeneratorConfig(
        context_length=request.context_length,
        word_count=request.samples,
        seed=request.seed,
        backend=request.backend,
    )
    try:
        generated = sample_many(table, config.word_count, rng=config.random_source())
    except WordGenError as e:
        logger.error("Sampling failed: %s", e)
        raise HTTPException(status_code=500, detail=str(e))

    if request.words is not None:
        source = request.words
    else:
        source = default_corpus(os.environ.get(WORDLIST_ENV))
    scored = request.held_out if request.held_out is not None else source
    avg_nll, coverage = evaluate_table(table, scored)
    return {
        "avg_nll": round(avg_nll, 4),
        "coverage": round(coverage, 2),
        "novelty": round(novelty_rate(generated, source), 2),
    }
