import threading

import pytest

from wordgen import (
    SEPARATOR,
    FrequencyTable,
    GeneratorConfig,
    InvalidConfiguration,
    MissingContext,
    PythonRandomSource,
    SamplingLimitExceeded,
    build_table,
    generate_from_config,
    generate_words,
    sample_many,
    sample_one,
)

CORPUS = ["maison", "jardin", "chanson", "mouton", "bouton", "savon", "raisin", "sapin"]


class ScriptedSource:
    """Returns characters from a fixed script and records what it was offered."""

    def __init__(self, script):
        self.script = list(script)
        self.offers = []

    def choice(self, options, weights):
        self.offers.append(dict(zip(options, weights)))
        return self.script.pop(0)


def test_sample_one_walks_until_separator():
    table = build_table(["cat", "car", "can"], 1)
    source = ScriptedSource(["c", "a", "r", " "])
    assert sample_one(table, source) == "car"
    assert source.offers[0] == {"c": 3}
    assert source.offers[2] == {"t": 1, "r": 1, "n": 1}


def test_cat_car_can_scenario(cat_table, rng):
    words = sample_many(cat_table, 5, rng=rng)
    assert len(words) == 5
    assert all(w in ("cat", "car", "can") for w in words)
    assert all(w.startswith("c") for w in words)


@pytest.mark.parametrize("k", [1, 2, 3])
def test_sample_many_sorted_by_length(k, rng):
    table = build_table(CORPUS, k)
    words = sample_many(table, 50, rng=rng)
    lengths = [len(w) for w in words]
    assert lengths == sorted(lengths)


def test_sample_many_sort_is_stable():
    table = build_table(["ab", "cd", "e"], 1)
    # draws "ab", "e", "cd" in that order
    source = ScriptedSource(["a", "b", " ", "e", " ", "c", "d", " "])
    assert sample_many(table, 3, rng=source) == ["e", "ab", "cd"]


def test_sample_many_zero_does_no_lookups():
    source = ScriptedSource([])
    empty = FrequencyTable({}, 2)
    assert sample_many(empty, 0, rng=source) == []
    assert source.offers == []


def test_sample_many_rejects_negative_count(cat_table):
    with pytest.raises(InvalidConfiguration):
        sample_many(cat_table, -1)


def test_generated_words_have_no_separators(rng):
    table = build_table(CORPUS, 2)
    for word in sample_many(table, 30, rng=rng):
        assert word == word.strip(SEPARATOR)
        assert SEPARATOR not in word


def test_walk_terminates_on_self_loop(rng):
    table = build_table(["aaaa"], 1)
    assert set(table["a"]) == {"a", " "}
    for word in sample_many(table, 20, rng=rng):
        assert set(word) == {"a"}


def test_missing_start_context_is_reported():
    table = FrequencyTable({"a": {"b": 1}}, 1)
    with pytest.raises(MissingContext) as excinfo:
        sample_one(table, PythonRandomSource(0))
    assert excinfo.value.context == " "


def test_missing_context_aborts_batch():
    table = FrequencyTable({" ": {"a": 1}}, 1)
    with pytest.raises(MissingContext):
        sample_many(table, 3, rng=PythonRandomSource(0))


def test_max_length_guard():
    table = FrequencyTable({" ": {"a": 1}, "a": {"a": 1}}, 1)
    with pytest.raises(SamplingLimitExceeded):
        sample_one(table, PythonRandomSource(0), max_length=10)


def test_max_length_allows_short_words(cat_table, rng):
    assert len(sample_one(cat_table, rng, max_length=3)) == 3


def test_seeded_sources_reproduce():
    table = build_table(CORPUS, 2)
    first = sample_many(table, 20, rng=PythonRandomSource(7))
    second = sample_many(table, 20, rng=PythonRandomSource(7))
    assert first == second


def test_higher_count_is_more_likely():
    table = FrequencyTable({" ": {"a": 99, "b": 1}, "a": {" ": 1}, "b": {" ": 1}}, 1)
    words = sample_many(table, 200, rng=PythonRandomSource(3))
    assert words.count("a") > words.count("b")


def test_concurrent_sampling_shares_table():
    table = build_table(CORPUS, 3)
    before = {k: dict(table[k]) for k in table}
    results = {}

    def worker(i):
        results[i] = sample_many(table, 25, rng=PythonRandomSource(i))

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert all(len(words) == 25 for words in results.values())
    assert {k: dict(table[k]) for k in table} == before


def test_table_generate_words(cat_table, rng):
    words = cat_table.generate_words(4, rng=rng)
    assert len(words) == 4


def test_generate_words_one_shot():
    words = generate_words(CORPUS, 3, 10, rng=PythonRandomSource(1))
    assert len(words) == 10
    assert [len(w) for w in words] == sorted(len(w) for w in words)


def test_generate_words_checks_count_before_building():
    with pytest.raises(InvalidConfiguration):
        generate_words([], 3, -1)


def test_generate_from_config():
    config = GeneratorConfig(context_length=2, word_count=6, seed=11)
    first = generate_from_config(CORPUS, config)
    second = generate_from_config(CORPUS, config)
    assert len(first) == 6
    assert first == second
