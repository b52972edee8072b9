import pytest

from wordgen import PythonRandomSource, build_table


@pytest.fixture
def cat_words():
    return ["cat", "car", "can"]


@pytest.fixture
def cat_table(cat_words):
    return build_table(cat_words, 1)


@pytest.fixture
def rng():
    return PythonRandomSource(seed=1234)


@pytest.fixture
def wordlist(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("Maison\nJardin\nchanson\nmouton\nbouton\nsavon\n", encoding="utf-8")
    return path
