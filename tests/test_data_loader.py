import io

from wordgen import FrequencyTable, load_words, read_words


def test_read_words_keeps_blank_lines():
    assert read_words(io.StringIO("a\r\n\nbc\n")) == ["a", "", "bc"]


def test_load_words(wordlist):
    words = load_words(wordlist)
    assert words[:2] == ["Maison", "Jardin"]
    assert len(words) == 6


def test_table_from_open_file(wordlist):
    with open(wordlist, encoding="utf-8") as f:
        table = FrequencyTable.from_reader(f, 2)
    assert "ma" in table
    assert "Ma" not in table
