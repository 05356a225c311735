import pytest

from t9line.dictionary import (
    FREQUENCY_ADJUSTMENTS,
    Candidate,
    DictionaryIndex,
    iter_records,
    load_corpus,
    parse_record,
)
from t9line.keypad import DIGITS, ConfigurationError, encode


class TestParseRecord:
    def test_word_and_frequency(self):
        assert parse_record("cat\t86012\n") == ("cat", 86012.0)

    def test_fractional_frequency(self):
        assert parse_record("cat\t0.25") == ("cat", 0.25)

    def test_extra_columns_ignored(self):
        assert parse_record("cat\t12\tnoun") == ("cat", 12.0)

    @pytest.mark.parametrize(
        "line",
        [
            "cat",
            "cat 12",
            "",
            "\n",
            "# comment\t1",
            "\t12",
            "cat\t",
            "cat\tmany",
            "cat\t-3",
            "cat\tnan",
            "cat\tinf",
        ],
    )
    def test_malformed_lines_are_skipped(self, line):
        assert parse_record(line) is None


def test_groups_keep_corpus_order():
    index = DictionaryIndex.build([("go", 50), ("in", 80), ("home", 1)])
    assert index.lookup("46") == [Candidate("go", 50), Candidate("in", 80)]
    assert index.lookup("4669") == [Candidate("home", 1)]


def test_lookup_of_unknown_sequence_is_empty(index):
    assert index.lookup("777") == []
    assert index.lookup("") == []


def test_lookup_returns_a_copy(index):
    index.lookup("46").clear()
    assert len(index.lookup("46")) == 2


def test_groups_are_read_only(index):
    with pytest.raises(TypeError):
        index._groups["46"] = ()


def test_frequency_adjustments():
    words = [("if", 10), ("he", 10), ("go", 10)]
    index = DictionaryIndex.build(words)
    assert index.lookup("49") == [Candidate("if", 30), Candidate("he", 5)]
    assert index.lookup("46") == [Candidate("go", 10)]
    assert FREQUENCY_ADJUSTMENTS == {"if": 3, "he": 0.5}


def test_unencodable_word_aborts_build():
    with pytest.raises(ConfigurationError, match="don't"):
        DictionaryIndex.build([("cat", 1), ("don't", 2)])


def test_indexed_words_encode_to_same_length(index):
    for sequence in index.sequences():
        assert set(sequence) <= set(DIGITS)
        for candidate in index.lookup(sequence):
            assert encode(candidate.word) == sequence
            assert len(sequence) == len(candidate.word)


def test_malformed_lines_never_reach_the_index():
    lines = ["cat\t5\n", "badline\n", "act 7\n", "bat\t3\n"]
    index = DictionaryIndex.build(iter_records(lines))
    words = [c.word for s in index.sequences() for c in index.lookup(s)]
    assert words == ["cat", "bat"]
    assert index.word_count == 2


def test_len_and_contains(index):
    assert "46" in index
    assert "777" not in index
    assert len(index) == len(set(index.sequences()))


def test_load_corpus(tmp_path, capsys):
    path = tmp_path / "words.tsv"
    path.write_text("# header\ngo\t50\nin\t80\nnofreq\n\n", encoding="utf-8")
    assert load_corpus(path) == [("go", 50.0), ("in", 80.0)]
    assert "[T9] Loaded 2 words" in capsys.readouterr().out


def test_from_file(tmp_path):
    path = tmp_path / "words.tsv"
    path.write_text("go\t50\nin\t80\n", encoding="utf-8")
    index = DictionaryIndex.from_file(path)
    assert [c.word for c in index.lookup("46")] == ["go", "in"]


def test_from_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        DictionaryIndex.from_file(tmp_path / "missing.tsv")


def test_packaged_corpus_builds():
    from t9line.config import DEFAULTS

    index = DictionaryIndex.from_file(DEFAULTS["corpus"])
    assert "882" in index
    assert index.word_count > 100
