"""Tests for dictionary handles."""

import logging

import pytest

from thai_segmenter.dictionary import DEFAULT_WORDS, Dictionary, load_dictionary
from thai_segmenter.trie import Trie


class TestLoadDictionary:
    """Tests for load_dictionary."""

    def test_default_words(self):
        dictionary = load_dictionary()
        assert dictionary.source is None
        assert len(dictionary) == len(set(DEFAULT_WORDS))
        assert "ไป" in dictionary

    def test_from_file(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("ฉัน\r\nไป\n\n", encoding="utf-8")

        dictionary = load_dictionary(path)

        assert dictionary.source == path
        assert not dictionary.is_default
        assert dictionary.word_count == 2
        assert "ที่" not in dictionary

    def test_missing_file_falls_back(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING):
            dictionary = load_dictionary(tmp_path / "missing.txt")

        assert dictionary.is_default
        assert "ไป" in dictionary
        assert "built-in word list" in caplog.text

    def test_missing_file_without_fallback(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_dictionary(tmp_path / "missing.txt", fallback=False)

    def test_directory_falls_back(self, tmp_path):
        assert load_dictionary(tmp_path).is_default


class TestDictionaryHandle:
    """Tests for the Dictionary handle."""

    def test_add(self):
        dictionary = Dictionary(Trie())
        assert dictionary.add("โรงเรียน")
        assert not dictionary.add("โรงเรียน")
        assert dictionary.word_count == 1

    def test_close(self):
        dictionary = load_dictionary()
        dictionary.close()
        dictionary.close()
        assert dictionary.closed
        with pytest.raises(ValueError):
            dictionary.trie
        assert repr(dictionary) == "Dictionary(closed)"

    def test_context_manager_releases(self):
        with load_dictionary() as dictionary:
            assert not dictionary.closed
        assert dictionary.closed

    def test_repr(self):
        assert repr(Dictionary(Trie(["ไป"]))) == "Dictionary(built-in, 1 words)"
