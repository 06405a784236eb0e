"""Tests for the public tokenization API."""

import threading

import pytest

from thai_segmenter import (
    NewmmSegmenter,
    clear_dictionary_cache,
    get_dictionary,
    load_dictionary,
    segment,
    word_tokenize,
)
from thai_segmenter.dictionary import default_dictionary_path


@pytest.fixture(autouse=True)
def fresh_cache():
    clear_dictionary_cache()
    yield
    clear_dictionary_cache()


@pytest.fixture
def word_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("ฉัน\nไป\nโรงเรียน\n", encoding="utf-8")
    return path


class TestSegment:
    """Tests for segment()."""

    def test_with_loaded_dictionary(self, word_file):
        with load_dictionary(word_file) as dictionary:
            assert segment("ฉันไปโรงเรียน", dictionary) == ["ฉัน", "ไป", "โรงเรียน"]
            assert not dictionary.closed

    def test_with_path(self, word_file):
        assert segment("ฉันไปโรงเรียน", word_file) == ["ฉัน", "ไป", "โรงเรียน"]

    def test_with_built_in_words(self):
        assert segment("ไปมา") == ["ไป", "มา"]

    def test_unreadable_path_falls_back(self, tmp_path):
        assert segment("ไปมา", tmp_path / "missing.txt") == ["ไป", "มา"]

    def test_empty_and_none(self):
        assert segment("") == []
        assert segment(None) == []

    def test_drop_whitespace(self):
        assert segment("ไป   มา", keep_whitespace=False) == ["ไป", "มา"]


class TestWordTokenize:
    """Tests for word_tokenize()."""

    def test_basic_sentence(self):
        assert word_tokenize("ฉันไปโรงเรียน") == ["ฉัน", "ไป", "โรงเรียน"]

    def test_default_word_list(self):
        assert default_dictionary_path() is not None
        assert word_tokenize("ฉันรักภาษาไทยเพราะฉันเป็นคนไทย") == [
            "ฉัน", "รัก", "ภาษาไทย", "เพราะ", "ฉัน", "เป็น", "คนไทย",
        ]
        assert word_tokenize("สวัสดีครับ สบายดีไหมครับ") == [
            "สวัสดี", "ครับ", " ", "สบายดี", "ไหม", "ครับ",
        ]
        assert word_tokenize("(คนไม่เอา)") == ["(", "คน", "ไม่", "เอา", ")"]
        assert word_tokenize("สีหน้า(รถ)") == ["สีหน้า", "(", "รถ", ")"]
        assert word_tokenize("กม/ชม") == ["กม", "/", "ชม"]

    def test_mixed_content(self):
        text = "ไป ABC 123"
        tokens = word_tokenize(text)
        assert tokens == ["ไป", " ", "ABC", " ", "123"]
        assert "".join(tokens) == text

    def test_non_thai(self):
        assert word_tokenize("123") == ["123"]
        assert word_tokenize("hello world") == ["hello", " ", "world"]

    def test_keep_whitespace_false(self):
        tokens = word_tokenize("สวัสดีครับ สบายดีไหมครับ", keep_whitespace=False)
        assert " " not in tokens

    def test_custom_dict(self, word_file):
        assert word_tokenize("ฉันไปโรงเรียน", custom_dict=word_file) == [
            "ฉัน", "ไป", "โรงเรียน",
        ]

    def test_tcc_engine(self):
        assert word_tokenize("ที่นี่", engine="tcc") == ["ที่", "นี่"]

    def test_empty_string(self):
        assert word_tokenize("") == []

    def test_invalid_engine(self):
        with pytest.raises(ValueError):
            word_tokenize("ฉันไปโรงเรียน", engine="invalid_engine")

    def test_invalid_text_type(self):
        with pytest.raises(TypeError):
            word_tokenize(123)

    def test_nonexistent_dict(self):
        with pytest.raises(FileNotFoundError):
            word_tokenize("ฉันไปโรงเรียน", custom_dict="/nonexistent/path/dict.txt")


class TestDictionaryCache:
    """Tests for the cached dictionary handle."""

    def test_same_source_is_reused(self, word_file):
        first = get_dictionary(word_file)
        assert get_dictionary(str(word_file)) is first

    def test_new_source_replaces_cached(self, word_file, tmp_path):
        other = tmp_path / "other.txt"
        other.write_text("มา\n", encoding="utf-8")

        first = get_dictionary(word_file)
        second = get_dictionary(other)

        assert second is not first
        assert not first.closed
        assert "มา" in second

    def test_replaced_handle_still_segments(self, word_file, tmp_path):
        other = tmp_path / "other.txt"
        other.write_text("มา\n", encoding="utf-8")

        handle = get_dictionary(word_file)
        assert word_tokenize("มา", custom_dict=other) == ["มา"]

        assert NewmmSegmenter(handle).segment("ฉันไป") == ["ฉัน", "ไป"]

    def test_concurrent_sources(self, word_file, tmp_path):
        other = tmp_path / "other.txt"
        other.write_text("มา\n", encoding="utf-8")
        errors = []

        def worker(source, text, expected):
            try:
                for _ in range(200):
                    assert word_tokenize(text, custom_dict=source) == expected
            except Exception as e:
                errors.append(e)

        threads = [
            threading.Thread(target=worker, args=(word_file, "ฉันไป", ["ฉัน", "ไป"])),
            threading.Thread(target=worker, args=(other, "มามา", ["มา", "มา"])),
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert errors == []

    def test_clear_releases_handle(self, word_file):
        dictionary = get_dictionary(word_file)
        clear_dictionary_cache()
        assert dictionary.closed
        assert get_dictionary(word_file) is not dictionary

    def test_word_tokenize_uses_cache(self, word_file):
        word_tokenize("ไป", custom_dict=word_file)
        cached = get_dictionary(word_file)
        word_tokenize("ฉัน", custom_dict=word_file)
        assert get_dictionary(word_file) is cached
        assert cached.word_count == 3

