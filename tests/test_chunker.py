import pytest

from aiscan.core.chunker import chunk, window_step
from aiscan.errors import InvalidInputError


class TestWindowStep:
    @pytest.mark.parametrize(
        "chunk_size, step",
        [(10, 8), (1024, 819), (5, 4), (2, 1), (1, 1)],
    )
    def test_step(self, chunk_size, step):
        assert window_step(chunk_size) == step


class TestChunk:
    def test_offsets_cover_corpus(self):
        text = "abcdefghijklmnopqrst"
        windows = list(chunk(text, 10))
        assert [w.start for w in windows] == [0, 8, 16]
        assert [w.content for w in windows] == ["abcdefghij", "ijklmnopqr", "qrst"]
        assert windows[-1].end == len(text)

    def test_union_covers_every_character(self):
        text = "x" * 97
        covered = set()
        for w in chunk(text, 13):
            covered.update(range(w.start, w.end))
        assert covered == set(range(len(text)))

    def test_consecutive_windows_overlap(self):
        windows = list(chunk("y" * 100, 20))
        for a, b in zip(windows, windows[1:]):
            assert b.start < a.end

    def test_short_corpus_is_one_window(self):
        windows = list(chunk("short text", 1024))
        assert len(windows) == 1
        assert windows[0].content == "short text"
        assert windows[0].start == 0

    @pytest.mark.parametrize("length, size", [(900, 1024), (9, 10), (1023, 1024), (1024, 1024), (1, 1)])
    def test_corpus_within_chunk_size_is_one_window(self, length, size):
        text = "a" * length
        windows = chunk(text, size)
        assert [w.content for w in windows] == [text]
        assert len(windows) == 1

    def test_last_window_is_first_to_reach_end(self):
        windows = list(chunk("b" * 25, 10))
        assert [w.start for w in windows] == [0, 8, 16]
        assert windows[-1].end == 25
        assert windows[-2].end < 25

    def test_empty_corpus_has_no_windows(self):
        windows = chunk("", 1024)
        assert list(windows) == []
        assert len(windows) == 0

    def test_len_matches_iteration(self):
        for size in (1, 3, 10, 64):
            windows = chunk("z" * 150, size)
            assert len(windows) == len(list(windows))

    def test_restartable(self):
        windows = chunk("the quick brown fox jumps over the lazy dog", 10)
        assert list(windows) == list(windows)

    def test_offsets_match_iteration(self):
        windows = chunk("c" * 2000, 1024)
        assert windows.offsets() == [w.start for w in windows] == [0, 819, 1638]

    def test_chunk_size_one(self):
        windows = list(chunk("abc", 1))
        assert [w.content for w in windows] == ["a", "b", "c"]

    @pytest.mark.parametrize("size", [0, -5])
    def test_non_positive_chunk_size(self, size):
        with pytest.raises(InvalidInputError):
            chunk("text", size)

    def test_non_integer_chunk_size(self):
        with pytest.raises(InvalidInputError):
            chunk("text", 10.5)
