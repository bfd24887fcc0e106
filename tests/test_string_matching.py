import random

import pytest

from algolab.string_matching import (
    CHUNK_SIZE,
    MAX_TEXT_SIZE,
    SearchStats,
    generate_text_files,
    rabin_karp,
    rabin_karp_stats,
)


def _occurrences(text, pattern):
    return [i for i in range(len(text)) if text.startswith(pattern, i)]


def _random_text(seed, length, alphabet="ab"):
    rng = random.Random(seed)
    return "".join(rng.choice(alphabet) for _ in range(length))


def test_rabin_karp_finds_overlapping_matches():
    text = "abracadabra"
    assert rabin_karp(text, "abra") == _occurrences(text, "abra")
    assert rabin_karp("aaaa", "aa") == [0, 1, 2]


@pytest.mark.parametrize("seed", range(5))
@pytest.mark.parametrize("prime", [101, 7, 1_000_003])
def test_rabin_karp_agrees_with_scan(seed, prime):
    text = _random_text(seed, 300)
    pattern = text[seed * 10:seed * 10 + 4]
    assert rabin_karp(text, pattern, prime) == _occurrences(text, pattern)


def test_rabin_karp_pattern_longer_than_text():
    assert rabin_karp("abc", "abcd") == []


def test_rabin_karp_rejects_empty_pattern():
    with pytest.raises(ValueError):
        rabin_karp("abc", "")
    with pytest.raises(ValueError):
        rabin_karp_stats("abc", "")


@pytest.mark.parametrize("seed", range(4))
def test_stats_count_real_matches(seed):
    text = _random_text(seed, 2000, "abcd")
    pattern = text[100:110]
    stats = rabin_karp_stats(text, pattern)
    assert stats.matches == len(_occurrences(text, pattern))
    assert stats.text_size == len(text)
    assert stats.pattern_size == len(pattern)
    assert stats.spurious_hits >= 0
    assert stats.elapsed_ms >= 0


def test_stats_without_spurious_hits():
    stats = rabin_karp_stats("aaaa", "aa")
    assert isinstance(stats, SearchStats)
    assert (stats.matches, stats.spurious_hits) == (3, 0)


def test_generate_text_files_slices_source(tmp_path):
    source = tmp_path / "paragraphs.txt"
    data = bytes(range(256)) * 20
    source.write_bytes(data)
    out = tmp_path / "out"
    out.mkdir()
    written = generate_text_files(source, out, 5, random.Random(2))
    assert len(written) == 5
    for index, (path, start) in enumerate(written, start=1):
        assert path.name == f"pattern{index}.txt"
        content = path.read_bytes()
        assert len(content) == index * CHUNK_SIZE
        assert content == data[start:start + len(content)]


def test_generate_text_files_uses_only_leading_bytes(tmp_path):
    source = tmp_path / "long.txt"
    source.write_bytes(b"xyz" * 10000)
    written = generate_text_files(source, tmp_path, 10, random.Random(4))
    for path, start in written:
        assert start + len(path.read_bytes()) <= MAX_TEXT_SIZE


def test_generate_text_files_short_source(tmp_path):
    source = tmp_path / "short.txt"
    source.write_bytes(b"a" * 2000)
    with pytest.raises(ValueError):
        generate_text_files(source, tmp_path, 2, random.Random(0))