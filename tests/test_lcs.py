import pytest

from algolab.lcs import longest_common_subsequence


def _is_subsequence(small, big):
    it = iter(big)
    return all(ch in it for ch in small)


def test_textbook_length():
    result = longest_common_subsequence("ABCBDAB", "BDCABA")
    assert len(result) == 4
    assert _is_subsequence(result, "ABCBDAB")
    assert _is_subsequence(result, "BDCABA")


@pytest.mark.parametrize("a,b", [("", "abc"), ("abc", ""), ("", "")])
def test_empty_inputs(a, b):
    assert longest_common_subsequence(a, b) == ""


def test_identical_strings():
    assert longest_common_subsequence("dynamic", "dynamic") == "dynamic"


def test_no_common_characters():
    assert longest_common_subsequence("abc", "xyz") == ""


def test_subsequence_of_other():
    assert longest_common_subsequence("axbycz", "abc") == "abc"


def test_symmetric_length():
    a, b = "AGGTAB", "GXTXAYB"
    assert len(longest_common_subsequence(a, b)) == len(longest_common_subsequence(b, a))