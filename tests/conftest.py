import pytest

from fivewords.words import filter_words

DISJOINT = ("abcde", "fghij", "klmno", "pqrst", "uvwxy")


@pytest.fixture
def disjoint_words():
    return filter_words(DISJOINT)


@pytest.fixture
def mixed_words():
    # five solutions through anagrams and near-misses, plus words that fit none
    return filter_words(
        [
            "abcde",
            "fghij",
            "klmno",
            "pqrst",
            "uvwxy",
            "uvwxz",
            "abcdz",
            "aghij",
            "zzzzz",
            "bcdea",
            "fjord",
        ],
    )
