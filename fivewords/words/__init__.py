import hashlib
import logging
import string
from collections import Counter
from pathlib import Path
from typing import Iterable, NamedTuple

import requests

logger = logging.getLogger(__name__)

directory = Path(__file__).parent

WORD_LENGTH = 5
ALPHABET = frozenset(string.ascii_lowercase)

DEFAULT_WORDS_URL = (
    "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt"
)


def cache_path(url: str) -> Path:
    name = url.rstrip("/").rsplit("/", 1)[-1] or "words.txt"
    digest = hashlib.sha256(url.encode()).hexdigest()[:12]
    return directory / f"{digest}-{name}"


class InvalidWord(ValueError):
    def __init__(self, word: str, reason: str) -> None:
        super().__init__(f"{word!r} {reason}")
        self.word = word
        self.reason = reason

    def __repr__(self) -> str:
        return f"InvalidWord({self.word!r}, {self.reason!r})"


def normalize(text: str) -> str:
    return text.strip().lower()


class Word(NamedTuple):
    text: str
    letters: frozenset[str]

    @classmethod
    def from_text(cls, text: str) -> "Word":
        text = normalize(text)

        if len(text) != WORD_LENGTH:
            raise InvalidWord(text, f"is not a {WORD_LENGTH}-letter word.")

        if not ALPHABET.issuperset(text):
            raise InvalidWord(text, "contains characters outside a-z.")

        letters = frozenset(text)
        if len(letters) != WORD_LENGTH:
            raise InvalidWord(text, "repeats a letter.")

        return cls(text, letters)


def filter_words(lines: Iterable[str]) -> list[Word]:
    """
    Keep the lines that are five distinct lowercase letters, in input order.

    Repeated texts are dropped after their first occurrence. Anagrams are
    distinct words and are all kept.
    """
    seen: set[str] = set()
    words = []
    rejected = 0
    for line in lines:
        text = normalize(line)
        if not text or text in seen:
            continue

        try:
            word = Word.from_text(text)
        except InvalidWord as e:
            logger.debug("rejected %s", e)
            rejected += 1
            continue

        seen.add(text)
        words.append(word)

    logger.debug("kept %d words, rejected %d", len(words), rejected)
    return words


def read_words_file(path: str | Path) -> list[Word]:
    # undecodable bytes become U+FFFD, which the alphabet check rejects
    with Path(path).open(encoding="utf-8", errors="replace") as f:
        return filter_words(f.read().splitlines())


def fetch_word_list(url: str = DEFAULT_WORDS_URL, *, cache: bool = True) -> list[str]:
    path = cache_path(url)

    if cache:
        try:
            with path.open(encoding="utf-8") as f:
                return f.read().splitlines()
        except OSError:
            pass

    logger.debug("downloading word list from %s", url)
    response = requests.get(url, timeout=60)
    response.raise_for_status()
    lines = response.text.splitlines()

    if cache:
        partial = path.with_name(f"{path.name}.part")
        try:
            with partial.open("w", encoding="utf-8") as f:
                f.writelines(f"{line}\n" for line in lines)
            partial.replace(path)
        except OSError:
            logger.debug("could not cache word list at %s", path)

    return lines


def load_words(
    path: str | Path | None = None,
    *,
    url: str = DEFAULT_WORDS_URL,
) -> list[Word]:
    if path is not None:
        return read_words_file(path)

    return filter_words(fetch_word_list(url))


def letter_frequencies(words: Iterable[Word]) -> dict[str, int]:
    counts = Counter(letter for word in words for letter in word.letters)
    return dict(sorted(counts.items()))
