import logging
from collections import defaultdict
from typing import Iterable, Sequence

from tqdm import tqdm

logger = logging.getLogger(__name__)


def iter_bits(bits: int) -> Iterable[int]:
    """Yield the indices of the set bits of ``bits``, lowest first."""
    while bits:
        low = bits & -bits
        bits ^= low
        yield low.bit_length() - 1


class Graph:
    """
    Compatibility graph over a word list.

    Vertex ``i`` is ``words[i]``. ``neighbors[i]`` is an N-bit bitset stored as
    an ``int``, with bit ``j`` set iff words ``i`` and ``j`` share no letter.
    The graph is read-only once built.
    """

    def __init__(self, words: Sequence[str], neighbors: Sequence[int]) -> None:
        if len(words) != len(neighbors):
            msg = f"Got {len(words)} words but {len(neighbors)} neighbor sets."
            raise ValueError(msg)

        self.words = tuple(words)
        self.neighbors = tuple(neighbors)
        self.full_mask = (1 << len(self.words)) - 1

    @classmethod
    def from_words(
        cls,
        words: Iterable[tuple[str, frozenset[str]]],
        *,
        progress: bool = False,
    ) -> "Graph":
        texts: list[str] = []
        letter_sets: list[frozenset[str]] = []
        for text, letters in words:
            texts.append(text)
            letter_sets.append(letters)

        if len(set(texts)) != len(texts):
            duplicates = sorted({t for t in texts if texts.count(t) > 1})
            msg = f"Words must be unique. These words are repeated: {duplicates!r}"
            raise ValueError(msg)

        # bit i of words_with_letter[L] is set iff word i contains L
        words_with_letter: defaultdict[str, int] = defaultdict(int)
        for index, letters in enumerate(letter_sets):
            bit = 1 << index
            for letter in letters:
                words_with_letter[letter] |= bit

        full_mask = (1 << len(texts)) - 1
        neighbors = []
        for letters in tqdm(letter_sets, desc="Building graph", disable=not progress):
            conflicting = 0
            for letter in letters:
                conflicting |= words_with_letter[letter]

            # a word always conflicts with itself, so no self-loops
            neighbors.append(full_mask & ~conflicting)

        graph = cls(texts, neighbors)
        logger.debug(
            "built graph with %d vertices and %d edges",
            len(graph),
            graph.edge_count(),
        )
        return graph

    def __len__(self) -> int:
        return len(self.words)

    def __repr__(self) -> str:
        return f"Graph({len(self)} words, {self.edge_count()} edges)"

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self.words):
            msg = f"Vertex {index} is out of range for a graph of {len(self)} words."
            raise IndexError(msg)

    def are_adjacent(self, i: int, j: int) -> bool:
        self._check(i)
        self._check(j)
        return bool(self.neighbors[i] >> j & 1)

    def neighbors_of(self, index: int) -> set[int]:
        self._check(index)
        return set(iter_bits(self.neighbors[index]))

    def degree(self, index: int) -> int:
        self._check(index)
        return self.neighbors[index].bit_count()

    def edge_count(self) -> int:
        return sum(bits.bit_count() for bits in self.neighbors) // 2

    def words_of(self, indices: Iterable[int]) -> tuple[str, ...]:
        return tuple(self.words[i] for i in indices)
