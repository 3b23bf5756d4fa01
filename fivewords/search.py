"""
Enumeration of 5-cliques in a compatibility graph.

Each clique is found exactly once, in increasing index order: at every depth
the candidate set is narrowed by the chosen vertex's neighbors and cut down to
the indices above it. Fixing the first vertex splits the search into
independent subtrees, which ``find_cliques`` can spread over processes.
"""

import logging
import os
from concurrent.futures import ProcessPoolExecutor, as_completed
from itertools import combinations
from typing import Iterator, Sequence

from tqdm import tqdm

from fivewords.graph import Graph, iter_bits

logger = logging.getLogger(__name__)

CLIQUE_SIZE = 5

Clique = tuple[str, str, str, str, str]

# set in each worker process by _init_worker
_worker_neighbors: Sequence[int] = ()


def _above(bits: int, index: int) -> int:
    return bits >> (index + 1) << (index + 1)


def _walk(neighbors: Sequence[int], first: int) -> Iterator[tuple[int, ...]]:
    candidates_1 = _above(neighbors[first], first)
    for second in iter_bits(candidates_1):
        candidates_2 = _above(candidates_1 & neighbors[second], second)
        for third in iter_bits(candidates_2):
            candidates_3 = _above(candidates_2 & neighbors[third], third)
            for fourth in iter_bits(candidates_3):
                candidates_4 = _above(candidates_3 & neighbors[fourth], fourth)
                for fifth in iter_bits(candidates_4):
                    yield first, second, third, fourth, fifth


def search_subtree(graph: Graph, first: int) -> list[tuple[int, ...]]:
    """All cliques whose smallest vertex index is ``first``."""
    if not 0 <= first < len(graph):
        msg = f"Vertex {first} is out of range for a graph of {len(graph)} words."
        raise IndexError(msg)

    return list(_walk(graph.neighbors, first))


def iter_cliques(graph: Graph) -> Iterator[tuple[int, ...]]:
    for first in range(len(graph)):
        yield from _walk(graph.neighbors, first)


def to_clique(graph: Graph, indices: Sequence[int]) -> Clique:
    return tuple(sorted(graph.words_of(indices)))  # type: ignore[return-value]


def is_clique(graph: Graph, indices: Sequence[int]) -> bool:
    return len(indices) == CLIQUE_SIZE and all(
        graph.are_adjacent(i, j) for i, j in combinations(indices, 2)
    )


def find_clique(graph: Graph) -> Clique | None:
    indices = next(iter_cliques(graph), None)
    if indices is None:
        return None

    return to_clique(graph, indices)


def _init_worker(neighbors: Sequence[int]) -> None:
    global _worker_neighbors
    _worker_neighbors = neighbors


def _search_firsts(firsts: range) -> list[tuple[int, ...]]:
    return [
        indices for first in firsts for indices in _walk(_worker_neighbors, first)
    ]


def _find_sequential(graph: Graph, progress: bool) -> set[Clique]:
    cliques = set()
    for first in tqdm(range(len(graph)), desc="Searching", disable=not progress):
        for indices in _walk(graph.neighbors, first):
            cliques.add(to_clique(graph, indices))

    return cliques


def _find_parallel(graph: Graph, workers: int, progress: bool) -> set[Clique]:
    # low indices root the largest subtrees, so deal them out round-robin
    stride = min(len(graph), workers * 8)
    chunks = [range(start, len(graph), stride) for start in range(stride)]

    cliques = set()
    with ProcessPoolExecutor(
        workers,
        initializer=_init_worker,
        initargs=(graph.neighbors,),
    ) as e:
        try:
            futures = [e.submit(_search_firsts, chunk) for chunk in chunks]
            logger.debug("submitted %d chunks to %d workers", len(futures), workers)

            for future in tqdm(
                as_completed(futures),
                total=len(futures),
                desc="Searching",
                disable=not progress,
            ):
                cliques.update(to_clique(graph, indices) for indices in future.result())
        except BaseException:
            e.shutdown(wait=False, cancel_futures=True)
            raise

    return cliques


def find_cliques(
    graph: Graph,
    *,
    workers: int | None = 1,
    progress: bool = False,
) -> set[Clique]:
    """
    Find every set of five pairwise letter-disjoint words in ``graph``.

    ``workers=1`` searches in this process. Larger values (or ``None`` for
    one per CPU) split the search by first vertex across a process pool. The
    result is the same set either way.
    """
    if workers is None:
        workers = os.cpu_count() or 1

    if workers < 1:
        msg = f"workers must be at least 1, not {workers}."
        raise ValueError(msg)

    if workers == 1 or len(graph) < CLIQUE_SIZE:
        cliques = _find_sequential(graph, progress)
    else:
        cliques = _find_parallel(graph, workers, progress)

    logger.debug("found %d cliques", len(cliques))
    return cliques
