"""Tests for fivewords/graph.py"""

import random

import pytest

from fivewords.graph import Graph, iter_bits
from fivewords.words import filter_words


def pairwise_edges(word_list):
    return {
        (i, j)
        for i, (_, a) in enumerate(word_list)
        for j, (_, b) in enumerate(word_list)
        if i != j and a.isdisjoint(b)
    }


class TestIterBits:
    def test_lowest_first(self):
        assert list(iter_bits(0b101001)) == [0, 3, 5]

    def test_empty(self):
        assert list(iter_bits(0)) == []

    def test_large(self):
        assert list(iter_bits(1 << 5000 | 1)) == [0, 5000]


class TestFromWords:
    def test_empty_word_list(self):
        graph = Graph.from_words([])
        assert len(graph) == 0
        assert graph.edge_count() == 0
        assert graph.full_mask == 0

    def test_disjoint_words_form_complete_graph(self, disjoint_words):
        graph = Graph.from_words(disjoint_words)
        assert len(graph) == 5
        assert graph.edge_count() == 10
        for i in range(5):
            assert graph.neighbors_of(i) == set(range(5)) - {i}

    def test_shared_letters_have_no_edge(self):
        graph = Graph.from_words(filter_words(["abcde", "abcxy"]))
        assert graph.edge_count() == 0
        assert not graph.are_adjacent(0, 1)

    def test_near_duplicate_letter_sets(self):
        graph = Graph.from_words(filter_words(["abcde", "fghij", "aghij"]))
        assert graph.are_adjacent(0, 1)
        assert not graph.are_adjacent(1, 2)
        assert not graph.are_adjacent(0, 2)
        assert graph.edge_count() == 1

    def test_anagrams_are_not_adjacent(self):
        graph = Graph.from_words(filter_words(["least", "slate"]))
        assert not graph.are_adjacent(0, 1)

    def test_accepts_plain_pairs(self):
        graph = Graph.from_words([("abcde", frozenset("abcde")), ("vwxyz", frozenset("vwxyz"))])
        assert graph.words == ("abcde", "vwxyz")
        assert graph.are_adjacent(0, 1)

    def test_rejects_repeated_words(self):
        with pytest.raises(ValueError, match="abcde"):
            Graph.from_words([("abcde", frozenset("abcde"))] * 2)

    def test_matches_pairwise_scan(self, mixed_words):
        graph = Graph.from_words(mixed_words)
        edges = {(i, j) for i in range(len(graph)) for j in graph.neighbors_of(i)}
        assert edges == pairwise_edges(mixed_words)

    def test_random_words_symmetric_and_irreflexive(self):
        rng = random.Random(1234)
        letters = "abcdefghijklmnopqrstuvwxyz"
        texts = {"".join(rng.sample(letters, 5)) for _ in range(300)}
        word_list = filter_words(sorted(texts))
        graph = Graph.from_words(word_list)

        for i in range(len(graph)):
            assert not graph.are_adjacent(i, i)
            for j in graph.neighbors_of(i):
                assert graph.are_adjacent(j, i)

        assert graph.edge_count() * 2 == len(pairwise_edges(word_list))

    def test_progress_bar(self, disjoint_words):
        graph = Graph.from_words(disjoint_words, progress=True)
        assert graph.edge_count() == 10


class TestAccessors:
    def test_degree_and_words_of(self, mixed_words):
        graph = Graph.from_words(mixed_words)
        abcde = graph.words.index("abcde")
        assert graph.degree(abcde) == len(graph.neighbors_of(abcde))
        assert graph.words_of([abcde]) == ("abcde",)

    def test_out_of_range(self, disjoint_words):
        graph = Graph.from_words(disjoint_words)
        with pytest.raises(IndexError):
            graph.neighbors_of(5)
        with pytest.raises(IndexError):
            graph.are_adjacent(-1, 0)

    def test_mismatched_lengths(self):
        with pytest.raises(ValueError):
            Graph(["abcde"], [])

    def test_repr(self, disjoint_words):
        assert repr(Graph.from_words(disjoint_words)) == "Graph(5 words, 10 edges)"
