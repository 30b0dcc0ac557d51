"""Tests for sign normalization of weighted edges."""

from collections import Counter

import pytest

from vieworder.exceptions import InvalidArgumentError
from vieworder.mfas.normalization import (
    flip_negative_edge_weights,
    flip_negative_edges,
)


def _undirected_multiset(edges, weights):
    return Counter((frozenset(edge), abs(w)) for edge, w in zip(edges, weights))


def test_negative_edges_are_reversed_and_negated():
    edges = [(0, 1), (1, 2), (2, 0)]
    weights = [1.5, -2.0, 0.0]

    flipped_edges, flipped_weights = flip_negative_edges(edges, weights)

    assert flipped_edges == [(0, 1), (2, 1), (2, 0)]
    assert flipped_weights == [1.5, 2.0, 0.0]


def test_all_weights_non_negative_and_undirected_multiset_preserved():
    edges = [("a", "b"), ("b", "c"), ("c", "a"), ("a", "c"), ("d", "d")]
    weights = [-0.3, 0.7, -1.2, 4.0, -5.0]

    flipped_edges, flipped_weights = flip_negative_edges(edges, weights)

    assert all(w >= 0 for w in flipped_weights)
    assert _undirected_multiset(flipped_edges, flipped_weights) == _undirected_multiset(
        edges, weights
    )


def test_inputs_are_not_modified():
    edges = [(0, 1)]
    weights = [-1.0]

    flip_negative_edges(edges, weights)

    assert edges == [(0, 1)]
    assert weights == [-1.0]


def test_misaligned_lengths_raise_invalid_argument():
    with pytest.raises(InvalidArgumentError, match="index-aligned"):
        flip_negative_edges([(0, 1), (1, 2)], [1.0])


def test_invalid_argument_is_a_value_error():
    with pytest.raises(ValueError):
        flip_negative_edges([(0, 1)], [])


def test_nan_weight_raises():
    with pytest.raises(InvalidArgumentError, match="index 1"):
        flip_negative_edges([(0, 1), (1, 2)], [1.0, float("nan")])


def test_empty_inputs():
    assert flip_negative_edges([], []) == ([], [])


class TestEdgeKeyedNormalization:
    def test_flips_keys(self):
        assert flip_negative_edge_weights({(0, 1): -2.0, (1, 2): 3.0}) == {
            (1, 0): 2.0,
            (1, 2): 3.0,
        }

    def test_colliding_keys_accumulate(self):
        result = flip_negative_edge_weights({(0, 1): 1.0, (1, 0): -2.5})

        assert result == {(0, 1): 3.5}
