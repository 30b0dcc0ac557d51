"""Tests for classifying edges against an ordering (outliers.py)."""

import pytest

from vieworder.exceptions import InvalidArgumentError, MissingNodeError
from vieworder.logger import mfas_logger
from vieworder.mfas.ordering import mfas_ratio
from vieworder.mfas.outliers import is_consistent, outlier_weights


def test_three_cycle_has_exactly_one_unit_outlier():
    edges = [("A", "B"), ("B", "C"), ("C", "A")]
    weights = [1.0, 1.0, 1.0]

    ordering = mfas_ratio(edges, weights, ["A", "B", "C"])
    outliers = outlier_weights(edges, weights, ordering)

    assert len(outliers) == 1
    assert sum(outliers.values()) == pytest.approx(1.0)
    assert outliers == {("C", "A"): 1.0}


@pytest.mark.parametrize(
    "nodes", [["A", "B", "C"], ["B", "C", "A"], ["C", "A", "B"], ["C", "B", "A"]]
)
def test_three_cycle_total_outlier_weight_independent_of_order(nodes):
    edges = [("A", "B"), ("B", "C"), ("C", "A")]
    weights = [1.0, 1.0, 1.0]

    outliers = outlier_weights(edges, weights, mfas_ratio(edges, weights, nodes))

    assert len(outliers) == 1
    assert sum(outliers.values()) == pytest.approx(1.0)


def test_consistent_acyclic_graph_has_no_outliers():
    edges = [(0, 1), (1, 2), (2, 3), (0, 2)]
    weights = [1.0, 0.5, 2.0, 1.0]

    ordering = mfas_ratio(edges, weights, [0, 1, 2, 3])

    assert outlier_weights(edges, weights, ordering) == {}


def test_ratio_example_flags_the_light_backward_edge():
    edges = [("A", "B"), ("B", "C"), ("C", "A"), ("B", "A")]
    weights = [1.0, 1.0, 1.0, 3.0]

    ordering = mfas_ratio(edges, weights, ["A", "B", "C"])

    assert outlier_weights(edges, weights, ordering) == {("A", "B"): 1.0}


def test_negative_weight_pointing_forward_is_flagged():
    ordering = {"a": 0, "b": 1}

    assert outlier_weights([("a", "b")], [-2.0], ordering) == {("a", "b"): 2.0}


def test_negative_weight_pointing_backward_is_consistent():
    ordering = {"a": 0, "b": 1}

    assert outlier_weights([("b", "a")], [-2.0], ordering) == {}


def test_zero_weight_is_never_flagged():
    ordering = {"a": 0, "b": 1}

    assert outlier_weights([("b", "a")], [0.0], ordering) == {}


@pytest.mark.parametrize("weight", [5.0, -5.0])
def test_self_loop_is_never_flagged(weight):
    ordering = {"u": 0, "v": 1}

    assert outlier_weights([("u", "u"), ("v", "u")], [weight, 1.0], ordering) == {
        ("v", "u"): 1.0
    }


def test_repeated_edge_accumulates():
    ordering = {"a": 1, "b": 0}
    edges = [("a", "b"), ("a", "b"), ("b", "a")]

    result = outlier_weights(edges, [1.0, 2.5, -0.5], ordering)

    assert result == {("a", "b"): 3.5, ("b", "a"): 0.5}


def test_classification_is_idempotent():
    edges = [(0, 1), (1, 2), (2, 0), (2, 1)]
    weights = [1.0, -0.5, 2.0, 0.25]
    ordering = {0: 0, 1: 1, 2: 2}

    first = outlier_weights(edges, weights, ordering)
    second = outlier_weights(edges, weights, ordering)

    assert first == second
    assert first == {(1, 2): 0.5, (2, 0): 2.0, (2, 1): 0.25}


def test_list_edges_are_keyed_as_tuples():
    result = outlier_weights([[1, 0]], [1.0], {0: 0, 1: 1})

    assert result == {(1, 0): 1.0}


def test_empty_graph_has_no_outliers():
    assert outlier_weights([], [], {}) == {}


def test_graph_without_edges_has_no_outliers():
    ordering = mfas_ratio([], [], ["a", "b", "c"])

    assert outlier_weights([], [], ordering) == {}


def test_nan_weight_raises():
    with pytest.raises(InvalidArgumentError, match="not finite"):
        outlier_weights([("a", "b")], [float("nan")], {"a": 0, "b": 1})


def test_missing_endpoint_in_ordering_raises():
    with pytest.raises(MissingNodeError, match="ordering"):
        outlier_weights([("a", "z")], [1.0], {"a": 0})


def test_misaligned_inputs_raise():
    with pytest.raises(InvalidArgumentError):
        outlier_weights([("a", "b")], [], {"a": 0, "b": 1})


def test_flagged_edges_are_logged():
    outlier_weights([("b", "a")], [1.0], {"a": 0, "b": 1})

    content = mfas_logger.get_text_content()
    assert "Flagged 1 of 1 edges as outliers" in content
    assert "b -> a" in content


class TestIsConsistent:
    def test_forward_positive(self):
        assert is_consistent((0, 1), 1.0, {0: 0, 1: 1})

    def test_backward_positive(self):
        assert not is_consistent((1, 0), 1.0, {0: 0, 1: 1})

    def test_self_loop(self):
        assert is_consistent((0, 0), -3.0, {0: 0})
