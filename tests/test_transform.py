"""
Tests for the scale tree and the sum/difference Haar transform.
"""

import pytest
import numpy as np

from mwm import (ScaleTree, haar_forward, haar_inverse, haar_decompose, haar_reconstruct,
                 InvalidLength, InvalidParameters, InvalidSequence)


class TestScaleTree:
    """Test the flat-array tree layout."""

    def test_level_sizes(self):
        tree = ScaleTree.zeros(4)
        assert tree.n_levels == 4
        assert [tree.level(j).size for j in range(4)] == [1, 2, 4, 8]
        assert tree.n_nodes == 15
        assert tree.leaf_count == 16

    def test_forest_level_sizes(self):
        tree = ScaleTree.zeros(3, n_roots=4)
        assert tree.n_roots == 4
        assert [tree.level(j).size for j in range(3)] == [4, 8, 16]

    def test_index_arithmetic(self):
        tree = ScaleTree.zeros(3)
        assert tree.children(0, 0) == (0, 1)
        assert tree.children(1, 1) == (2, 3)
        assert tree.parent(2, 3) == 1
        assert tree.parent(1, 0) == 0

        with pytest.raises(IndexError):
            tree.children(2, 0)  # deepest level
        with pytest.raises(IndexError):
            tree.parent(0, 0)
        with pytest.raises(IndexError):
            tree.children(1, 2)

    def test_traversal_order(self):
        tree = ScaleTree([[1.0], [2.0, 3.0], [4.0, 5.0, 6.0, 7.0]])
        assert [j for j, _ in tree.top_down()] == [0, 1, 2]
        assert [j for j, _ in tree.bottom_up()] == [2, 1, 0]
        np.testing.assert_array_equal(next(tree.bottom_up())[1], [4.0, 5.0, 6.0, 7.0])

    def test_empty_tree(self):
        tree = ScaleTree([])
        assert tree.n_levels == 0
        assert len(tree) == 0
        assert list(tree.top_down()) == []

    def test_set_level(self):
        tree = ScaleTree.zeros(2)
        tree.set_level(1, [1.0, 2.0])
        np.testing.assert_array_equal(tree.level(1), [1.0, 2.0])
        with pytest.raises(InvalidLength):
            tree.set_level(1, [1.0, 2.0, 3.0])

    def test_rejects_bad_shapes(self):
        with pytest.raises(InvalidLength) as excinfo:
            ScaleTree([[1.0], [2.0, 3.0, 4.0]])
        assert excinfo.value.level == 1
        with pytest.raises(InvalidParameters):
            ScaleTree([[1.0, 2.0, 3.0]])
        with pytest.raises(InvalidParameters):
            ScaleTree.zeros(2, n_roots=3)

    def test_copy_is_independent(self):
        tree = ScaleTree.zeros(2)
        duplicate = tree.copy()
        duplicate.level(1)[0] = 5.0
        assert tree.level(1)[0] == 0.0


class TestHaarTransform:
    """Test forward/inverse Haar decomposition."""

    def test_known_coefficients(self, backend):
        root, details = haar_forward([1.0, 3.0, 2.0, 2.0])
        assert root == 8.0
        np.testing.assert_array_equal(details.level(0), [0.0])
        np.testing.assert_array_equal(details.level(1), [-2.0, 0.0])

    @pytest.mark.parametrize("size", [1, 2, 4, 8, 64, 1024])
    def test_round_trip(self, size, backend):
        x = np.random.default_rng(size).gamma(1.5, size=size)
        root, details = haar_forward(x)

        assert details.n_levels == int(np.log2(size))
        np.testing.assert_allclose(haar_inverse(root, details), x, rtol=1e-9, atol=1e-12)

    def test_round_trip_signed_values(self, backend):
        x = np.random.default_rng(7).standard_normal(256)
        root, details = haar_forward(x)
        np.testing.assert_allclose(haar_inverse(root, details), x, rtol=1e-9, atol=1e-12)

    def test_root_is_sum(self):
        x = np.random.default_rng(3).uniform(size=128)
        root, _ = haar_forward(x)
        assert np.isclose(root, x.size * x.mean(), rtol=1e-12)

    def test_single_value(self):
        root, details = haar_forward([2.5])
        assert root == 2.5
        assert details.n_levels == 0
        np.testing.assert_array_equal(haar_inverse(root, details), [2.5])

    @pytest.mark.parametrize("levels", [0, 1, 3, 6])
    def test_partial_decomposition(self, levels, backend):
        x = np.random.default_rng(levels).exponential(size=64)
        coarse, details = haar_decompose(x, levels)

        assert coarse.size == 64 // 2**levels
        assert details.n_roots == coarse.size
        assert details.n_levels == levels
        np.testing.assert_allclose(coarse, x.reshape(coarse.size, -1).sum(axis=1), rtol=1e-12)
        np.testing.assert_allclose(haar_reconstruct(coarse, details), x, rtol=1e-9, atol=1e-12)

    @pytest.mark.parametrize("size", [0, 3, 6, 100])
    def test_invalid_length(self, size):
        with pytest.raises(InvalidLength):
            haar_forward(np.ones(size))

    def test_rejects_multidimensional_input(self):
        with pytest.raises(InvalidLength):
            haar_forward(np.ones((4, 4)))

    def test_rejects_non_finite(self):
        x = np.ones(8)
        x[5] = np.nan
        with pytest.raises(InvalidSequence) as excinfo:
            haar_forward(x)
        assert excinfo.value.index == 5

    def test_levels_out_of_range(self):
        with pytest.raises(InvalidLength):
            haar_decompose(np.ones(8), levels=4)

    def test_inverse_requires_single_root(self):
        coarse, details = haar_decompose(np.ones(8), levels=1)
        with pytest.raises(InvalidParameters):
            haar_inverse(1.0, details)
        with pytest.raises(InvalidParameters):
            haar_reconstruct(coarse[:2], details)
