"""Tests for the NumPy shape, axis and row helpers."""

from __future__ import annotations

import numpy as np
import pytest

from nddft.numpy import (
    iterate_rows,
    pad_with_zeros,
    resize_along_axis,
    swap_to_last,
    to_complex,
    truncate,
)
from tests.conftest import complex_normal, get_test_shapes


class TestToComplex:
    @pytest.mark.parametrize(
        ("dtype", "expected"),
        [
            (np.float32, np.complex64),
            (np.float64, np.complex128),
            (np.int64, np.complex128),
            (np.complex64, np.complex64),
            (np.complex128, np.complex128),
        ],
    )
    def test_dtype_promotion(self, dtype, expected):
        out = to_complex(np.ones((2, 3), dtype=dtype))
        assert out.dtype == expected

    def test_returns_owned_copy(self, rng):
        data = complex_normal(rng, (3, 4))
        out = to_complex(data)
        assert not np.shares_memory(out, data)
        out[0, 0] = 100.0
        assert data[0, 0] != 100.0

    def test_accepts_lists(self):
        out = to_complex([1, 2, 3])
        np.testing.assert_array_equal(out, np.array([1, 2, 3], dtype=complex))


class TestResizeAlongAxis:
    @pytest.mark.parametrize("dim", [1, 2, 3, 4])
    @pytest.mark.parametrize("delta", [-1, 0, 2])
    def test_only_target_axis_changes(self, dim, delta, rng):
        for shape in get_test_shapes(dim):
            data = complex_normal(rng, shape)
            for axis in range(dim):
                n = max(1, shape[axis] + delta)
                out = resize_along_axis(data, n, axis)
                expected = list(shape)
                expected[axis] = n
                assert out.shape == tuple(expected)

    def test_truncate_keeps_leading_elements(self, rng):
        data = complex_normal(rng, (3, 4))
        out = resize_along_axis(data, 2, 1)
        np.testing.assert_array_equal(out, data[:, :2])

    def test_pad_appends_zeros(self, rng):
        data = complex_normal(rng, (2, 3))
        out = resize_along_axis(data, 4, 0)
        np.testing.assert_array_equal(out[:2], data)
        np.testing.assert_array_equal(out[2:], np.zeros((2, 3), dtype=complex))

    def test_pad_vector(self):
        out = resize_along_axis(np.array([1 + 1j, 2 - 1j]), 4, 0)
        np.testing.assert_array_equal(out, [1 + 1j, 2 - 1j, 0, 0])

    def test_negative_axis(self, rng):
        data = complex_normal(rng, (2, 3))
        np.testing.assert_array_equal(
            resize_along_axis(data, 5, -1), resize_along_axis(data, 5, 1)
        )

    def test_source_untouched(self, rng):
        data = complex_normal(rng, (4, 4))
        before = data.copy()
        for n in (2, 4, 6):
            out = resize_along_axis(data, n, 0)
            out[...] = 0
        np.testing.assert_array_equal(data, before)

    def test_same_length_is_copy(self, rng):
        data = complex_normal(rng, (2, 3))
        out = resize_along_axis(data, 3, 1)
        np.testing.assert_array_equal(out, data)
        assert not np.shares_memory(out, data)

    @pytest.mark.parametrize("n", [0, -3])
    def test_non_positive_length(self, n):
        with pytest.raises(ValueError, match="length must be >= 1"):
            resize_along_axis(np.zeros((2, 2)), n, 0)

    @pytest.mark.parametrize("axis", [2, -3])
    def test_axis_out_of_bounds(self, axis):
        with pytest.raises(ValueError, match="out of bounds"):
            resize_along_axis(np.zeros((2, 2)), 3, axis)

    def test_non_integer_length(self):
        with pytest.raises(TypeError, match="must be an integer"):
            resize_along_axis(np.zeros((2, 2)), 2.0, 0)

    def test_truncate_and_pad_reject_wrong_direction(self):
        with pytest.raises(ValueError, match="cannot truncate"):
            truncate(np.zeros(2), 3, 0)
        with pytest.raises(ValueError, match="cannot pad"):
            pad_with_zeros(np.zeros(3), 2, 0)


class TestSwapToLast:
    def test_identity_when_last(self, rng):
        data = complex_normal(rng, (2, 3, 4))
        assert swap_to_last(data, 2) is data
        assert swap_to_last(data, -1) is data

    def test_swaps_shape(self, rng):
        data = complex_normal(rng, (2, 3, 4))
        assert swap_to_last(data, 0).shape == (4, 3, 2)
        assert swap_to_last(data, 1).shape == (2, 4, 3)

    @pytest.mark.parametrize("axis", [0, 1, 2])
    def test_double_swap_restores(self, axis, rng):
        data = complex_normal(rng, (2, 3, 4))
        restored = swap_to_last(swap_to_last(data, axis), axis)
        assert restored.shape == data.shape
        np.testing.assert_array_equal(restored, data)

    def test_rows_follow_swapped_axis(self, rng):
        data = complex_normal(rng, (3, 5))
        swapped = swap_to_last(data, 0)
        np.testing.assert_array_equal(swapped[2], data[:, 2])


class TestIterateRows:
    def test_visits_every_row_once(self):
        data = np.zeros((2, 3, 4), dtype=complex)
        iterate_rows(data, lambda row: row + 1)
        np.testing.assert_array_equal(data, np.ones((2, 3, 4)))

    def test_vector_is_single_row(self):
        data = np.arange(4, dtype=complex)
        iterate_rows(data, lambda row: row[::-1])
        np.testing.assert_array_equal(data, [3, 2, 1, 0])

    def test_writes_through_non_contiguous_view(self, rng):
        data = complex_normal(rng, (3, 5))
        expected = data * 2
        view = swap_to_last(data, 0)
        assert not view.flags.c_contiguous
        iterate_rows(view, lambda row: 2 * row)
        np.testing.assert_allclose(data, expected)

    @pytest.mark.parametrize("workers", [1, 2, 4])
    def test_workers_give_same_result(self, workers, rng):
        data = complex_normal(rng, (4, 3, 6))
        expected = np.fft.fft(data, axis=-1)
        iterate_rows(data, np.fft.fft, workers=workers)
        np.testing.assert_allclose(data, expected)

    def test_length_changing_op_raises(self):
        data = np.zeros((2, 3), dtype=complex)
        with pytest.raises(ValueError, match="changed row shape"):
            iterate_rows(data, lambda row: row[:2])

    def test_error_in_worker_propagates(self):
        def op(row):
            msg = "boom"
            raise RuntimeError(msg)

        with pytest.raises(RuntimeError, match="boom"):
            iterate_rows(np.zeros((3, 2), dtype=complex), op, workers=2)

    def test_scalar_raises(self):
        with pytest.raises(ValueError, match="0-dimensional"):
            iterate_rows(np.array(1.0 + 0j), lambda row: row)
