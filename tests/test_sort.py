"""Tests for sorting (x, y) pairs."""
from __future__ import annotations

import numpy as np
import pytest

from spectral_resample.errors import LengthMismatch
from spectral_resample.preprocess.sort import sort_x


def test_ascending_and_descending() -> None:
    curve = {"x": [3.0, 1.0, 2.0], "y": [30.0, 10.0, 20.0]}
    up = sort_x(curve)
    assert up.x.tolist() == [1.0, 2.0, 3.0]
    assert up.y.tolist() == [10.0, 20.0, 30.0]
    down = sort_x(curve, reverse=True)
    assert down.x.tolist() == [3.0, 2.0, 1.0]
    assert down.y.tolist() == [30.0, 20.0, 10.0]


def test_equal_x_keeps_original_order() -> None:
    curve = {"x": [1.0, 0.0, 1.0], "y": [1.0, 2.0, 3.0]}
    assert sort_x(curve).y.tolist() == [2.0, 1.0, 3.0]
    assert sort_x(curve, reverse=True).y.tolist() == [1.0, 3.0, 2.0]


def test_idempotent() -> None:
    x = np.array([5.0, -1.0, 2.5, 2.5, 0.0])
    y = np.array([1.0, 2.0, 3.0, 4.0, 5.0])
    once = sort_x((x, y))
    twice = sort_x(once)
    np.testing.assert_array_equal(once.x, twice.x)
    np.testing.assert_array_equal(once.y, twice.y)


def test_does_not_mutate_input() -> None:
    x = np.array([2.0, 1.0])
    y = np.array([20.0, 10.0])
    sort_x((x, y))
    assert x.tolist() == [2.0, 1.0]
    assert y.tolist() == [20.0, 10.0]


def test_length_mismatch() -> None:
    with pytest.raises(LengthMismatch):
        sort_x(([1.0, 2.0], [1.0]))
