from __future__ import annotations

import numpy as np
import pytest

from engine.core.points import as_points, ensure_points, pairwise_distances


def test_ensure_points_returns_same_object(pts_cube: np.ndarray) -> None:
    assert ensure_points(pts_cube) is pts_cube


def test_ensure_points_accepts_empty_and_float32() -> None:
    ensure_points(np.empty((0, 3), dtype=np.float64))
    ensure_points(np.zeros((4, 3), dtype=np.float32))


@pytest.mark.parametrize(
    "bad",
    [
        [[0.0, 0.0, 0.0]],  # list（ndarray ではない）
        np.zeros((2, 3), dtype=np.int64),  # 整数 dtype
    ],
)
def test_ensure_points_type_errors(bad) -> None:
    with pytest.raises(TypeError):
        ensure_points(bad)


@pytest.mark.parametrize("shape", [(3,), (2, 2), (2, 4), (1, 3, 1)])
def test_ensure_points_shape_errors(shape) -> None:
    with pytest.raises(ValueError):
        ensure_points(np.zeros(shape, dtype=np.float64))


def test_ensure_points_rejects_read_only(pts_cube: np.ndarray) -> None:
    pts_cube.flags.writeable = False
    with pytest.raises(ValueError):
        ensure_points(pts_cube)


def test_as_points_from_tuples_and_2d() -> None:
    a = as_points([(1, 2, 3), (4, 5, 6)])
    assert a.shape == (2, 3) and a.dtype == np.float64
    b = as_points([(1, 2), (3, 4)])
    np.testing.assert_array_equal(b, [[1, 2, 0], [3, 4, 0]])


def test_as_points_empty_and_flat() -> None:
    assert as_points([]).shape == (0, 3)
    np.testing.assert_array_equal(as_points(np.arange(6.0)), [[0, 1, 2], [3, 4, 5]])
    with pytest.raises(ValueError):
        as_points([1.0, 2.0])


def test_as_points_copies_input_array(pts_cube: np.ndarray) -> None:
    out = as_points(pts_cube)
    out[0, 0] = 99.0
    assert pts_cube[0, 0] == 0.0


def test_pairwise_distances() -> None:
    d = pairwise_distances(as_points([(0, 0, 0), (3, 4, 0)]))
    np.testing.assert_allclose(d, [[0.0, 5.0], [5.0, 0.0]])


# Numba カーネルが型付けできない浮動小数点 dtype は検証段階で弾く
UNSUPPORTED_FLOAT_DTYPES = [
    pytest.param(np.dtype(np.float64).newbyteorder(), id="float64-swapped"),
    pytest.param(np.dtype(np.float32).newbyteorder(), id="float32-swapped"),
    pytest.param(np.dtype(np.float16), id="float16"),
    pytest.param(
        np.dtype(np.longdouble),
        id="longdouble",
        marks=pytest.mark.skipif(
            np.dtype(np.longdouble).itemsize <= 8, reason="longdouble が float64 と同一の環境"
        ),
    ),
]


@pytest.mark.parametrize("dtype", UNSUPPORTED_FLOAT_DTYPES)
def test_ensure_points_rejects_non_native_or_exotic_floats(dtype: np.dtype) -> None:
    with pytest.raises(TypeError):
        ensure_points(np.array([[1.0, 0.0, 0.0]], dtype=dtype))
