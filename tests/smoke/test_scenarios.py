"""
代表シナリオの通しテスト（UI 操作 1 回 = select + apply）
"""
from __future__ import annotations

import numpy as np
import pytest

from api import ObjectTransformer, TransformKind, TransformerStateError, get_strategy


@pytest.mark.smoke
def test_rotate_z_quarter_turn() -> None:
    pts = np.array([[1.0, 0.0, 0.0]])
    t = ObjectTransformer()
    t.select(get_strategy("rotate"))
    t.apply(pts, TransformKind.ROTATE_Z, 90.0)
    np.testing.assert_allclose(pts, [[0.0, 1.0, 0.0]], atol=1e-9)


@pytest.mark.smoke
def test_move_x_back_to_plane() -> None:
    pts = np.array([[2.0, 3.0, 4.0]])
    t = ObjectTransformer()
    t.select(get_strategy("move"))
    t.apply(pts, TransformKind.MOVE_X, -2.0)
    np.testing.assert_array_equal(pts, [[0.0, 3.0, 4.0]])


@pytest.mark.smoke
def test_scale_two_points() -> None:
    pts = np.array([[1.0, 1.0, 1.0], [2.0, 2.0, 2.0]])
    t = ObjectTransformer()
    t.select(get_strategy("scale"))
    t.apply(pts, TransformKind.SCALE, 2.0)
    np.testing.assert_array_equal(pts, [[2.0, 2.0, 2.0], [4.0, 4.0, 4.0]])


@pytest.mark.smoke
def test_unselected_apply_reports_state_error() -> None:
    pts = np.array([[1.0, 2.0, 3.0]])
    with pytest.raises(TransformerStateError):
        ObjectTransformer().apply(pts, TransformKind.SCALE, 2.0)
    np.testing.assert_array_equal(pts, [[1.0, 2.0, 3.0]])
