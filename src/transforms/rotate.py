"""
rotate 戦略（回転）

- X/Y/Z いずれかのワールド軸回りに、角度 [deg] だけ全点を回転（右手系）。
- 既定の回転中心は原点。`pivot` 指定時はその点を中心に回す。
- 巡回する軸ペア (a, b) に対し a' = a·cosθ − b·sinθ, b' = a·sinθ + b·cosθ。
  X: (y, z) / Y: (z, x) / Z: (x, y)
- 角度 0 は恒等（点列に触れない）。±360° を超える角度も周期性でそのまま扱う。
"""

from __future__ import annotations

import math

import numpy as np
from numba import njit  # type: ignore[attr-defined]

from common import settings
from common.param_utils import deg_to_rad
from common.types import PointSequence, Vec3
from engine.core.kinds import Axis, TransformKind

from .base import TransformStrategy
from .registry import strategy

# 回転軸 -> (a 列, b 列)
_AXIS_PAIRS = {
    Axis.X: (1, 2),
    Axis.Y: (2, 0),
    Axis.Z: (0, 1),
}


@njit(cache=True)
def _rotate_pair_inplace(
    points: np.ndarray,
    ia: int,
    ib: int,
    c: float,
    s: float,
    pa: float,
    pb: float,
) -> None:
    """列 ia/ib の平面で全点を回転（in-place）。"""
    for k in range(points.shape[0]):
        a = points[k, ia] - pa
        b = points[k, ib] - pb
        points[k, ia] = a * c - b * s + pa
        points[k, ib] = a * s + b * c + pb


def _rotate_pair_numpy(
    points: np.ndarray,
    ia: int,
    ib: int,
    c: float,
    s: float,
    pa: float,
    pb: float,
) -> None:
    a = points[:, ia] - pa
    b = points[:, ib] - pb
    points[:, ia] = a * c - b * s + pa
    points[:, ib] = a * s + b * c + pb


@strategy("rotate")
class Rotate(TransformStrategy):
    family = "rotate"
    supported_kinds = frozenset(
        {TransformKind.ROTATE_X, TransformKind.ROTATE_Y, TransformKind.ROTATE_Z}
    )

    def _apply(
        self,
        points: PointSequence,
        kind: TransformKind,
        value: float,
        pivot: Vec3 | None,
    ) -> None:
        if value == 0.0:
            return
        theta = deg_to_rad(value)
        c, s = math.cos(theta), math.sin(theta)
        ia, ib = _AXIS_PAIRS[kind.axis]  # type: ignore[index]
        pa = pb = 0.0
        if pivot is not None:
            pa, pb = float(pivot[ia]), float(pivot[ib])

        if settings.get().USE_NUMBA:
            _rotate_pair_inplace(points, ia, ib, c, s, pa, pb)
        else:
            _rotate_pair_numpy(points, ia, ib, c, s, pa, pb)


__all__ = ["Rotate"]
