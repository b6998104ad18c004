"""
scale 戦略（一様スケール）

全点の x, y, z に同じ倍率を掛ける（中心は原点、`pivot` 指定時はその点）。

- factor = 1 は no-op
- factor = 0 は全点を中心に潰す（エラーにしない）
- 負の factor は中心に対する点対称（反転ジオメトリ）
"""

from __future__ import annotations

import numpy as np

from common.types import PointSequence, Vec3
from engine.core.kinds import TransformKind

from .base import TransformStrategy
from .registry import strategy


@strategy("scale")
class Scale(TransformStrategy):
    family = "scale"
    supported_kinds = frozenset({TransformKind.SCALE})

    def _apply(
        self,
        points: PointSequence,
        kind: TransformKind,
        value: float,
        pivot: Vec3 | None,
    ) -> None:
        if value == 1.0:
            return
        if pivot is None:
            points *= value
            return
        center = np.asarray(pivot, dtype=points.dtype)
        points -= center
        points *= value
        points += center


__all__ = ["Scale"]
