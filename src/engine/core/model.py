"""
モデル頂点コンテナ

vertices : float ndarray (N, 3)   # モデルの全頂点（呼び出し側が所有）

- 変換戦略は `vertices` を in-place で書き換える。Model 自身は変換を持たない。
- 面（facet）や描画属性は扱わない。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

import numpy as np

from common.types import PointSequence, Vec3

from .points import as_points, ensure_points


@dataclass(slots=True)
class Model:
    vertices: PointSequence  # (N, 3) float

    def __post_init__(self) -> None:
        ensure_points(self.vertices)

    # ── ファクトリ ───────────────────
    @classmethod
    def from_points(cls, points: Iterable, dtype=np.float64) -> "Model":
        return cls(as_points(points, dtype=dtype))

    # ── 問い合わせ（非破壊） ──────────
    def centroid(self) -> Vec3:
        """頂点の平均座標。空モデルは原点。"""
        if self.vertices.shape[0] == 0:
            return (0.0, 0.0, 0.0)
        c = self.vertices.mean(axis=0)
        return (float(c[0]), float(c[1]), float(c[2]))

    def bounds(self) -> Tuple[Vec3, Vec3]:
        """軸平行バウンディングボックス (min, max)。"""
        if self.vertices.shape[0] == 0:
            raise ValueError("empty model has no bounds")
        lo = self.vertices.min(axis=0)
        hi = self.vertices.max(axis=0)
        return (
            (float(lo[0]), float(lo[1]), float(lo[2])),
            (float(hi[0]), float(hi[1]), float(hi[2])),
        )

    def __len__(self) -> int:
        return int(self.vertices.shape[0])


__all__ = ["Model"]
