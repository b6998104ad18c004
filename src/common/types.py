"""
どこで: `common` の型定義。
何を: Vec3 などの軽量エイリアス（組込みジェネリックで記述）。
"""

import numpy as np

Vec3 = tuple[float, float, float]

# (N, 3) の浮動小数点配列。行が点、列が x/y/z。
PointSequence = np.ndarray


__all__ = ["Vec3", "PointSequence"]
