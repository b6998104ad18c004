"""
点列（PointSequence）の検証と生成

points : float ndarray (N, 3)   # 行が 1 点、列が x, y, z
- 変換はすべて in-place（呼び出し側が所有する配列を直接書き換える）
- N = 0 は有効（すべての変換が no-op）
"""

from __future__ import annotations

from typing import Iterable

import numpy as np

from common.types import PointSequence

# 全戦略（Numba カーネルを含む）が扱えるのはネイティブバイト順の float32 / float64 のみ
_SUPPORTED_DTYPES = (np.dtype(np.float32), np.dtype(np.float64))


def ensure_points(points: PointSequence) -> PointSequence:
    """in-place 変換の前提を検証し、同じ配列をそのまま返す（コピーしない）。

    例外:
    - TypeError: ndarray でない、または dtype がネイティブ順の float32 / float64 でない
      （float16, longdouble, ビッグエンディアン等）。
    - ValueError: 形状が (N, 3) でない、または書き込み不可。
    """
    if not isinstance(points, np.ndarray):
        raise TypeError(f"points は numpy.ndarray である必要があります: got {type(points).__name__}")
    if points.dtype not in _SUPPORTED_DTYPES or not points.dtype.isnative:
        raise TypeError(
            f"points の dtype はネイティブ順の float32 / float64 である必要があります: got {points.dtype.str}"
        )
    if points.ndim != 2 or points.shape[1] != 3:
        raise ValueError(f"Invalid points shape: {points.shape}. Expected (N, 3)")
    if not points.flags.writeable:
        raise ValueError("points は書き込み可能である必要があります（read-only 配列）")
    return points


def as_points(points: Iterable, dtype=np.float64) -> PointSequence:
    """(x, y, z) の列から新しい (N, 3) 配列を生成。

    - 2D 点 (x, y) は z = 0 で補完する。
    - 空入力は (0, 3) を返す。
    """
    arr = np.array(list(points) if not isinstance(points, np.ndarray) else points, dtype=dtype)
    if arr.size == 0:
        return np.empty((0, 3), dtype=dtype)
    if arr.ndim == 1:
        if arr.shape[0] % 3 != 0:
            raise ValueError(f"Invalid coordinate shape: {arr.shape}")
        arr = arr.reshape(-1, 3)
    elif arr.ndim == 2 and arr.shape[1] == 2:
        zeros = np.zeros((arr.shape[0], 1), dtype=dtype)
        arr = np.hstack([arr, zeros])
    elif arr.ndim != 2 or arr.shape[1] != 3:
        raise ValueError(f"Invalid coordinate shape: {arr.shape}")
    return np.ascontiguousarray(arr)


def pairwise_distances(points: PointSequence) -> np.ndarray:
    """(N, N) のユークリッド距離行列。"""
    diff = points[:, None, :] - points[None, :, :]
    return np.sqrt(np.sum(diff * diff, axis=-1))


__all__ = ["ensure_points", "as_points", "pairwise_distances"]
