"""共通フィクスチャ。

- 乱数シード固定
- 小さな点列試料（float64 / float32）
"""

from __future__ import annotations

from typing import Iterator

import numpy as np
import pytest

from common import settings


@pytest.fixture(scope="session", autouse=True)
def np_seed() -> None:
    """NumPy の乱数を固定。"""
    np.random.seed(12345)


@pytest.fixture()
def pts_empty() -> np.ndarray:
    return np.empty((0, 3), dtype=np.float64)


@pytest.fixture()
def pts_single() -> np.ndarray:
    return np.array([[1.0, 0.0, 0.0]], dtype=np.float64)


@pytest.fixture()
def pts_cube() -> np.ndarray:
    """原点を一頂点とする単位立方体の 8 頂点。"""
    return np.array(
        [[x, y, z] for x in (0.0, 1.0) for y in (0.0, 1.0) for z in (0.0, 1.0)],
        dtype=np.float64,
    )


@pytest.fixture()
def pts_random() -> np.ndarray:
    return np.random.uniform(-10.0, 10.0, size=(32, 3))


@pytest.fixture()
def no_numba(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """回転カーネルを NumPy 経路に切り替える。"""
    monkeypatch.setenv("VTX_USE_NUMBA", "0")
    settings.reload_from_env()
    yield
    monkeypatch.delenv("VTX_USE_NUMBA", raising=False)
    settings.reload_from_env()
