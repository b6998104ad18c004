"""
名前・ベクトル・角度パラメータの共通変換ユーティリティ。
"""
from __future__ import annotations

import math
import re
from typing import Iterable, Tuple


def camel_to_snake(name: str) -> str:
    s1 = re.sub(r"(.)([A-Z][a-z]+)", r"\1_\2", name)
    s2 = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", s1)
    return s2.lower()


def normalize_name(name: str) -> str:
    """名前キーの正規化（例: "MoveX" -> "move_x", "rotate-z" -> "rotate_z", "SCALE" -> "scale"）。"""
    if not isinstance(name, str):
        raise TypeError("名前キーは str である必要があります")
    name = name.strip()
    if not name:
        raise ValueError("名前キーは空であってはなりません")
    name = name.replace("-", "_").replace(" ", "_")
    # 大文字を含む場合のみキャメル→スネーク変換（全大文字は単に小文字化される）
    return camel_to_snake(name) if any(c.isupper() for c in name) else name.lower()


def deg_to_rad(deg: float) -> float:
    return math.radians(float(deg))


def ensure_vec3(v: float | Iterable[float]) -> Tuple[float, float, float]:
    if isinstance(v, (int, float)):
        f = float(v)
        return (f, f, f)
    t = tuple(float(x) for x in v)
    if len(t) == 1:
        return (t[0], t[0], t[0])
    if len(t) != 3:
        raise ValueError("expected scalar, 1-tuple, or 3-tuple for vec3")
    return (t[0], t[1], t[2])


__all__ = [
    "camel_to_snake",
    "normalize_name",
    "deg_to_rad",
    "ensure_vec3",
]
