"""
どこで: `engine.core.kinds`
何を: 軸（Axis）・変換種別（TransformKind）・変換要求（TransformRequest）の定義。

TransformKind は従来のフラットな 7 種（MoveX..Z, RotateX..Z, SCALE）を保ちつつ、
`family`（どの戦略か）と `axis`（どの軸か）に分解して扱えるようにする。
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from numbers import Integral, Real
from typing import Any, Mapping

from common.param_utils import normalize_name

FAMILIES = ("move", "rotate", "scale")

# 名前の別表記（正規化後のキー -> 正規名）
_FAMILY_ALIASES = {
    "translate": "move",
    "translation": "move",
    "rotation": "rotate",
    "scaling": "scale",
}


class Axis(IntEnum):
    """ワールド座標軸。値は点列の列インデックス。"""

    X = 0
    Y = 1
    Z = 2

    @classmethod
    def parse(cls, value: Any) -> "Axis":
        if isinstance(value, Axis):
            return value
        if isinstance(value, str):
            key = value.strip().upper()
            if key in cls.__members__:
                return cls[key]
            raise ValueError(f"unknown axis: {value!r}")
        if isinstance(value, Integral) and not isinstance(value, bool):
            try:
                return cls(int(value))
            except ValueError:
                raise ValueError(f"axis index must be 0, 1 or 2: got {value}")
        raise TypeError(f"axis must be Axis, int or str: got {type(value).__name__}")


class TransformKind(Enum):
    MOVE_X = ("move", Axis.X)
    MOVE_Y = ("move", Axis.Y)
    MOVE_Z = ("move", Axis.Z)
    ROTATE_X = ("rotate", Axis.X)
    ROTATE_Y = ("rotate", Axis.Y)
    ROTATE_Z = ("rotate", Axis.Z)
    SCALE = ("scale", None)

    @property
    def family(self) -> str:
        return self.value[0]

    @property
    def axis(self) -> Axis | None:
        return self.value[1]

    @classmethod
    def of(cls, family: str, axis: Axis | int | str | None = None) -> "TransformKind":
        """(family, axis) の分解表現から種別を組み立てる。"""
        fam = normalize_name(family)
        fam = _FAMILY_ALIASES.get(fam, fam)
        if fam not in FAMILIES:
            raise ValueError(f"unknown transform family: {family!r}")
        if fam == "scale":
            if axis is not None:
                raise ValueError("scale は一様スケールのみ（axis は指定不可）")
            return cls.SCALE
        if axis is None:
            raise ValueError(f"{fam} には axis の指定が必要です")
        return cls[f"{fam.upper()}_{Axis.parse(axis).name}"]

    @classmethod
    def parse(cls, value: Any) -> "TransformKind":
        """列挙値・メンバ名・"MoveX"/"move_x"/"translate-x"/"SCALE" などを受理。"""
        if isinstance(value, TransformKind):
            return value
        if not isinstance(value, str):
            raise TypeError(f"transform kind must be TransformKind or str: got {type(value).__name__}")
        key = normalize_name(value)
        if key in FAMILIES or key in _FAMILY_ALIASES:
            return cls.of(key)
        fam, sep, axis = key.rpartition("_")
        if not sep or axis not in ("x", "y", "z"):
            raise ValueError(f"unknown transform kind: {value!r}")
        return cls.of(fam, axis)


@dataclass(frozen=True)
class TransformRequest:
    """1 回分の変換要求（種別と値）。値の意味は種別に依存（距離/角度[deg]/倍率）。"""

    kind: TransformKind
    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", TransformKind.parse(self.kind))
        if isinstance(self.value, bool) or not isinstance(self.value, Real):
            raise TypeError(f"value は数値である必要があります: got {self.value!r}")
        object.__setattr__(self, "value", float(self.value))

    def to_spec(self) -> dict[str, Any]:
        """Return a serializable spec: {"kind": str, "value": float}."""
        return {"kind": self.kind.name, "value": self.value}

    @staticmethod
    def from_spec(spec: Mapping[str, Any]) -> "TransformRequest":
        """Create a request from a spec. Raises on missing keys or an unknown kind."""
        if not isinstance(spec, Mapping):
            raise TypeError(f"spec must be a mapping: got {type(spec).__name__}")
        missing = [k for k in ("kind", "value") if k not in spec]
        if missing:
            raise ValueError(f"spec is missing keys: {missing}")
        return TransformRequest(TransformKind.parse(spec["kind"]), spec["value"])


__all__ = ["Axis", "TransformKind", "TransformRequest", "FAMILIES"]
