"""
move 戦略（平行移動）

指定軸の座標に step を加算する。他の 2 軸には触れない。step = 0 は no-op。
`pivot` は平行移動では意味を持たないため無視する。
"""

from __future__ import annotations

from common.types import PointSequence, Vec3
from engine.core.kinds import TransformKind

from .base import TransformStrategy
from .registry import strategy


@strategy("move")
class Move(TransformStrategy):
    family = "move"
    supported_kinds = frozenset(
        {TransformKind.MOVE_X, TransformKind.MOVE_Y, TransformKind.MOVE_Z}
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
        points[:, int(kind.axis)] += value  # type: ignore[arg-type]


__all__ = ["Move"]
