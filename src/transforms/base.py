"""
どこで: `transforms.base`
何を: 変換戦略の抽象基底（TransformStrategy）と種別解決。

契約:
- `transform(points, kind, value, *, pivot=None)` は points を in-place で書き換え、None を返す。
- 種別と点列の検証はすべて書き換え前に行う（失敗時は点列に一切触れない）。
- 数値 `value` 自体は検証しない（0 倍・負の倍率なども有効な結果として扱う）。
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar, FrozenSet

from common.param_utils import ensure_vec3
from common.types import PointSequence, Vec3
from engine.core.kinds import Axis, TransformKind
from engine.core.points import ensure_points

logger = logging.getLogger(__name__)


class UnsupportedKindError(ValueError):
    """戦略が扱えない変換種別が渡された（例: Scale に RotateX）。"""


class TransformStrategy(ABC):
    """変換戦略の基底クラス。

    サブクラスは `family` / `supported_kinds` と `_apply` を定義する。
    戦略は状態を持たないため、同一インスタンスを使い回してよい。
    """

    family: ClassVar[str] = ""
    supported_kinds: ClassVar[FrozenSet[TransformKind]] = frozenset()

    def resolve_kind(self, kind: Any) -> TransformKind:
        """種別指定を TransformKind に解決。

        - TransformKind / 文字列（"MoveX", "rotate_z", "SCALE" など）
        - Axis（または "x" など軸のみの指定）: この戦略の当該軸として解釈
        - None: 軸を持たない戦略（Scale）のみ
        """
        if isinstance(kind, TransformKind):
            return kind
        if kind is None or isinstance(kind, Axis):
            return TransformKind.of(self.family, kind)
        if isinstance(kind, str) and kind.strip().upper() in Axis.__members__:
            return TransformKind.of(self.family, kind)
        return TransformKind.parse(kind)

    def accepts(self, kind: Any) -> bool:
        try:
            return self.resolve_kind(kind) in self.supported_kinds
        except (TypeError, ValueError):
            return False

    def transform(
        self,
        points: PointSequence,
        kind: Any,
        value: float,
        *,
        pivot: Vec3 | None = None,
    ) -> None:
        """点列全体に変換を適用（in-place）。

        例外:
        - UnsupportedKindError: 戦略が扱えない種別。
        - TypeError / ValueError: 点列の型・形状が不正、または種別名が不正。
        """
        try:
            resolved = self.resolve_kind(kind)
        except ValueError as e:
            raise UnsupportedKindError(f"{type(self).__name__}: {e}") from e
        if resolved not in self.supported_kinds:
            supported = ", ".join(sorted(k.name for k in self.supported_kinds))
            raise UnsupportedKindError(
                f"{type(self).__name__} は {resolved.name} を扱えません（対応: {supported}）"
            )
        ensure_points(points)
        center = ensure_vec3(pivot) if pivot is not None else None
        value = float(value)

        logger.debug(
            "%s: %s value=%r points=%d pivot=%s",
            type(self).__name__, resolved.name, value, points.shape[0], center,
        )
        if points.shape[0] == 0:
            return
        self._apply(points, resolved, value, center)

    @abstractmethod
    def _apply(
        self,
        points: PointSequence,
        kind: TransformKind,
        value: float,
        pivot: Vec3 | None,
    ) -> None:
        """検証済みの入力で点列を書き換える。"""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


__all__ = ["TransformStrategy", "UnsupportedKindError"]
