"""
どこで: `transforms.dispatcher`
何を: 選択中の変換戦略を 1 つ保持し、変換要求をそのまま転送する（ObjectTransformer）。

状態:
- Unselected（初期）: `apply` は TransformerStateError
- Selected（`select` 後）: `apply` は選択中の戦略へ転送
`select` はいつでも再実行でき、適用済みの変換には影響しない。終端状態は無い。
"""

from __future__ import annotations

import logging
from typing import Any

from common.types import PointSequence
from engine.core.kinds import TransformRequest

from .base import TransformStrategy
from .registry import get_strategy, strategy_for_kind

logger = logging.getLogger(__name__)


class TransformerStateError(RuntimeError):
    """戦略未選択のまま apply が呼ばれた。"""


class ObjectTransformer:
    """変換戦略のディスパッチャ。戦略の寿命は所有しない（参照のみ保持）。"""

    def __init__(self, strategy: TransformStrategy | str | None = None) -> None:
        self._strategy: TransformStrategy | None = None
        if strategy is not None:
            self.select(strategy)

    @property
    def strategy(self) -> TransformStrategy | None:
        return self._strategy

    @property
    def is_selected(self) -> bool:
        return self._strategy is not None

    def select(self, strategy: TransformStrategy | str) -> TransformStrategy:
        """戦略を選択（インスタンスまたは登録名）。選択した戦略を返す。

        例外:
        - KeyError: 未登録の戦略名。
        - TypeError: 戦略でも文字列でもない値。
        いずれの場合も選択状態は変わらない。
        """
        if isinstance(strategy, str):
            resolved = get_strategy(strategy)
        elif isinstance(strategy, TransformStrategy):
            resolved = strategy
        else:
            raise TypeError(
                f"select は TransformStrategy または登録名を受け付けます: got {type(strategy).__name__}"
            )
        if resolved is not self._strategy:
            logger.debug("strategy: %r -> %r", self._strategy, resolved)
        self._strategy = resolved
        return resolved

    def select_for(self, kind: Any) -> TransformStrategy:
        """変換種別に対応する登録戦略を選択（MoveX -> move など）。"""
        return self.select(strategy_for_kind(kind))

    def apply(self, points: PointSequence, kind: Any, value: float, **kwargs: Any) -> None:
        """選択中の戦略の `transform` へそのまま転送する。

        例外:
        - TransformerStateError: 戦略が未選択（点列には触れない）。
        """
        if self._strategy is None:
            raise TransformerStateError("変換戦略が選択されていません（apply の前に select を呼んでください）")
        self._strategy.transform(points, kind, value, **kwargs)

    def apply_request(self, points: PointSequence, request: TransformRequest, **kwargs: Any) -> None:
        self.apply(points, request.kind, request.value, **kwargs)

    def __repr__(self) -> str:
        return f"ObjectTransformer(strategy={self._strategy!r})"


__all__ = ["ObjectTransformer", "TransformerStateError"]
