"""
どこで: `api.manipulator`
何を: UI 操作（ボタン/キー/スライダー）を戦略選択 + 変換要求に変換するファサード。

使い方:
    m = Manipulator(Model.from_points([(1, 0, 0), (0, 1, 0)]))
    m.move("x", steps=2)      # move_step * 2 だけ X 方向へ
    m.rotate(Axis.Z)          # rotate_step_deg だけ Z 軸回り
    m.scale(steps=-1)         # 1 / scale_step 倍
    m.apply("RotateY", 90.0)  # スライダー等の絶対値指定

回転・スケールの中心は既定で原点。設定 `manipulation.pivot: centroid` のときは
変換直前のモデル重心を中心にする。

ロギングは構築時に設定しない。アプリケーションの入口で `configure_logging()` を明示的に呼ぶ。
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from common.logging import setup_default_logging
from common.types import PointSequence, Vec3
from engine.core.kinds import Axis, TransformKind, TransformRequest
from engine.core.model import Model
from transforms import ObjectTransformer
from util.utils import load_config, manipulation_config

logger = logging.getLogger(__name__)


def configure_logging(config: Mapping[str, Any] | None = None) -> None:
    """設定の `logging.level` でルートロガーを初期化する（入口で 1 回だけ呼ぶ想定）。

    `config` 省略時は `load_config()` を読む。既にハンドラがあれば何もしない。
    """
    cfg = config if config is not None else load_config()
    log_cfg = cfg.get("logging") or {}
    setup_default_logging(log_cfg.get("level") if isinstance(log_cfg, dict) else None)


class Manipulator:
    def __init__(
        self,
        target: Model | PointSequence,
        *,
        config: Mapping[str, Any] | None = None,
        transformer: ObjectTransformer | None = None,
    ) -> None:
        self._model = target if isinstance(target, Model) else Model(target)
        cfg = dict(config) if config is not None else load_config()
        self._steps = manipulation_config(cfg)
        self._transformer = transformer if transformer is not None else ObjectTransformer()

    # ── 参照 ──────────────────────────
    @property
    def model(self) -> Model:
        return self._model

    @property
    def points(self) -> PointSequence:
        return self._model.vertices

    @property
    def transformer(self) -> ObjectTransformer:
        return self._transformer

    @property
    def steps(self) -> dict[str, Any]:
        return dict(self._steps)

    # ── ステップ操作（UI コントロール 1 つに 1 メソッド） ──
    def move(self, axis: Axis | int | str, steps: float = 1) -> TransformRequest:
        kind = TransformKind.of("move", axis)
        return self._run(TransformRequest(kind, self._steps["move_step"] * steps))

    def rotate(self, axis: Axis | int | str, steps: float = 1) -> TransformRequest:
        kind = TransformKind.of("rotate", axis)
        return self._run(TransformRequest(kind, self._steps["rotate_step_deg"] * steps))

    def scale(self, steps: float = 1) -> TransformRequest:
        """`scale_step ** steps` 倍（負の steps は縮小）。"""
        return self._run(TransformRequest(TransformKind.SCALE, self._steps["scale_step"] ** steps))

    # ── 絶対値指定 ────────────────────
    def apply(self, kind: TransformKind | str, value: float) -> TransformRequest:
        return self._run(TransformRequest(TransformKind.parse(kind), value))

    def apply_request(self, request: TransformRequest) -> TransformRequest:
        return self._run(request)

    def _pivot_for(self, kind: TransformKind) -> Vec3 | None:
        if kind.family == "move" or self._steps["pivot"] == "origin":
            return None
        return self._model.centroid()

    def _run(self, request: TransformRequest) -> TransformRequest:
        self._transformer.select_for(request.kind)
        pivot = self._pivot_for(request.kind)
        if pivot is None:
            self._transformer.apply_request(self.points, request)
        else:
            self._transformer.apply_request(self.points, request, pivot=pivot)
        logger.debug("applied %s=%r (pivot=%s)", request.kind.name, request.value, pivot)
        return request


__all__ = ["Manipulator", "configure_logging"]
