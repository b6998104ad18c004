"""
モデル頂点のアフィン変換 API（戦略・ディスパッチャ・ファサード）

Usage:
    from api import Manipulator, Model, ObjectTransformer, Rotate, TransformKind, configure_logging

    configure_logging()  # configs/default.yaml の logging.level を適用

    model = Model.from_points([(1.0, 0.0, 0.0)])

    # 低レベル: 戦略を選んでから適用
    t = ObjectTransformer()
    t.select(Rotate())
    t.apply(model.vertices, TransformKind.ROTATE_Z, 90.0)

    # 高レベル: UI 操作単位（ステップ量は configs/default.yaml）
    m = Manipulator(model)
    m.move("x", steps=-2)
"""

# 主要API
from .manipulator import Manipulator, configure_logging

# コアクラス
from engine.core.kinds import Axis, TransformKind, TransformRequest
from engine.core.model import Model
from engine.core.points import as_points
from transforms import (
    Move,
    ObjectTransformer,
    Rotate,
    Scale,
    TransformerStateError,
    TransformStrategy,
    UnsupportedKindError,
    get_strategy,
    list_strategies,
)

__all__ = [
    # メインAPI
    "Manipulator",
    "ObjectTransformer",
    "configure_logging",
    # 戦略
    "TransformStrategy",
    "Rotate",
    "Move",
    "Scale",
    "get_strategy",
    "list_strategies",
    # 型
    "Axis",
    "TransformKind",
    "TransformRequest",
    "Model",
    "as_points",
    # 例外
    "TransformerStateError",
    "UnsupportedKindError",
]

# バージョン情報
__version__ = "2026.10"
