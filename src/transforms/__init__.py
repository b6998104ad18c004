"""
transforms パッケージ（戦略ベース）

このモジュールの import 副作用で標準の変換戦略（rotate/move/scale）を登録します。
"""

from .base import TransformStrategy, UnsupportedKindError
from .registry import get_strategy, list_strategies, strategy, strategy_for_kind

# 標準戦略を登録
from .rotate import Rotate
from .move import Move
from .scale import Scale

from .dispatcher import ObjectTransformer, TransformerStateError

__all__ = [
    "TransformStrategy",
    "UnsupportedKindError",
    "strategy",
    "get_strategy",
    "strategy_for_kind",
    "list_strategies",
    "Rotate",
    "Move",
    "Scale",
    "ObjectTransformer",
    "TransformerStateError",
]
