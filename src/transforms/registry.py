"""
どこで: `transforms` のレジストリ層。
何を: `@strategy` デコレータによる戦略クラスの登録と、名前ごとの単一インスタンス取得を提供（キーは正規化）。

公開 API 概要:
- `strategy`（デコレータ）: TransformStrategy サブクラスを登録
- `get_strategy(name)` / `strategy_for_kind(kind)` / `list_strategies()` /
  `is_strategy_registered(name)` / `clear_registry()`
- `get_registry()`: 読み取り専用ビュー（テスト/診断用）
"""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Any, Mapping

from common.base_registry import CacheableRegistry
from engine.core.kinds import TransformKind

if TYPE_CHECKING:
    from .base import TransformStrategy

# 共通レジストリ（インスタンスは名前ごとにプロセス寿命で 1 つ）
_strategy_registry = CacheableRegistry()


def strategy(arg: Any | None = None, /, name: str | None = None):
    """変換戦略クラスを登録するデコレータ。

    使用例:
    - `@strategy` / `@strategy()`                → クラス名から自動推論。
    - `@strategy("rotate")` / `@strategy(name="rotate")` → 明示名で登録。

    例外:
    - TypeError: TransformStrategy のサブクラス以外を登録しようとした場合。
    """

    def _register_checked(obj: Any, resolved_name: str | None = None):
        from .base import TransformStrategy

        if not (inspect.isclass(obj) and issubclass(obj, TransformStrategy)):
            raise TypeError(
                f"@strategy は TransformStrategy のサブクラスのみ登録可能です: got {obj!r}"
            )
        return _strategy_registry.register(resolved_name)(obj)

    # 直付け (@strategy)
    if inspect.isclass(arg) and name is None:
        return _register_checked(arg, None)

    # 位置引数で名前を渡した (@strategy("name"))
    if isinstance(arg, str) and name is None:

        def _decorator_named(obj: Any):
            return _register_checked(obj, arg)

        return _decorator_named

    # name キーワード引数、または引数なし
    def _decorator_generic(obj: Any):
        return _register_checked(obj, name)

    return _decorator_generic


def get_strategy(name: str) -> "TransformStrategy":
    """登録された戦略のインスタンスを取得（同名なら常に同一インスタンス）。

    例外:
    - KeyError: 未登録名の場合。
    """
    return _strategy_registry.get_instance(name)


def strategy_for_kind(kind: Any) -> "TransformStrategy":
    """変換種別に対応する戦略インスタンスを返す（MoveX -> move, SCALE -> scale）。"""
    return get_strategy(TransformKind.parse(kind).family)


def list_strategies() -> list[str]:
    """登録済み戦略名をソートして返す。"""
    return sorted(_strategy_registry.list_all())


def is_strategy_registered(name: str) -> bool:
    return _strategy_registry.is_registered(name)


def get_registry() -> Mapping[str, Any]:
    """登録内容のコピーを返す（変更してもレジストリには影響しない）。"""
    return _strategy_registry.registry


def clear_registry() -> None:
    _strategy_registry.clear()


__all__ = [
    "strategy",
    "get_strategy",
    "strategy_for_kind",
    "list_strategies",
    "is_strategy_registered",
    "get_registry",
    "clear_registry",
]
