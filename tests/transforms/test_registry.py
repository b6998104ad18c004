from __future__ import annotations

import pytest

from engine.core.kinds import TransformKind
from transforms import Move, Rotate, Scale
from transforms import registry as _strategy_registry
from transforms.base import TransformStrategy
from transforms.registry import (
    clear_registry,
    get_registry,
    get_strategy,
    is_strategy_registered,
    list_strategies,
    strategy,
    strategy_for_kind,
)


@pytest.fixture()
def restore_registry():
    """レジストリを変更するテストの後で標準戦略の登録（とインスタンス）を復元する。"""
    reg = _strategy_registry._strategy_registry
    saved = reg.registry
    instances = dict(reg._instance_cache)
    yield
    reg.clear()
    reg._registry.update(saved)
    reg._instance_cache.update(instances)


class _Identity(TransformStrategy):
    family = "scale"
    supported_kinds = frozenset({TransformKind.SCALE})

    def _apply(self, points, kind, value, pivot) -> None:
        return None


def test_builtin_strategies_registered() -> None:
    assert list_strategies() == ["move", "rotate", "scale"]
    assert isinstance(get_strategy("rotate"), Rotate)
    assert isinstance(get_strategy("Move"), Move)
    assert isinstance(get_strategy("SCALE"), Scale)


def test_get_strategy_returns_singleton() -> None:
    assert get_strategy("rotate") is get_strategy("rotate")


def test_unknown_strategy_raises_key_error() -> None:
    with pytest.raises(KeyError):
        get_strategy("shear")


@pytest.mark.parametrize(
    "kind, cls",
    [
        (TransformKind.MOVE_X, Move),
        ("RotateY", Rotate),
        (TransformKind.SCALE, Scale),
    ],
)
def test_strategy_for_kind(kind, cls) -> None:
    assert isinstance(strategy_for_kind(kind), cls)


def test_get_registry_returns_copy() -> None:
    snap = dict(get_registry())
    snap["bogus"] = object()
    assert not is_strategy_registered("bogus")


def test_decorator_rejects_non_strategy() -> None:
    with pytest.raises(TypeError) as ei:
        strategy(name="bad")(object)
    assert "got" in str(ei.value)


def test_decorator_rejects_duplicate_name() -> None:
    with pytest.raises(ValueError):
        strategy("rotate")(_Identity)


def test_decorator_named_registration(restore_registry) -> None:
    strategy("identity")(_Identity)
    assert is_strategy_registered("identity")
    assert isinstance(get_strategy("Identity"), _Identity)
    clear_registry()
    assert not is_strategy_registered("identity")
    assert not is_strategy_registered("rotate")
