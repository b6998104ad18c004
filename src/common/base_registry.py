"""
共通レジストリ基底クラス
transforms/ の戦略登録で使用する名前付きレジストリ
"""

from abc import ABC
from typing import Any, Callable

from .param_utils import normalize_name


class BaseRegistry(ABC):
    """レジストリの基底クラス。

    - 文字列キーは正規化されます（大文字小文字・キャメル→スネークを吸収）。
    - デコレータは名前省略可。省略時はクラス名から自動推論します。
    """

    def __init__(self):
        self._registry: dict[str, Any] = {}

    @classmethod
    def _normalize_key(cls, name: str) -> str:
        """レジストリキーの正規化（例: "MyStrategy" -> "my_strategy"）。"""
        if not isinstance(name, str):
            raise TypeError("レジストリキーは str である必要があります")
        if not name:
            raise ValueError("レジストリキーは空であってはなりません")
        return normalize_name(name)

    def register(self, name: str | None = None) -> Callable:
        """クラス/関数をレジストリに登録するデコレータ。"""

        def decorator(obj: Any) -> Any:
            key = self._normalize_key(name) if name else self._normalize_key(obj.__name__)
            if key in self._registry and self._registry[key] is not obj:
                raise ValueError(f"'{key}' は既に登録されています")
            self._registry[key] = obj
            return obj

        return decorator

    def get(self, name: str) -> Any:
        """登録されたクラス/関数を取得。"""
        key = self._normalize_key(name)
        if key not in self._registry:
            raise KeyError(f"'{name}' は登録されていません")
        return self._registry[key]

    def list_all(self) -> list[str]:
        """登録されているすべての名前を取得（未ソート）。"""
        return list(self._registry.keys())

    def is_registered(self, name: str) -> bool:
        return self._normalize_key(name) in self._registry

    def unregister(self, name: str) -> None:
        """レジストリから削除（名前が存在しない場合は無視）。"""
        key = self._normalize_key(name)
        if key in self._registry:
            del self._registry[key]

    def clear(self) -> None:
        self._registry.clear()

    @property
    def registry(self) -> dict[str, Any]:
        """レジストリの読み取り専用アクセス"""
        return self._registry.copy()


class CacheableRegistry(BaseRegistry):
    """登録クラスのインスタンスを名前ごとに 1 つだけ生成して保持するレジストリ。"""

    def __init__(self):
        super().__init__()
        self._instance_cache: dict[str, Any] = {}

    def get_instance(self, name: str) -> Any:
        """インスタンスを取得（初回のみ生成し、以後は同一インスタンスを返す）。"""
        key = self._normalize_key(name)
        if key not in self._instance_cache:
            cls = self.get(name)
            self._instance_cache[key] = cls()
        return self._instance_cache[key]

    def unregister(self, name: str) -> None:
        super().unregister(name)
        self._instance_cache.pop(self._normalize_key(name), None)

    def clear(self) -> None:
        super().clear()
        self.clear_instance_cache()

    def clear_instance_cache(self) -> None:
        """インスタンスキャッシュをクリア"""
        self._instance_cache.clear()
