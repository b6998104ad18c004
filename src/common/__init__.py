"""
どこで: `common` パッケージ。
何を: engine/transforms/api で使う軽量ユーティリティ（BaseRegistry, 型エイリアス, 設定）。
"""

from .base_registry import BaseRegistry, CacheableRegistry

__all__ = [
    "BaseRegistry",
    "CacheableRegistry",
]
