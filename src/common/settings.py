"""
どこで: `common.settings`
何を: プロジェクトの環境変数を型付きで一元管理し、起動時に読み込む。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_str

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class _Settings:
    # 回転カーネル
    USE_NUMBA: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - `VTX_USE_NUMBA`: 0/1, true/false（既定 True）
    - `VTX_LOG_LEVEL`: DEBUG/INFO/WARNING/ERROR/CRITICAL（不正値は INFO）
    """
    _settings.USE_NUMBA = env_bool("VTX_USE_NUMBA", True)
    _settings.LOG_LEVEL = env_str("VTX_LOG_LEVEL", "INFO", choices=LOG_LEVELS) or "INFO"


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
