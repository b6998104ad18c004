"""
どこで: `common.env`
何を: 環境変数の軽量パースヘルパを提供。
"""

from __future__ import annotations

import os
from typing import Optional


def env_bool(name: str, default: bool = False) -> bool:
    """真偽環境変数を取得（0/1, true/false を許容）。

    未設定または解釈できない値は `default` を返す。
    """
    raw = os.getenv(name)
    if raw is None:
        return bool(default)
    s = raw.strip().lower()
    if s.lstrip("-").isdigit():
        return int(s) != 0
    if s in {"true", "t", "yes", "y", "on"}:
        return True
    if s in {"false", "f", "no", "n", "off"}:
        return False
    return bool(default)


def env_str(name: str, default: Optional[str] = None, *, choices: Optional[set[str]] = None) -> Optional[str]:
    """文字列環境変数を取得。

    Parameters
    ----------
    name : str
        環境変数名。
    default : Optional[str]
        未設定/空文字/候補外のときに返す値。
    choices : Optional[set[str]]
        許容値（大文字小文字は無視して比較）。

    Returns
    -------
    Optional[str]
        前後空白を除いた値。`choices` 指定時は大文字に揃えて返す。
    """
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    val = raw.strip()
    if choices is not None:
        upper = val.upper()
        if upper not in {c.upper() for c in choices}:
            return default
        return upper
    return val


__all__ = ["env_bool", "env_str"]
