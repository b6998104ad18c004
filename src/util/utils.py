from pathlib import Path
from typing import Any, Dict

import yaml

MANIPULATION_DEFAULTS: Dict[str, Any] = {
    "move_step": 0.1,
    "rotate_step_deg": 5.0,
    "scale_step": 1.1,
    "pivot": "origin",
}


def _safe_load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return data if isinstance(data, dict) else {}
    except (OSError, yaml.YAMLError):
        return {}


def _find_project_root(start: Path) -> Path:
    """プロジェクトルートを推定して返す。

    - `src/` 配下から呼ばれることを想定し、上位に `.git` や `pyproject.toml`、`configs/` がある
      もっとも近いディレクトリを返す。
    - 見つからない場合は `start.parent.parent` をフォールバックとして返す。
    """
    cur = start.resolve()
    for parent in [cur] + list(cur.parents):
        if (
            (parent / ".git").exists()
            or (parent / "pyproject.toml").exists()
            or (parent / "configs").exists()
        ):
            return parent
    # 典型: <repo>/src/util/utils.py -> <repo>
    return cur.parent.parent


def load_config(project_root: Path | None = None) -> Dict[str, Any]:
    """構成を読み込んで辞書で返す（フェイルソフト）。

    優先順:
    1) `configs/default.yaml`（ベース）
    2) ルート `config.yaml`（ベースに上書き）

    - いずれも存在しない/不正な場合は空辞書を返す。
    - ネストした辞書のディープマージは行わず、トップレベルのみ上書き。
    """
    if project_root is None:
        project_root = _find_project_root(Path(__file__).parent)
    base: Dict[str, Any] = {}

    default_path = project_root / "configs" / "default.yaml"
    if default_path.exists():
        base.update(_safe_load_yaml(default_path))

    root_config_path = project_root / "config.yaml"
    if root_config_path.exists():
        base.update(_safe_load_yaml(root_config_path))

    return base


def manipulation_config(config: Dict[str, Any] | None = None) -> Dict[str, Any]:
    """`manipulation` セクションを既定値で補完して返す。

    数値キーは float に変換する。変換できない値は `ValueError`。
    """
    if config is None:
        config = load_config()
    section = config.get("manipulation") or {}
    if not isinstance(section, dict):
        raise ValueError(f"manipulation は mapping である必要があります: got {section!r}")
    out = dict(MANIPULATION_DEFAULTS)
    out.update(section)
    for key in ("move_step", "rotate_step_deg", "scale_step"):
        try:
            out[key] = float(out[key])
        except (TypeError, ValueError):
            raise ValueError(f"manipulation.{key} は数値である必要があります: got {out[key]!r}")
    pivot = str(out["pivot"]).strip().lower()
    if pivot not in ("origin", "centroid"):
        raise ValueError(f"manipulation.pivot は 'origin' か 'centroid': got {out['pivot']!r}")
    out["pivot"] = pivot
    return out
