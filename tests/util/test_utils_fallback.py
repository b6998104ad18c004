from __future__ import annotations

from pathlib import Path

import pytest

from util.utils import MANIPULATION_DEFAULTS, _find_project_root, load_config, manipulation_config


def test_find_project_root_fallback(tmp_path: Path) -> None:
    # tmp_path/a/b のような構造（上流に .git/pyproject.toml/configs が無い）では
    # フォールバックで start.parent.parent を返す
    a = tmp_path / "a" / "b"
    a.mkdir(parents=True)
    start = a
    got = _find_project_root(start)
    assert got == start.parent.parent


def test_load_config_merges_top_level(tmp_path: Path) -> None:
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text(
        "manipulation:\n  move_step: 0.5\nlogging:\n  level: INFO\n", encoding="utf-8"
    )
    (tmp_path / "config.yaml").write_text("logging:\n  level: DEBUG\n", encoding="utf-8")
    cfg = load_config(tmp_path)
    assert cfg["manipulation"] == {"move_step": 0.5}
    assert cfg["logging"] == {"level": "DEBUG"}


def test_load_config_is_fail_soft(tmp_path: Path) -> None:
    assert load_config(tmp_path) == {}
    (tmp_path / "config.yaml").write_text("manipulation: [unclosed\n", encoding="utf-8")
    assert load_config(tmp_path) == {}
    (tmp_path / "config.yaml").write_text("- just\n- a list\n", encoding="utf-8")
    assert load_config(tmp_path) == {}


def test_repository_default_config_is_loadable() -> None:
    cfg = load_config()
    steps = manipulation_config(cfg)
    assert steps["pivot"] == "origin"
    assert steps["scale_step"] > 1.0


def test_manipulation_config_defaults_and_overrides() -> None:
    assert manipulation_config({}) == MANIPULATION_DEFAULTS
    steps = manipulation_config({"manipulation": {"move_step": "2", "pivot": "Centroid"}})
    assert steps["move_step"] == 2.0
    assert steps["pivot"] == "centroid"


@pytest.mark.parametrize(
    "section",
    [
        {"move_step": "far"},
        {"pivot": "corner"},
        ["not", "a", "mapping"],
    ],
)
def test_manipulation_config_rejects_invalid(section) -> None:
    with pytest.raises(ValueError):
        manipulation_config({"manipulation": section})
