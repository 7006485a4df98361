# tests/test_config.py
import pytest

from solver.config import DEFAULTS, load_config, merge_overrides


def test_defaults_without_file():
    cfg = load_config()
    assert cfg == DEFAULTS
    assert cfg.blank_char == "X"
    assert cfg.solution_suffix == ".sln.txt"


def test_yaml_then_overrides(tmp_path):
    f = tmp_path / "solver.yaml"
    f.write_text("blank_char: '.'\nquiet: true\n", encoding="utf-8")
    cfg = load_config(f, quiet=None, write_solution=False)
    assert cfg.blank_char == "."
    assert cfg.quiet is True
    assert cfg.write_solution is False


def test_unknown_keys_rejected(tmp_path):
    f = tmp_path / "solver.yaml"
    f.write_text("grid_size: 16\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(f)


def test_merge_overrides_skips_none():
    assert merge_overrides({"a": 1}, a=None, b=2) == {"a": 1, "b": 2}


def test_non_mapping_yaml_rejected(tmp_path):
    f = tmp_path / "solver.yaml"
    f.write_text("- X\n- .\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(f)
