from __future__ import annotations

from pathlib import Path

import pytest

from vecnum.config import config_from_dict, default_config, load_config

ROOT = Path(__file__).resolve().parents[1]


def test_defaults():
    cfg = default_config()
    assert cfg.sweep.seed == 12345
    assert cfg.sweep.n_random == 200
    assert cfg.sweep.root_range == (-10.0, 10.0)
    assert cfg.tolerances.quadratic_rel == 1e-9
    assert cfg.tolerances.cubic_rel == 1e-7
    assert cfg.quadrature.orders == [2, 4, 8, 16]


def test_example_config_matches_defaults():
    cfg = load_config(str(ROOT / "examples" / "verify_default.yaml"))
    assert cfg == default_config()


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(str(path)) == default_config()


def test_partial_override(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text(
        """
sweep:
  n_random: 10
  root_range: [-1, 1]
tolerances:
  cubic_rel: 1.0e-6
""",
        encoding="utf-8",
    )
    cfg = load_config(str(path))
    assert cfg.sweep.n_random == 10
    assert cfg.sweep.root_range == (-1.0, 1.0)
    assert cfg.sweep.seed == 12345
    assert cfg.tolerances.cubic_rel == 1e-6
    assert cfg.tolerances.quadratic_rel == 1e-9


def test_rejects_unsupported_section():
    with pytest.raises(ValueError, match="unsupported sections"):
        config_from_dict({"solver": {}})


def test_rejects_unsupported_key():
    with pytest.raises(ValueError, match="sweep contains unsupported keys"):
        config_from_dict({"sweep": {"n_cases": 3}})


def test_rejects_inverted_root_range():
    with pytest.raises(ValueError, match="sweep.root_range must satisfy lo < hi"):
        config_from_dict({"sweep": {"root_range": [1.0, -1.0]}})


def test_rejects_non_positive_tolerance():
    with pytest.raises(ValueError, match="tolerances.root_rel must be positive"):
        config_from_dict({"tolerances": {"root_rel": 0.0}})


def test_rejects_quadrature_order_out_of_range():
    with pytest.raises(ValueError, match="quadrature.orders must be in"):
        config_from_dict({"quadrature": {"orders": [2, 20]}})


def test_rejects_non_mapping_root(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ValueError, match="config root must be a mapping"):
        load_config(str(path))
