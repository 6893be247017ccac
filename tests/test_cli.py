from __future__ import annotations

import math

import pytest

from vecnum.main import main


def _run(argv, capsys):
    main(argv)
    return capsys.readouterr().out


def _exit_code(argv):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    return exc.value.code


def test_solve_quadratic(capsys):
    out = _run(["solve-quadratic", "1", "-3", "2"], capsys)
    assert out.startswith("[solve-quadratic] count=2")
    assert "roots=[2, 1]" in out


def test_solve_quadratic_bounded(capsys):
    out = _run(["solve-quadratic", "1", "-3", "2", "--lo", "0", "--hi", "1.5"], capsys)
    assert "count=1 roots=[1]" in out


def test_solve_cubic(capsys):
    out = _run(["solve-cubic", "1", "-3", "2", "0"], capsys)
    assert "count=3" in out


def test_integrate(capsys):
    out = _run(["integrate", "3", "0", "0", "--a", "0", "--b", "1", "--order", "2"], capsys)
    assert "order=2" in out
    value = float(out.split("value=")[1])
    assert value == pytest.approx(1.0, abs=1e-15)


def test_integrate_default_order(capsys):
    out = _run(["integrate", "1", "0", "--a", "0", "--b", "0.25"], capsys)
    assert "order=8" in out


def test_integrate_rejects_bad_order():
    code = _exit_code(["integrate", "1", "--a", "0", "--b", "1", "--order", "20"])
    assert "quadrature order must be in" in str(code)


def test_find_root(capsys):
    out = _run(["find-root", "1", "0", "-2", "--x0", "1", "--a", "0", "--b", "2"], capsys)
    x = float(out.split("x=")[1].split()[0])
    assert abs(x - math.sqrt(2.0)) < 1e-9


def test_find_root_rejects_inverted_bracket():
    code = _exit_code(["find-root", "1", "0", "-2", "--x0", "1", "--a", "2", "--b", "0"])
    assert "bracket" in str(code)


def test_verify_writes_csv_and_plots(tmp_path, capsys):
    csv_path = tmp_path / "verify.csv"
    plots = tmp_path / "plots"
    code = _exit_code(["verify", "--n-random", "5", "--csv", str(csv_path), "--plots", str(plots)])
    out = capsys.readouterr().out
    assert code == 0, out
    assert "[verify] total=" in out
    assert csv_path.is_file()
    assert (plots / "max_residual.png").is_file()


def test_verify_with_config_and_case_filter(tmp_path, capsys):
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text("sweep:\n  n_random: 0\n", encoding="utf-8")
    code = _exit_code(["verify", str(cfg), "--case", "quad_distinct", "--case", "cubic_triple_root"])
    out = capsys.readouterr().out
    assert code == 0, out
    # two named cases, four quadrature orders, three root problems
    assert "[verify] total=9 ok=9 fail=0" in out


def test_verify_unknown_case():
    code = _exit_code(["verify", "--case", "nope"])
    assert "Unknown cases" in str(code)


def test_golden_gen_and_check(tmp_path, capsys):
    path = tmp_path / "golden.json"
    assert _exit_code(["golden-gen", "--out", str(path)]) == 0
    assert path.is_file()
    assert _exit_code(["golden-check", "--golden", str(path)]) == 0
    out = capsys.readouterr().out
    assert "[golden-check quad_distinct] ok=True" in out


def test_golden_check_empty_file_fails(tmp_path):
    path = tmp_path / "golden.json"
    path.write_text('{"roots": []}', encoding="utf-8")
    assert _exit_code(["golden-check", "--golden", str(path)]) == 2
