from pathlib import Path

import pytest

from figexport.core.naming import figure_basename, pdf_path, resolve_output_dir, sanitize_name


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("A/B:C", "A_B_C"),
        ("Loss Curve", "Loss_Curve"),
        ("already_safe-Name01", "already_safe-Name01"),
        ("µm (x10)", "_m__x10_"),
        ("", ""),
    ],
)
def test_sanitize_replaces_disallowed_characters(name, expected):
    assert sanitize_name(name) == expected


@pytest.mark.parametrize("name", ["A/B:C", "  spaced  out ", "Δt → 0", "a.b.c", "x" * 300, "\t\n"])
def test_sanitize_is_idempotent(name):
    once = sanitize_name(name)
    assert sanitize_name(once) == once


def test_basename_pads_number_and_keeps_name():
    assert figure_basename(1, "Loss Curve") == "Fig001_Loss_Curve"
    assert figure_basename(42, "x") == "Fig042_x"
    assert figure_basename(1234, "x") == "Fig1234_x"


@pytest.mark.parametrize("name", ["", "   ", None])
def test_unnamed_figure_uses_number(name):
    assert figure_basename(2, name) == "Fig002_Figure2"


def test_name_is_trimmed_before_sanitizing():
    assert figure_basename(3, "  Trace  ") == "Fig003_Trace"


def test_distinct_numbers_never_collide():
    names = ["", "plot", "0_plot", "00_plot"]
    by_number = {}
    for number in range(1, 1200):
        for name in names:
            by_number.setdefault(figure_basename(number, name), set()).add(number)
    assert all(len(numbers) == 1 for numbers in by_number.values())


def test_pdf_path_is_stable(tmp_path):
    first = pdf_path(tmp_path, 7, "Pressure / Diameter")
    second = pdf_path(tmp_path, 7, "Pressure / Diameter")
    assert first == second == tmp_path / "Fig007_Pressure___Diameter.pdf"


@pytest.mark.parametrize("value", [None, "", "   "])
def test_output_dir_defaults_to_figures(value, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert resolve_output_dir(value) == Path.cwd() / "Figures"


def test_output_dir_is_used_verbatim(tmp_path):
    assert resolve_output_dir(tmp_path / "out") == tmp_path / "out"
    assert resolve_output_dir("rel/out") == Path("rel/out")
