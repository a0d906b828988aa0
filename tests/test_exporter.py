from types import SimpleNamespace

import matplotlib as mpl
import matplotlib.pyplot as plt
import pytest

from figexport.core.errors import FigureExportError
from figexport.core.exporter import export_pdf, supports_savefig


def _figure():
    fig, ax = plt.subplots()
    ax.plot([0, 1, 2], [0, 1, 4], label="trace")
    ax.set_title("Export")
    ax.legend()
    return fig


def test_export_writes_a_pdf(tmp_path):
    target = tmp_path / "out.pdf"
    assert export_pdf(_figure(), target) == target
    data = target.read_bytes()
    assert data.startswith(b"%PDF")
    assert b"/CreationDate" not in data


def test_export_overwrites_existing_file(tmp_path):
    target = tmp_path / "out.pdf"
    target.write_bytes(b"stale")
    export_pdf(_figure(), target)

    assert target.read_bytes().startswith(b"%PDF")
    assert [p.name for p in tmp_path.iterdir()] == ["out.pdf"]


def test_export_does_not_leak_rc_settings(tmp_path):
    fonttype = mpl.rcParams["pdf.fonttype"]
    export_pdf(_figure(), tmp_path / "out.pdf")
    assert mpl.rcParams["pdf.fonttype"] == fonttype


def test_falls_back_to_print_figure_without_savefig(tmp_path):
    fig = _figure()
    stand_in = SimpleNamespace(canvas=fig.canvas)
    assert supports_savefig(fig)
    assert not supports_savefig(stand_in)

    target = tmp_path / "fallback.pdf"
    export_pdf(stand_in, target)
    assert target.read_bytes().startswith(b"%PDF")


def test_failure_is_wrapped_with_cause(tmp_path):
    target = tmp_path / "taken.pdf"
    target.mkdir()

    with pytest.raises(FigureExportError) as info:
        export_pdf(_figure(), target)

    assert info.value.path == target
    assert isinstance(info.value.__cause__, OSError)


def test_missing_canvas_is_an_export_failure(tmp_path):
    with pytest.raises(FigureExportError, match="AttributeError"):
        export_pdf(object(), tmp_path / "nothing.pdf")


def test_real_figure_falls_back_when_pdf_backend_is_unavailable(tmp_path, monkeypatch):
    fig = _figure()
    calls = []

    def no_backend(*args, **kwargs):
        calls.append(kwargs.get("backend"))
        raise ValueError("The 'pdf' backend does not support pdf output")

    monkeypatch.setattr(fig, "savefig", no_backend)
    target = tmp_path / "fallback.pdf"
    export_pdf(fig, target)

    assert calls == ["pdf"]
    assert target.read_bytes().startswith(b"%PDF")
