# FigExport
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Vector PDF export of a single matplotlib figure."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import matplotlib as mpl

from .constants import PDF_METADATA, READABLE_BACKGROUND, VECTOR_RC
from .errors import FigureExportError

log = logging.getLogger(__name__)

__all__ = ["export_pdf", "supports_savefig"]


def supports_savefig(figure: Any) -> bool:
    """Return True when ``figure`` exposes the high-fidelity ``savefig`` path."""

    return callable(getattr(figure, "savefig", None))


def export_pdf(figure: Any, path: str | Path) -> Path:
    """
    Write ``figure`` to ``path`` as a vector PDF.

    The preferred path is ``Figure.savefig`` on the dedicated PDF backend with
    an explicit white background and embedded TrueType text. When that backend
    is unavailable (import or capability error), or the object has no
    ``savefig``, the canvas' generic ``print_figure`` writes the same path.

    Args:
        figure: Matplotlib figure (or any object exposing a canvas)
        path: Destination file, overwritten when it already exists

    Returns:
        The written path

    Raises:
        FigureExportError: If the file could not be written
    """
    path = Path(path)
    try:
        with mpl.rc_context(VECTOR_RC):
            if not supports_savefig(figure):
                log.debug("savefig unavailable for %r, using print_figure", figure)
                _print_pdf(figure, path)
                return path
            try:
                _save_vector_pdf(figure, path)
            except (ImportError, ValueError) as exc:
                log.debug("PDF backend unavailable (%s), using print_figure", exc)
                _print_pdf(figure, path)
    except Exception as exc:
        raise FigureExportError(path, f"{type(exc).__name__}: {exc}") from exc
    return path


def _save_vector_pdf(figure: Any, path: Path) -> None:
    figure.savefig(
        path,
        format="pdf",
        backend="pdf",
        facecolor=READABLE_BACKGROUND,
        edgecolor=READABLE_BACKGROUND,
        transparent=False,
        bbox_inches="tight",
        metadata=PDF_METADATA,
    )


def _print_pdf(figure: Any, path: Path) -> None:
    figure.canvas.print_figure(
        path,
        format="pdf",
        facecolor=READABLE_BACKGROUND,
        edgecolor=READABLE_BACKGROUND,
        metadata=PDF_METADATA,
    )
