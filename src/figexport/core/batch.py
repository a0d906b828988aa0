# FigExport
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Batch export of every open figure to print-readable vector PDFs."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from matplotlib.figure import Figure

from .errors import OutputDirectoryError
from .exporter import export_pdf
from .figures import open_figures
from .naming import pdf_path, resolve_output_dir
from .style import ReadableStyle

log = logging.getLogger(__name__)

__all__ = ["ExportResult", "export_figure", "export_all_figures"]


@dataclass(frozen=True)
class ExportResult:
    """Outcome of exporting one figure."""

    number: int
    name: str
    path: Path
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def export_figure(number: int, figure: Figure, directory: Path) -> ExportResult:
    """
    Export one figure with the readable palette and restore its style.

    Failures are logged as warnings and returned in the result; they never
    propagate, so one figure cannot stop the others.
    """
    name = figure.get_label() or ""
    path = pdf_path(directory, number, name)
    try:
        with ReadableStyle(figure):
            export_pdf(figure, path)
    except Exception as exc:
        log.warning("Failed to save figure %d: %s", number, exc)
        return ExportResult(number, name, path, exc)
    log.info("Saved %s", path)
    return ExportResult(number, name, path)


def export_all_figures(output_dir: str | Path | None = None) -> list[ExportResult]:
    """
    Export every open pyplot figure to ``<output_dir>/Fig<NNN>_<name>.pdf``.

    Args:
        output_dir: Target directory, created with its parents when missing.
            Defaults to ``./Figures`` when omitted or empty.

    Returns:
        One result per open figure, in figure-number order

    Raises:
        OutputDirectoryError: If the output directory cannot be created
    """
    directory = resolve_output_dir(output_dir)
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputDirectoryError(directory, str(exc)) from exc

    figures = open_figures()
    if not figures:
        log.info("No open figures to export")
        return []

    results = [export_figure(number, figure, directory) for number, figure in figures]
    failed = sum(1 for result in results if not result.ok)
    log.debug("Exported %d of %d figure(s) to %s", len(results) - failed, len(results), directory)
    return results
