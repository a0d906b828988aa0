# FigExport
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Public package interface for FigExport."""

from figexport.core.batch import ExportResult, export_all_figures, export_figure
from figexport.core.errors import FigureExportError, OutputDirectoryError
from figexport.core.exporter import export_pdf
from figexport.core.figures import open_figures
from figexport.core.naming import figure_basename, pdf_path, resolve_output_dir, sanitize_name
from figexport.core.style import (
    ReadableStyle,
    StyleSnapshot,
    apply_readable_style,
    capture_style,
    restore_style,
)

__all__ = [
    "export_all_figures",
    "export_figure",
    "ExportResult",
    "export_pdf",
    "open_figures",
    "figure_basename",
    "pdf_path",
    "resolve_output_dir",
    "sanitize_name",
    "ReadableStyle",
    "StyleSnapshot",
    "capture_style",
    "apply_readable_style",
    "restore_style",
    "FigureExportError",
    "OutputDirectoryError",
]
