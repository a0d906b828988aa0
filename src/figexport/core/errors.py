# FigExport
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Exceptions raised by the figure export routine."""

from __future__ import annotations

from pathlib import Path


class OutputDirectoryError(RuntimeError):
    """Raised when the output directory cannot be created."""

    def __init__(self, directory: Path, reason: str) -> None:
        super().__init__(f"Cannot create output directory {directory}: {reason}")
        self.directory = directory


class FigureExportError(RuntimeError):
    """Raised when a figure could not be written to its PDF file."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(reason)
        self.path = path
