# FigExport
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Deterministic output filenames for exported figures."""

from __future__ import annotations

import re
from pathlib import Path

from .constants import DEFAULT_OUTPUT_DIRNAME, PDF_SUFFIX

__all__ = ["sanitize_name", "figure_basename", "pdf_path", "resolve_output_dir"]

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_\-]")


def sanitize_name(name: str) -> str:
    """Replace every character outside [A-Za-z0-9_-] with an underscore."""

    return _UNSAFE_CHARS.sub("_", name)


def figure_basename(number: int, name: str | None) -> str:
    """
    Return the file stem for a figure, e.g. Fig001_Loss_Curve.

    Unnamed figures (empty or whitespace-only labels) fall back to
    Figure<number>. No timestamp or counter is ever added, so exporting
    the same figure twice targets the same file.
    """
    label = (name or "").strip()
    if not label:
        label = f"Figure{number}"
    return f"Fig{number:03d}_{sanitize_name(label)}"


def pdf_path(directory: str | Path, number: int, name: str | None) -> Path:
    """Return <directory>/<basename>.pdf for the given figure."""

    return Path(directory) / f"{figure_basename(number, name)}{PDF_SUFFIX}"


def resolve_output_dir(output_dir: str | Path | None = None) -> Path:
    """Return output_dir, or ./Figures when it is omitted or empty."""

    if output_dir is None or str(output_dir).strip() == "":
        return Path.cwd() / DEFAULT_OUTPUT_DIRNAME
    return Path(output_dir)
