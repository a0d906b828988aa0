# FigExport
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Central definition for export defaults and the print-readable palette."""

from __future__ import annotations

from typing import Any, Final

DEFAULT_OUTPUT_DIRNAME: Final[str] = "Figures"
PDF_SUFFIX: Final[str] = ".pdf"

READABLE_FOREGROUND: Final[str] = "black"
READABLE_BACKGROUND: Final[str] = "white"
NO_EDGE: Final[str] = "none"

# Applied through matplotlib.rc_context only while a single figure is written.
VECTOR_RC: Final[dict[str, Any]] = {
    "pdf.fonttype": 42,  # embed TrueType so text stays selectable
}

# None drops the key, so reruns do not embed a creation timestamp.
PDF_METADATA: Final[dict[str, Any]] = {
    "Creator": "figexport",
    "CreationDate": None,
}
