# FigExport
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Discovery of the figures currently open in the pyplot session."""

from __future__ import annotations

import logging

from matplotlib._pylab_helpers import Gcf
from matplotlib.figure import Figure

log = logging.getLogger(__name__)

__all__ = ["open_figures"]


def open_figures() -> list[tuple[int, Figure]]:
    """
    Return (number, figure) for every open pyplot figure, sorted by number.

    The figure-manager registry is read directly instead of going through
    plt.figure(num), which would make each figure current in turn.
    """
    managers = sorted(Gcf.get_all_fig_managers(), key=lambda manager: manager.num)
    figures = [(int(manager.num), manager.canvas.figure) for manager in managers]
    log.debug("Found %d open figure(s): %s", len(figures), [num for num, _ in figures])
    return figures
