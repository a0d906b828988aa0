# FigExport
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""
Temporary print-readable styling for a figure.

A figure is walked into element variants (figure background, axes, free
text, legends, colorbars). Each variant yields the readability-relevant
properties it actually supports, as getter/setter pairs. The current values
are captured into a :class:`StyleSnapshot`, the readable palette (black
foreground on white background) is applied, and the snapshot is written back
afterwards. Every individual read or write is isolated so a property that is
unsupported in the current context never blocks the others.

Data-bearing colors (lines, patches, colormaps) are never touched.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Final

from matplotlib.axes import Axes
from matplotlib.axis import Axis
from matplotlib.colorbar import Colorbar
from matplotlib.figure import FigureBase
from matplotlib.legend import Legend
from matplotlib.patches import Patch
from matplotlib.text import Text

from .constants import NO_EDGE, READABLE_BACKGROUND, READABLE_FOREGROUND

log = logging.getLogger(__name__)

__all__ = [
    "ABSENT",
    "ElementKind",
    "StyleProperty",
    "StyleSnapshot",
    "ReadableStyle",
    "attempt",
    "collect_elements",
    "collect_properties",
    "capture_style",
    "apply_readable_style",
    "restore_style",
]


class ElementKind(Enum):
    FIGURE = "figure"
    AXES = "axes"
    TEXT = "text"
    LEGEND = "legend"
    COLORBAR = "colorbar"


class _Absent:
    """Marker for a property that could not be read when the snapshot was taken."""

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT: Final = _Absent()

PropertyKey = tuple[int, str]


@dataclass(frozen=True, eq=False)
class StyleProperty:
    """One readability-relevant property of one artist."""

    kind: ElementKind
    owner: Any
    name: str
    readable: Any
    getter: Callable[[], Any] = field(repr=False)
    setter: Callable[[Any], Any] = field(repr=False)

    @property
    def key(self) -> PropertyKey:
        return id(self.owner), self.name


def attempt(action: Callable[..., Any], *args: Any) -> bool:
    """Call ``action(*args)`` and report success instead of raising."""

    try:
        action(*args)
    except Exception as exc:
        log.debug("Skipped style update %s%r: %s", getattr(action, "__qualname__", action), args, exc)
        return False
    return True


# ---- Property builders ------------------------------------------------------


def _text_color(kind: ElementKind, text: Text) -> StyleProperty:
    return StyleProperty(kind, text, "color", READABLE_FOREGROUND, text.get_color, text.set_color)


def _existing_ticks(axis: Axis, which: str) -> list[Any]:
    # Only ticks already materialized; the lazy tick list would create one on access.
    return list(vars(axis).get(f"{which}Ticks", ()))


def _tick_label_texts(axis: Axis, which: str) -> Iterator[Text]:
    for tick in _existing_ticks(axis, which):
        for label in (tick.label1, tick.label2):
            if isinstance(label, Text):
                yield label


def _tick_label_color(kind: ElementKind, axis: Axis, which: str) -> StyleProperty:
    """Axis-wide label color, inherited by ticks created after capture."""

    def read() -> Any:
        ticks = _existing_ticks(axis, which)
        if not ticks:
            raise LookupError(f"no {which} ticks")
        return ticks[0].label1.get_color()

    def write(color: Any) -> None:
        axis.set_tick_params(which=which, labelcolor=color)

    return StyleProperty(kind, axis, f"{which}_ticklabel_color", READABLE_FOREGROUND, read, write)


def _patch_facecolor(kind: ElementKind, patch: Patch) -> StyleProperty:
    return StyleProperty(
        kind, patch, "facecolor", READABLE_BACKGROUND, patch.get_facecolor, patch.set_facecolor
    )


# ---- Element variants -------------------------------------------------------


@dataclass(frozen=True)
class FigureElement:
    """Background of a figure or subfigure."""

    kind: ClassVar[ElementKind] = ElementKind.FIGURE
    figure: FigureBase

    def properties(self) -> Iterator[StyleProperty]:
        patch = self.figure.patch
        yield _patch_facecolor(self.kind, patch)
        # Opaque, visible background so the PDF never shows through.
        yield StyleProperty(self.kind, patch, "alpha", 1.0, patch.get_alpha, patch.set_alpha)
        yield StyleProperty(self.kind, patch, "visible", True, patch.get_visible, patch.set_visible)


@dataclass(frozen=True)
class AxesElement:
    """Plotting region: background, tick labels, title and axis labels."""

    kind: ClassVar[ElementKind] = ElementKind.AXES
    axes: Axes
    dimensions: tuple[Axis, ...]
    title: Text | None = None

    @classmethod
    def from_axes(cls, axes: Axes) -> AxesElement:
        dimensions = tuple(
            axis
            for axis in (getattr(axes, name, None) for name in ("xaxis", "yaxis", "zaxis"))
            if isinstance(axis, Axis)
        )
        title = getattr(axes, "title", None)
        return cls(axes, dimensions, title if isinstance(title, Text) else None)

    def properties(self) -> Iterator[StyleProperty]:
        yield StyleProperty(
            self.kind,
            self.axes,
            "facecolor",
            READABLE_BACKGROUND,
            self.axes.get_facecolor,
            self.axes.set_facecolor,
        )
        # Per-label colors come first so that, restored in reverse, they are
        # written after the axis-wide setting and keep individual colors.
        for axis in self.dimensions:
            for which in ("major", "minor"):
                for label in _tick_label_texts(axis, which):
                    yield _text_color(self.kind, label)
                yield _tick_label_color(self.kind, axis, which)
        if self.title is not None:
            yield _text_color(self.kind, self.title)
        for axis in self.dimensions:
            label = getattr(axis, "label", None)
            if isinstance(label, Text):
                yield _text_color(self.kind, label)


@dataclass(frozen=True)
class TextElement:
    kind: ClassVar[ElementKind] = ElementKind.TEXT
    text: Text

    def properties(self) -> Iterator[StyleProperty]:
        yield _text_color(self.kind, self.text)


@dataclass(frozen=True)
class LegendElement:
    """
    Legend entries plus its optional box face.

    The frame patch doubles as the legend background. When present it is
    forced to an opaque white fill with no edge stroke.
    """

    kind: ClassVar[ElementKind] = ElementKind.LEGEND
    legend: Legend
    texts: tuple[Text, ...]
    box_face: Patch | None = None

    @classmethod
    def from_legend(cls, legend: Legend) -> LegendElement:
        texts = list(legend.get_texts())
        title = legend.get_title()
        if isinstance(title, Text):
            texts.append(title)
        frame = legend.get_frame()
        return cls(legend, tuple(texts), frame if isinstance(frame, Patch) else None)

    def properties(self) -> Iterator[StyleProperty]:
        for text in self.texts:
            yield _text_color(self.kind, text)
        face = self.box_face
        if face is None:
            return
        # Restored in reverse, so fill and alpha are back before the colors.
        yield _patch_facecolor(self.kind, face)
        yield StyleProperty(self.kind, face, "edgecolor", NO_EDGE, face.get_edgecolor, face.set_edgecolor)
        yield StyleProperty(self.kind, face, "alpha", 1.0, face.get_alpha, face.set_alpha)
        yield StyleProperty(self.kind, face, "fill", True, face.get_fill, face.set_fill)


@dataclass(frozen=True)
class ColorbarElement:
    kind: ClassVar[ElementKind] = ElementKind.COLORBAR
    colorbar: Colorbar
    label: Text | None = None

    @classmethod
    def from_colorbar(cls, colorbar: Colorbar) -> ColorbarElement:
        long_axis = (
            colorbar.ax.xaxis
            if getattr(colorbar, "orientation", "vertical") == "horizontal"
            else colorbar.ax.yaxis
        )
        label = getattr(long_axis, "label", None)
        return cls(colorbar, label if isinstance(label, Text) else None)

    def properties(self) -> Iterator[StyleProperty]:
        if self.label is not None:
            yield _text_color(self.kind, self.label)


StyleElement = FigureElement | AxesElement | TextElement | LegendElement | ColorbarElement


def _walk_figures(figure: FigureBase) -> Iterator[FigureBase]:
    yield figure
    for subfigure in getattr(figure, "subfigs", ()):
        yield from _walk_figures(subfigure)


def collect_elements(figure: FigureBase) -> list[StyleElement]:
    """Return every style-relevant element owned by ``figure``."""

    containers = list(_walk_figures(figure))
    elements: list[StyleElement] = [FigureElement(container) for container in containers]

    seen_axes: set[int] = set()
    seen_colorbars: set[int] = set()
    for container in containers:
        for axes in container.axes:
            if id(axes) in seen_axes:
                continue
            seen_axes.add(id(axes))
            elements.append(AxesElement.from_axes(axes))
            elements.extend(TextElement(text) for text in axes.texts)
            legend = axes.get_legend()
            if legend is not None:
                elements.append(LegendElement.from_legend(legend))
            for artist in axes.get_children():
                colorbar = getattr(artist, "colorbar", None)
                if isinstance(colorbar, Colorbar) and id(colorbar) not in seen_colorbars:
                    seen_colorbars.add(id(colorbar))
                    elements.append(ColorbarElement.from_colorbar(colorbar))

    for container in containers:
        elements.extend(TextElement(text) for text in container.texts)
        elements.extend(LegendElement.from_legend(legend) for legend in container.legends)
    return elements


def collect_properties(figure: FigureBase) -> list[StyleProperty]:
    """Flatten the elements of ``figure`` into unique properties, in walk order."""

    properties: list[StyleProperty] = []
    seen: set[PropertyKey] = set()
    for element in collect_elements(figure):
        for prop in element.properties():
            if prop.key in seen:
                continue
            seen.add(prop.key)
            properties.append(prop)
    return properties


# ---- Snapshot / override / restore -----------------------------------------


@dataclass
class StyleSnapshot:
    """Pre-override value of every collected property of one figure."""

    figure: FigureBase
    properties: tuple[StyleProperty, ...]
    values: dict[PropertyKey, Any] = field(default_factory=dict)

    def value(self, prop: StyleProperty) -> Any:
        return self.values.get(prop.key, ABSENT)

    def recorded(self) -> Iterator[tuple[StyleProperty, Any]]:
        """Yield ``(property, original value)`` for every property that was readable."""

        for prop in self.properties:
            value = self.values.get(prop.key, ABSENT)
            if value is not ABSENT:
                yield prop, value

    @property
    def absent_count(self) -> int:
        return sum(1 for value in self.values.values() if value is ABSENT)


def _read(prop: StyleProperty) -> Any:
    try:
        return prop.getter()
    except Exception as exc:
        log.debug("Cannot read %s %s of %r: %s", prop.kind.value, prop.name, prop.owner, exc)
        return ABSENT


def capture_style(figure: FigureBase) -> StyleSnapshot:
    """Record the current value of every readability-relevant property."""

    properties = tuple(collect_properties(figure))
    snapshot = StyleSnapshot(figure, properties, {prop.key: _read(prop) for prop in properties})
    log.debug(
        "Captured %d style properties (%d absent)", len(properties), snapshot.absent_count
    )
    return snapshot


def apply_readable_style(snapshot: StyleSnapshot) -> int:
    """
    Force the readable palette onto every recorded property.

    Properties that could not be read are left alone, since they could not be
    restored either. Returns the number of writes that failed.
    """
    failures = 0
    for prop, _original in snapshot.recorded():
        if not attempt(prop.setter, prop.readable):
            failures += 1
    return failures


def restore_style(snapshot: StyleSnapshot) -> int:
    """Write every recorded value back, newest first. Returns the failure count."""

    failures = 0
    for prop, original in reversed(list(snapshot.recorded())):
        if not attempt(prop.setter, original):
            failures += 1
    return failures


class ReadableStyle:
    """
    Scoped print-readable styling for a single figure.

    Entering captures a snapshot and applies the readable palette; leaving
    restores the snapshot exactly once, whatever happened in between.

    Usage:
        with ReadableStyle(figure):
            figure.savefig("out.pdf")
    """

    def __init__(self, figure: FigureBase) -> None:
        self.figure = figure
        self.snapshot: StyleSnapshot | None = None
        self._released = False

    @property
    def released(self) -> bool:
        return self._released

    def acquire(self) -> StyleSnapshot:
        """Capture the current style and apply the readable palette."""

        if self.snapshot is not None:
            raise RuntimeError("ReadableStyle can only be acquired once")
        self.snapshot = capture_style(self.figure)
        try:
            failures = apply_readable_style(self.snapshot)
        except BaseException:
            self.release()
            raise
        if failures:
            log.debug("%d style properties could not be overridden", failures)
        return self.snapshot

    def release(self) -> None:
        """Restore the captured style; later calls are no-ops."""

        if self.snapshot is None or self._released:
            return
        self._released = True
        failures = restore_style(self.snapshot)
        if failures:
            log.debug("%d style properties could not be restored", failures)

    def __enter__(self) -> ReadableStyle:
        self.acquire()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.release()
