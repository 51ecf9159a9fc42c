"""
Scene Composition
=================
Builds the static part of the 3D scene: axes, arrowheads, ticks and labels.

Why is this file needed?
------------------------
1. Geometry: The builder functions return plain PyVista meshes, so the scene
   layout can be checked without opening a window.
2. Ordering: Labels need a font that arrives asynchronously. The composer
   tracks whether labels are still pending, ready or unavailable.

Classes:
    SceneItem: A mesh together with how it should be drawn.
    LabelState: Lifecycle of the label layer.
    SceneComposer: Adds the items to a scene sink exactly once.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Protocol, Tuple, TYPE_CHECKING

import pyvista as pv

from lorenzscene import config

if TYPE_CHECKING:
    from lorenzscene.view.text import TextFont

logger = logging.getLogger(__name__)

AXES: Tuple[str, ...] = ("x", "y", "z")

_UNIT: Dict[str, Tuple[float, float, float]] = {
    "x": (1.0, 0.0, 0.0),
    "y": (0.0, 1.0, 0.0),
    "z": (0.0, 0.0, 1.0),
}

# Direction in which a tick mark on the given axis extends
_TICK_SPAN: Dict[str, str] = {
    "x": "y",
    "y": "x",
    "z": "y",
}


class ItemKind(Enum):
    LINE = "line"
    SURFACE = "surface"


class LabelState(Enum):
    PENDING = "pending"
    READY = "ready"
    UNAVAILABLE = "unavailable"


@dataclass
class SceneItem:
    name: str
    mesh: pv.PolyData
    color: str
    kind: ItemKind = ItemKind.LINE


class SceneSink(Protocol):
    def add_static(self, item: SceneItem) -> None: ...


def _on_axis(axis: str, value: float) -> Tuple[float, float, float]:
    ux, uy, uz = _UNIT[axis]
    return ux * value, uy * value, uz * value


def _add(a: Tuple[float, float, float], b: Tuple[float, float, float]) -> Tuple[float, float, float]:
    return a[0] + b[0], a[1] + b[1], a[2] + b[2]


# ------------------------------------------------------------------------------
# Builders
# ------------------------------------------------------------------------------

def build_axes(extent: float = config.AXIS_EXTENT) -> List[SceneItem]:
    """One line segment per axis, from -extent to +extent."""
    return [
        SceneItem(
            name=f"axis_{axis}",
            mesh=pv.Line(_on_axis(axis, -extent), _on_axis(axis, extent)),
            color=config.AXIS_COLORS[axis],
        )
        for axis in AXES
    ]


def build_arrows(extent: float = config.AXIS_EXTENT) -> List[SceneItem]:
    """Cone arrowheads at both ends of every axis, tips pointing outward."""
    items = []
    for axis in AXES:
        for sign, suffix in ((1.0, "pos"), (-1.0, "neg")):
            cone = pv.Cone(
                center=_on_axis(axis, sign * extent),
                direction=_on_axis(axis, sign),
                height=config.ARROW_HEIGHT,
                radius=config.ARROW_RADIUS,
                resolution=config.ARROW_RESOLUTION,
            )
            items.append(SceneItem(f"arrow_{axis}_{suffix}", cone, config.AXIS_COLORS[axis], ItemKind.SURFACE))
    return items


def tick_values(extent: int = config.AXIS_EXTENT) -> List[int]:
    """Integer tick positions along an axis, skipping the origin."""
    return [i for i in range(-extent, extent + 1) if i != 0]


def build_ticks(extent: int = config.AXIS_EXTENT) -> List[SceneItem]:
    """Short perpendicular segments at every integer tick."""
    items = []
    half = config.TICK_HALF_LENGTH
    for axis in AXES:
        span = _TICK_SPAN[axis]
        for i in tick_values(extent):
            base = _on_axis(axis, i)
            line = pv.Line(_add(base, _on_axis(span, -half)), _add(base, _on_axis(span, half)))
            items.append(SceneItem(f"tick_{axis}_{i}", line, config.AXIS_COLORS[axis]))
    return items


def tick_label_position(axis: str, value: int) -> Tuple[float, float, float]:
    """Where the number for a tick is placed, slightly below and left of the tick."""
    offset = config.TICK_LABEL_OFFSET
    if axis == "x":
        return value - 0.1, -offset, 0.0
    if axis == "y":
        return -offset, value - 0.1, 0.0
    if axis == "z":
        return 0.0, -offset, value - 0.1
    raise ValueError(f"Unknown axis '{axis}'")


def build_labels(font: TextFont, extent: int = config.AXIS_EXTENT) -> List[SceneItem]:
    """Tick numbers (absolute values) and the axis names at the positive ends."""
    items = []
    for axis in AXES:
        color = config.AXIS_COLORS[axis]
        for i in tick_values(extent):
            mesh = font.text_geometry(str(abs(i)), config.TICK_LABEL_SIZE, config.LABEL_DEPTH)
            mesh.translate(tick_label_position(axis, i), inplace=True)
            items.append(SceneItem(f"label_{axis}_{i}", mesh, color, ItemKind.SURFACE))

        name = font.text_geometry(axis, config.AXIS_LABEL_SIZE, config.LABEL_DEPTH)
        name.translate(_on_axis(axis, config.AXIS_LABEL_POSITION), inplace=True)
        items.append(SceneItem(f"label_{axis}", name, color, ItemKind.SURFACE))
    return items


# ------------------------------------------------------------------------------
# Composer
# ------------------------------------------------------------------------------

class SceneComposer:
    """
    Populates a scene sink with the static geometry.

    The axes and arrows are added by compose(). Ticks and their labels follow
    together once on_font_loaded() is called; until then label_state is
    PENDING. A failed font load leaves the scene without ticks.
    """

    def __init__(self, sink: SceneSink) -> None:
        self.sink = sink
        self.label_state: LabelState = LabelState.PENDING
        self._composed: bool = False

    @property
    def is_composed(self) -> bool:
        return self._composed

    def compose(self) -> None:
        if self._composed:
            return

        items = build_axes() + build_arrows()
        for item in items:
            self.sink.add_static(item)
        self._composed = True
        logger.info(f"Scene composed with {len(items)} static items.")

    def on_font_loaded(self, font: TextFont) -> None:
        if self.label_state is not LabelState.PENDING:
            return

        items = build_ticks() + build_labels(font)
        for item in items:
            self.sink.add_static(item)
        self.label_state = LabelState.READY
        logger.info(f"Added {len(items)} ticks and labels using font '{font.family}'.")

    def on_font_failed(self, message: str) -> None:
        if self.label_state is not LabelState.PENDING:
            return

        self.label_state = LabelState.UNAVAILABLE
        logger.warning(f"Labels unavailable, font could not be loaded: {message}")
