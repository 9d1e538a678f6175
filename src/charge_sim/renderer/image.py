# MIT License (see LICENSE)
"""
Raster image renderer backed by matplotlib.

Draws a charge system onto a fixed-size canvas addressed in pixels:
axis lines through the centre, one filled circle per charge sized by |value|
and coloured by sign. The figure is built with the object-oriented
matplotlib API (no pyplot global state) and written as PNG.
"""
from __future__ import annotations
import logging
from typing import TYPE_CHECKING

from matplotlib.figure import Figure
from matplotlib.patches import Circle

from ..constants import (
    AXIS_COLOR,
    CHARGE_SIZE_SCALE,
    IMAGE_HEIGHT,
    IMAGE_WIDTH,
    NEGATIVE_COLOR,
    POSITIVE_COLOR,
    WORLD_SPAN,
)
from ..types import Charge
from .adapter import RendererAdapter, charge_diameter, world_to_pixel

if TYPE_CHECKING:
    from ..system import ChargeSystem

logger = logging.getLogger(__name__)

_DPI = 100


class ImageRenderer(RendererAdapter):
    """
    Renders a charge system to a PNG image.

    Example:
        renderer = ImageRenderer()
        renderer.render_system(system)
        renderer.save("charge_distribution.png")

    Attributes:
        width, height: Canvas size in pixels.
        span: World units across each canvas dimension.
        size_scale: Circle diameter in pixels per Coulomb of |value|.
        circles: (index, px, py, radius, color) for every circle drawn in
                 the current frame.
    """

    def __init__(
        self,
        width: int = IMAGE_WIDTH,
        height: int = IMAGE_HEIGHT,
        span: float = WORLD_SPAN,
        size_scale: float = CHARGE_SIZE_SCALE,
    ):
        self.width = width
        self.height = height
        self.span = span
        self.size_scale = size_scale
        self.figure: Figure | None = None
        self._ax = None
        self.circles: list[tuple[int, int, int, float, str]] = []

    def begin_frame(self, system: "ChargeSystem") -> None:
        """Create a blank canvas with the x and y axes drawn through its centre."""
        w, h = self.width, self.height
        self.figure = Figure(figsize=(w / _DPI, h / _DPI), dpi=_DPI)
        ax = self.figure.add_axes((0.0, 0.0, 1.0, 1.0))
        # Pixel coordinates, y downward
        ax.set_xlim(0, w)
        ax.set_ylim(h, 0)
        ax.set_aspect("equal")
        ax.axis("off")

        ax.plot([0, w], [h // 2, h // 2], color=AXIS_COLOR, linewidth=1)
        ax.plot([w // 2, w // 2], [0, h], color=AXIS_COLOR, linewidth=1)

        self._ax = ax
        self.circles = []

    def draw_charge(self, index: int, charge: Charge) -> None:
        """Draw a filled circle for one charge. The z coordinate is ignored."""
        if self._ax is None:
            return

        px, py = world_to_pixel(charge.x, charge.y, self.width, self.height, self.span)
        radius = charge_diameter(charge.value, self.size_scale) / 2.0
        color = POSITIVE_COLOR if charge.value > 0 else NEGATIVE_COLOR

        self.circles.append((index, px, py, radius, color))
        if radius > 0:
            self._ax.add_patch(Circle((px, py), radius, color=color))

    def end_frame(self) -> None:
        self._ax = None

    def save(self, path: str) -> bool:
        """
        Write the last rendered frame to `path` as PNG.

        Returns:
            True on success. Write errors are logged and reported as False.
        """
        if self.figure is None:
            logger.error("Nothing rendered yet; call render_system() before save().")
            return False
        try:
            self.figure.savefig(path, format="png", dpi=_DPI)
        except OSError as e:
            logger.exception(f"Failed to write charge image to '{path}': {e}")
            return False
        logger.info(f"Charge image written to: {path}")
        return True
