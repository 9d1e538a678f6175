# MIT License (see LICENSE)
"""
Renderer adapters for charge system visualization.

This module provides an abstract base class for rendering, a text debug
implementation, and the pixel mapping shared by raster renderers. The core
model has no rendering dependency - these adapters are optional.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO
import sys

from ..constants import (
    CHARGE_SIZE_SCALE,
    IMAGE_HEIGHT,
    IMAGE_WIDTH,
    WORLD_SPAN,
)
from ..types import Charge

if TYPE_CHECKING:
    from ..system import ChargeSystem


def world_to_pixel(
    x: float,
    y: float,
    width: int = IMAGE_WIDTH,
    height: int = IMAGE_HEIGHT,
    span: float = WORLD_SPAN,
) -> tuple[int, int]:
    """
    Map world (x, y) to integer pixel coordinates.

    One world unit covers 1/span of each image dimension, the origin sits at
    the image centre and y grows downward on screen:
      px = int(x * W/span + W/2)
      py = int(-y * H/span + H/2)
    """
    px = int(x * (width / span) + width / 2.0)
    py = int(-y * (height / span) + height / 2.0)
    return px, py


def charge_diameter(value: float, scale: float = CHARGE_SIZE_SCALE) -> int:
    """Circle diameter in pixels, proportional to |value|."""
    return int(abs(value) * scale)


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Subclasses implement the drawing methods to integrate with a graphics
    backend (matplotlib, text, ...).

    Usage:
        renderer = MyRenderer()
        renderer.begin_frame(system)
        for index, charge in system.populated():
            renderer.draw_charge(index, charge)
        renderer.end_frame()

    Or use the convenience method:
        renderer.render_system(system)
    """

    @abstractmethod
    def begin_frame(self, system: "ChargeSystem") -> None:
        """
        Begin a new frame for rendering.

        Args:
            system: The system about to be drawn.
        """
        ...

    @abstractmethod
    def draw_charge(self, index: int, charge: Charge) -> None:
        """
        Draw a single charge.

        Args:
            index: Slot index of the charge.
            charge: The charge to draw.
        """
        ...

    @abstractmethod
    def end_frame(self) -> None:
        """Finalize the current frame."""
        ...

    def render_system(self, system: "ChargeSystem") -> None:
        """
        Convenience method to render all populated charges of a system.

        Args:
            system: The system to render.
        """
        self.begin_frame(system)
        for index, charge in system.populated():
            self.draw_charge(index, charge)
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Console/text debug renderer.

    Writes one line per charge, with its pixel placement, to a stream
    (stdout by default).

    Output:
        === System N=4 Q=0.0 ===
        [0] +2e-06 C @ (0.00, -1.00, 0.00) px=(300, 330)
        [1] -2e-06 C @ (0.00, 2.00, 0.00) px=(300, 240)
    """

    def __init__(self, output: TextIO | None = None, verbose: bool = True):
        """
        Args:
            output: Output stream (defaults to sys.stdout).
            verbose: If True, include the pixel placement.
        """
        self.output = output or sys.stdout
        self.verbose = verbose

    def begin_frame(self, system: "ChargeSystem") -> None:
        self.output.write(f"=== System N={system.capacity} Q={system.total_charge()} ===\n")

    def draw_charge(self, index: int, charge: Charge) -> None:
        line = f"[{index}] {charge.value:+} C @ ({charge.x:.2f}, {charge.y:.2f}, {charge.z:.2f})"
        if self.verbose:
            px, py = world_to_pixel(charge.x, charge.y)
            line += f" px=({px}, {py})"
        self.output.write(line + "\n")

    def end_frame(self) -> None:
        self.output.write("\n")
        self.output.flush()
