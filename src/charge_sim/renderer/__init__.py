# MIT License (see LICENSE)
"""
Rendering adapters for visualization.

This subpackage provides abstract and concrete renderer implementations:
    - RendererAdapter: Abstract base class defining the rendering interface.
    - DebugRenderer: Text/console output for debugging.
    - ImageRenderer: matplotlib-backed PNG output.
    - world_to_pixel: The world-to-canvas mapping shared by raster renderers.

The charge model has no rendering dependency; these adapters are optional.

Typical usage:
    from charge_sim.renderer import ImageRenderer

    renderer = ImageRenderer()
    renderer.render_system(system)
    renderer.save("charge_distribution.png")
"""
from .adapter import (
    RendererAdapter,
    DebugRenderer,
    world_to_pixel,
    charge_diameter,
)
from .image import ImageRenderer

__all__ = [
    "RendererAdapter",
    "DebugRenderer",
    "ImageRenderer",
    "world_to_pixel",
    "charge_diameter",
]
