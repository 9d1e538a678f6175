# MIT License (see LICENSE)
"""
Physical constants and rendering defaults used throughout the package.

Physical values use SI units. Charge values are plain scalars in Coulombs;
no units system is applied on top of them.
"""
from __future__ import annotations

# Coulomb's constant (electrostatic constant), k = 1/(4πε₀)
# Value: 8.9875 × 10⁹ N·m²/C²
K_COULOMB: float = 8.9875e9

# Sentinel for "exclude no charge" in field queries.
NO_EXCLUDE: int = -1

# Image renderer canvas, in pixels.
IMAGE_WIDTH: int = 600
IMAGE_HEIGHT: int = 600

# World span mapped onto the canvas: one world unit is 1/20th of each dimension.
WORLD_SPAN: float = 20.0

# Circle diameter in pixels per Coulomb of |charge value|: 1 µC draws 10 px wide.
CHARGE_SIZE_SCALE: float = 1e7

POSITIVE_COLOR: str = "red"
NEGATIVE_COLOR: str = "blue"
AXIS_COLOR: str = "black"
