# MIT License (see LICENSE)
"""
The charge system container and its aggregate queries.

ChargeSystem plays the role of the world container:
- A fixed number of charge slots, decided at construction.
- Population by index (set_charge), which overwrites rather than inserts.
- Superposition queries: field at a point, net force on a charge.
- Text reports and an optional image rendering of the configuration.

Structure:
    - User creates a ChargeSystem(capacity).
    - User fills every slot via set_charge().
    - User queries electric_field_at(), force_on(), report(), forces_report().

Slot policy:
    Queries that sum over every charge (field, force) require all slots to be
    populated and raise IncompleteSystemError otherwise. total_charge(),
    report() and rendering only look at populated slots.
"""
from __future__ import annotations
import logging
from typing import TYPE_CHECKING

import numpy as np

from .constants import K_COULOMB, NO_EXCLUDE
from .core.coulomb import field_from, force_between
from .errors import IncompleteSystemError
from .types import Charge, Vector3D
from .util import as_xyz

if TYPE_CHECKING:
    from .renderer.image import ImageRenderer

logger = logging.getLogger(__name__)


class ChargeSystem:
    """
    A fixed-capacity collection of point charges.

    Attributes:
        capacity: Number of slots (N). Slots are indexed 0..N-1.
        k: Coulomb's constant used by every query on this system.
    """

    def __init__(self, capacity: int, k: float = K_COULOMB):
        if capacity < 0:
            raise ValueError(f"Capacity must be non-negative, got {capacity}")
        self.capacity = int(capacity)
        self.k = float(k)
        self._slots: list[Charge | None] = [None] * self.capacity

    def __len__(self) -> int:
        return self.capacity

    def __repr__(self) -> str:
        return f"ChargeSystem(capacity={self.capacity}, populated={len(self.charges)})"

    # -------------------------------------------------------------------------
    # Population
    # -------------------------------------------------------------------------

    def _in_range(self, index: int) -> bool:
        return 0 <= index < self.capacity

    def set_charge(self, index: int, x: float, y: float, z: float, value: float) -> bool:
        """
        Place a charge in slot `index`, replacing whatever was there.

        Args:
            index: Slot index, 0 <= index < capacity.
            x, y, z: Position in meters.
            value: Charge in Coulombs.

        Returns:
            True if the slot was written. An out-of-range index is logged
            and leaves the system untouched, returning False.
        """
        if not self._in_range(index):
            logger.error(f"Invalid charge index {index} (capacity {self.capacity}); charge not set.")
            return False
        self._slots[index] = Charge(float(x), float(y), float(z), float(value))
        logger.debug(f"Charge {index} set to {self._slots[index]}")
        return True

    def clear_charge(self, index: int) -> bool:
        """Empty slot `index`. Same out-of-range handling as set_charge()."""
        if not self._in_range(index):
            logger.error(f"Invalid charge index {index} (capacity {self.capacity}); nothing cleared.")
            return False
        self._slots[index] = None
        return True

    def charge_at(self, index: int) -> Charge | None:
        """The charge in slot `index`, or None if the slot is empty."""
        if not self._in_range(index):
            raise IndexError(f"Charge index {index} out of range for capacity {self.capacity}")
        return self._slots[index]

    @property
    def charges(self) -> list[Charge]:
        """Populated charges in index order."""
        return [c for c in self._slots if c is not None]

    def populated(self) -> list[tuple[int, Charge]]:
        """(index, charge) pairs for every populated slot."""
        return [(i, c) for i, c in enumerate(self._slots) if c is not None]

    @property
    def is_complete(self) -> bool:
        """True when every slot holds a charge."""
        return all(c is not None for c in self._slots)

    def _require_complete(self) -> list[Charge]:
        missing = [i for i, c in enumerate(self._slots) if c is None]
        if missing:
            raise IncompleteSystemError(missing)
        return self._slots  # type: ignore[return-value]

    def positions(self) -> np.ndarray:
        """Positions of populated charges as an [M, 3] float64 array."""
        return np.array([[c.x, c.y, c.z] for c in self.charges], dtype=np.float64).reshape(-1, 3)

    def values(self) -> np.ndarray:
        """Values of populated charges as an [M] float64 array."""
        return np.array([c.value for c in self.charges], dtype=np.float64)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def total_charge(self) -> float:
        """Sum of charge values over populated slots. Recomputed on every call."""
        total = 0.0
        for c in self.charges:
            total += c.value
        return total

    def electric_field_at(self, point, exclude_index: int = NO_EXCLUDE) -> Vector3D:
        """
        Superposition field at `point` from every charge but `exclude_index`.

        Implements E = Σ k * q_i / |r_i|² * r̂_i with r_i = point - position_i.

        Args:
            point: Vector3D or (x, y, z) sequence.
            exclude_index: Slot to leave out of the sum. NO_EXCLUDE (-1)
                includes every charge.

        Raises:
            IncompleteSystemError: If any slot is empty.
            DegenerateGeometryError: If `point` coincides with a
                contributing charge.
        """
        slots = self._require_complete()
        p = Vector3D(*as_xyz(point))

        field = Vector3D.zero()
        for i, charge in enumerate(slots):
            if i == exclude_index:
                continue
            field = field.add(field_from(charge, p, self.k))
        return field

    def force_on(self, index: int) -> Vector3D:
        """
        Net electrostatic force on the charge in slot `index`.

        Implements F = Σ_{j≠index} k * q_index * q_j / |r|² * r̂ with
        r = position_index - position_j. The charge never acts on itself.

        Returns:
            The force vector. An out-of-range index is logged and yields the
            zero vector.

        Raises:
            IncompleteSystemError: If any slot is empty.
            DegenerateGeometryError: If another charge shares the position.
        """
        if not self._in_range(index):
            logger.error(f"Invalid charge index {index} (capacity {self.capacity}); returning zero force.")
            return Vector3D.zero()

        slots = self._require_complete()
        target = slots[index]

        force = Vector3D.zero()
        for j, source in enumerate(slots):
            if j == index:
                continue
            force = force.add(force_between(target, source, self.k))
        return force

    # -------------------------------------------------------------------------
    # Reporting
    # -------------------------------------------------------------------------

    def report(self) -> list[str]:
        """
        Human-readable listing of every slot followed by the total charge.

        Output:
            Charge 0: Position (0.0, -1.0, 0.0), Value: 2e-06
            Charge 1: <unset>
            Total charge in the system: 2e-06 C
        """
        lines = []
        for i, c in enumerate(self._slots):
            if c is None:
                lines.append(f"Charge {i}: <unset>")
            else:
                lines.append(f"Charge {i}: Position ({c.x}, {c.y}, {c.z}), Value: {c.value}")
        lines.append(f"Total charge in the system: {self.total_charge()} C")
        return lines

    def forces_report(self) -> list[tuple[int, Vector3D]]:
        """Force on every charge, as (index, force) pairs in index order."""
        self._require_complete()
        return [(i, self.force_on(i)) for i in range(self.capacity)]

    def render(self, path: str, renderer: "ImageRenderer | None" = None) -> bool:
        """
        Draw the system and write the image to `path`.

        Args:
            path: Output file (PNG).
            renderer: Image renderer to draw with.
                Defaults to a fresh ImageRenderer.

        Returns:
            True if the file was written. Write failures are logged, not raised.
        """
        if renderer is None:
            from .renderer.image import ImageRenderer
            renderer = ImageRenderer()
        renderer.render_system(self)
        return renderer.save(path)
