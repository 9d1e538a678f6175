# MIT License (see LICENSE)
"""
JSON serialization and deserialization for charge systems.

This module saves and loads charge configurations so a system can be
described in a file instead of a sequence of set_charge() calls.

JSON Schema Overview:
---------------------
{
  "k": float,                      # Coulomb's constant, default: 8.9875e9
  "capacity": int,                 # Slot count, default: len(charges)
  "charges": [
    {
      "index": int,                # Slot, default: position in this list
      "position": [x, y, z],       # Required, meters
      "value": float               # Required, Coulombs
    }
  ]
}

Empty slots are simply absent from "charges"; a loaded system with fewer
entries than "capacity" is incomplete until the rest are set.
"""
from __future__ import annotations
import json
import logging
from typing import Any

from ..constants import K_COULOMB
from ..system import ChargeSystem
from ..types import Charge
from ..util import as_xyz

logger = logging.getLogger(__name__)


def load_system_raw(path: str) -> dict[str, Any]:
    """
    Load raw JSON data from a system file without object construction.

    Args:
        path: Absolute or relative path to the JSON file.

    Returns:
        Dictionary containing the raw JSON data.
    """
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_system(path: str) -> ChargeSystem:
    """
    Load and construct a ChargeSystem from a JSON file.

    Raises:
        FileNotFoundError: If the file cannot be found.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If a charge entry is malformed or out of range.
    """
    logger.info(f"Loading charge system from: {path}")
    return system_from_json(load_system_raw(path))


def system_from_json(data: dict[str, Any]) -> ChargeSystem:
    """Build a ChargeSystem from a decoded JSON document."""
    entries = data.get("charges", [])
    capacity = int(data.get("capacity", len(entries)))
    k = float(data.get("k", K_COULOMB))

    system = ChargeSystem(capacity, k=k)
    for pos, entry in enumerate(entries):
        index = int(entry.get("index", pos))
        # Invalid indices in a file are a format error, not a runtime no-op
        if not (0 <= index < capacity):
            raise ValueError(f"Charge entry {pos} has index {index} outside capacity {capacity}")
        c = charge_from_json(entry)
        system.set_charge(index, c.x, c.y, c.z, c.value)

    logger.debug(f"Loaded {len(system.charges)} of {capacity} charges.")
    return system


def charge_from_json(d: dict[str, Any]) -> Charge:
    """
    Parse a single charge definition.

    Raises:
        ValueError: If "position" or "value" is missing or malformed.
    """
    if "position" not in d:
        raise ValueError("Charge definition missing required 'position' field.")
    if "value" not in d:
        raise ValueError("Charge definition missing required 'value' field.")
    x, y, z = as_xyz(d["position"])
    return Charge(x, y, z, float(d["value"]))


def charge_to_json(index: int, charge: Charge) -> dict[str, Any]:
    """Serialize one populated slot (round-trip compatible)."""
    return {
        "index": index,
        "position": [charge.x, charge.y, charge.z],
        "value": charge.value,
    }


def system_to_json(system: ChargeSystem) -> dict[str, Any]:
    """
    Serialize a ChargeSystem to a dictionary.

    "k" is only written when it differs from the default constant.
    """
    result: dict[str, Any] = {
        "capacity": system.capacity,
        "charges": [charge_to_json(i, c) for i, c in system.populated()],
    }
    if system.k != K_COULOMB:
        result["k"] = system.k
    return result


def save_system(system: ChargeSystem, path: str, indent: int = 2) -> None:
    """Save a ChargeSystem to a JSON file on disk."""
    data = system_to_json(system)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent)
    logger.info(f"Charge system saved to: {path}")
