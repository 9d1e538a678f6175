# MIT License (see LICENSE)
"""
Input/Output utilities for charge systems.

This subpackage provides:
    - JSON serialization: Save and load charge systems to/from JSON files.
    - Round-trip support: Saved systems load back with the same slots.

Typical usage:
    from charge_sim.io import load_system, save_system

    system = load_system("four_charges.json")
    save_system(system, "output.json")
"""
from .json_io import (
    load_system,
    load_system_raw,
    save_system,
    system_to_json,
    system_from_json,
    charge_to_json,
    charge_from_json,
)

__all__ = [
    # Loading
    "load_system",
    "load_system_raw",
    # Saving
    "save_system",
    # Serialization
    "system_to_json",
    "system_from_json",
    "charge_to_json",
    "charge_from_json",
]
