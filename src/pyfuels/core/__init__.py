"""Core data structures for pyfuels."""

from __future__ import annotations

from pyfuels.core.exceptions import FileFormatError, FuelsIOError, PyFuelsError
from pyfuels.core.parameters import (
    BaseFuelType,
    DisturbanceType,
    FuelType,
    InputParameters,
    parse_base_fuel_type,
)
from pyfuels.core.registry import (
    Ecoregion,
    EcoregionRegistry,
    Species,
    SpeciesRegistry,
)

__all__ = [
    "PyFuelsError",
    "FuelsIOError",
    "FileFormatError",
    "BaseFuelType",
    "parse_base_fuel_type",
    "FuelType",
    "DisturbanceType",
    "InputParameters",
    "Species",
    "SpeciesRegistry",
    "Ecoregion",
    "EcoregionRegistry",
]
