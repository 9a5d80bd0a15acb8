"""
pyfuels - Python package for dynamic fuel system parameters.

This package provides tools for:
- Reading and validating dynamic fuel system parameter files
- Writing parameter sets back to the text format
- Resolving species and ecoregion names against host registries
"""

from __future__ import annotations

__version__ = "0.1.0"

from pyfuels.core.exceptions import (
    FileFormatError,
    FuelsIOError,
    PyFuelsError,
)
from pyfuels.core.map_names import check_template_vars, replace_template_vars
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
from pyfuels.io.config import FuelParametersReaderConfig
from pyfuels.io.fuel_parameters import (
    DynamicFuelsParametersReader,
    read_fuel_parameters,
)
from pyfuels.io.fuel_writer import write_fuel_parameters

__all__ = [
    "__version__",
    # Exceptions
    "PyFuelsError",
    "FuelsIOError",
    "FileFormatError",
    # Parameter model
    "BaseFuelType",
    "parse_base_fuel_type",
    "FuelType",
    "DisturbanceType",
    "InputParameters",
    # Registries
    "Species",
    "SpeciesRegistry",
    "Ecoregion",
    "EcoregionRegistry",
    # Map filename templates
    "check_template_vars",
    "replace_template_vars",
    # Reading and writing
    "FuelParametersReaderConfig",
    "DynamicFuelsParametersReader",
    "read_fuel_parameters",
    "write_fuel_parameters",
]
