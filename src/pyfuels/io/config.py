"""
Reader configuration for dynamic fuel system parameter files.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_LANDIS_DATA_VALUE = "Dynamic Fuel System"


@dataclass
class FuelParametersReaderConfig:
    """
    Options controlling how a parameter file is read.

    Attributes:
        landis_data_value: Expected value of the ``LandisData`` line
        encoding: Text encoding used when opening files; the default
            accepts files with or without a UTF-8 byte-order mark
        check_map_templates: Validate ``{timestep}`` in map filename templates
    """

    landis_data_value: str = DEFAULT_LANDIS_DATA_VALUE
    encoding: str = "utf-8-sig"
    check_map_templates: bool = True
