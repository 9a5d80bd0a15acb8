"""
Dynamic fuel system parameter file writer.

Writes an :class:`~pyfuels.core.parameters.InputParameters` back to the
text format read by :mod:`pyfuels.io.fuel_parameters`.  Reading the
written file gives back an equal parameter set.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING, TextIO

from pyfuels.io.config import DEFAULT_LANDIS_DATA_VALUE
from pyfuels.io.fuel_parameters import (
    AGE_RANGE_CONNECTOR,
    DEAD_FIR_MAX_AGE,
    DISTURBANCE_CONVERSION_TABLE,
    ECOREGION_TABLE,
    FUEL_TYPES,
    HARDWOOD_MAXIMUM,
    LANDIS_DATA,
    MAP_FILE_NAMES,
    NEGATIVE_PREFIX,
    PCT_CONIFER_FILE_NAME,
    PCT_DEAD_FIR_FILE_NAME,
    TIMESTEP,
)
from pyfuels.io.text_reader import COMMENT_MARKER
from pyfuels.io.values import QUOTE

if TYPE_CHECKING:
    from pyfuels.core.parameters import FuelType, InputParameters
    from pyfuels.core.registry import Ecoregion, Species

logger = logging.getLogger(__name__)


def write_comment(f: TextIO, text: str = "") -> None:
    """Write a full-line ``>>`` comment."""
    f.write(f"{COMMENT_MARKER} {text}".rstrip() + "\n")


def write_var(f: TextIO, name: str, value: object) -> None:
    """Write a ``<name>  <value>`` line."""
    f.write(f"{name:<20s}  {value}\n")


def format_string(value: str) -> str:
    """Quote *value* if it would not read back as a single word."""
    if not value or any(ch.isspace() for ch in value) or COMMENT_MARKER in value:
        return f"{QUOTE}{value}{QUOTE}"
    return value


def ensure_parent_dir(filepath: Path) -> None:
    """Create parent directories for *filepath* if they do not exist."""
    filepath.parent.mkdir(parents=True, exist_ok=True)


def _species_tokens(fuel_type: FuelType, species_names: list[str]) -> list[str]:
    tokens = []
    for index, multiplier in enumerate(fuel_type.multipliers):
        if multiplier > 0:
            tokens.append(format_string(species_names[index]))
        elif multiplier < 0:
            tokens.append(format_string(NEGATIVE_PREFIX + species_names[index]))
    return tokens


def write_fuel_parameters(
    params: InputParameters,
    filepath: Path | str,
    species: Iterable[Species],
    ecoregions: Iterable[Ecoregion],
    landis_data_value: str = DEFAULT_LANDIS_DATA_VALUE,
) -> Path:
    """Write a dynamic fuel system parameter file.

    Args:
        params: Parameter set to write
        filepath: Output file path
        species: Species records, used to name per-species entries
        ecoregions: Ecoregion records, used to name per-ecoregion entries
        landis_data_value: Value written on the ``LandisData`` line

    Returns:
        Path to the written file.
    """
    filepath = Path(filepath)
    ensure_parent_dir(filepath)

    species_names = [sp.name for sp in sorted(species, key=lambda sp: sp.index)]
    ecoregion_names = [eco.name for eco in sorted(ecoregions, key=lambda eco: eco.index)]

    with open(filepath, "w") as f:
        write_var(f, LANDIS_DATA, format_string(landis_data_value))
        f.write("\n")
        write_var(f, TIMESTEP, params.timestep)
        f.write("\n")

        write_comment(f, "Species         Fuel Coefficient")
        write_comment(f, "-------         ----------------")
        for index, coefficient in enumerate(params.fuel_coefficients):
            if coefficient != 0.0:
                name = format_string(species_names[index])
                f.write(f"{name:<17s} {float(coefficient)!r}\n")
        f.write("\n")

        write_var(f, HARDWOOD_MAXIMUM, params.hardwood_max)
        write_var(f, DEAD_FIR_MAX_AGE, params.dead_fir_max_age)
        f.write("\n")

        f.write(f"{FUEL_TYPES}\n")
        write_comment(f, "Index  BaseFuel           Age Range    Species")
        for fuel_type in params.fuel_types:
            age_range = f"{fuel_type.min_age} {AGE_RANGE_CONNECTOR} {fuel_type.max_age}"
            tokens = " ".join(_species_tokens(fuel_type, species_names))
            f.write(
                f"{fuel_type.index:<6d} {fuel_type.base_fuel.value:<18s} {age_range:<12s} {tokens}\n"
            )
        f.write("\n")

        with_ecoregions = [ft for ft in params.fuel_types if ft.ecoregions.any()]
        if with_ecoregions:
            f.write(f"{ECOREGION_TABLE}\n")
            write_comment(f, "Index  Ecoregions")
            for fuel_type in with_ecoregions:
                names = [
                    format_string(ecoregion_names[i])
                    for i, flag in enumerate(fuel_type.ecoregions)
                    if flag
                ]
                f.write(f"{fuel_type.index:<6d} {' '.join(names)}\n")
            f.write("\n")

        f.write(f"{DISTURBANCE_CONVERSION_TABLE}\n")
        write_comment(f, "Index  Duration  Prescriptions")
        for dist_type in params.disturbance_types:
            prescriptions = " ".join(format_string(p) for p in dist_type.prescription_names)
            f.write(f"{dist_type.fuel_index:<6d} {dist_type.max_age:<9d} {prescriptions}\n")
        f.write("\n")

        write_var(f, MAP_FILE_NAMES, format_string(params.map_file_names))
        write_var(f, PCT_CONIFER_FILE_NAME, format_string(params.pct_conifer_file_name))
        write_var(f, PCT_DEAD_FIR_FILE_NAME, format_string(params.pct_dead_fir_file_name))

    logger.info(
        "Wrote %d fuel types and %d disturbance types to %s",
        params.n_fuel_types,
        params.n_disturbance_types,
        filepath,
    )
    return filepath
