"""
Dynamic fuel system parameter file reader.

The parameter file is read in a single forward pass.  Sections must
appear in this order::

    LandisData  "Dynamic Fuel System"
    Timestep    10

    >> Species   Fuel Coefficient
    abiebals     1.0
    ...

    HardwoodMaximum   15
    DeadFirMaxAge     15

    FuelTypes
    >> Index  BaseFuel   Age Range   Species
    1         Conifer    0 to 40     pinubank
    2         Conifer    0 to 400    piceglau -betupapy
    ...

    EcoregionTable                     >> optional
    >> Index  Ecoregions
    1         eco1 eco2

    DisturbanceConversionTable
    >> Index  Duration  Prescriptions
    20        20        MaxAgeClearcut PatchCut

    MapFileNames         fire/FuelType-{timestep}.img
    PctConiferFileName   fire/PctConifer-{timestep}.img
    PctDeadFirFileName   fire/PctDeadFir-{timestep}.img

Each table runs until the header of the following section.  Species
and ecoregion names are resolved against the host registries, and the
ecoregion table may only refer to fuel indices listed in ``FuelTypes``
above it.  The first problem found aborts the read with a
:class:`~pyfuels.core.exceptions.FileFormatError`.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, TextIO

import numpy as np

from pyfuels.core.exceptions import FileFormatError
from pyfuels.core.map_names import check_template_vars
from pyfuels.core.parameters import (
    DisturbanceType,
    FuelType,
    InputParameters,
    parse_base_fuel_type,
)
from pyfuels.io.config import FuelParametersReaderConfig
from pyfuels.io.lookups import (
    check_repeated,
    resolve_ecoregion,
    resolve_fuel_type,
    resolve_species,
)
from pyfuels.io.text_reader import (
    InputLine,
    LineCursor,
    iter_input_lines,
    load_input_lines,
    split_input_lines,
)
from pyfuels.io.values import ValueReader

if TYPE_CHECKING:
    from pyfuels.core.registry import EcoregionLookup, SpeciesLookup

logger = logging.getLogger(__name__)

# Section and parameter names, in file order
LANDIS_DATA = "LandisData"
TIMESTEP = "Timestep"
HARDWOOD_MAXIMUM = "HardwoodMaximum"
DEAD_FIR_MAX_AGE = "DeadFirMaxAge"
FUEL_TYPES = "FuelTypes"
ECOREGION_TABLE = "EcoregionTable"
DISTURBANCE_CONVERSION_TABLE = "DisturbanceConversionTable"
MAP_FILE_NAMES = "MapFileNames"
PCT_CONIFER_FILE_NAME = "PctConiferFileName"
PCT_DEAD_FIR_FILE_NAME = "PctDeadFirFileName"

AGE_RANGE_CONNECTOR = "to"
NEGATIVE_PREFIX = "-"


def _require(condition: bool, message: str, line_number: int, value: object) -> None:
    if not condition:
        raise FileFormatError(message, line_number=line_number, value=str(value))


def read_landis_data(cursor: LineCursor, expected: str) -> None:
    """Check the ``LandisData`` line that identifies the file type."""
    line_number = cursor.line_number
    value = cursor.read_var(LANDIS_DATA, ValueReader.read_string)
    _require(
        value == expected,
        f'Expected "{expected}" for {LANDIS_DATA}, got "{value}"',
        line_number,
        value,
    )


def read_timestep(cursor: LineCursor) -> int:
    line_number = cursor.line_number
    timestep = cursor.read_var(TIMESTEP, ValueReader.read_int)
    _require(timestep > 0, f"{TIMESTEP} must be > 0", line_number, timestep)
    return timestep


def read_fuel_coefficients(
    cursor: LineCursor, params: InputParameters, species: SpeciesLookup
) -> None:
    """Read ``<species> <coefficient>`` rows up to ``HardwoodMaximum``."""
    line_numbers: dict[str, int] = {}

    while not cursor.at_end and cursor.current_name != HARDWOOD_MAXIMUM:
        reader = cursor.reader()

        name = reader.read_string("Species")
        sp = resolve_species(species, name, cursor.line_number)
        check_repeated(name, "species", line_numbers, cursor.line_number)

        coefficient = reader.read_float("Fuel Coefficient")
        params.fuel_coefficients[sp.index] = coefficient

        cursor.check_no_data_after("the Fuel Coefficient column", reader)
        cursor.advance()

    logger.debug("Read fuel coefficients for %d species", len(line_numbers))


def read_scalar_parameters(cursor: LineCursor, params: InputParameters) -> None:
    """Read ``HardwoodMaximum`` and ``DeadFirMaxAge``."""
    line_number = cursor.line_number
    hardwood_max = cursor.read_var(HARDWOOD_MAXIMUM, ValueReader.read_int)
    _require(
        0 <= hardwood_max <= 100,
        f"{HARDWOOD_MAXIMUM} must be between 0 and 100",
        line_number,
        hardwood_max,
    )
    params.hardwood_max = hardwood_max

    line_number = cursor.line_number
    dead_fir_max_age = cursor.read_var(DEAD_FIR_MAX_AGE, ValueReader.read_int)
    _require(
        dead_fir_max_age >= 0,
        f"{DEAD_FIR_MAX_AGE} must be = or > 0",
        line_number,
        dead_fir_max_age,
    )
    params.dead_fir_max_age = dead_fir_max_age


def _read_age(reader: ValueReader, name: str) -> int:
    age = reader.read_int(name)
    if age < 0:
        raise reader.error(f"{name} must be = or > 0", value=str(age))
    return age


def _read_fuel_type_row(
    reader: ValueReader,
    species: SpeciesLookup,
    n_ecoregions: int,
    line_numbers: dict[int, int],
) -> FuelType:
    index = reader.read_int("Fuel Index")
    check_repeated(index, "fuel type", line_numbers, reader.line_number)

    base_fuel = reader.read_enum("Base Fuel Type", parse_base_fuel_type)
    fuel_type = FuelType.empty(index, base_fuel, len(species), n_ecoregions)

    fuel_type.min_age = _read_age(reader, "Min Age")
    word = reader.read_word()
    if word != AGE_RANGE_CONNECTOR:
        message = (
            f'Expected "{AGE_RANGE_CONNECTOR}" after the minimum age ({fuel_type.min_age})'
        )
        if word:
            message += f', but found "{word}" instead'
        raise reader.error(message, value=word)
    fuel_type.max_age = _read_age(reader, "Max Age")

    listed: set[str] = set()
    while not reader.at_end:
        token = reader.read_string("Species")
        negative = token.startswith(NEGATIVE_PREFIX)
        name = token[len(NEGATIVE_PREFIX) :] if negative else token
        if negative and not name:
            raise reader.error(f'No species name after "{NEGATIVE_PREFIX}"', value=token)

        sp = resolve_species(species, name, reader.line_number)
        if sp.name in listed:
            raise reader.error(f"The species {sp.name} appears more than once.", value=token)
        listed.add(sp.name)

        fuel_type.multipliers[sp.index] = -1 if negative else 1

    if not listed:
        raise reader.error("At least one species is required.")
    return fuel_type


def read_fuel_types(
    cursor: LineCursor,
    params: InputParameters,
    species: SpeciesLookup,
    n_ecoregions: int,
) -> None:
    """Read the ``FuelTypes`` table."""
    logger.info("Reading in the Fuel Assignment table")
    cursor.read_name(FUEL_TYPES)

    line_numbers: dict[int, int] = {}
    stop_names = (DISTURBANCE_CONVERSION_TABLE, ECOREGION_TABLE)

    while not cursor.at_end and cursor.current_name not in stop_names:
        reader = cursor.reader()
        fuel_type = _read_fuel_type_row(reader, species, n_ecoregions, line_numbers)
        params.fuel_types.append(fuel_type)
        logger.debug("Fuel type %d: %d species", fuel_type.index, fuel_type.n_species)
        cursor.advance()


def read_ecoregion_table(
    cursor: LineCursor, params: InputParameters, ecoregions: EcoregionLookup
) -> None:
    """Read the rows of the optional ``EcoregionTable``.

    The header itself has already been consumed by the caller.
    """
    logger.info("Loading Ecoregion data")
    line_numbers: dict[int, int] = {}

    while not cursor.at_end and cursor.current_name != DISTURBANCE_CONVERSION_TABLE:
        reader = cursor.reader()
        line_number = cursor.line_number

        index = reader.read_int("Fuel Index")
        fuel_type = resolve_fuel_type(index, params.fuel_types, line_number)
        check_repeated(index, "fuel type", line_numbers, line_number)

        membership = np.zeros(len(ecoregions), dtype=np.bool_)
        listed: set[str] = set()
        while not reader.at_end:
            name = reader.read_string("Ecoregion Name")
            eco = resolve_ecoregion(ecoregions, name, line_number)
            if eco.name in listed:
                raise reader.error(f"The ecoregion {eco.name} appears more than once.", value=name)
            listed.add(eco.name)
            membership[eco.index] = True

        fuel_type.ecoregions = membership
        cursor.advance()


def read_disturbance_types(cursor: LineCursor, params: InputParameters) -> None:
    """Read the ``DisturbanceConversionTable``.

    Fuel indices here are stored as written and are not checked against
    the ``FuelTypes`` table.
    """
    logger.info("Reading in the Disturbance Type table")
    cursor.read_name(DISTURBANCE_CONVERSION_TABLE)

    line_numbers: dict[int, int] = {}

    while not cursor.at_end and cursor.current_name != MAP_FILE_NAMES:
        reader = cursor.reader()
        line_number = cursor.line_number

        fuel_index = reader.read_int("Fuel Index")
        check_repeated(fuel_index, "disturbance type", line_numbers, line_number)
        max_age = _read_age(reader, "Max Age")

        prescriptions: list[str] = []
        while not reader.at_end:
            prescriptions.append(reader.read_string("Prescription"))
        if not prescriptions:
            raise reader.error("At least one prescription is required.")

        params.disturbance_types.append(
            DisturbanceType(fuel_index=fuel_index, max_age=max_age, prescription_names=prescriptions)
        )
        cursor.advance()


def _read_map_template(cursor: LineCursor, name: str, check_templates: bool) -> str:
    line_number = cursor.line_number
    template = cursor.read_var(name, ValueReader.read_string)
    if check_templates:
        try:
            check_template_vars(template)
        except ValueError as exc:
            raise FileFormatError(
                f"{name}: {exc}", line_number=line_number, value=template
            ) from exc
    return template


def read_map_names(
    cursor: LineCursor, params: InputParameters, check_templates: bool = True
) -> None:
    """Read the three map filename templates that end the file."""
    logger.info("Reading in map names")
    params.map_file_names = _read_map_template(cursor, MAP_FILE_NAMES, check_templates)
    params.pct_conifer_file_name = _read_map_template(
        cursor, PCT_CONIFER_FILE_NAME, check_templates
    )
    params.pct_dead_fir_file_name = _read_map_template(
        cursor, PCT_DEAD_FIR_FILE_NAME, check_templates
    )


class DynamicFuelsParametersReader:
    """Reader for dynamic fuel system parameter files.

    Parameters
    ----------
    species : SpeciesLookup
        Species registry of the host simulation.
    ecoregions : EcoregionLookup
        Ecoregion registry of the host simulation.
    config : FuelParametersReaderConfig, optional
        Reader options. Defaults are used when omitted.

    Examples
    --------
    >>> from pyfuels import EcoregionRegistry, SpeciesRegistry
    >>> species = SpeciesRegistry.from_names(["pinubank", "piceglau"])
    >>> ecoregions = EcoregionRegistry.from_names(["eco1"])
    >>> reader = DynamicFuelsParametersReader(species, ecoregions)
    >>> params = reader.read("dynamic-fuels.txt")  # doctest: +SKIP
    """

    def __init__(
        self,
        species: SpeciesLookup,
        ecoregions: EcoregionLookup,
        config: FuelParametersReaderConfig | None = None,
    ) -> None:
        self.species = species
        self.ecoregions = ecoregions
        self.config = config or FuelParametersReaderConfig()

    def read(self, filepath: Path | str) -> InputParameters:
        """Read and validate a parameter file.

        Raises:
            FileNotFoundError: If the file does not exist.
            FileFormatError: If the file is malformed or fails validation.
        """
        filepath = Path(filepath)
        lines = load_input_lines(filepath, encoding=self.config.encoding)
        logger.info("Reading dynamic fuel parameters from %s", filepath)
        return self.parse(lines)

    def parse(
        self, source: str | TextIO | Sequence[InputLine] | Sequence[str]
    ) -> InputParameters:
        """Parse parameter text, an open stream, or a sequence of lines.

        A sequence may hold data lines already split by
        :func:`~pyfuels.io.text_reader.load_input_lines` or raw text lines,
        which are numbered from 1 and stripped of comments here.

        Raises:
            FileFormatError: If the text is malformed or fails validation.
            TypeError: If a sequence holds anything other than lines.
        """
        if isinstance(source, str) or not isinstance(source, Sequence):
            lines = split_input_lines(source)
        elif all(isinstance(line, InputLine) for line in source):
            lines = source
        elif all(isinstance(line, str) for line in source):
            lines = iter_input_lines(source)
        else:
            raise TypeError("Expected a sequence of InputLine or str items")
        cursor = LineCursor(lines)

        read_landis_data(cursor, self.config.landis_data_value)
        params = InputParameters.for_species_count(len(self.species))
        params.timestep = read_timestep(cursor)

        read_fuel_coefficients(cursor, params, self.species)
        read_scalar_parameters(cursor, params)
        read_fuel_types(cursor, params, self.species, len(self.ecoregions))
        if cursor.read_optional_name(ECOREGION_TABLE):
            read_ecoregion_table(cursor, params, self.ecoregions)
        read_disturbance_types(cursor, params)
        read_map_names(cursor, params, self.config.check_map_templates)
        cursor.check_end_of_input(f"the {PCT_DEAD_FIR_FILE_NAME} parameter")

        logger.info(
            "Read %d fuel types and %d disturbance types",
            params.n_fuel_types,
            params.n_disturbance_types,
        )
        return params


def read_fuel_parameters(
    filepath: Path | str,
    species: SpeciesLookup,
    ecoregions: EcoregionLookup,
    config: FuelParametersReaderConfig | None = None,
) -> InputParameters:
    """Read a dynamic fuel system parameter file.

    Convenience wrapper around :class:`DynamicFuelsParametersReader`.
    """
    return DynamicFuelsParametersReader(species, ecoregions, config).read(filepath)
