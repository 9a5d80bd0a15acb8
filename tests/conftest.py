"""Pytest configuration and fixtures for pyfuels tests."""

from __future__ import annotations

import textwrap
from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

from pyfuels.core.registry import EcoregionRegistry, SpeciesRegistry
from pyfuels.io.fuel_parameters import DynamicFuelsParametersReader

SPECIES_NAMES = ["abiebals", "piceglau", "pinubank", "betupapy", "popubalm", "pinuresi"]
ECOREGION_NAMES = ["eco1", "eco2", "eco3"]

DEFAULT_MAP_NAMES = [
    "MapFileNames         fire/FuelType-{timestep}.img",
    "PctConiferFileName   fire/PctConifer-{timestep}.img",
    "PctDeadFirFileName   fire/PctDeadFir-{timestep}.img",
]


@pytest.fixture
def fixtures_path() -> Path:
    """Return path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def species() -> SpeciesRegistry:
    """Six species, indexed in the order of SPECIES_NAMES."""
    return SpeciesRegistry.from_names(SPECIES_NAMES)


@pytest.fixture
def ecoregions() -> EcoregionRegistry:
    """Three ecoregions: eco1 (0), eco2 (1), eco3 (2)."""
    return EcoregionRegistry.from_names(ECOREGION_NAMES)


@pytest.fixture
def reader(species: SpeciesRegistry, ecoregions: EcoregionRegistry) -> DynamicFuelsParametersReader:
    return DynamicFuelsParametersReader(species, ecoregions)


@pytest.fixture
def sample_text() -> str:
    """A complete parameter file with every section, comments and blank lines."""
    return textwrap.dedent(
        """\
        LandisData  "Dynamic Fuel System"   >> file type

        Timestep  10

        >> Species   Fuel Coefficient
        >> -------   ----------------
        abiebals     1.0
        piceglau     1.3
        pinubank     0.5
        betupapy     1.0

        HardwoodMaximum   15
        DeadFirMaxAge     15

        FuelTypes
        >> Index  BaseFuel            Age Range  Species
        1         Conifer             0 to 40    pinubank
        2         Conifer             0 to 400   piceglau -betupapy
        3         Deciduous           0 to 300   betupapy popubalm
        4         ConiferPlantation   0 to 40    pinuresi

        EcoregionTable
        >> Index  Ecoregions
        1         eco1 eco2
        4         eco3

        DisturbanceConversionTable
        >> Index  Duration  Prescriptions
        20        20        MaxAgeClearcut PatchCut
        21        10        "Aspen Clearcut"

        MapFileNames         fire/FuelType-{timestep}.img
        PctConiferFileName   fire/PctConifer-{timestep}.img
        PctDeadFirFileName   fire/PctDeadFir-{timestep}.img
        """
    )


def _build_text(
    coefficients: Sequence[str] = ("abiebals 1.0",),
    fuel_types: Sequence[str] = ("1 Conifer 0 to 40 pinubank",),
    ecoregion_table: Sequence[str] | None = None,
    disturbance_types: Sequence[str] = ("20 20 MaxAgeClearcut",),
    map_names: Sequence[str] = tuple(DEFAULT_MAP_NAMES),
    trailing: Sequence[str] = (),
    timestep: str = "Timestep 10",
    landis_data: str = 'LandisData "Dynamic Fuel System"',
) -> str:
    """Build a parameter file with no blank or comment lines.

    Line 1 is LandisData, line 2 is Timestep, and coefficient rows start
    on line 3, so tests can predict line numbers.
    """
    lines = [landis_data, timestep, *coefficients]
    lines += ["HardwoodMaximum 15", "DeadFirMaxAge 15", "FuelTypes", *fuel_types]
    if ecoregion_table is not None:
        lines += ["EcoregionTable", *ecoregion_table]
    lines += ["DisturbanceConversionTable", *disturbance_types]
    lines += [*map_names, *trailing]
    return "\n".join(lines) + "\n"


@pytest.fixture
def make_text() -> Callable[..., str]:
    """Return a builder for small parameter files (see ``_build_text``)."""
    return _build_text
