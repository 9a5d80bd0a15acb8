"""Integration test: read the sample parameter file shipped with the tests."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from pyfuels import (
    BaseFuelType,
    EcoregionRegistry,
    SpeciesRegistry,
    read_fuel_parameters,
    replace_template_vars,
    write_fuel_parameters,
)

SPECIES = [
    "abiebals",
    "acerrubr",
    "betupapy",
    "piceglau",
    "pinubank",
    "pinuresi",
    "pinustro",
    "poputrem",
    "thujocci",
    "tsugcana",
]
ECOREGIONS = ["eco101", "eco102", "eco103"]


@pytest.fixture
def sample_file(fixtures_path: Path) -> Path:
    path = fixtures_path / "dynamic-fuels.txt"
    if not path.exists():
        pytest.skip("Sample parameter file not available")
    return path


class TestSampleFile:
    def test_read(self, sample_file: Path) -> None:
        species = SpeciesRegistry.from_names(SPECIES)
        ecoregions = EcoregionRegistry.from_names(ECOREGIONS)
        params = read_fuel_parameters(sample_file, species, ecoregions)

        assert params.timestep == 10
        assert params.fuel_coefficient(species.get("piceglau")) == 1.3
        assert params.n_fuel_types == 8
        assert params.get_fuel_type(6).base_fuel is BaseFuelType.CONIFER_PLANTATION

        ft3 = params.get_fuel_type(3)
        assert ft3.species_multiplier(species.get("piceglau")) == 1
        assert ft3.species_multiplier(species.get("poputrem")) == -1
        assert ft3.species_multiplier(species.get("pinubank")) == 0

        assert params.get_fuel_type(2).min_age == 41
        np.testing.assert_array_equal(params.get_fuel_type(1).ecoregions, [True, True, False])
        assert not params.get_fuel_type(8).ecoregions.any()

        assert [dt.fuel_index for dt in params.disturbance_types] == [20, 21, 31]
        assert params.disturbance_types[1].prescription_names == ["Aspen Clearcut"]

        assert replace_template_vars(params.map_file_names, 30) == "fire/FuelType-30.img"

    def test_write_and_read_back(self, sample_file: Path, tmp_path: Path) -> None:
        species = SpeciesRegistry.from_names(SPECIES)
        ecoregions = EcoregionRegistry.from_names(ECOREGIONS)
        params = read_fuel_parameters(sample_file, species, ecoregions)

        out = write_fuel_parameters(params, tmp_path / "copy.txt", species, ecoregions)
        assert read_fuel_parameters(out, species, ecoregions) == params
