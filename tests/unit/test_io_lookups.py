"""Tests for name/index resolution and the duplicate guard."""

from __future__ import annotations

import pytest

from pyfuels.core.exceptions import FileFormatError
from pyfuels.core.parameters import BaseFuelType, FuelType
from pyfuels.core.registry import EcoregionRegistry, SpeciesRegistry
from pyfuels.io.lookups import (
    check_repeated,
    resolve_ecoregion,
    resolve_fuel_type,
    resolve_species,
)


class TestResolveSpecies:
    def test_found(self, species: SpeciesRegistry) -> None:
        assert resolve_species(species, "piceglau").index == 1

    def test_not_found(self, species: SpeciesRegistry) -> None:
        with pytest.raises(FileFormatError) as exc_info:
            resolve_species(species, "quercus", line_number=8)
        assert exc_info.value.message == "quercus is not a species name"
        assert exc_info.value.line_number == 8
        assert exc_info.value.value == "quercus"


class TestResolveEcoregion:
    def test_found(self, ecoregions: EcoregionRegistry) -> None:
        assert resolve_ecoregion(ecoregions, "eco3").index == 2

    def test_not_found(self, ecoregions: EcoregionRegistry) -> None:
        with pytest.raises(FileFormatError, match="eco9 is not an ecoregion name"):
            resolve_ecoregion(ecoregions, "eco9")


class TestResolveFuelType:
    def test_found(self) -> None:
        fuel_types = [
            FuelType.empty(1, BaseFuelType.CONIFER, 1, 1),
            FuelType.empty(5, BaseFuelType.OPEN, 1, 1),
        ]
        assert resolve_fuel_type(5, fuel_types) is fuel_types[1]

    def test_not_previously_listed(self) -> None:
        fuel_types = [FuelType.empty(1, BaseFuelType.CONIFER, 1, 1)]
        with pytest.raises(FileFormatError, match="The fuel type 2 was not previously listed"):
            resolve_fuel_type(2, fuel_types, line_number=30)


class TestCheckRepeated:
    def test_records_first_line(self) -> None:
        line_numbers: dict[str, int] = {}
        check_repeated("abiebals", "species", line_numbers, 7)
        check_repeated("piceglau", "species", line_numbers, 8)
        assert line_numbers == {"abiebals": 7, "piceglau": 8}

    def test_repeat_reports_first_line(self) -> None:
        line_numbers: dict[int, int] = {}
        check_repeated(3, "fuel type", line_numbers, 17)
        with pytest.raises(FileFormatError) as exc_info:
            check_repeated(3, "fuel type", line_numbers, 21)
        assert exc_info.value.message == "The fuel type 3 was previously used on line 17"
        assert exc_info.value.line_number == 21

    def test_scopes_are_separate(self) -> None:
        species_lines: dict[str, int] = {}
        other_lines: dict[str, int] = {}
        check_repeated("abiebals", "species", species_lines, 3)
        check_repeated("abiebals", "species", other_lines, 9)
