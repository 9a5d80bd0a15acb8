"""
Dynamic fuel system parameter model.

This module holds the in-memory form of a dynamic fuel system parameter
file:

- :class:`BaseFuelType`: coarse fuel category of a fuel type
- :class:`FuelType`: age range plus weighted species composition
- :class:`DisturbanceType`: prescriptions that convert a cell to a fuel type
- :class:`InputParameters`: the complete parameter set

Per-species and per-ecoregion values are numpy arrays sized to the host
registries and addressed by ``Species.index`` / ``Ecoregion.index``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from numpy.typing import NDArray

    from pyfuels.core.registry import Ecoregion, Species


class BaseFuelType(Enum):
    """Base fuel type of a fuel type."""

    CONIFER = "Conifer"
    CONIFER_PLANTATION = "ConiferPlantation"
    DECIDUOUS = "Deciduous"
    OPEN = "Open"
    NO_FUEL = "NoFuel"
    SLASH = "Slash"


_BASE_FUEL_TYPES = {bft.value: bft for bft in BaseFuelType}


def parse_base_fuel_type(word: str) -> BaseFuelType:
    """Convert an input-file word into a :class:`BaseFuelType`.

    Matching is exact and case-sensitive.

    Raises:
        ValueError: If *word* is not one of the six base fuel type names.
    """
    try:
        return _BASE_FUEL_TYPES[word]
    except KeyError:
        valid = ", ".join(_BASE_FUEL_TYPES)
        raise ValueError(f"Valid Fuel Types: {valid}.") from None


@dataclass(eq=False)
class FuelType:
    """
    A fuel type assignment rule.

    Parameters
    ----------
    index : int
        Fuel index, unique within a parameter file. Should match the fuel
        table of the fire extension.
    base_fuel : BaseFuelType
        Coarse fuel category.
    min_age, max_age : int
        Inclusive cohort age range.
    multipliers : NDArray[np.int8]
        Per-species multiplier (+1, -1 or 0 for species not listed).
    ecoregions : NDArray[np.bool_]
        Per-ecoregion membership. All False when the parameter file has no
        ecoregion table.
    """

    index: int
    base_fuel: BaseFuelType
    min_age: int
    max_age: int
    multipliers: NDArray[np.int8]
    ecoregions: NDArray[np.bool_]

    @classmethod
    def empty(
        cls,
        index: int,
        base_fuel: BaseFuelType,
        n_species: int,
        n_ecoregions: int,
        min_age: int = 0,
        max_age: int = 0,
    ) -> FuelType:
        """Create a fuel type with no species and no ecoregions."""
        return cls(
            index=index,
            base_fuel=base_fuel,
            min_age=min_age,
            max_age=max_age,
            multipliers=np.zeros(n_species, dtype=np.int8),
            ecoregions=np.zeros(n_ecoregions, dtype=np.bool_),
        )

    @property
    def n_species(self) -> int:
        """Number of species with a non-zero multiplier."""
        return int(np.count_nonzero(self.multipliers))

    def species_multiplier(self, species: Species) -> int:
        return int(self.multipliers[species.index])

    def in_ecoregion(self, ecoregion: Ecoregion) -> bool:
        return bool(self.ecoregions[ecoregion.index])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FuelType):
            return NotImplemented
        return (
            self.index == other.index
            and self.base_fuel == other.base_fuel
            and self.min_age == other.min_age
            and self.max_age == other.max_age
            and np.array_equal(self.multipliers, other.multipliers)
            and np.array_equal(self.ecoregions, other.ecoregions)
        )

    def __repr__(self) -> str:
        return (
            f"FuelType(index={self.index}, base_fuel={self.base_fuel.value}, "
            f"ages={self.min_age}-{self.max_age}, n_species={self.n_species})"
        )


@dataclass
class DisturbanceType:
    """
    Conversion of disturbed cells to a fuel type.

    Attributes:
        fuel_index: Fuel index assigned after the disturbance. Stored as
            written; it is not required to match a listed fuel type.
        max_age: Number of years the conversion stays in effect
        prescription_names: Harvest prescriptions (or other disturbance
            names) that trigger the conversion
    """

    fuel_index: int
    max_age: int
    prescription_names: list[str] = field(default_factory=list)


@dataclass(eq=False)
class InputParameters:
    """
    Complete parameter set for the dynamic fuel system.

    Attributes:
        timestep: Extension timestep in years
        fuel_coefficients: Per-species fuel coefficient (n_species,);
            species not listed in the file keep 0.0
        fuel_types: Fuel types in file order
        disturbance_types: Disturbance conversions in file order
        hardwood_max: Maximum hardwood percentage for conifer fuel types
        dead_fir_max_age: Years a dead fir cohort contributes to fuel
        map_file_names: Template for fuel type map paths
        pct_conifer_file_name: Template for percent conifer map paths
        pct_dead_fir_file_name: Template for percent dead fir map paths
    """

    timestep: int
    fuel_coefficients: NDArray[np.float64]
    fuel_types: list[FuelType] = field(default_factory=list)
    disturbance_types: list[DisturbanceType] = field(default_factory=list)
    hardwood_max: int = 0
    dead_fir_max_age: int = 0
    map_file_names: str = ""
    pct_conifer_file_name: str = ""
    pct_dead_fir_file_name: str = ""

    @classmethod
    def for_species_count(cls, n_species: int, timestep: int = 0) -> InputParameters:
        """Create an empty parameter set with a zero-filled coefficient array."""
        return cls(timestep=timestep, fuel_coefficients=np.zeros(n_species, dtype=np.float64))

    @property
    def n_fuel_types(self) -> int:
        return len(self.fuel_types)

    @property
    def n_disturbance_types(self) -> int:
        return len(self.disturbance_types)

    def get_fuel_type(self, index: int) -> FuelType | None:
        """Return the fuel type with the given fuel index, or ``None``."""
        for fuel_type in self.fuel_types:
            if fuel_type.index == index:
                return fuel_type
        return None

    def fuel_coefficient(self, species: Species) -> float:
        return float(self.fuel_coefficients[species.index])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InputParameters):
            return NotImplemented
        return (
            self.timestep == other.timestep
            and np.array_equal(self.fuel_coefficients, other.fuel_coefficients)
            and self.fuel_types == other.fuel_types
            and self.disturbance_types == other.disturbance_types
            and self.hardwood_max == other.hardwood_max
            and self.dead_fir_max_age == other.dead_fir_max_age
            and self.map_file_names == other.map_file_names
            and self.pct_conifer_file_name == other.pct_conifer_file_name
            and self.pct_dead_fir_file_name == other.pct_dead_fir_file_name
        )

    def __repr__(self) -> str:
        return (
            f"InputParameters(timestep={self.timestep}, "
            f"n_fuel_types={self.n_fuel_types}, "
            f"n_disturbance_types={self.n_disturbance_types})"
        )
