"""
Name and index lookups shared by the section parsers.

- ``resolve_*`` functions turn names and fuel indices read from a line
  into registry records, failing on unknown references.
- :func:`check_repeated` guards a table against repeated keys.  Each
  table passes its own ``line_numbers`` dict, so duplicate detection
  never crosses table boundaries.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from typing import TYPE_CHECKING

from pyfuels.core.exceptions import FileFormatError

if TYPE_CHECKING:
    from pyfuels.core.parameters import FuelType
    from pyfuels.core.registry import Ecoregion, EcoregionLookup, Species, SpeciesLookup


def resolve_species(
    registry: SpeciesLookup, name: str, line_number: int | None = None
) -> Species:
    species = registry.get(name)
    if species is None:
        raise FileFormatError(f"{name} is not a species name", line_number=line_number, value=name)
    return species


def resolve_ecoregion(
    registry: EcoregionLookup, name: str, line_number: int | None = None
) -> Ecoregion:
    ecoregion = registry.get(name)
    if ecoregion is None:
        raise FileFormatError(
            f"{name} is not an ecoregion name", line_number=line_number, value=name
        )
    return ecoregion


def resolve_fuel_type(
    index: int, fuel_types: Iterable[FuelType], line_number: int | None = None
) -> FuelType:
    """Find a fuel type among those already read.

    Only fuel types parsed earlier in the same file are searched; there
    are no forward references.
    """
    for fuel_type in fuel_types:
        if fuel_type.index == index:
            return fuel_type
    raise FileFormatError(
        f"The fuel type {index} was not previously listed",
        line_number=line_number,
        value=str(index),
    )


def check_repeated(
    key: Hashable,
    description: str,
    line_numbers: dict,
    line_number: int | None,
) -> None:
    """Record *key* as seen on *line_number*, failing if it was seen before.

    The error names the line of the first occurrence.
    """
    if key in line_numbers:
        first_line = line_numbers[key]
        raise FileFormatError(
            f"The {description} {key} was previously used on line {first_line}",
            line_number=line_number,
            value=str(key),
        )
    line_numbers[key] = line_number
