"""
Species and ecoregion registries.

The fuel parameter parser never builds these itself; it only looks
names up.  Any object providing ``get(name)`` and ``__len__`` satisfies
the lookup protocols, so a host simulation can pass its own dataset
directly.  :class:`SpeciesRegistry` and :class:`EcoregionRegistry` are
simple in-memory implementations built from an ordered list of names.

Example
-------
>>> from pyfuels.core.registry import SpeciesRegistry
>>> species = SpeciesRegistry.from_names(["abiebals", "piceglau"])
>>> species.get("piceglau").index
1
>>> species.get("pinubank") is None
True
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class Species:
    """A tree species known to the host simulation.

    Attributes:
        name: Unique species name as written in input files
        index: Dense 0-based index used to address per-species arrays
    """

    name: str
    index: int


@dataclass(frozen=True)
class Ecoregion:
    """An ecoregion known to the host simulation.

    Attributes:
        name: Unique ecoregion name as written in input files
        index: Dense 0-based index used to address per-ecoregion arrays
    """

    name: str
    index: int


class SpeciesLookup(Protocol):
    """Read-only species lookup used by the parameter parser."""

    def get(self, name: str) -> Species | None: ...

    def __len__(self) -> int: ...


class EcoregionLookup(Protocol):
    """Read-only ecoregion lookup used by the parameter parser."""

    def get(self, name: str) -> Ecoregion | None: ...

    def __len__(self) -> int: ...


def _check_dense_indices(indices: Iterable[int], kind: str) -> None:
    """Fail unless *indices* are exactly 0 .. n-1, each used once."""
    ordered = sorted(indices)
    if ordered != list(range(len(ordered))):
        raise ValueError(
            f"{kind} indices must run from 0 to {len(ordered) - 1} without gaps "
            f"or repeats, got {ordered}"
        )


class SpeciesRegistry:
    """In-memory species registry keyed by name.

    Raises:
        ValueError: On a repeated name, or if the indices are not exactly
            ``0 .. n-1``.
    """

    def __init__(self, species: Iterable[Species]) -> None:
        self._by_name: dict[str, Species] = {}
        for sp in species:
            if sp.name in self._by_name:
                raise ValueError(f"Duplicate species name: {sp.name!r}")
            self._by_name[sp.name] = sp
        _check_dense_indices((sp.index for sp in self._by_name.values()), "Species")

    @classmethod
    def from_names(cls, names: Iterable[str]) -> SpeciesRegistry:
        """Build a registry assigning indices in the order given."""
        return cls(Species(name=name, index=i) for i, name in enumerate(names))

    def get(self, name: str) -> Species | None:
        return self._by_name.get(name)

    def __len__(self) -> int:
        return len(self._by_name)

    def __iter__(self) -> Iterator[Species]:
        return iter(sorted(self._by_name.values(), key=lambda sp: sp.index))

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __repr__(self) -> str:
        return f"SpeciesRegistry(n_species={len(self)})"


class EcoregionRegistry:
    """In-memory ecoregion registry keyed by name.

    Raises:
        ValueError: On a repeated name, or if the indices are not exactly
            ``0 .. n-1``.
    """

    def __init__(self, ecoregions: Iterable[Ecoregion]) -> None:
        self._by_name: dict[str, Ecoregion] = {}
        for eco in ecoregions:
            if eco.name in self._by_name:
                raise ValueError(f"Duplicate ecoregion name: {eco.name!r}")
            self._by_name[eco.name] = eco
        _check_dense_indices((eco.index for eco in self._by_name.values()), "Ecoregion")

    @classmethod
    def from_names(cls, names: Iterable[str]) -> EcoregionRegistry:
        """Build a registry assigning indices in the order given."""
        return cls(Ecoregion(name=name, index=i) for i, name in enumerate(names))

    def get(self, name: str) -> Ecoregion | None:
        return self._by_name.get(name)

    def __len__(self) -> int:
        return len(self._by_name)

    def __iter__(self) -> Iterator[Ecoregion]:
        return iter(sorted(self._by_name.values(), key=lambda eco: eco.index))

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __repr__(self) -> str:
        return f"EcoregionRegistry(n_ecoregions={len(self)})"
