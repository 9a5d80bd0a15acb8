"""I/O handlers for dynamic fuel system parameter files."""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

# ---------------------------------------------------------------------------
# Lazy import mapping: symbol_name -> (module_path, attr_name)
# ---------------------------------------------------------------------------
_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    # Configuration
    "FuelParametersReaderConfig": ("pyfuels.io.config", "FuelParametersReaderConfig"),
    # Line and value reading
    "InputLine": ("pyfuels.io.text_reader", "InputLine"),
    "LineCursor": ("pyfuels.io.text_reader", "LineCursor"),
    "load_input_lines": ("pyfuels.io.text_reader", "load_input_lines"),
    "split_input_lines": ("pyfuels.io.text_reader", "split_input_lines"),
    "ValueReader": ("pyfuels.io.values", "ValueReader"),
    # Parameter file reader and writer
    "DynamicFuelsParametersReader": (
        "pyfuels.io.fuel_parameters",
        "DynamicFuelsParametersReader",
    ),
    "read_fuel_parameters": ("pyfuels.io.fuel_parameters", "read_fuel_parameters"),
    "write_fuel_parameters": ("pyfuels.io.fuel_writer", "write_fuel_parameters"),
}

__all__ = list(_LAZY_IMPORTS)


def __getattr__(name: str) -> object:
    """Lazy import of io symbols and submodules (PEP 562).

    Resolved values are cached in ``globals()`` so subsequent access is
    a plain dict lookup.
    """
    entry = _LAZY_IMPORTS.get(name)
    if entry is not None:
        module_path, attr_name = entry
        module = importlib.import_module(module_path)
        value = getattr(module, attr_name)
        globals()[name] = value
        return value

    # Fall back: try to import as a submodule
    try:
        module = importlib.import_module(f"pyfuels.io.{name}")
    except ImportError:
        raise AttributeError(f"module 'pyfuels.io' has no attribute {name!r}") from None
    globals()[name] = module
    return module


if TYPE_CHECKING:
    from pyfuels.io.config import FuelParametersReaderConfig as FuelParametersReaderConfig
    from pyfuels.io.fuel_parameters import (
        DynamicFuelsParametersReader as DynamicFuelsParametersReader,
    )
    from pyfuels.io.fuel_parameters import read_fuel_parameters as read_fuel_parameters
    from pyfuels.io.fuel_writer import write_fuel_parameters as write_fuel_parameters
    from pyfuels.io.text_reader import InputLine as InputLine
    from pyfuels.io.text_reader import LineCursor as LineCursor
    from pyfuels.io.text_reader import load_input_lines as load_input_lines
    from pyfuels.io.text_reader import split_input_lines as split_input_lines
    from pyfuels.io.values import ValueReader as ValueReader
