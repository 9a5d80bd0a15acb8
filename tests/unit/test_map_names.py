"""Tests for map filename templates."""

from __future__ import annotations

import pytest

from pyfuels.core.map_names import (
    check_template_vars,
    replace_template_vars,
    template_vars,
)


class TestTemplateVars:
    def test_finds_vars(self) -> None:
        assert template_vars("fire/{timestep}/fuel-{timestep}.img") == ["timestep", "timestep"]

    def test_no_vars(self) -> None:
        assert template_vars("fire/fuel.img") == []


class TestCheckTemplateVars:
    def test_valid(self) -> None:
        check_template_vars("fire/FuelType-{timestep}.img")

    def test_missing_timestep(self) -> None:
        with pytest.raises(ValueError, match=r"must include the \{timestep\} variable"):
            check_template_vars("fire/FuelType.img")

    def test_unknown_var(self) -> None:
        with pytest.raises(ValueError, match=r"\{year\} is not recognized"):
            check_template_vars("fire/FuelType-{year}-{timestep}.img")


class TestReplaceTemplateVars:
    def test_replace(self) -> None:
        assert replace_template_vars("fire/FuelType-{timestep}.img", 20) == "fire/FuelType-20.img"
