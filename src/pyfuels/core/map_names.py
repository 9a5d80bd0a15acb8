"""
Map filename templates.

Output map paths are given as templates containing the ``{timestep}``
variable, which is replaced with the simulation year when a map is
written, e.g. ``fire/fuels-{timestep}.img`` -> ``fire/fuels-20.img``.
"""

from __future__ import annotations

import re

TIMESTEP_VAR = "timestep"

KNOWN_VARS = frozenset({TIMESTEP_VAR})
REQUIRED_VARS = frozenset({TIMESTEP_VAR})

_VAR_PATTERN = re.compile(r"\{([^{}]*)\}")


def template_vars(template: str) -> list[str]:
    """Return the variable names used in *template*, in order."""
    return _VAR_PATTERN.findall(template)


def check_template_vars(template: str) -> None:
    """Validate the variables in a map filename template.

    Raises:
        ValueError: If the template uses an unknown variable or omits a
            required one.
    """
    used = template_vars(template)
    for var in used:
        if var not in KNOWN_VARS:
            raise ValueError(f"The template variable {{{var}}} is not recognized")
    for var in sorted(REQUIRED_VARS):
        if var not in used:
            raise ValueError(f"The template must include the {{{var}}} variable")


def replace_template_vars(template: str, timestep: int) -> str:
    """Substitute *timestep* into a map filename template."""
    return template.replace("{" + TIMESTEP_VAR + "}", str(timestep))
