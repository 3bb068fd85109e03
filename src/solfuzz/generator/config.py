from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GeneratorConfig:
    """Constants shaping the generated test programs."""

    max_source_units: int = 3  # Units per program, drawn from [1, max]
    max_imports: int = 2  # Imports per unit, drawn from [1, max]
    source_unit_prefix: str = "su"
    source_unit_suffix: str = ".sol"

    generic_pragmas: tuple[str, ...] = (
        "// SPDX-License-Identifier: GPL-3.0",
        "pragma solidity >= 0.0.0;",
        "pragma experimental SMTChecker;",
    )
    abi_pragmas: tuple[str, ...] = (
        "pragma abicoder v1;",
        "pragma abicoder v2;",
    )


# Default configuration instance
DEFAULT_CONFIG = GeneratorConfig()
