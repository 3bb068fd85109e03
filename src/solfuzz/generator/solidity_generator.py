"""
Top-level driver for synthesizing Solidity test programs.

Owns the random distribution, the test state and exactly one instance of
every generator kind. A generation pass starts at the test case generator and
recurses through the declared dependencies.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Type

from solfuzz.exceptions import invariant
from solfuzz.generator.base_generator import BaseGenerator, GeneratorKind
from solfuzz.generator.config import GeneratorConfig
from solfuzz.generator.distribution import UniformRandomDistribution
from solfuzz.generator.generators import (
    ContractGenerator,
    ImportGenerator,
    PragmaGenerator,
    SourceUnitGenerator,
    TestCaseGenerator,
)
from solfuzz.generator.state import TestState


GENERATOR_TYPES: Dict[GeneratorKind, Type[BaseGenerator]] = {
    GeneratorKind.TEST_CASE: TestCaseGenerator,
    GeneratorKind.SOURCE_UNIT: SourceUnitGenerator,
    GeneratorKind.PRAGMA: PragmaGenerator,
    GeneratorKind.IMPORT: ImportGenerator,
    GeneratorKind.CONTRACT: ContractGenerator,
}


class SolidityGenerator:
    def __init__(self, seed: int, config: Optional[GeneratorConfig] = None):
        self.seed = seed
        self.distribution = UniformRandomDistribution(seed)
        self.test_state = TestState(self.distribution, config)
        self._generators: Dict[GeneratorKind, BaseGenerator] = {}
        self._create_generators()

    @property
    def config(self) -> GeneratorConfig:
        return self.test_state.config

    def _create_generators(self) -> None:
        for kind, generator_type in GENERATOR_TYPES.items():
            self._generators[kind] = generator_type(self)

    def generator(self, kind: GeneratorKind) -> BaseGenerator:
        generator = self._generators.get(kind)
        invariant(generator is not None, f"no generator registered for {kind.name}")
        return generator

    def generate_test_program(self) -> str:
        """Return a pseudo randomly generated multi-unit test program.

        Every call starts from an empty test state. Calls after the first keep
        drawing from the same random stream, so only the first program of a
        driver is a function of the seed alone.
        """
        self.test_state.reset()
        program = self.generator(GeneratorKind.TEST_CASE).generate()
        logging.debug(f"seed={self.seed}: {self.test_state.describe()}")
        return program
