from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import TYPE_CHECKING, Dict

if TYPE_CHECKING:
    from solfuzz.generator.solidity_generator import SolidityGenerator


class GeneratorKind(Enum):
    TEST_CASE = auto()
    SOURCE_UNIT = auto()
    PRAGMA = auto()
    IMPORT = auto()
    CONTRACT = auto()


class BaseGenerator(ABC):
    """A node in the generator dependency graph.

    Each kind has exactly one instance per ``SolidityGenerator``. Nodes share
    the driver's test state and random distribution, and declare the child
    kinds they depend on (with a weight: how many times the child contributes
    to this node's output) in ``setup``.
    """

    kind: GeneratorKind
    name: str = "Generator"

    def __init__(self, mutator: SolidityGenerator):
        self.mutator = mutator
        self.state = mutator.test_state
        self.distribution = mutator.distribution
        self.generators: Dict[GeneratorKind, int] = {}

    def generator(self, kind: GeneratorKind) -> BaseGenerator:
        return self.mutator.generator(kind)

    def add_generator(self, kind: GeneratorKind, weight: int = 1) -> None:
        self.generators[kind] = weight

    def setup(self) -> None:
        """Declare dependencies. No dependencies unless overridden."""
        self.generators.clear()

    @abstractmethod
    def visit(self) -> str:
        ...

    def end_visit(self) -> None:
        pass

    def visit_child(self, kind: GeneratorKind) -> list[str]:
        child = self.generator(kind)
        return [child.generate() for _ in range(self.generators.get(kind, 0))]

    def visit_children(self) -> str:
        fragments: list[str] = []
        for kind in self.generators:
            fragments.extend(self.visit_child(kind))
        return "\n".join(fragments)

    def generate(self) -> str:
        self.setup()
        code = self.visit()
        self.end_visit()
        logging.debug(f"{self.name}: emitted {len(code)} chars")
        return code
