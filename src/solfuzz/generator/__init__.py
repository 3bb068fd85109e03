from .solidity_generator import SolidityGenerator
from .distribution import UniformRandomDistribution
from .state import SourceState, TestState
from .base_generator import BaseGenerator, GeneratorKind
from .config import GeneratorConfig, DEFAULT_CONFIG

__all__ = [
    "SolidityGenerator",
    "UniformRandomDistribution",
    "SourceState",
    "TestState",
    "BaseGenerator",
    "GeneratorKind",
    "GeneratorConfig",
    "DEFAULT_CONFIG",
]
