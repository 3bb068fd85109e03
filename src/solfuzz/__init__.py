from solfuzz.exceptions import GeneratorError, InvariantViolation
from solfuzz.generator import SolidityGenerator

__all__ = ["SolidityGenerator", "GeneratorError", "InvariantViolation"]
