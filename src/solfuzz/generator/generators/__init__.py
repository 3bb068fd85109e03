from .test_case import TestCaseGenerator
from .source_unit import SourceUnitGenerator
from .pragma import PragmaGenerator
from .imports import ImportGenerator
from .contract import ContractGenerator

__all__ = [
    "TestCaseGenerator",
    "SourceUnitGenerator",
    "PragmaGenerator",
    "ImportGenerator",
    "ContractGenerator",
]
