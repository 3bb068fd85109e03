import re

import pytest

from solfuzz.generator import SolidityGenerator
from solfuzz.sources import split_sources


IMPORT_RE = re.compile(r'^import "(?P<path>[^"]+)";$', re.MULTILINE)


@pytest.fixture
def make_generator():
    def fn(seed=0, config=None) -> SolidityGenerator:
        return SolidityGenerator(seed, config)

    return fn


@pytest.fixture
def get_units():
    # maps unit path -> (imported paths in order, unit text)
    def fn(program):
        return {
            path: ([m.group("path") for m in IMPORT_RE.finditer(text)], text)
            for path, text in split_sources(program).items()
        }

    return fn
