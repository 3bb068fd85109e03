"""Helpers for handing generated programs to a multi-file Solidity loader."""

from __future__ import annotations

import re
from typing import Any, Dict

from solfuzz.exceptions import GeneratorError


SOURCE_HEADER_RE = re.compile(r"^==== Source: (?P<path>\S+) ====$", re.MULTILINE)


def split_sources(program: str) -> Dict[str, str]:
    """Split a generated program into ``{path: content}`` by its unit headers."""
    headers = list(SOURCE_HEADER_RE.finditer(program))
    if not headers:
        raise GeneratorError("program has no source unit headers")

    sources: Dict[str, str] = {}
    for i, header in enumerate(headers):
        end = headers[i + 1].start() if i + 1 < len(headers) else len(program)
        path = header.group("path")
        if path in sources:
            raise GeneratorError(f"duplicate source unit {path}")
        sources[path] = program[header.end() : end].strip("\n") + "\n"
    return sources


def to_standard_json(program: str) -> Dict[str, Any]:
    """Build the compiler's standard JSON input for a generated program."""
    sources = split_sources(program)
    return {
        "language": "Solidity",
        "sources": {path: {"content": content} for path, content in sources.items()},
        "settings": {"outputSelection": {"*": {"*": ["abi"]}}},
    }
