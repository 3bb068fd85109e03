from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import Dict, Optional, Set

from solfuzz.exceptions import invariant
from solfuzz.generator.config import DEFAULT_CONFIG, GeneratorConfig
from solfuzz.generator.distribution import UniformRandomDistribution


@dataclass
class SourceState:
    """What has been generated so far inside one source unit."""

    path: str
    imported_sources: Set[str] = field(default_factory=set)
    num_contracts: int = 0

    def add_imported_source_path(self, source_path: str) -> None:
        invariant(source_path != self.path, f"{self.path} cannot import itself")
        invariant(
            source_path not in self.imported_sources,
            f"{source_path} already imported into {self.path}",
        )
        self.imported_sources.add(source_path)

    def source_path_imported(self, source_path: str) -> bool:
        return source_path in self.imported_sources

    def new_contract_name(self) -> str:
        stem = PurePosixPath(self.path).stem
        name = f"C_{stem}_{self.num_contracts}"
        self.num_contracts += 1
        return name

    def describe(self) -> str:
        imports = ", ".join(sorted(self.imported_sources)) or "-"
        return f"{self.path}: imports [{imports}], contracts {self.num_contracts}"


class TestState:
    """Whole-program generation state.

    Source units are only created through ``add_source``, which names them
    ``<prefix><counter>.sol`` with a counter starting from zero.
    """

    # Not a pytest test class despite the name.
    __test__ = False

    def __init__(
        self,
        distribution: UniformRandomDistribution,
        config: Optional[GeneratorConfig] = None,
    ):
        self.distribution = distribution
        self.config = config or DEFAULT_CONFIG
        self.reset()

    def reset(self) -> None:
        self.source_unit_state: Dict[str, SourceState] = {}
        self.current_source_unit_path: Optional[str] = None
        self.num_source_units = 0

    @property
    def source_unit_name_prefix(self) -> str:
        return self.config.source_unit_prefix

    def add_source_unit(self, path: str) -> None:
        self.source_unit_state[path] = SourceState(path)
        self.current_source_unit_path = path

    def new_path(self) -> str:
        return (
            f"{self.source_unit_name_prefix}{self.num_source_units}"
            f"{self.config.source_unit_suffix}"
        )

    def update_source_path(self, path: str) -> None:
        self.add_source_unit(path)
        self.num_source_units += 1

    def add_source(self) -> str:
        path = self.new_path()
        self.update_source_path(path)
        return path

    @property
    def is_empty(self) -> bool:
        return not self.source_unit_state

    def __len__(self) -> int:
        return len(self.source_unit_state)

    @property
    def current_path(self) -> str:
        invariant(
            self.num_source_units > 0 and self.current_source_unit_path is not None,
            "no source unit has been declared yet",
        )
        return self.current_source_unit_path

    @property
    def current_source_state(self) -> SourceState:
        return self.source_unit_state[self.current_path]

    def source_unit_paths(self) -> list[str]:
        return sorted(self.source_unit_state)

    def random_path(self, paths: Optional[list[str]] = None) -> str:
        candidates = sorted(paths) if paths is not None else self.source_unit_paths()
        invariant(bool(candidates), "no source unit path to choose from")
        return self.distribution.choice(candidates)

    def random_non_current_path(self) -> str:
        invariant(len(self) > 1, "need at least two source units")
        current = self.current_path
        return self.random_path([p for p in self.source_unit_paths() if p != current])

    def describe(self) -> str:
        lines = [f"{len(self)} source unit(s), current: {self.current_source_unit_path}"]
        for path in self.source_unit_paths():
            lines.append("  " + self.source_unit_state[path].describe())
        return "\n".join(lines)
