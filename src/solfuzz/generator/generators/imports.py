from solfuzz.exceptions import invariant
from solfuzz.generator.base_generator import BaseGenerator, GeneratorKind


class ImportGenerator(BaseGenerator):
    name = "Import generator"
    kind = GeneratorKind.IMPORT

    def visit(self) -> str:
        invariant(len(self.state) > 1, "imports need at least two source units")
        source_state = self.state.current_source_state
        current = self.state.current_path
        eligible = [
            path
            for path in self.state.source_unit_paths()
            if path != current and not source_state.source_path_imported(path)
        ]
        invariant(bool(eligible), f"no importable source unit left for {current}")

        path = self.state.random_path(eligible)
        source_state.add_imported_source_path(path)
        return f'import "{path}";'
