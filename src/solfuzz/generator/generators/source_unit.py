from solfuzz.generator.base_generator import BaseGenerator, GeneratorKind


class SourceUnitGenerator(BaseGenerator):
    name = "Source unit generator"
    kind = GeneratorKind.SOURCE_UNIT

    def setup(self) -> None:
        super().setup()
        self.add_generator(GeneratorKind.PRAGMA)
        # Imports need a sibling unit to point at, and never more of them
        # than there are siblings.
        siblings = len(self.state) - 1
        if siblings > 0:
            num_imports = self.distribution.distribution_one_to_n(
                self.state.config.max_imports
            )
            self.add_generator(GeneratorKind.IMPORT, min(num_imports, siblings))
        self.add_generator(GeneratorKind.CONTRACT)

    def visit(self) -> str:
        return self.visit_children()
