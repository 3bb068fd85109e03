from solfuzz.generator.base_generator import BaseGenerator, GeneratorKind


SOURCE_HEADER = "==== Source: {path} ===="


class TestCaseGenerator(BaseGenerator):
    """Top of the graph: a whole program made of one or more source units."""

    __test__ = False

    kind = GeneratorKind.TEST_CASE
    name = "Test case generator"

    def setup(self) -> None:
        super().setup()
        max_units = self.state.config.max_source_units
        num_source_units = self.distribution.distribution_one_to_n(max_units)
        self.add_generator(GeneratorKind.SOURCE_UNIT, num_source_units)

    def visit(self) -> str:
        source_unit = self.generator(GeneratorKind.SOURCE_UNIT)
        units = []
        for _ in range(self.generators[GeneratorKind.SOURCE_UNIT]):
            path = self.state.add_source()
            units.append(
                SOURCE_HEADER.format(path=path) + "\n" + source_unit.generate() + "\n"
            )
        return "\n".join(units)
