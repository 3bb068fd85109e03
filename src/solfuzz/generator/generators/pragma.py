from solfuzz.generator.base_generator import BaseGenerator, GeneratorKind


class PragmaGenerator(BaseGenerator):
    name = "Pragma generator"
    kind = GeneratorKind.PRAGMA

    def visit(self) -> str:
        config = self.state.config
        generic = self.distribution.choice(config.generic_pragmas)
        abi = self.distribution.choice(config.abi_pragmas)
        return f"{generic}\n{abi}"
