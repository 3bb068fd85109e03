from solfuzz.generator.base_generator import BaseGenerator, GeneratorKind


class ContractGenerator(BaseGenerator):
    name = "Contract generator"
    kind = GeneratorKind.CONTRACT

    def visit(self) -> str:
        # Unit stem plus per-unit counter keeps names unique program-wide.
        name = self.state.current_source_state.new_contract_name()
        return f"contract {name} {{}}"
