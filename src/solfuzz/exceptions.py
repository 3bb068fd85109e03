class GeneratorError(Exception):
    pass


class InvariantViolation(GeneratorError):
    """Internal precondition of the generator was broken.

    Raised for programming-contract breaches (empty sample ranges, asking
    for the current source unit before one exists, registry misses, imports
    with no eligible target). It is fatal and is never caught by the
    generator itself.
    """

    def __init__(self, message="Generator invariant violated"):
        super().__init__(message)


def invariant(condition: bool, message: str = "") -> None:
    if not condition:
        raise InvariantViolation(message or "Generator invariant violated")
