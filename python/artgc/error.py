from typing import Iterable


class CircuitError(ValueError):
    """Base class of every error raised on an ill-formed circuit"""


class EmptyInputError(CircuitError):
    def __init__(self):
        super().__init__("This circuit has no input.")


class EmptyOutputError(CircuitError):
    def __init__(self):
        super().__init__("This circuit has no output.")


class CyclicPathError(CircuitError):
    def __init__(self, gate_id: int, wire_id):
        self.gate_id = gate_id
        self.wire_id = wire_id
        super().__init__(
            f"This circuit has cyclic path. Gate with id {gate_id} "
            + f"has input wire with id {int(wire_id)}."
        )


class EmptyWireError(CircuitError):
    """
    Some wires were left without a layer or a value after evaluation.

    This is never caused by input values: it means the circuit was built
    wrong (cycles, dangling wires) or the layering is broken.
    """

    def __init__(self, wire_ids: Iterable):
        self.wire_ids = list(wire_ids)
        ids = ", ".join(str(int(w)) for w in self.wire_ids)
        super().__init__(f"Wires left without value after evaluation: {ids}")
