"""
Arithmetic circuit as a DAG of two-input, one-output gates.

Wires are identity-only handles allocated by the circuit. Gates connect
wires by id: a wire produced by one gate is consumed by any number of
other gates. Wires marked as inputs are the starting nodes of the graph
and must not be produced by any gate.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple, Union

from .error import EmptyInputError, EmptyOutputError


@dataclass(frozen=True, order=True)
class WireId:
    """Handle of a value carrier in the circuit. Carries no value itself."""

    id: int

    def __int__(self):
        return self.id

    def __index__(self):
        return self.id

    def __repr__(self):
        return f"WireId({self.id})"


class GateType(Enum):
    ADD = "ADD"
    MUL = "MUL"

    def apply(self, x, y):
        if self is GateType.ADD:
            return x + y
        return x * y


@dataclass(frozen=True)
class Gate:
    id: int
    gate_type: GateType
    x: WireId
    y: WireId
    out: WireId

    def inputs(self) -> Tuple[WireId, WireId]:
        return self.x, self.y


def _to_wire(wire: Union[WireId, int]) -> WireId:
    if isinstance(wire, WireId):
        return wire
    if isinstance(wire, int) and not isinstance(wire, bool):
        if wire < 0:
            raise ValueError(f"Invalid wire id: {wire}")
        return WireId(wire)
    raise TypeError(f"Invalid type of {wire}")


def _to_gate_type(gate_type: Union[GateType, str]) -> GateType:
    if isinstance(gate_type, GateType):
        return gate_type
    try:
        return GateType(gate_type)
    except ValueError as exc:
        raise ValueError("Invalid gate type") from exc


class Circuit:
    """
    Mutable builder of an arithmetic circuit.

    Order of `mark_input` and `mark_output` calls is significant: input
    values are matched to input wires by position and output values are
    returned in the order the output wires were marked.
    """

    def __init__(self):
        self._inputs: List[WireId] = []
        self._outputs: List[WireId] = []
        self._gates: List[Gate] = []
        self._wire_count = 0
        self._gate_count = 0

    def __repr__(self):
        return (
            f"Circuit(wires={self._wire_count}, gates={self._gate_count}, "
            + f"inputs={len(self._inputs)}, outputs={len(self._outputs)})"
        )

    def is_valid(self):
        """
        Check structural validity of the circuit:
        1. at least one wire is marked as input
        2. at least one wire is marked as output

        Connectivity and cycles are not checked here,
        see `artgc.detect_cycle.check_acyclic`.
        """
        if not self._inputs:
            raise EmptyInputError()
        if not self._outputs:
            raise EmptyOutputError()

        return True

    def create_new_wire(self) -> WireId:
        """Allocate a new wire and return its id"""
        wire_id = WireId(self._wire_count)
        self._wire_count += 1
        return wire_id

    def add_gate(
        self,
        gate_type: Union[GateType, str],
        x: Union[WireId, int],
        y: Union[WireId, int],
        out: Union[WireId, int],
    ) -> int:
        """
        Add a gate computing `out = x <op> y` and return its id.
        Wires are not checked to be allocated by this circuit.
        """
        gate_id = self._gate_count
        gate = Gate(
            gate_id, _to_gate_type(gate_type), _to_wire(x), _to_wire(y), _to_wire(out)
        )
        self._gates.append(gate)
        self._gate_count += 1

        return gate_id

    def add(self, x, y, out) -> int:
        """Short for `add_gate(GateType.ADD, x, y, out)`"""
        return self.add_gate(GateType.ADD, x, y, out)

    def mul(self, x, y, out) -> int:
        """Short for `add_gate(GateType.MUL, x, y, out)`"""
        return self.add_gate(GateType.MUL, x, y, out)

    add_mul_gate = mul

    def mark_input(self, wire: Union[WireId, int]):
        self._inputs.append(_to_wire(wire))

    def mark_output(self, wire: Union[WireId, int]):
        self._outputs.append(_to_wire(wire))

    def add_input(self) -> WireId:
        """Allocate a new wire and mark it as input"""
        wire_id = self.create_new_wire()
        self._inputs.append(wire_id)
        return wire_id

    def add_output(self) -> WireId:
        """Allocate a new wire and mark it as output"""
        wire_id = self.create_new_wire()
        self._outputs.append(wire_id)
        return wire_id

    @property
    def wire_count(self) -> int:
        return self._wire_count

    @property
    def gate_count(self) -> int:
        return self._gate_count

    @property
    def gates(self) -> Tuple[Gate, ...]:
        return tuple(self._gates)

    @property
    def inputs(self) -> Tuple[WireId, ...]:
        return tuple(self._inputs)

    @property
    def outputs(self) -> Tuple[WireId, ...]:
        return tuple(self._outputs)

    def get_wire_count(self) -> int:
        return self._wire_count

    def get_gate_count(self) -> int:
        return self._gate_count

    def get_gate(self, gate_id: int) -> Gate:
        if not 0 <= gate_id < self._gate_count:
            raise IndexError(f"Gate with id {gate_id} does not exist")
        return self._gates[gate_id]

    def get_all_gates(self) -> Tuple[Gate, ...]:
        return self.gates

    def get_all_inputs(self) -> Tuple[WireId, ...]:
        return self.inputs

    def get_all_outputs(self) -> Tuple[WireId, ...]:
        return self.outputs
