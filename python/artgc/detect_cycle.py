import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .circuit import Circuit, WireId
from .error import CyclicPathError

logger = logging.getLogger(__name__)

NOT_VISITED = 0
ON_PATH = 1
EXPLORED = 2


@dataclass
class WireConnection:
    # ids of gates this wire goes into, once per input slot
    to_ids: List[int] = field(default_factory=list)

    # id of the gate this wire comes out of, None for circuit inputs
    from_id: Optional[int] = None


def wire_span(circuit: Circuit) -> int:
    """Number of wire slots needed to index every wire referenced by the circuit"""
    span = circuit.wire_count
    for gate in circuit.gates:
        span = max(span, int(gate.x) + 1, int(gate.y) + 1, int(gate.out) + 1)
    for wire in circuit.inputs + circuit.outputs:
        span = max(span, int(wire) + 1)

    return span


def build_connections(circuit: Circuit) -> List[WireConnection]:
    """Index, for every wire, the gates consuming it and the gate producing it"""
    connections = [WireConnection() for _ in range(wire_span(circuit))]

    for gate in circuit.gates:
        connections[gate.x].to_ids.append(gate.id)
        connections[gate.y].to_ids.append(gate.id)

        conn = connections[gate.out]
        if conn.from_id is not None:
            logger.warning(
                "Wire %d is produced by both gate %d and gate %d",
                int(gate.out),
                conn.from_id,
                gate.id,
            )
        conn.from_id = gate.id

    return connections


def detect_cycle(circuit: Circuit) -> Optional[Tuple[int, WireId]]:
    """
    Check if the circuit has a cyclic path.

    Returns `None` for an acyclic circuit, otherwise the pair `(gate_id, wire_id)`
    where `gate_id` is a gate on the cycle and `wire_id` is the wire through which
    the walk re-entered it.

    Depth-first search is run from every gate consuming a circuit input, then
    from any gate left unexplored. A gate is only a cycle witness when it is
    on the current path; gates reached again through another branch
    (diamonds) are already fully explored and skipped.
    """
    gates = circuit.gates
    connections = build_connections(circuit)
    state = [NOT_VISITED] * circuit.gate_count

    input_gates = set()
    for wire in circuit.inputs:
        input_gates.update(connections[wire].to_ids)

    seeds = sorted(input_gates) + list(range(circuit.gate_count))

    for seed in seeds:
        if state[seed] != NOT_VISITED:
            continue

        state[seed] = ON_PATH
        stack = [(seed, iter(connections[gates[seed].out].to_ids))]

        while stack:
            gate_id, next_gates = stack[-1]

            for next_id in next_gates:
                if state[next_id] == ON_PATH:
                    return next_id, gates[gate_id].out
                if state[next_id] == NOT_VISITED:
                    state[next_id] = ON_PATH
                    stack.append((next_id, iter(connections[gates[next_id].out].to_ids)))
                    break
            else:
                state[gate_id] = EXPLORED
                stack.pop()

    return None


def check_acyclic(circuit: Circuit):
    """Raise `CyclicPathError` if the circuit has a cyclic path"""
    cycle = detect_cycle(circuit)
    if cycle is not None:
        gate_id, wire_id = cycle
        raise CyclicPathError(gate_id, wire_id)

    return True
