import logging
from collections import deque
from dataclasses import dataclass, field
from typing import List, Optional, Union

from .circuit import Circuit, WireId
from .detect_cycle import build_connections

logger = logging.getLogger(__name__)


@dataclass
class Layering:
    """
    Layer of every wire and gates grouped by the layer of their output.

    `buckets[k]` holds the ids of gates whose output wire is at layer `k`.
    Circuit inputs are at layer 0, so `buckets[0]` is always empty. Gates of
    one bucket only read wires of lower layers, so they can be evaluated in
    any order.
    """

    wire_layers: List[Optional[int]] = field(default_factory=list)
    buckets: List[List[int]] = field(default_factory=lambda: [[]])

    @property
    def depth(self) -> int:
        return len(self.buckets) - 1

    def layer_of(self, wire: Union[WireId, int]) -> Optional[int]:
        return self.wire_layers[wire]

    def is_complete(self) -> bool:
        return all(layer is not None for layer in self.wire_layers)


def assign_layers(circuit: Circuit) -> Layering:
    """
    Assign a layer to every wire reachable from the circuit inputs.

    Inputs are at layer 0 and a gate output is at `max(layer(x), layer(y)) + 1`.
    Each gate counts its unresolved input slots, and is resolved once both of
    them are layered, so every gate is visited once. Wires on a cycle or not
    reachable from the inputs are left with `None`.
    """
    gates = circuit.gates
    connections = build_connections(circuit)
    wire_layers: List[Optional[int]] = [None] * len(connections)
    buckets: List[List[int]] = [[]]

    pending = [2] * circuit.gate_count
    queue = deque()

    for wire in circuit.inputs:
        if wire_layers[wire] is None:
            wire_layers[wire] = 0
            queue.append(wire)

    while queue:
        wire = queue.popleft()

        for gate_id in connections[wire].to_ids:
            pending[gate_id] -= 1
            if pending[gate_id]:
                continue

            gate = gates[gate_id]
            if wire_layers[gate.out] is not None:
                logger.warning(
                    "Gate %d skipped: its output wire %d already has a layer",
                    gate_id,
                    int(gate.out),
                )
                continue

            layer = max(wire_layers[gate.x], wire_layers[gate.y]) + 1
            wire_layers[gate.out] = layer
            while len(buckets) <= layer:
                buckets.append([])
            buckets[layer].append(gate_id)
            queue.append(gate.out)

    for bucket in buckets:
        bucket.sort()

    logger.debug(
        "Assigned %d layers to %d wires",
        len(buckets) - 1,
        sum(layer is not None for layer in wire_layers),
    )

    return Layering(wire_layers, buckets)
