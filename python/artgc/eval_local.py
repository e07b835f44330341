"""
Local evaluation of a circuit.

No garbling or networking is involved: gates are computed in the clear,
layer by layer. Mostly useful to debug a circuit or to get the expected
outputs of a protocol run.
"""

import logging
from copy import copy
from typing import Dict, List, Sequence

from .circuit import Circuit, WireId
from .detect_cycle import check_acyclic
from .error import EmptyWireError
from .layering import Layering, assign_layers
from .ring import Ring
from .utils import get_validate_mode

logger = logging.getLogger(__name__)


def eval_bucket(circuit: Circuit, bucket: Sequence[int], values: list):
    """
    Evaluate the gates of one layer, writing each result to its output wire.

    Gates of a layer only read wires of lower layers, so the order of
    `bucket` does not change the result.
    """
    for gate_id in bucket:
        gate = circuit.get_gate(gate_id)
        values[gate.out] = gate.gate_type.apply(values[gate.x], values[gate.y])


def _evaluate(circuit: Circuit, inputs: Sequence, validate=None):
    if validate is None:
        validate = get_validate_mode()
    if validate:
        circuit.is_valid()
        check_acyclic(circuit)

    inputs = list(inputs)
    if len(inputs) != len(circuit.inputs):
        raise ValueError("Length of input values differ with input wires")
    for value in inputs:
        if not isinstance(value, Ring):
            raise TypeError(f"Invalid type of {value!r}")

    layering = assign_layers(circuit)
    values = [None] * len(layering.wire_layers)

    for wire, value in zip(circuit.inputs, inputs):
        values[wire] = copy(value)

    for bucket in layering.buckets:
        eval_bucket(circuit, bucket, values)

    empty_wires = [
        WireId(i)
        for i, (layer, value) in enumerate(zip(layering.wire_layers, values))
        if layer is None or value is None
    ]
    if empty_wires:
        raise EmptyWireError(empty_wires)

    logger.debug(
        "Evaluated %d gates over %d layers", circuit.gate_count, layering.depth
    )

    return layering, values


def eval_local(circuit: Circuit, inputs: Sequence, validate=None) -> List:
    """
    Evaluate the circuit with the given input values.

    `inputs[i]` is the value of the i-th wire marked as input; the result
    holds the values of the output wires in the order they were marked.
    Values can be of any `Ring` type, arithmetic is left to that type.

    If `validate` is true, or not given and `ARTGC_VALIDATE` is set,
    `circuit.is_valid()` and `check_acyclic(circuit)` are run first.

    Raises `EmptyWireError` if some wire cannot be evaluated,
    which only happens on a cyclic or badly connected circuit.
    """
    _, values = _evaluate(circuit, inputs, validate)

    return [copy(values[wire]) for wire in circuit.outputs]


def eval_layers(circuit: Circuit, inputs: Sequence, validate=None) -> List[Dict]:
    """Evaluate the circuit and return the wire values produced at each layer."""
    layering, values = _evaluate(circuit, inputs, validate)
    return _group_by_layer(circuit, layering, values)


def _group_by_layer(circuit: Circuit, layering: Layering, values) -> List[Dict]:
    layer_evals = [{wire: copy(values[wire]) for wire in circuit.inputs}]

    for bucket in layering.buckets[1:]:
        current_layer_eval = {}
        for gate_id in bucket:
            out = circuit.get_gate(gate_id).out
            current_layer_eval[out] = copy(values[out])

        layer_evals.append(current_layer_eval)

    return layer_evals
