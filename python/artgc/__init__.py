from .circuit import Circuit, Gate, GateType, WireId
from .detect_cycle import detect_cycle, check_acyclic
from .layering import Layering, assign_layers
from .eval_local import eval_local, eval_layers, eval_bucket
from .ring import Ring, prime_field, base_field, scalar_field
from .error import (
    CircuitError,
    EmptyInputError,
    EmptyOutputError,
    CyclicPathError,
    EmptyWireError,
)
