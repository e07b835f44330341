import random

from artgc import Circuit, assign_layers, detect_cycle, eval_local
from artgc.ring import scalar_field
from artgc.utils import Timer

Fp = scalar_field("BLS12_381")


def random_circuit(n_inputs, n_gates):
    circuit = Circuit()
    wires = [circuit.add_input() for _ in range(n_inputs)]

    for _ in range(n_gates):
        out = circuit.create_new_wire()
        # favor recent wires to get deep circuits
        x = wires[-random.randint(1, min(len(wires), 8))]
        y = random.choice(wires)
        if random.random() < 0.5:
            circuit.add(x, y, out)
        else:
            circuit.mul(x, y, out)
        wires.append(out)

    circuit.mark_output(wires[-1])
    return circuit


def run(n_gates):
    circuit = random_circuit(16, n_gates)
    inputs = [Fp(random.randrange(1, Fp.field_modulus)) for _ in range(16)]

    with Timer(f"detect_cycle ({n_gates} gates)"):
        assert detect_cycle(circuit) is None

    with Timer(f"assign_layers ({n_gates} gates)"):
        layering = assign_layers(circuit)

    with Timer(f"eval_local ({n_gates} gates, depth {layering.depth})"):
        eval_local(circuit, inputs)


random.seed("artgc")
for n in [1 << 12, 1 << 14, 1 << 16]:
    run(n)
