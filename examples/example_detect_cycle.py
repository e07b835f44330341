from artgc import Circuit, CyclicPathError, check_acyclic, detect_cycle, eval_local

# gate0: c = a * b
# gate1: b = x + c  <- feeds back into gate0
circuit = Circuit()
a = circuit.add_input()
x = circuit.add_input()
b = circuit.create_new_wire()
c = circuit.create_new_wire()

circuit.mul(a, b, c)
circuit.add(x, c, b)
circuit.mark_output(c)

circuit.is_valid()
print("Cycle found at (gate, wire):", detect_cycle(circuit))

try:
    check_acyclic(circuit)
except CyclicPathError as exc:
    print(exc)

try:
    eval_local(circuit, [1, 2], validate=True)
except CyclicPathError:
    print("Evaluation refused for a cyclic circuit")
