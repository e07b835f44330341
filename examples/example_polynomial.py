from artgc import Circuit, eval_local, eval_layers, check_acyclic
from artgc.ring import scalar_field

Fp = scalar_field("BN254")

# f(x, y) = (x + y)^3 + x * y
circuit = Circuit()
x = circuit.add_input()
y = circuit.add_input()

s = circuit.create_new_wire()
xy = circuit.create_new_wire()
s2 = circuit.create_new_wire()
s3 = circuit.create_new_wire()
out = circuit.create_new_wire()

circuit.add(x, y, s)
circuit.mul(x, y, xy)
circuit.mul(s, s, s2)
circuit.mul(s2, s, s3)
circuit.add(s3, xy, out)
circuit.mark_output(out)

circuit.is_valid()
check_acyclic(circuit)

print(circuit)
for i, layer in enumerate(eval_layers(circuit, [Fp(3), Fp(4)])):
    print(f"layer {i}:", {int(w): int(v) for w, v in layer.items()})

result = eval_local(circuit, [Fp(3), Fp(4)])
assert result == [7**3 + 12]
print("f(3, 4) =", int(result[0]))
