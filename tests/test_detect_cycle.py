import pytest

from artgc import Circuit, GateType, WireId, CyclicPathError
from artgc.detect_cycle import build_connections, detect_cycle, check_acyclic


def test_circuit_with_no_cycles():
    #
    #       `out2`
    #         │
    #       ┌───┐
    #       │ * │ gate1
    #       └───┘
    #   ┌────┘ └───────┐
    #   │              │ `out1`
    # `in3`          ┌───┐
    #                │ + │ gate0
    #                └───┘
    #            ┌────┘ └────┐
    #            │           │
    #          `in1`       `in2`
    #
    circuit = Circuit()

    in1 = circuit.create_new_wire()
    in2 = circuit.create_new_wire()
    out1 = circuit.create_new_wire()
    circuit.add_gate(GateType.ADD, in1, in2, out1)

    in3 = circuit.create_new_wire()
    out2 = circuit.create_new_wire()
    circuit.add_gate(GateType.MUL, in3, out1, out2)

    circuit.mark_input(in1)
    circuit.mark_input(in2)
    circuit.mark_input(in3)
    circuit.mark_output(out2)

    assert detect_cycle(circuit) is None
    assert check_acyclic(circuit)


def test_diamond_is_not_a_cycle():

    circuit = Circuit()
    in0 = circuit.add_input()
    in1 = circuit.add_input()
    a, b, c, d = [circuit.create_new_wire() for _ in range(4)]

    circuit.add(in0, in1, a)
    circuit.mul(a, in0, b)
    circuit.add(a, in1, c)
    circuit.mul(b, c, d)
    circuit.mark_output(d)

    assert detect_cycle(circuit) is None


def test_circuit_with_a_cycle():
    #
    #       `out`
    #         ├──────────────┐
    #       ┌───┐            │
    #       │ * │ gate0      │
    #       └───┘            │
    #   ┌────┘ └───────┐     │
    # `in1`          ┌───┐   │
    #          gate1 │ + │   │
    #                └───┘   │
    #           ┌─────┘ └────┘
    #         `in2`
    #
    circuit = Circuit()

    x1 = circuit.create_new_wire()
    y1 = circuit.create_new_wire()
    out1 = circuit.create_new_wire()
    circuit.add_gate(GateType.MUL, x1, y1, out1)

    x2 = circuit.create_new_wire()
    circuit.add_gate(GateType.ADD, x2, out1, y1)

    circuit.mark_input(x1)
    circuit.mark_input(x2)
    circuit.mark_output(out1)

    assert detect_cycle(circuit) == (0, y1)


def test_circuit_with_a_cycle_2():
    #
    #       `out0`         `out1`
    #          │     ┌───────┼──────────────┐
    #        ┌───┐   │     ┌───┐            │
    #  gate0 │ + │   │     │ + │ gate1      │
    #        └───┘   │     └───┘            │
    #    ┌────┘ └────┘ ┌────┘ └───────┐     │
    #  `in0`           │       `mid0` │     │
    #                `in1`          ┌───┐   │
    #                         gate2 │ + │   │
    #                               └───┘   │
    #                          ┌─────┘ └────┘
    #                        `in2`
    #
    circuit = Circuit()

    in0 = circuit.create_new_wire()
    in1 = circuit.create_new_wire()
    in2 = circuit.create_new_wire()
    mid0 = circuit.create_new_wire()
    out0 = circuit.create_new_wire()
    out1 = circuit.create_new_wire()

    circuit.add_gate(GateType.ADD, in0, out1, out0)
    circuit.add_gate(GateType.ADD, in1, mid0, out1)
    circuit.add_gate(GateType.ADD, in2, out1, mid0)

    circuit.mark_input(in0)
    circuit.mark_input(in1)
    circuit.mark_input(in2)
    circuit.mark_output(out0)
    circuit.mark_output(out1)

    gate_id, wire_id = detect_cycle(circuit)

    assert gate_id in (1, 2)
    assert wire_id in (mid0, out1)

    with pytest.raises(CyclicPathError) as exc_info:
        check_acyclic(circuit)

    assert exc_info.value.gate_id == gate_id
    assert exc_info.value.wire_id == wire_id


def test_gate_feeding_itself():

    circuit = Circuit()
    x = circuit.add_input()
    out = circuit.add_output()
    circuit.add(x, out, out)

    assert detect_cycle(circuit) == (0, out)


def test_cycle_unreachable_from_inputs():

    circuit = Circuit()
    x = circuit.add_input()
    out = circuit.add_output()
    p = circuit.create_new_wire()
    q = circuit.create_new_wire()

    circuit.add(x, x, out)
    circuit.mul(p, p, q)
    circuit.mul(q, q, p)

    assert detect_cycle(circuit) == (1, p)


def test_long_chain_does_not_hit_recursion_limit():

    circuit = Circuit()
    x = circuit.add_input()
    one = circuit.add_input()

    prev = x
    for _ in range(5000):
        nxt = circuit.create_new_wire()
        circuit.add(prev, one, nxt)
        prev = nxt
    circuit.mark_output(prev)

    assert detect_cycle(circuit) is None


def test_build_connections():

    circuit = Circuit()
    x = circuit.add_input()
    y = circuit.add_input()
    z = circuit.create_new_wire()
    out = circuit.add_output()

    circuit.add(x, y, z)
    circuit.mul(z, z, out)

    connections = build_connections(circuit)

    assert connections[x].to_ids == [0]
    assert connections[x].from_id is None
    assert connections[z].to_ids == [1, 1]
    assert connections[z].from_id == 0
    assert connections[out].to_ids == []
    assert connections[out].from_id == 1
    assert connections[WireId(3)] is connections[out]
