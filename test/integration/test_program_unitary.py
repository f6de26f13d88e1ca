"""Check complete programs against the product of their Pauli rotations.

Every term ``c * P`` with parameter ``k`` is expected to implement
``exp(-i * m * c * theta_k / 2 * s * P)``, where ``s`` is the sign picked up
from the basis changes. Terms are applied in input order.
"""

from test.helpers.gate_matrices import pauli_rotation, qasm_unitary

import numpy as np
import pytest

from pauliqasm.config import TranslationConfig
from pauliqasm.program import records_to_qasm
from pauliqasm.reader import read_operator_lines


def _expected_unitary(records, num_qubits, params, multiplier):
    u = np.eye(2**num_qubits, dtype=complex)
    for r in records:
        sign = (-1) ** sum(p in "XY" for p in r.symbol_string)
        theta = multiplier * r.coefficient * params[r.parameter]
        u = pauli_rotation(r.symbol_string, sign * theta) @ u
    return u


@pytest.mark.parametrize("format_version", [2, 3])
@pytest.mark.parametrize("multiplier", [0.5, 1.3])
def test_hamiltonian_program(format_version: int, multiplier: float):
    lines = [
        "XXII 0.5 0",
        "IYYI -0.25 1",
        "ZIIZ 1.5 0",
        "IXZY 0.75 1",
        "YIIX -1.0 2",
    ]
    records, num_qubits = read_operator_lines(lines)
    params = {1: 0.3, 2: -0.8, 3: 1.1, 4: 0.45, 5: 2.0}
    program = records_to_qasm(
        records,
        num_qubits,
        TranslationConfig(format_version=format_version, angle_multiplier=multiplier),
    )
    u = qasm_unitary(program, num_qubits, params)
    assert np.allclose(u, _expected_unitary(records, num_qubits, params, multiplier))


def test_random_terms():
    rng = np.random.default_rng(1234)
    num_qubits = 4
    lines = []
    for _ in range(12):
        chars = rng.choice(list("IXYZ"), size=num_qubits)
        chars[rng.integers(num_qubits)] = rng.choice(list("XYZ"))
        coefficient = rng.choice([-1, 1]) * rng.uniform(0.1, 2)
        lines.append(f"{''.join(chars)} {coefficient:.3f} 0")
    records, _ = read_operator_lines(lines)
    params = {r.parameter: float(rng.uniform(-1, 1)) for r in records}
    program = records_to_qasm(records, num_qubits)
    u = qasm_unitary(program, num_qubits, params)
    assert np.allclose(u, _expected_unitary(records, num_qubits, params, 0.5))
