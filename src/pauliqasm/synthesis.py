"""Gate synthesis for a single Pauli rotation term.

A term ``c * P`` with dependency parameter ``k`` is lowered to

1. a basis change on every qubit in the X or Y basis, mapping it onto Z,
2. a CNOT ladder from every qubit to the pivot (the highest qubit touched),
   which collects the parity of the string onto the pivot,
3. ``rz(m*c*$[k])`` on the pivot,
4. the mirrored ladder and the inverse basis changes.

The block is built inside-out: the center rotation comes first and every
non-pivot qubit wraps its ``(basis-in, cx)`` / ``(cx, basis-out)`` pair around
what has been accumulated so far. The pivot's own basis change is applied last
as the outermost layer, since a rotation on the pivot does not commute with
the CNOTs targeting it.
"""

from __future__ import annotations

import logging
from collections import deque

from pauliqasm.errors import EmptyOperator, InternalSynthesisInvariantViolation
from pauliqasm.operators import EncodedOperator, OperatorRecord

logger = logging.getLogger(__name__)

# (basis-change-in, basis-change-out) per basis; Z needs none.
BASIS_CHANGE: dict[str, tuple[str, str] | None] = {
    "X": ("ry(pi/2)", "ry(-pi/2)"),
    "Y": ("rx(-pi/2)", "rx(pi/2)"),
    "Z": None,
}

DEFAULT_ANGLE_MULTIPLIER = 0.5


def _qubit(index: int) -> str:
    """Register operand for a 1-based qubit index."""
    return f"q[{index - 1}]"


def _gate(name: str, *qubits: int) -> str:
    return f"{name} {', '.join(_qubit(q) for q in qubits)};"


def format_angle(multiplier: float, coefficient: float, parameter: int) -> str:
    """Symbolic angle of the center rotation, e.g. ``0.5*2.0*$[1]``."""
    return f"{float(multiplier)!r}*{float(coefficient)!r}*$[{parameter}]"


def select_pivot(encoded: EncodedOperator, position: int = 0) -> int:
    """Return the highest qubit index touched by ``encoded``.

    Raises:
        EmptyOperator: If the operator touches no qubit.
    """
    qubits = encoded.qubits
    if not qubits:
        raise EmptyOperator(position)
    return qubits[-1]


def _check_encoding(encoded: EncodedOperator, position: int) -> None:
    """Reject encodings the decoder can never produce.

    ``EncodedOperator`` holds exactly the X, Y and Z groupings, so a fourth
    grouping cannot occur.
    """
    qubits = encoded.qubits
    if len(set(qubits)) != len(qubits):
        raise InternalSynthesisInvariantViolation(
            "A qubit appears in more than one basis", position
        )
    for basis, indices in encoded.bases:
        if list(indices) != sorted(indices) or (indices and indices[0] < 1):
            raise InternalSynthesisInvariantViolation(
                f"Indices of basis {basis} are not ascending 1-based", position
            )


def synthesize_instructions(
    encoded: EncodedOperator,
    coefficient: float,
    parameter: int,
    *,
    angle_multiplier: float = DEFAULT_ANGLE_MULTIPLIER,
    position: int = 0,
) -> list[str]:
    """Build the gate sequence implementing one Pauli rotation.

    Args:
        encoded: Per-basis qubit indices of the Pauli string.
        coefficient: Coefficient of the term.
        parameter: Dependency parameter referenced as ``$[parameter]``.
        angle_multiplier: Scalar folded into the rotation angle.
        position: Position of the term, reported on failure.

    Returns:
        One OpenQASM instruction per entry, without trailing newlines.

    Raises:
        EmptyOperator: If ``encoded`` acts on no qubit.
        InternalSynthesisInvariantViolation: If ``encoded`` is malformed.
    """
    _check_encoding(encoded, position)
    pivot = select_pivot(encoded, position)

    prefix: deque[str] = deque()
    suffix: list[str] = []
    pivot_change: tuple[str, str] | None = None

    for basis, indices in encoded.bases:
        change = BASIS_CHANGE[basis]
        for q in indices:
            if q == pivot:
                pivot_change = change
                continue
            prefix.appendleft(_gate("cx", q, pivot))
            suffix.append(_gate("cx", q, pivot))
            if change is not None:
                prefix.appendleft(_gate(change[0], q))
                suffix.append(_gate(change[1], q))

    angle = format_angle(angle_multiplier, coefficient, parameter)
    instructions = [*prefix, _gate(f"rz({angle})", pivot), *suffix]

    if pivot_change is not None:
        instructions.insert(0, _gate(pivot_change[0], pivot))
        instructions.append(_gate(pivot_change[1], pivot))

    return instructions


def synthesize_term(
    record: OperatorRecord,
    *,
    angle_multiplier: float = DEFAULT_ANGLE_MULTIPLIER,
    encoded: EncodedOperator | None = None,
) -> str:
    """Decode and synthesize one record into its program text block.

    The block starts with a blank line and a provenance comment naming the
    record position (the term number, which skips blank input lines) and ends
    with a newline.
    """
    if encoded is None:
        encoded = record.encode()
    instructions = synthesize_instructions(
        encoded,
        record.coefficient,
        record.parameter,
        angle_multiplier=angle_multiplier,
        position=record.position,
    )
    logger.debug(
        "operator %d: %d instructions on %d qubits",
        record.position,
        len(instructions),
        encoded.weight,
    )
    body = "".join(f"{line}\n" for line in instructions)
    return f"\n// New operator from line {record.position}\n{body}"
