"""Operator records and the Pauli string decoder.

An input term such as ``XIZ 2.0 0`` is held in an :class:`OperatorRecord`.
Decoding its Pauli string yields an :class:`EncodedOperator`, which lists the
1-based qubit indices acted on by each of the X, Y and Z bases:

    >>> decode_pauli_string("XIZY")
    EncodedOperator(x=(1,), y=(4,), z=(3,))

"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import stim

from pauliqasm.errors import UnsupportedSymbol

PAULI_SYMBOLS = frozenset("IXYZ")

# Largest dependency parameter that fits an unsigned 64-bit integer.
MAX_PARAMETER = 2**64 - 1


@dataclass(frozen=True)
class EncodedOperator:
    """Qubit indices (1-based, ascending) per non-identity Pauli basis."""

    x: tuple[int, ...] = ()
    y: tuple[int, ...] = ()
    z: tuple[int, ...] = ()

    @property
    def bases(self) -> tuple[tuple[str, tuple[int, ...]], ...]:
        """Basis groupings in synthesis order: X, then Y, then Z."""
        return (("X", self.x), ("Y", self.y), ("Z", self.z))

    @property
    def qubits(self) -> tuple[int, ...]:
        """All qubits acted on by the operator, ascending."""
        return tuple(sorted(self.x + self.y + self.z))

    @property
    def weight(self) -> int:
        """Number of non-identity factors."""
        return len(self.x) + len(self.y) + len(self.z)

    def to_pauli_string(self, num_qubits: int) -> str:
        """Rebuild the Pauli string over ``num_qubits`` qubits."""
        chars = ["I"] * num_qubits
        for basis, indices in self.bases:
            for q in indices:
                chars[q - 1] = basis
        return "".join(chars)


def decode_pauli_string(symbol_string: str, position: int = 0) -> EncodedOperator:
    """Decode a Pauli string into per-basis qubit indices.

    Args:
        symbol_string: Characters from ``IXYZ``, one per qubit. The leftmost
            character is qubit 1.
        position: Position of the originating term, reported on failure.

    Returns:
        The encoded operator.

    Raises:
        UnsupportedSymbol: If a character outside of ``IXYZ`` is present.
    """
    for i, ch in enumerate(symbol_string):
        if ch not in PAULI_SYMBOLS:
            raise UnsupportedSymbol(ch, i + 1, position)

    xs, zs = stim.PauliString(symbol_string).to_numpy()
    return EncodedOperator(
        x=_one_based(xs & ~zs),
        y=_one_based(xs & zs),
        z=_one_based(~xs & zs),
    )


def _one_based(mask: np.ndarray) -> tuple[int, ...]:
    return tuple(int(i) + 1 for i in np.flatnonzero(mask))


@dataclass(frozen=True)
class OperatorRecord:
    """One validated input term.

    Attributes:
        position: 1-based place of the term in the input sequence.
        symbol_string: Pauli string over ``IXYZ``.
        coefficient: Non-zero factor scaling the rotation angle.
        parameter: Dependency parameter. Terms sharing a parameter share the
            symbolic angle ``$[parameter]`` in the emitted program.
    """

    position: int
    symbol_string: str
    coefficient: float
    parameter: int

    @classmethod
    def from_raw(
        cls, position: int, symbol_string: str, coefficient: float, parameter: int
    ) -> OperatorRecord:
        """Build a record from raw input, mapping parameter 0 to ``position``."""
        return cls(
            position=position,
            symbol_string=symbol_string,
            coefficient=float(coefficient),
            parameter=int(parameter) or position,
        )

    @property
    def num_qubits(self) -> int:
        return len(self.symbol_string)

    def encode(self) -> EncodedOperator:
        """Decode this record's Pauli string."""
        return decode_pauli_string(self.symbol_string, self.position)
