"""Exceptions raised while reading and translating Pauli operator terms."""

from __future__ import annotations


class PauliQasmError(Exception):
    """Base class for all errors raised by pauliqasm."""


class ConfigurationError(PauliQasmError, ValueError):
    """Raised for an invalid :class:`pauliqasm.config.TranslationConfig`."""


class InputFormatError(PauliQasmError, ValueError):
    """Raised by the reader when an input line cannot become an operator record.

    Attributes:
        line: 1-based line number in the input.
        message: Description of the problem, without the line prefix.
    """

    def __init__(self, message: str, line: int):
        self.message = message
        self.line = line
        super().__init__(f"line {line}: {message}")


class TranslationError(PauliQasmError):
    """A single term failed to decode or synthesize.

    Attributes:
        position: Position of the failing term in the input sequence.
        message: Description of the problem, without the position prefix.
    """

    def __init__(self, message: str, position: int):
        self.message = message
        self.position = position
        super().__init__(f"operator {position}: {message}")


class UnsupportedSymbol(TranslationError, ValueError):
    """A character outside of ``IXYZ`` was found in a Pauli string."""

    def __init__(self, symbol: str, qubit: int, position: int):
        self.symbol = symbol
        self.qubit = qubit
        super().__init__(
            f"Unsupported character instruction {symbol!r} at qubit {qubit}",
            position,
        )


class EmptyOperator(TranslationError, ValueError):
    """The Pauli string acts on no qubit (all identities)."""

    def __init__(self, position: int):
        super().__init__("Operator does not act on any qubit", position)


class QubitCountMismatch(TranslationError, ValueError):
    """A Pauli string does not match the register size of the program."""

    def __init__(self, length: int, qubit_count: int, position: int):
        self.length = length
        self.qubit_count = qubit_count
        super().__init__(
            f"Operator acts on {length} qubits but the register has {qubit_count}",
            position,
        )


class InternalSynthesisInvariantViolation(TranslationError, RuntimeError):
    """The synthesizer saw an encoded operator it can never legally receive."""
