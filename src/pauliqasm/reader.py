"""Read operator terms from text.

Each non-blank line holds one term::

    <pauli-string> <coefficient> <parameter>

for example ``IXIZY 0.25 0``. The first term fixes the number of qubits;
every later term must have the same length. A parameter of 0 marks the term
as independent and is replaced by the term's position.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from pathlib import Path

from pauliqasm.errors import InputFormatError
from pauliqasm.operators import MAX_PARAMETER, OperatorRecord

logger = logging.getLogger(__name__)


def parse_operator_line(line: str, line_number: int) -> tuple[str, float, int]:
    """Split a line into its raw ``(pauli_string, coefficient, parameter)``.

    Raises:
        InputFormatError: If the line does not hold a string, a finite number
            and an integer.
    """
    tokens = line.split()
    if len(tokens) < 3:
        raise InputFormatError("Wrong format!", line_number)
    symbol_string, coef_token, param_token = tokens[:3]
    try:
        coefficient = float(coef_token)
        parameter = int(param_token)
    except ValueError:
        raise InputFormatError("Wrong format!", line_number) from None
    if not math.isfinite(coefficient):
        raise InputFormatError("Wrong format!", line_number)
    return symbol_string, coefficient, parameter


def check_operator(
    symbol_string: str,
    coefficient: float,
    parameter: int,
    qubit_count: int,
    line_number: int,
) -> None:
    """Validate one raw term against the register size and value ranges."""
    if not symbol_string:
        raise InputFormatError("No operator provided!", line_number)
    if len(symbol_string) != qubit_count:
        raise InputFormatError(
            "Non-matching length of string representation!", line_number
        )
    if coefficient == 0:
        raise InputFormatError("Zero coefficient!", line_number)
    if parameter < 0:
        raise InputFormatError("Negative parameter!", line_number)
    if parameter > MAX_PARAMETER:
        raise InputFormatError("Parameter out of bound!", line_number)


def read_operator_lines(lines: Iterable[str]) -> tuple[list[OperatorRecord], int]:
    """Parse and validate terms from an iterable of lines.

    Blank lines are skipped. Line numbers in errors refer to physical lines,
    while record positions count terms only.

    Returns:
        The records in input order and the number of qubits.
    """
    records: list[OperatorRecord] = []
    qubit_count = 0
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        symbol_string, coefficient, parameter = parse_operator_line(line, line_number)
        if not records:
            qubit_count = len(symbol_string)
        check_operator(symbol_string, coefficient, parameter, qubit_count, line_number)
        records.append(
            OperatorRecord.from_raw(
                len(records) + 1, symbol_string, coefficient, parameter
            )
        )
    logger.debug("read %d operators on %d qubits", len(records), qubit_count)
    return records, qubit_count


def read_operator_file(path: str | Path) -> tuple[list[OperatorRecord], int]:
    """Read terms from a text file. See :func:`read_operator_lines`."""
    text = Path(path).read_text(encoding="utf-8")
    return read_operator_lines(text.splitlines())
