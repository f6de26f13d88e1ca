from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from pauliqasm.config import SUPPORTED_FORMAT_VERSIONS, TranslationConfig
from pauliqasm.errors import ConfigurationError
from pauliqasm.operators import OperatorRecord
from pauliqasm.reader import read_operator_file
from pauliqasm.synthesis import DEFAULT_ANGLE_MULTIPLIER
from pauliqasm.translate import translate_records

logger = logging.getLogger(__name__)

_HEADERS = {
    2: 'OPENQASM 2.0;\ninclude "qelib1.inc";\nqreg q[{n}];\ncreg c[{n}];\n',
    3: 'OPENQASM 3.0;\ninclude "stdgates.inc";\nqubit[{n}] q;\nbit[{n}] c;\n',
}


def program_header(qubit_count: int, format_version: int = 2) -> str:
    """OpenQASM header declaring ``q`` and ``c`` registers of ``qubit_count``.

    Args:
        qubit_count: Size of the quantum and of the classical register.
        format_version: 2 for OpenQASM 2.0, 3 for OpenQASM 3.0.
    """
    if format_version not in SUPPORTED_FORMAT_VERSIONS:
        raise ConfigurationError(
            f"Unsupported OpenQASM version {format_version!r}, "
            f"expected one of {SUPPORTED_FORMAT_VERSIONS}"
        )
    return _HEADERS[format_version].format(n=qubit_count)


def assemble_program(
    blocks: Iterable[str], qubit_count: int, format_version: int = 2
) -> str:
    """Concatenate the header and the already ordered term blocks."""
    return program_header(qubit_count, format_version) + "".join(blocks)


def records_to_qasm(
    records: Sequence[OperatorRecord],
    qubit_count: int,
    config: TranslationConfig | None = None,
) -> str:
    """Translate operator records into a complete OpenQASM program.

    Args:
        records: Validated operator records.
        qubit_count: Register size shared by all records.
        config: Translation options. Defaults to ``TranslationConfig()``.

    Returns:
        The program text. Nothing is returned if any term fails; the failure
        is raised instead.
    """
    if config is None:
        config = TranslationConfig()
    blocks = translate_records(records, qubit_count, config)
    logger.info(
        "assembled %d operators on %d qubits (OpenQASM %d)",
        len(blocks),
        qubit_count,
        config.format_version,
    )
    return assemble_program(blocks, qubit_count, config.format_version)


def write_program(program: str, path: str | Path) -> None:
    """Write program text to ``path`` as UTF-8."""
    Path(path).write_text(program, encoding="utf-8")
    logger.info("wrote program to %s", path)


def parse_circuit(
    path: str | Path,
    *,
    format_version: int = 2,
    output_path: str | Path | None = None,
    angle_multiplier: float | None = None,
    parallel: bool = True,
    max_workers: int | None = None,
) -> str:
    """Read an operator file and translate it into an OpenQASM program.

    Args:
        path: Input file with one ``<pauli-string> <coefficient> <parameter>``
            term per line.
        format_version: 2 for OpenQASM 2.0, 3 for OpenQASM 3.0.
        output_path: If given, the program is also written to this file.
        angle_multiplier: Scalar folded into every rotation angle. None keeps
            the default of 0.5.
        parallel: Translate terms on a thread pool.
        max_workers: Upper bound on worker threads.

    Returns:
        The program text.
    """
    config = TranslationConfig(
        format_version=format_version,
        angle_multiplier=(
            DEFAULT_ANGLE_MULTIPLIER if angle_multiplier is None else angle_multiplier
        ),
        parallel=parallel,
        max_workers=max_workers,
        output_path=output_path,
    )
    records, qubit_count = read_operator_file(path)
    program = records_to_qasm(records, qubit_count, config)
    if config.output_path is not None:
        write_program(program, config.output_path)
    return program
