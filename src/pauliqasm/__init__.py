from pauliqasm.config import TranslationConfig
from pauliqasm.errors import (
    ConfigurationError,
    EmptyOperator,
    InputFormatError,
    InternalSynthesisInvariantViolation,
    PauliQasmError,
    QubitCountMismatch,
    TranslationError,
    UnsupportedSymbol,
)
from pauliqasm.operators import EncodedOperator, OperatorRecord, decode_pauli_string
from pauliqasm.program import (
    assemble_program,
    parse_circuit,
    program_header,
    records_to_qasm,
    write_program,
)
from pauliqasm.reader import read_operator_file, read_operator_lines
from pauliqasm.synthesis import select_pivot, synthesize_instructions, synthesize_term
from pauliqasm.translate import translate_record, translate_records

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "EmptyOperator",
    "EncodedOperator",
    "InputFormatError",
    "InternalSynthesisInvariantViolation",
    "OperatorRecord",
    "PauliQasmError",
    "QubitCountMismatch",
    "TranslationConfig",
    "TranslationError",
    "UnsupportedSymbol",
    "assemble_program",
    "decode_pauli_string",
    "parse_circuit",
    "program_header",
    "read_operator_file",
    "read_operator_lines",
    "records_to_qasm",
    "select_pivot",
    "synthesize_instructions",
    "synthesize_term",
    "translate_record",
    "translate_records",
    "write_program",
]
