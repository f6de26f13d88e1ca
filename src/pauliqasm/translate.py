"""Translate many operator records concurrently.

Every record is decoded and synthesized independently. Finished blocks are
stored under the record's position, so the result order is the input order no
matter which term finishes first. The first failing term aborts the whole
translation: pending terms are cancelled, running terms no longer store their
result, and the failure is re-raised to the caller.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed

from pauliqasm.config import TranslationConfig
from pauliqasm.errors import QubitCountMismatch
from pauliqasm.operators import OperatorRecord
from pauliqasm.synthesis import DEFAULT_ANGLE_MULTIPLIER, synthesize_term

logger = logging.getLogger(__name__)


def translate_record(
    record: OperatorRecord,
    qubit_count: int,
    *,
    angle_multiplier: float = DEFAULT_ANGLE_MULTIPLIER,
) -> str:
    """Translate a single record into its program text block.

    Raises:
        QubitCountMismatch: If the record's string length is not ``qubit_count``.
        UnsupportedSymbol: If the Pauli string has a character outside ``IXYZ``.
        EmptyOperator: If the Pauli string only holds identities.
    """
    if record.num_qubits != qubit_count:
        raise QubitCountMismatch(record.num_qubits, qubit_count, record.position)
    return synthesize_term(record, angle_multiplier=angle_multiplier)


def translate_records(
    records: Sequence[OperatorRecord],
    qubit_count: int,
    config: TranslationConfig | None = None,
) -> list[str]:
    """Translate all records and return their blocks in ascending position order.

    Args:
        records: Validated operator records with unique positions.
        qubit_count: Register size every record must match.
        config: Translation options. Defaults to ``TranslationConfig()``.

    Returns:
        One text block per record, ordered by position.

    Raises:
        TranslationError: The first per-term failure that was observed.
        ValueError: If two records share a position.
    """
    if config is None:
        config = TranslationConfig()

    positions = [r.position for r in records]
    if len(set(positions)) != len(positions):
        raise ValueError("Operator records must have unique positions")

    results: dict[int, str] = {}

    if not config.parallel:
        for record in records:
            results[record.position] = translate_record(
                record, qubit_count, angle_multiplier=config.angle_multiplier
            )
        return [results[p] for p in sorted(results)]

    lock = threading.Lock()
    failed = threading.Event()

    def work(record: OperatorRecord) -> None:
        if failed.is_set():
            return
        block = translate_record(
            record, qubit_count, angle_multiplier=config.angle_multiplier
        )
        with lock:
            if not failed.is_set():
                results[record.position] = block

    with ThreadPoolExecutor(max_workers=config.max_workers) as executor:
        logger.debug(
            "translating %d operators (max_workers=%s)",
            len(records),
            config.max_workers,
        )
        futures = [executor.submit(work, record) for record in records]
        for future in as_completed(futures):
            try:
                future.result()
            except Exception as exc:
                failed.set()
                for f in futures:
                    f.cancel()
                logger.info("translation aborted: %s", exc)
                raise

    return [results[p] for p in sorted(results)]
