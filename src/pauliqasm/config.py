from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path

from pauliqasm.errors import ConfigurationError
from pauliqasm.synthesis import DEFAULT_ANGLE_MULTIPLIER

SUPPORTED_FORMAT_VERSIONS = (2, 3)


@dataclass(frozen=True)
class TranslationConfig:
    """Options controlling how operator records become an OpenQASM program.

    Attributes:
        format_version: OpenQASM dialect of the header, 2 or 3.
        angle_multiplier: Scalar folded into every center rotation angle.
        parallel: Translate terms on a thread pool. When False, terms are
            translated one after another; the output is identical.
        max_workers: Upper bound on worker threads. None lets the executor
            pick a default based on the available CPUs.
        output_path: Optional file the program is written to.
    """

    format_version: int = 2
    angle_multiplier: float = DEFAULT_ANGLE_MULTIPLIER
    parallel: bool = True
    max_workers: int | None = None
    output_path: str | Path | None = None

    def __post_init__(self):
        if self.format_version not in SUPPORTED_FORMAT_VERSIONS:
            raise ConfigurationError(
                f"Unsupported OpenQASM version {self.format_version!r}, "
                f"expected one of {SUPPORTED_FORMAT_VERSIONS}"
            )
        if not math.isfinite(self.angle_multiplier):
            raise ConfigurationError(
                f"angle_multiplier must be finite, got {self.angle_multiplier!r}"
            )
        if self.max_workers is not None and self.max_workers < 1:
            raise ConfigurationError(
                f"max_workers must be positive, got {self.max_workers}"
            )
