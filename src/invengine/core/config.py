"""Runtime configuration for engine runs."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class EngineConfig:
    """Options shared by the command-line drivers.

    ``check_invariants`` follows the interpreter's debug flag by default, so
    running Python with ``-O`` switches the partition checks off.
    """

    check_invariants: bool = __debug__
    collect_stats: bool = False
    window_size: int = 3
