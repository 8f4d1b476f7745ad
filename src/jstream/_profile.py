"""
Hot path profiling for the decoder.

Enabled by setting ``JSTREAM_PROFILE`` in the environment; compiled down to
no-op context managers otherwise (and always under ``python -O``). Input
length is unknown while streaming, so processed characters are measured as
the distance the cursor moved inside the profiled block.
"""

import os
import time
from dataclasses import dataclass
from typing import Any
from typing import Protocol

PROFILE_HOT_PATHS = __debug__ and "JSTREAM_PROFILE" in os.environ


class Positioned(Protocol):
    pos: int


@dataclass
class HotPathStats:
    """Statistics for profiling hot paths during decoding."""

    function_name: str
    call_count: int = 0
    total_time_ns: int = 0
    chars_processed: int = 0

    def record_call(self, duration_ns: int, chars: int = 0) -> None:
        """Records one call with its duration and characters consumed."""
        self.call_count += 1
        self.total_time_ns += duration_ns
        self.chars_processed += chars

    @property
    def mean_time_ns(self) -> float:
        return self.total_time_ns / self.call_count if self.call_count else 0.0


if PROFILE_HOT_PATHS:
    _hot_path_stats: dict[str, HotPathStats] = {}

    class ProfileContext:
        """Times a block and counts the characters the cursor moved over."""

        def __init__(self, func_name: str, cursor: Positioned | None = None):
            self.func_name = func_name
            self.cursor = cursor
            self.start_time = 0
            self.start_pos = 0

        def __enter__(self) -> "ProfileContext":
            if self.cursor is not None:
                self.start_pos = self.cursor.pos
            self.start_time = time.perf_counter_ns()
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            duration = time.perf_counter_ns() - self.start_time
            chars = 0
            if self.cursor is not None:
                chars = max(self.cursor.pos - self.start_pos, 0)
            stats = _hot_path_stats.setdefault(
                self.func_name, HotPathStats(self.func_name)
            )
            stats.record_call(duration, chars)

    def get_hot_path_stats() -> dict[str, HotPathStats]:
        """Returns current profiling statistics."""
        return _hot_path_stats.copy()

    def clear_hot_path_stats() -> None:
        """Clears profiling statistics."""
        _hot_path_stats.clear()

else:
    # Zero-cost in production
    class ProfileContext:  # type: ignore[no-redef]
        def __init__(
            self, func_name: str, cursor: Positioned | None = None
        ) -> None:
            pass

        def __enter__(self) -> "ProfileContext":
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            pass

    def get_hot_path_stats() -> dict[str, HotPathStats]:
        return {}

    def clear_hot_path_stats() -> None:
        pass
