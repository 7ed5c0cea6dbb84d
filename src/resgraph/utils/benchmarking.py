# src/resgraph/utils/benchmarking.py

import time
import logging
from dataclasses import dataclass, field
from statistics import mean, median
from typing import List, Optional

logger = logging.getLogger(__name__)


@dataclass
class Timer:
    """Context manager timing a code block and logging it at DEBUG level."""

    name: str
    log: Optional[logging.Logger] = None
    start_time: float = field(default=0.0)
    end_time: float = field(default=0.0)

    def __enter__(self) -> "Timer":
        """Start timing when entering context."""
        self.start_time = time.perf_counter()
        self.end_time = 0.0
        return self

    def __exit__(self, *args) -> None:
        """Stop timing and report the elapsed time."""
        self.end_time = time.perf_counter()
        (self.log or logger).debug(f"{self.name} took {self.elapsed():.4f}s")

    def elapsed(self) -> float:
        """Get elapsed time in seconds."""
        if self.end_time == 0.0:
            return time.perf_counter() - self.start_time
        return self.end_time - self.start_time


@dataclass
class TimingStats:
    """Per-structure timings collected over a batch run."""

    name: str
    times: List[float] = field(default_factory=list)
    atoms_processed: int = 0

    def add_timing(self, elapsed: float, num_atoms: int = 0) -> None:
        """Add a timing measurement.

        Args:
            elapsed: Time taken in seconds
            num_atoms: Number of atoms in the processed structure
        """
        self.times.append(elapsed)
        self.atoms_processed += num_atoms

    @property
    def count(self) -> int:
        return len(self.times)

    @property
    def total_time(self) -> float:
        return sum(self.times)

    @property
    def avg_time(self) -> float:
        return mean(self.times) if self.times else 0.0

    @property
    def median_time(self) -> float:
        return median(self.times) if self.times else 0.0

    @property
    def atoms_per_second(self) -> float:
        total = self.total_time
        return self.atoms_processed / total if total > 0 else 0.0

    def __str__(self) -> str:
        if not self.times:
            return f"{self.name}: No timing data"

        summary = (
            f"{self.name}: {self.count} structures in {self.total_time:.2f}s "
            f"(avg {self.avg_time:.3f}s, median {self.median_time:.3f}s, "
            f"slowest {max(self.times):.3f}s)"
        )
        if self.atoms_processed:
            summary += f", {self.atoms_per_second:.0f} atoms/s"
        return summary
