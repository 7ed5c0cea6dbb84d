# src/resgraph/services/batch_service.py
"""
Batch computation of contact graphs for many structures.

Structures share no state, so they are processed in worker processes when
more than one worker is requested.
"""

import logging
import os
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

from tqdm import tqdm

from ..config import DetectionSettings
from ..domain.implementations.grid_contact_detector import GridContactDetector
from ..domain.interfaces.coordinate_source import CoordinateSource
from ..domain.models.contact_graph import ContactGraph
from ..utils.benchmarking import TimingStats

logger = logging.getLogger(__name__)


def process_structure(
    args: Tuple[str, CoordinateSource, str, float],
) -> Dict[str, Any]:
    """Compute the contact graph of a single structure.

    Args:
        args: Tuple containing (structure_id, source, contact_type, cutoff)

    Returns:
        Dictionary with the structure id, the graph or the error, and timing
    """
    structure_id, source, contact_type, cutoff = args
    start = time.perf_counter()
    try:
        graph = GridContactDetector().detect(source, contact_type, cutoff)
        return {
            "structure_id": structure_id,
            "success": True,
            "graph": graph,
            "elapsed": time.perf_counter() - start,
            "num_atoms": len(source) if hasattr(source, "__len__") else 0,
        }
    except Exception as e:
        return {
            "structure_id": structure_id,
            "success": False,
            "error": str(e),
            "elapsed": time.perf_counter() - start,
        }


@dataclass
class BatchResult:
    """Graphs and failures of a batch run."""

    graphs: Dict[str, ContactGraph] = field(default_factory=dict)
    errors: Dict[str, str] = field(default_factory=dict)
    timings: TimingStats = field(default_factory=lambda: TimingStats("contact graphs"))

    @property
    def successful(self) -> int:
        return len(self.graphs)

    @property
    def failed(self) -> int:
        return len(self.errors)


class BatchContactService:
    """Build contact graphs for a collection of structures."""

    def __init__(self, settings: Optional[DetectionSettings] = None, progress: bool = True):
        """
        Initialize the batch service.

        Args:
            settings: Contact type, cutoff and number of worker processes
            progress: Show a tqdm progress bar
        """
        self.settings = (settings or DetectionSettings()).validate()
        self.progress = progress

    def run(self, structures: Mapping[str, CoordinateSource]) -> BatchResult:
        """
        Compute the contact graph of every structure.

        Args:
            structures: Structure id to structure view

        Returns:
            BatchResult with graphs keyed by structure id and per-structure errors
        """
        tasks = [
            (structure_id, source, self.settings.contact_type, self.settings.cutoff)
            for structure_id, source in structures.items()
        ]
        result = BatchResult()
        if not tasks:
            return result

        num_processes = min(self.settings.max_workers, os.cpu_count() or 1, len(tasks))
        logger.info(
            f"Computing {self.settings.contact_type} graphs at {self.settings.cutoff}A "
            f"for {len(tasks)} structures using {num_processes} process(es)"
        )

        with tqdm(
            total=len(tasks), desc="Contact graphs", disable=not self.progress
        ) as pbar:
            if num_processes == 1:
                for task in tasks:
                    self._collect(process_structure(task), result)
                    pbar.update(1)
            else:
                with ProcessPoolExecutor(max_workers=num_processes) as executor:
                    futures = [executor.submit(process_structure, t) for t in tasks]
                    for future in as_completed(futures):
                        self._collect(future.result(), result)
                        pbar.update(1)

        logger.info(
            f"Batch complete. Successful: {result.successful}, Failed: {result.failed}"
        )
        logger.debug(str(result.timings))
        return result

    @staticmethod
    def _collect(outcome: Dict[str, Any], result: BatchResult) -> None:
        structure_id = outcome["structure_id"]
        if outcome["success"]:
            result.graphs[structure_id] = outcome["graph"]
            result.timings.add_timing(outcome["elapsed"], outcome["num_atoms"])
        else:
            result.errors[structure_id] = outcome["error"]
            logger.error(f"Failed to process {structure_id}: {outcome['error']}")
