"""Defaults, detection settings and logging setup."""

import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .errors import InvalidCutoffError

# Coordinates are binned in hundredths of Angstrom, so cutoffs have 0.01A precision
SCALE = 100

DEFAULT_CUTOFF = 8.0
DEFAULT_CONTACT_TYPE = "Ca"
DIRECTED_SEPARATOR = "/"


def validate_cutoff(cutoff: float) -> float:
    """Return ``cutoff`` as a float, raising if it can't define a grid.

    Raises:
        InvalidCutoffError: If cutoff is not a finite number > 0
    """
    try:
        value = float(cutoff)
    except (TypeError, ValueError):
        raise InvalidCutoffError(cutoff) from None
    if not math.isfinite(value) or value <= 0.0:
        raise InvalidCutoffError(cutoff)
    return value


def is_directed(contact_type: str) -> bool:
    """Directed contact types are pairs of atom subsets separated by '/'."""
    return DIRECTED_SEPARATOR in contact_type


@dataclass
class DetectionSettings:
    """Parameters for a contact detection run."""

    cutoff: float = DEFAULT_CUTOFF
    contact_type: str = DEFAULT_CONTACT_TYPE
    max_workers: int = 1

    @property
    def directed(self) -> bool:
        return is_directed(self.contact_type)

    def validate(self) -> "DetectionSettings":
        """Check the settings, raising InvalidCutoffError on a bad cutoff."""
        self.cutoff = validate_cutoff(self.cutoff)
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")
        return self


def setup_logging(
    verbose: bool = False, log_file: Optional[Union[str, Path]] = None
) -> logging.Logger:
    """Set up the package logger.

    Args:
        verbose: Log INFO messages to the console, otherwise only warnings
        log_file: Optional file receiving timestamped records

    Returns:
        The configured ``resgraph`` logger
    """
    logger = logging.getLogger("resgraph")

    # Remove any existing handlers
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(console_handler)
    logger.setLevel(logging.INFO if verbose else logging.WARNING)

    return logger
