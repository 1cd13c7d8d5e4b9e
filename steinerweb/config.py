"""Configuration for the Steiner tree pipeline."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class SteinerConfig:
    """Knobs for :func:`steinerweb.steiner.solve`."""

    # Run the connectivity repair step after the frontier search
    repair_enabled: bool = True

    # Upper bound on repair passes; None repeats until connected or stuck
    max_repair_passes: Optional[int] = None

    # Rounds between DEBUG progress records during the search; 0 disables
    progress_log_interval: int = 1000

    def __post_init__(self) -> None:
        if self.max_repair_passes is not None and self.max_repair_passes < 0:
            raise ValueError(
                f"max_repair_passes must be >= 0 or None, got {self.max_repair_passes}"
            )
        if self.progress_log_interval < 0:
            raise ValueError(
                f"progress_log_interval must be >= 0, got {self.progress_log_interval}"
            )

    def should_log_progress(self, rounds: int) -> bool:
        """Whether a progress record is due after ``rounds`` completed rounds."""
        interval = self.progress_log_interval
        return interval > 0 and rounds > 0 and rounds % interval == 0


# Global configuration instance
DEFAULT_CONFIG = SteinerConfig()
