"""
Sampling configuration.
"""

from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from typing import List, Optional
import numpy as np

from .sampling import spawn_rngs


@dataclass
class SamplingSettings:
    """Configuration for random streams used by sampling helpers."""
    seed: Optional[int] = None  # None = OS entropy
    num_streams: int = 0  # 0 = one per CPU
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.num_streams < 0:
            raise ValueError(f"num_streams must be >= 0, got {self.num_streams}")
        if self.num_streams == 0:
            self.num_streams = os.cpu_count() or 4
        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level: {self.log_level}")

    def create_generators(self) -> List[np.random.Generator]:
        """Create one independent generator per stream."""
        return spawn_rngs(self.seed, self.num_streams)
