import logging
import os
from dataclasses import dataclass

log = logging.getLogger(__name__)


@dataclass
class ProfilerConfig:
    """Settings of a profiling session.

    The sampling rate is not part of the configuration: the sampler always
    runs at the fastest rate it supports.
    """

    cutoff_percentage: float = 0.1
    frame_delimiter: str = ";"
    run_name_format: str = "Run #{}"
    depth_limit: int | None = None

    @classmethod
    def from_env(cls):
        """Builds a config, overriding defaults with `ZONEPROF_*` variables."""
        config = cls()
        cutoff = os.environ.get("ZONEPROF_CUTOFF")
        if cutoff:
            config.cutoff_percentage = float(cutoff)
        depth_limit = os.environ.get("ZONEPROF_DEPTH_LIMIT")
        if depth_limit:
            config.depth_limit = int(depth_limit)
        log.debug(f"Profiler config: {config}")
        return config
