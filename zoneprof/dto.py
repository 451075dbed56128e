from dataclasses import dataclass, field
from enum import Enum

from zoneprof.errors import UnknownModeError


class VmMode(Enum):
    """Execution mode reported by the sampler for a sample."""

    COMPILED = "N"
    INTERPRETED = "I"
    C_CODE = "C"
    JIT = "J"
    GC = "G"

    @classmethod
    def parse(cls, tag):
        try:
            return cls(tag)
        except ValueError:
            raise UnknownModeError(tag) from None

    @property
    def has_frames(self) -> bool:
        """Whether a sample in this mode carries a meaningful call stack."""
        return self in (VmMode.COMPILED, VmMode.INTERPRETED, VmMode.C_CODE)


@dataclass
class ZoneStatistics:
    """Accumulated samples for a zone."""

    n_samples: int = 0
    n_compiled_samples: int = 0
    n_interpreted_samples: int = 0
    n_c_code_samples: int = 0
    n_gc_samples: int = 0
    n_jit_samples: int = 0
    function_to_count: dict[str, int] = field(default_factory=dict)
    function_to_percentage: dict[str, float] = field(default_factory=dict)

    def add_mode_samples(self, mode: VmMode, n_samples: int):
        match mode:
            case VmMode.COMPILED:
                self.n_compiled_samples += n_samples
            case VmMode.INTERPRETED:
                self.n_interpreted_samples += n_samples
            case VmMode.C_CODE:
                self.n_c_code_samples += n_samples
            case VmMode.JIT:
                self.n_jit_samples += n_samples
            case VmMode.GC:
                self.n_gc_samples += n_samples

    @property
    def n_ticks(self) -> int:
        """Number of sampler ticks attributed to the zone, across all modes."""
        return (
            self.n_compiled_samples
            + self.n_interpreted_samples
            + self.n_c_code_samples
            + self.n_gc_samples
            + self.n_jit_samples
        )


@dataclass
class ZoneInterval:
    """Describes one closed activation of a zone."""

    start: float
    end: float
    n_samples: int


@dataclass
class ZoneTiming:
    """Wall-clock bookkeeping for a zone."""

    start_time: float | None = None
    duration: float = 0.0
    start_samples: int = 0
    intervals: list[ZoneInterval] = field(default_factory=list)


@dataclass
class ReportRow:
    """Describes a row in the report table."""

    percentage: str
    count: int
    name: str


@dataclass
class ZoneReport:
    """Describes the rendered statistics of a zone."""

    zone_name: str
    n_samples: int
    samples_per_second: int
    duration: float
    start_date: str
    gc_percentage: float
    n_gc_samples: int
    jit_percentage: float
    n_jit_samples: int
    rows: list[ReportRow] = field(default_factory=list)
    cutoff_row: ReportRow | None = None
