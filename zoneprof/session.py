"""Profiling session: the object application code pushes zones on.

Usage:
    session = Session(SignalSampler())
    session.push("update")
    # profiled code here
    session.pop()
    print(session.report())

The sampler needs to run for a few seconds to give accurate results.
"""

import logging
import threading
import time
from contextlib import contextmanager
from datetime import datetime

from zoneprof.aggregator import SampleAggregator
from zoneprof.config import ProfilerConfig
from zoneprof.dto import VmMode, ZoneStatistics
from zoneprof.emit_trace import emit_trace
from zoneprof.registry import ZoneRegistry
from zoneprof.report import build_zone_report, render_report
from zoneprof.sampler import ManualSampler
from zoneprof.zone_stack import ZoneStack

log = logging.getLogger(__name__)


class Session:
    """Owns all the state of one profiling session.

    Once the first zone is pushed the sampler runs until the process exits;
    samples taken while no zone is active are discarded.
    """

    def __init__(self, sampler=None, config=None, clock=time.perf_counter):
        self.config = config or ProfilerConfig()
        self._sampler = sampler or ManualSampler()
        self._clock = clock
        self._lock = threading.RLock()
        self._registry = ZoneRegistry()
        self._stack = ZoneStack(self._registry)
        self._statistics = {}  # zone id -> ZoneStatistics
        self._aggregator = SampleAggregator(self._statistics, self.config.frame_delimiter)
        self._run_i = 1
        self._is_running = False
        self._start_date = None
        self._start_time = None
        self.n_samples = 0

    @property
    def is_running(self):
        return self._is_running

    @property
    def start_date(self):
        return self._start_date

    @property
    def start_time(self):
        return self._start_time

    def push(self, name=None):
        """Adds a zone to the active zones, starting the sampler on the first call."""
        with self._lock:
            if name is None:
                name = self.config.run_name_format.format(self._run_i)
                self._run_i += 1
            if not isinstance(name, str):
                raise TypeError(f"Zone name has to be a string, got {type(name).__name__}")

            zone_id = self._registry.register_or_get(name)
            stats = self._statistics.setdefault(zone_id, ZoneStatistics())
            self._stack.push(zone_id, self._clock(), stats.n_samples)

            if not self._is_running:
                self._is_running = True
                self._start_date = datetime.now().strftime("%c")
                self._start_time = self._stack.timing(name).start_time
                self._sampler.start(self._sampling_callback)
                log.debug(f"Profiling session started on {self._start_date}")

    def pop(self):
        """Closes the most recently pushed zone. The sampler keeps running."""
        with self._lock:
            zone_id = self._stack.active()[-1] if len(self._stack) else None
            n_samples = self._statistics[zone_id].n_samples if zone_id is not None else 0
            return self._stack.pop(self._clock(), n_samples)

    @contextmanager
    def zone(self, name=None):
        """Context manager wrapping `push` and `pop`."""
        self.push(name)
        try:
            yield
        finally:
            self.pop()

    def _sampling_callback(self, thread, n_samples, vmstate):
        with self._lock:
            zones = self._stack.active()
            if not zones:
                return
            callstack = ""
            if VmMode.parse(vmstate).has_frames:
                callstack = self._sampler.dump_stack(thread, self.config.depth_limit)
            self.n_samples += self._aggregator.record(zones, callstack, n_samples, vmstate)

    def active_zones(self):
        """Names of the active zones, in push order."""
        with self._lock:
            return [self._registry.name_of(zone_id) for zone_id in self._stack.active()]

    def statistics(self, name):
        return self._statistics[self._zone_id(name)]

    def timing(self, name):
        self._zone_id(name)
        return self._stack.timing(name)

    def zone_names(self):
        return self._registry.names()

    def _zone_id(self, name):
        zone_id = self._registry.id_of(name)
        if zone_id is None:
            raise KeyError(f"Unknown zone `{name}`")
        return zone_id

    def report(self, name=None):
        """Returns the statistics of all zones, or only of `name`, as text."""
        with self._lock:
            names = self._registry.names() if name is None else [name]
            reports = [
                build_zone_report(
                    zone_name,
                    self.statistics(zone_name),
                    self._stack.timing(zone_name),
                    self._start_date,
                    self.config.cutoff_percentage,
                )
                for zone_name in names
            ]
            return render_report(reports)

    def write_trace(self, filename):
        """Writes the zone timeline as a Perfetto trace."""
        from zoneprof.perfetto_writer import PerfettoWriter

        with self._lock:
            writer = PerfettoWriter()
            for obj in emit_trace(self):
                writer.add(obj)
        writer.write(filename)
        log.debug(f"Wrote Perfetto trace to {filename}")
