"""Sampling facilities feeding the profiler.

A sampler calls `callback(thread, n_samples, vmstate)` periodically once
started. `thread` is an opaque handle that the sampler can turn into a stack
dump with `dump_stack`; `vmstate` is one of the `VmMode` tags.
"""

import gc
import logging
import signal
import threading

log = logging.getLogger(__name__)

# Smallest interval setitimer reliably honours.
FASTEST_INTERVAL = 0.001


class Sampler:
    """Interface of a sampling facility."""

    def start(self, callback):
        raise NotImplementedError

    def dump_stack(self, thread, depth_limit=None) -> str:
        raise NotImplementedError


def format_frame(frame):
    code = frame.f_code
    return f"{code.co_name} @ {code.co_filename}:{frame.f_lineno}"


class SignalSampler(Sampler):
    """Samples the main thread on every SIGPROF tick.

    The timer is armed once and never disarmed: sampling continues for the
    rest of the process. Samples taken while the garbage collector runs are
    reported with the `G` tag.
    """

    def __init__(self, interval=FASTEST_INTERVAL):
        self._interval = interval
        self._callback = None
        self._in_gc = False

    def start(self, callback):
        if self._callback is not None:
            return
        if threading.current_thread() is not threading.main_thread():
            raise RuntimeError("SignalSampler can only be started from the main thread")
        self._callback = callback
        gc.callbacks.append(self._on_gc)
        signal.signal(signal.SIGPROF, self._sample)
        signal.setitimer(signal.ITIMER_PROF, self._interval, self._interval)
        log.debug(f"Started SIGPROF sampler every {self._interval}s")

    def dump_stack(self, thread, depth_limit=None):
        frames = []
        frame = thread
        while frame is not None and (depth_limit is None or len(frames) < depth_limit):
            frames.append(format_frame(frame) + ";")
            frame = frame.f_back
        return "".join(frames)

    def _on_gc(self, phase, _info):
        self._in_gc = phase == "start"

    def _sample(self, _signum, frame):
        vmstate = "G" if self._in_gc else "I"
        self._callback(frame, 1, vmstate)


class ManualSampler(Sampler):
    """Sampler driven explicitly by the caller.

    `deliver` hands a ready-made stack dump to the profiler, the same way a
    timer-driven sampler would.
    """

    def __init__(self):
        self._callback = None
        self.start_count = 0

    @property
    def is_started(self):
        return self._callback is not None

    def start(self, callback):
        self._callback = callback
        self.start_count += 1

    def dump_stack(self, thread, depth_limit=None):
        if depth_limit is None:
            return thread
        return "".join(frame + ";" for frame in thread.split(";")[:depth_limit] if frame)

    def deliver(self, callstack, n_samples=1, vmstate="I"):
        if self._callback is not None:
            self._callback(callstack, n_samples, vmstate)
