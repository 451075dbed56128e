from zoneprof.dto import VmMode


def split_callstack(callstack, delimiter=";"):
    """Splits a stack dump like `f @ a.py:1;g @ a.py:2;` into frame identifiers."""
    if not callstack:
        return []
    return [frame for frame in callstack.split(delimiter) if frame]


class SampleAggregator:
    """Attributes the samples delivered by the sampler to the active zones.

    `statistics` maps zone ids to their `ZoneStatistics`; the aggregator
    only writes into existing entries.
    """

    def __init__(self, statistics, delimiter=";"):
        self._statistics = statistics
        self._delimiter = delimiter

    def record(self, zones, callstack, n_samples, vmstate):
        """Adds one sample event to every zone in `zones`.

        Every zone gets the mode counter and the count of every frame in
        `callstack` increased by `n_samples`, and its number of sample events
        increased by one. Frames appearing in the same stack are all counted,
        so the per-frame counts of a zone do not sum up to its total.

        Returns the number of ticks accounted for, 0 if no zone is active.
        """
        if not zones:
            return 0

        mode = VmMode.parse(vmstate)
        frames = split_callstack(callstack, self._delimiter) if mode.has_frames else []

        for zone_id in zones:
            zone = self._statistics[zone_id]
            zone.add_mode_samples(mode, n_samples)
            function_to_count = zone.function_to_count
            for frame in frames:
                function_to_count[frame] = function_to_count.get(frame, 0) + n_samples
            zone.n_samples += 1

        return n_samples
