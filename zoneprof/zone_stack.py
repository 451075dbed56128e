from zoneprof.dto import ZoneInterval, ZoneTiming
from zoneprof.errors import DuplicateZoneError, EmptyStackError


class ZoneStack:
    """Keeps track of the zones that are currently measured, and for how long.

    All the zones in the stack are active at the same time; the order only
    matters for `pop`, which closes the most recently pushed zone.
    """

    def __init__(self, registry):
        self._registry = registry
        self._active = []  # zone ids, in push order
        self._timings = {}  # zone name -> ZoneTiming

    def push(self, zone_id, now, n_samples=0):
        """Activates `zone_id` at time `now`.

        `n_samples` is the number of samples the zone had so far; it is used to
        count the samples taken during this activation.
        """
        name = self._registry.name_of(zone_id)
        if self.is_active(zone_id):
            raise DuplicateZoneError(name)

        timing = self._timings.setdefault(name, ZoneTiming())
        if timing.start_time is None:
            timing.start_time = now
            timing.start_samples = n_samples
        self._active.append(zone_id)

    def pop(self, now, n_samples=0):
        """Closes the most recently pushed zone and returns its name."""
        if not self._active:
            raise EmptyStackError()

        zone_id = self._active.pop()
        name = self._registry.name_of(zone_id)
        timing = self._timings[name]
        timing.duration += now - timing.start_time
        timing.intervals.append(
            ZoneInterval(
                start=timing.start_time,
                end=now,
                n_samples=n_samples - timing.start_samples,
            )
        )
        timing.start_time = None
        return name

    def active(self):
        """Returns a snapshot of the active zone ids."""
        return tuple(self._active)

    def is_active(self, zone_id):
        return zone_id in self._active

    def timing(self, name):
        return self._timings[name]

    def __len__(self):
        return len(self._active)
