import zoneprof.emit_dto as emit_dto

ZONES_PID = 0


def emit_trace(session):
    """Generates the emit DTO objects describing the zone timeline of `session`.

    Only closed activations are emitted; timestamps are in nanoseconds since
    the first push of the session.
    """
    track_emitter = _TrackEmitter()
    yield track_emitter.process_track()

    origin = session.start_time
    for zone_id, name in enumerate(session.zone_names(), 1):
        timing = session.timing(name)
        zone_uuid = track_emitter.next_uuid()
        yield emit_dto.ZoneTrack(track_uuid=zone_uuid, pid=ZONES_PID, tid=zone_id, zone_name=name)
        counter_uuid = track_emitter.next_uuid()
        yield track_emitter.counter_track(counter_uuid, f"{name} samples")

        for interval in timing.intervals:
            start = _to_ns(interval.start - origin)
            end = _to_ns(interval.end - origin)
            yield emit_dto.ZoneStart(track_uuid=zone_uuid, timestamp=start, name=name)
            yield emit_dto.ZoneEnd(track_uuid=zone_uuid, timestamp=end)
            yield emit_dto.CounterValue(track_uuid=counter_uuid, timestamp=end, value=interval.n_samples)


def _to_ns(seconds):
    return int(round(seconds * 1e9))


class _TrackEmitter:
    def __init__(self):
        self._track_uuid_gen = _track_id_gen()
        self.zones_track_uuid = next(self._track_uuid_gen)

    def process_track(self):
        """Emits the process track grouping all the zones."""
        return emit_dto.ProcessTrack(track_uuid=self.zones_track_uuid, pid=ZONES_PID, name="Profiler zones")

    def next_uuid(self):
        """Generates the next track uuid."""
        return next(self._track_uuid_gen)

    def counter_track(self, uuid, name):
        """Emits a counter track."""
        return emit_dto.CounterTrack(
            track_uuid=uuid,
            parent_track=self.zones_track_uuid,
            name=name,
        )


def _track_id_gen():
    """Generates unique track ids."""
    track_uuid = 1
    while True:
        yield track_uuid
        track_uuid += 1
