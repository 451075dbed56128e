from perfetto.protos.perfetto.trace import perfetto_trace_pb2 as pb2

import zoneprof.emit_dto as dto

_SEQUENCE_ID = 1


class PerfettoWriter:
    """Knows how to write a perfetto trace file."""

    def __init__(self):
        self._trace = pb2.Trace()

    def write(self, filename):
        """Writes the trace to a file."""
        with open(filename, "wb") as f:
            f.write(self.serialize())

    def serialize(self):
        return self._trace.SerializeToString()

    def add(self, item):
        """Add an emit dto object to the trace."""
        if isinstance(item, dto.ProcessTrack):
            self.add_process_track(item)
        elif isinstance(item, dto.ZoneTrack):
            self.add_zone_track(item)
        elif isinstance(item, dto.CounterTrack):
            self.add_counter_track(item)
        elif isinstance(item, dto.ZoneStart):
            self.add_zone_start(item)
        elif isinstance(item, dto.ZoneEnd):
            self.add_zone_end(item)
        elif isinstance(item, dto.CounterValue):
            self.add_counter_value(item)
        else:
            raise ValueError(f"Unknown object {item}")

    def add_process_track(self, p: dto.ProcessTrack):
        """Adds a process track to the trace."""
        packet = self._trace.packet.add()
        packet.track_descriptor.uuid = p.track_uuid
        packet.track_descriptor.name = p.name
        packet.track_descriptor.process.pid = p.pid

    def add_zone_track(self, t: dto.ZoneTrack):
        """Adds the track of a zone, shown as a thread of the process track."""
        packet = self._trace.packet.add()
        packet.track_descriptor.uuid = t.track_uuid
        packet.track_descriptor.thread.pid = t.pid
        packet.track_descriptor.thread.tid = t.tid
        packet.track_descriptor.thread.thread_name = t.zone_name

    def add_counter_track(self, t: dto.CounterTrack):
        """Adds a counter track to the trace."""
        packet = self._trace.packet.add()
        packet.track_descriptor.uuid = t.track_uuid
        packet.track_descriptor.name = t.name
        if t.parent_track is not None:
            packet.track_descriptor.parent_uuid = t.parent_track
        packet.track_descriptor.counter.unit_name = "samples"

    def add_zone_start(self, z: dto.ZoneStart):
        """Adds a zone start event to the trace."""
        packet = self._trace.packet.add()
        packet.timestamp = z.timestamp
        packet.trusted_packet_sequence_id = _SEQUENCE_ID
        packet.track_event.type = pb2.TrackEvent.Type.TYPE_SLICE_BEGIN
        packet.track_event.track_uuid = z.track_uuid
        packet.track_event.name = z.name

    def add_zone_end(self, z: dto.ZoneEnd):
        """Adds a zone end event to the trace."""
        packet = self._trace.packet.add()
        packet.timestamp = z.timestamp
        packet.trusted_packet_sequence_id = _SEQUENCE_ID
        packet.track_event.type = pb2.TrackEvent.Type.TYPE_SLICE_END
        packet.track_event.track_uuid = z.track_uuid

    def add_counter_value(self, v: dto.CounterValue):
        """Adds a counter value to the trace."""
        packet = self._trace.packet.add()
        packet.timestamp = v.timestamp
        packet.trusted_packet_sequence_id = _SEQUENCE_ID
        packet.track_event.type = pb2.TrackEvent.Type.TYPE_COUNTER
        packet.track_event.track_uuid = v.track_uuid
        if isinstance(v.value, int):
            packet.track_event.counter_value = v.value
        elif isinstance(v.value, float):
            packet.track_event.double_counter_value = v.value
