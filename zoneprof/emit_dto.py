from dataclasses import dataclass


@dataclass
class ProcessTrack:
    """Describes a process track in a profiling trace."""

    track_uuid: int
    pid: int
    name: str


@dataclass
class ZoneTrack:
    """Describes the track holding the activations of a zone."""

    track_uuid: int
    pid: int
    tid: int
    zone_name: str


@dataclass
class CounterTrack:
    """Describes a track for counter."""

    track_uuid: int
    parent_track: int
    name: str


@dataclass
class ZoneStart:
    """Describes the start of a zone activation."""

    track_uuid: int
    timestamp: int
    name: str


@dataclass
class ZoneEnd:
    """Describes the end of a zone activation."""

    track_uuid: int
    timestamp: int


@dataclass
class CounterValue:
    """Describes a value for a counter."""

    track_uuid: int
    timestamp: int
    value: int | float
