class ProfilerError(Exception):
    """base class for all errors raised by the zone profiler."""


class DuplicateZoneError(ProfilerError):
    """a zone was pushed while a zone with the same name is still active."""

    def __init__(self, zone_name: str):
        self.zone_name = zone_name
        super().__init__(
            f"Zone `{zone_name}` is already active, each active zone name has to be unique. "
            f"Pop it first, or call `push()` without a name to have one chosen automatically"
        )


class EmptyStackError(ProfilerError):
    """pop was called while no zone is active."""

    def __init__(self):
        super().__init__("Trying to pop, but no zone is active. Every `pop()` needs a matching `push()`")


class UnknownModeError(ProfilerError):
    """the sampling facility reported an execution mode outside the known set."""

    def __init__(self, vmstate):
        self.vmstate = vmstate
        super().__init__(f"Unhandled execution mode `{vmstate}` reported by the sampler, expected one of N, I, C, J, G")
