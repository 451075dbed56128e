import logging

log = logging.getLogger(__name__)


class ZoneRegistry:
    """Assigns a stable integer id to every zone name it sees."""

    def __init__(self):
        self._name_to_id = {}
        self._id_to_name = {}
        self._next_id = 1

    def register_or_get(self, name: str) -> int:
        """Returns the id of `name`, registering it first if it is new."""
        zone_id = self._name_to_id.get(name)
        if zone_id is None:
            zone_id = self._next_id
            self._next_id += 1
            self._name_to_id[name] = zone_id
            self._id_to_name[zone_id] = name
            log.debug(f"Registered zone `{name}` as #{zone_id}")
        return zone_id

    def id_of(self, name: str) -> int | None:
        return self._name_to_id.get(name)

    def name_of(self, zone_id: int) -> str:
        return self._id_to_name[zone_id]

    def names(self):
        """Zone names, in registration order."""
        return list(self._name_to_id)

    def __contains__(self, name):
        return name in self._name_to_id

    def __len__(self):
        return len(self._name_to_id)
