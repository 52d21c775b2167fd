import logging

from Info_app.realtime import Broadcaster
from Info_app.schemas import Notification
from Info_app.store import KVStore

log = logging.getLogger(__name__)


class InfoService:
    """Store plus broadcaster: every write is stored, then announced once."""

    def __init__(self, store: KVStore, broadcaster: Broadcaster):
        self.store = store
        self.broadcaster = broadcaster

    def set(self, key: str, value: str) -> int:
        self.store.set(key, value)
        # store lock is already released here, so a notified reader can always get() the value
        payload = Notification(key=key, value=value).model_dump_json()
        delivered = self.broadcaster.broadcast(payload)
        log.debug("set %r -> notified %d subscriber(s)", key, delivered)
        return delivered

    def get(self, key: str) -> tuple[str, bool]:
        return self.store.get(key)

    def get_all(self) -> dict[str, str]:
        return self.store.get_all()
