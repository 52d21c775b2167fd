"""In-memory key/value store shared by every request handler."""
import threading
from contextlib import contextmanager


class RWLock:
    """Many readers or one writer. Waiting writers block new readers."""

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read(self):
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self):
        with self._cond:
            self._writers_waiting += 1
            while self._writer or self._readers:
                self._cond.wait()
            self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class KVStore:
    """String key -> string value mapping. Last write wins, nothing is ever deleted."""

    def __init__(self) -> None:
        self._data: dict[str, str] = {}
        self._lock = RWLock()

    def set(self, key: str, value: str) -> None:
        with self._lock.write():
            self._data[key] = value

    def get(self, key: str) -> tuple[str, bool]:
        with self._lock.read():
            if key in self._data:
                return self._data[key], True
        return "", False

    def get_all(self) -> dict[str, str]:
        """Return a copy of every pair; later writes never touch it."""
        with self._lock.read():
            return dict(self._data)

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._data)
