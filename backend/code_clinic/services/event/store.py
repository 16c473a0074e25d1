import threading
from contextlib import contextmanager
from typing import Iterator, Optional

from code_clinic.models import EventState


class StateStore:
    """Owner of the one authoritative ``EventState``.

    ``lock`` is re-entrant so a caller holding it (apply + broadcast) can
    still go through ``mutate()`` and ``snapshot()``.
    """

    def __init__(self, state: Optional[EventState] = None):
        self._state = state if state is not None else EventState.default()
        self.lock = threading.RLock()

    @property
    def state(self) -> EventState:
        return self._state

    @contextmanager
    def mutate(self) -> Iterator[EventState]:
        with self.lock:
            yield self._state

    def snapshot(self) -> dict:
        with self.lock:
            return self._state.to_dict()
