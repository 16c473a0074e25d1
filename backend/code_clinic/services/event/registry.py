import threading
from typing import Dict, Hashable, List


class ConnectionRegistry:
    """Currently connected clients, in connect order."""

    def __init__(self):
        self._clients: Dict[Hashable, None] = {}
        self._lock = threading.Lock()

    def add(self, client: Hashable) -> None:
        with self._lock:
            self._clients[client] = None

    def remove(self, client: Hashable) -> None:
        with self._lock:
            self._clients.pop(client, None)

    def snapshot(self) -> List[Hashable]:
        # Broadcast iterates this copy so connects/disconnects can interleave
        with self._lock:
            return list(self._clients)

    def __contains__(self, client: Hashable) -> bool:
        with self._lock:
            return client in self._clients

    def __len__(self) -> int:
        with self._lock:
            return len(self._clients)
