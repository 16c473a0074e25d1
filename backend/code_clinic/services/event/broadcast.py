import json
import logging
from typing import Any, Callable, Hashable, Optional

from .actions import Action, ActionDecodeError, decode_message
from .dispatcher import ActionDispatcher
from .registry import ConnectionRegistry
from .store import StateStore

STATE_UPDATE = 'stateUpdate'

_log = logging.getLogger(__name__)


class BroadcastCoordinator:
    """Glue between the transport and the event state.

    Applying an action and pushing the resulting snapshot happen under the
    store lock, so no client ever sees a half-applied state and a newly
    connected client gets its snapshot before any later broadcast.
    """

    def __init__(self, store: StateStore, dispatcher: ActionDispatcher, registry: ConnectionRegistry,
                 send: Callable[[Hashable, str], Any], logger: Optional[logging.Logger] = None):
        self.store = store
        self.dispatcher = dispatcher
        self.registry = registry
        self.send = send
        self.logger = logger or _log

    def envelope(self) -> str:
        return json.dumps({'type': STATE_UPDATE, 'payload': self.store.snapshot()})

    def on_connect(self, client: Hashable) -> None:
        with self.store.lock:
            self.registry.add(client)
            self.logger.info(f"[connection] client={client} connected ({len(self.registry)} total)")
            self._deliver(client, self.envelope())

    def on_disconnect(self, client: Hashable) -> None:
        self.registry.remove(client)
        self.logger.info(f"[connection] client={client} disconnected ({len(self.registry)} total)")

    def handle_message(self, client: Hashable, raw: Any) -> bool:
        try:
            action = decode_message(raw)
        except ActionDecodeError as exc:
            self.logger.error(f"[error] failed to process message from client={client}: {exc}")
            return False
        self.logger.info(f"[message] client={client} action={type(action).__name__}")
        return self.submit(action)

    def submit(self, action: Action) -> bool:
        with self.store.lock:
            try:
                changed = self.dispatcher.apply_action(action)
            except Exception:
                self.logger.exception(f"[error] failed to apply {action!r}")
                return False
            if changed:
                self.broadcast()
            return changed

    def broadcast(self) -> int:
        """Send the full state to every connected client; returns deliveries."""
        with self.store.lock:
            text = self.envelope()
            clients = self.registry.snapshot()
            delivered = sum(1 for client in clients if self._deliver(client, text))
        self.logger.info(f"[broadcast] sent updated state to {delivered}/{len(clients)} clients")
        return delivered

    def _deliver(self, client: Hashable, text: str) -> bool:
        try:
            ok = self.send(client, text)
        except Exception as exc:
            self.logger.warning(f"[broadcast] delivery to client={client} failed: {exc}")
            return False
        if ok is False:
            self.logger.warning(f"[broadcast] delivery to client={client} failed")
            return False
        return True
