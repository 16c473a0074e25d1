from flask import current_app, request
from code_clinic import socketio
from code_clinic.services.event import BroadcastCoordinator

NAMESPACE = '/ws'


def _coordinator() -> BroadcastCoordinator:
    return current_app.extensions['code_clinic']


def _get_sid() -> str:
    # type: ignore: request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def send_to_client(sid: str, text: str) -> bool:
    """Transport capability used by the coordinator: one text frame to one socket."""
    socketio.send(text, to=sid, namespace=NAMESPACE)
    return True


def handle_connect():
    _coordinator().on_connect(_get_sid())


def handle_disconnect():
    _coordinator().on_disconnect(_get_sid())


def handle_message(data):
    _coordinator().handle_message(_get_sid(), data)


def register_socketio_handlers() -> None:
    """Register Socket.IO event handlers on namespace '/ws'.

    Clients speak plain JSON text frames: actions arrive as ``message``
    events and state snapshots are sent back the same way.
    """
    socketio.on_event('connect', handle_connect, namespace=NAMESPACE)
    socketio.on_event('disconnect', handle_disconnect, namespace=NAMESPACE)
    socketio.on_event('message', handle_message, namespace=NAMESPACE)
