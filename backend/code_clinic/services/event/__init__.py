"""Event synchronization services: timer, actions, store and broadcast.

This package contains the state machine behind the live event and the
fan-out that keeps every connected browser on the same snapshot. It is
imported by socket handlers and HTTP routes, keeping transport concerns
separated from the event mechanics.
"""

from .actions import ActionDecodeError, decode_message, parse_action
from .broadcast import BroadcastCoordinator
from .dispatcher import ActionDispatcher
from .registry import ConnectionRegistry
from .store import StateStore
from .timer import elapsed_ms, utc_now

__all__ = [
    'ActionDecodeError',
    'ActionDispatcher',
    'BroadcastCoordinator',
    'ConnectionRegistry',
    'StateStore',
    'decode_message',
    'elapsed_ms',
    'parse_action',
    'utc_now',
]
