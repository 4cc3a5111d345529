"""
State holder - the single owner of the engine's session state.

State is replaced, never mutated. Writers are serialized with a lock and
every replacement is pushed to subscribers as an immutable snapshot.
Listeners are called while the lock is held, so every listener sees
snapshots in the order they were written.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Any

from chuk_mcp_fretboard.models.theory import EngineState

logger = logging.getLogger(__name__)

StateListener = Callable[[EngineState], None]


class StateHolder:
    """
    Holds the current EngineState and notifies subscribers of changes.

    New subscribers immediately receive the current snapshot, then every
    later one.
    """

    def __init__(self, initial: EngineState | None = None):
        self._state = initial or EngineState()
        # Reentrant: a listener may write or unsubscribe from inside a notification
        self._lock = threading.RLock()
        self._listeners: list[StateListener] = []

    def snapshot(self) -> EngineState:
        """Get the current state."""
        return self._state

    def replace(self, **changes: Any) -> EngineState:
        """
        Build a new state from the current one with some fields replaced.

        The new state is validated, so list values are stored as tuples
        and later changes to the caller's list do not reach the state.

        Args:
            **changes: EngineState field values to replace

        Returns:
            The new state
        """
        with self._lock:
            state = self._state = EngineState(**{**dict(self._state), **changes})
            self._notify(list(self._listeners), state)
            return state

    def reset(self) -> EngineState:
        """Restore the empty initial state."""
        with self._lock:
            state = self._state = EngineState()
            self._notify(list(self._listeners), state)
            return state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """
        Register a listener for state snapshots.

        Args:
            listener: Called with the current state now and each new state later

        Returns:
            Function that removes the listener
        """
        with self._lock:
            self._listeners.append(listener)
            self._notify([listener], self._state)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    @property
    def subscriber_count(self) -> int:
        return len(self._listeners)

    def _notify(self, listeners: list[StateListener], state: EngineState) -> None:
        for listener in listeners:
            try:
                listener(state)
            except Exception:
                logger.exception("State listener %r failed", listener)
